# src/core/models.py — v2
"""Shared Pydantic domain models used across modules.

No module redefines these types — all imports come from core.models.
Analysis results and conversation messages are immutable once built.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# === SENTENCE ANALYSIS ===


class AttachedParticle(BaseModel):
    """Particle attached to its host word (は, を, に, が, ...)."""

    model_config = ConfigDict(frozen=True)

    text: str
    reading: str | None = None
    description: str


class WordNode(BaseModel):
    """One segmented unit of a sentence, excluding its particle."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    reading: str | None = None
    part_of_speech: str
    modifies: list[str] | None = None
    position: int = Field(ge=0)
    attached_particle: AttachedParticle | None = None
    is_topic: bool | None = None


class GrammarPoint(BaseModel):
    """A grammatical structure found in the sentence, explained in plain text."""

    model_config = ConfigDict(frozen=True)

    title: str
    explanation: str


class SentenceAnalysis(BaseModel):
    """Full breakdown of one sentence, as returned to the caller."""

    model_config = ConfigDict(frozen=True)

    direct_translation: str
    words: list[WordNode]
    explanation: str
    is_fragment: bool
    grammar_points: list[GrammarPoint]


# === CONVERSATION ===


class ConversationMessage(BaseModel):
    """Single turn message. Immutable once appended."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime = Field(default_factory=utcnow)


class ConversationScore(BaseModel):
    """Post-hoc competency evaluation of the user's side of a conversation."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    did_well: list[str]
    needs_improvement: list[str]


class ConversationReply(BaseModel):
    """Assistant reply plus the completion signal driving the state machine."""

    model_config = ConfigDict(frozen=True)

    message: str
    is_conversation_complete: bool


class Conversation(BaseModel):
    """A practice conversation, owned by a conversation store.

    ``is_complete`` only ever moves False -> True, together with ``score``.
    """

    id: str
    user_id: str
    topic: str
    messages: list[ConversationMessage]
    is_complete: bool = False
    score: ConversationScore | None = None
    provider: str
    model: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
