# src/llm/contracts.py — v1
"""Structured-output contracts: the only reply shapes accepted from a model.

Field names follow the camelCase wire shape the prompts ask for. Strict mode
rejects wrong primitive types instead of coercing them, and required fields
are never defaulted.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Contract(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")


# === SENTENCE ANALYSIS ===


class ParticleContract(_Contract):
    text: str = Field(description="The particle text (e.g., は, を, に, が, etc.)")
    reading: str | None = Field(
        default=None, description="Hiragana reading of the particle (optional)"
    )
    description: str = Field(
        description=(
            "A brief explanation of what this particle does in this specific "
            "sentence context (1-2 sentences)"
        )
    )


class WordContract(_Contract):
    id: str = Field(description="Unique identifier for this word/phrase")
    text: str = Field(
        description=(
            "The actual text of the word/phrase in Japanese (NOT including "
            "particles - those go in attachedParticle)"
        )
    )
    reading: str | None = Field(
        default=None, description="Hiragana reading of the word (optional)"
    )
    partOfSpeech: str = Field(
        description="Part of speech (e.g., noun, verb, adjective, particle, etc.)"
    )
    modifies: list[str] | None = Field(
        default=None,
        description="Array of IDs of words/phrases that this word modifies or relates to",
    )
    position: int = Field(ge=0, description="Position in the sentence (0-indexed)")
    attachedParticle: ParticleContract | None = Field(
        default=None,
        description=(
            "Particle attached to this word (if any). Do NOT create separate "
            "word entries for particles."
        ),
    )
    isTopic: bool | None = Field(
        default=None,
        description=(
            "True if this word is the sentence topic. Topics provide context "
            "but don't modify the main sentence."
        ),
    )


class GrammarPointContract(_Contract):
    title: str = Field(
        description=(
            "Grammar point title (e.g., 'は (Topic Marker)', "
            "'て-form (Connective)', 'Potential Form')"
        )
    )
    explanation: str = Field(
        description=(
            "2-3 sentences, plain text (no HTML), explaining how this grammar "
            "point functions, with an example from this specific sentence"
        )
    )


class AnalysisContract(_Contract):
    directTranslation: str = Field(
        description=(
            "A direct, literal English translation of the sentence that "
            "preserves the Japanese word order and structure as closely as "
            "possible, even if it sounds awkward in English"
        )
    )
    words: list[WordContract]
    explanation: str = Field(
        description=(
            "Brief HTML-formatted explanation of the sentence structure. Use "
            "HTML tags like <p>, <strong>, <em>, <ul>, <li> for better formatting."
        )
    )
    isFragment: bool = Field(
        description=(
            "True if this is a sentence fragment or incomplete sentence. "
            "False if it's a complete sentence."
        )
    )
    grammarPoints: list[GrammarPointContract] = Field(
        description=(
            "List of grammar points found in the sentence: particles, verb "
            "forms, sentence patterns, etc."
        )
    )


# === CONVERSATION ===


class ConversationReplyContract(_Contract):
    message: str = Field(
        description="Your Japanese reply in this conversation. Write naturally."
    )
    isConversationComplete: bool = Field(
        description=(
            "True if the conversation has reached a natural conclusion (e.g. a "
            "goodbye exchange, the topic has been fully discussed, or 8-15 "
            "total exchanges have occurred). False otherwise."
        )
    )


class ConversationScoreContract(_Contract):
    # Out-of-range values are clamped by the conversation engine, not rejected.
    score: float = Field(
        allow_inf_nan=False,
        description=(
            "Overall score from 0 to 100 evaluating the user's Japanese "
            "ability in this conversation."
        ),
    )
    didWell: list[str] = Field(
        description=(
            "Array of 2-4 specific things the user did well, in English. Be "
            "concrete and reference examples from the conversation."
        )
    )
    needsImprovement: list[str] = Field(
        description=(
            "Array of 2-4 specific areas where the user could improve, in "
            "English. Be constructive and reference examples from the conversation."
        )
    )
