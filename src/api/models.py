# src/api/models.py — v2
"""API-level models returned by the facade."""

from __future__ import annotations

from pydantic import BaseModel

from bunkai.core.models import ConversationMessage, ConversationScore, SentenceAnalysis


class AnalyzeResult(BaseModel):
    """Return value of Bunkai.analyze()."""

    sentence: str
    provider: str
    model: str
    analysis: SentenceAnalysis
    cached: bool = False
    saved_to_history: bool = False


class TurnResult(BaseModel):
    """Return value of Bunkai.send_message()."""

    message: ConversationMessage
    is_complete: bool
    score: ConversationScore | None = None
