# src/storage/base_history_store.py — v1
"""Abstract history store: the durable per-user record of analyses.

Separate from the response cache, which is only a performance layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from bunkai.core.models import SentenceAnalysis


class HistoryRecord(BaseModel):
    """A saved analysis."""

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    sentence: str
    provider: str
    model: str
    analysis: SentenceAnalysis
    created_at: datetime


class BaseHistoryStore(ABC):
    """Persistence interface for analysis history."""

    @abstractmethod
    async def save(
        self,
        user_id: str,
        sentence: str,
        provider: str,
        model: str,
        analysis: SentenceAnalysis,
    ) -> HistoryRecord:
        """Persist a successful analysis."""

    @abstractmethod
    async def list_for_user(self, user_id: str) -> list[HistoryRecord]:
        """A user's history, newest first."""

    @abstractmethod
    async def get(self, record_id: str, user_id: str) -> HistoryRecord | None:
        """Fetch one record owned by user_id."""

    @abstractmethod
    async def delete(self, record_id: str, user_id: str) -> bool:
        """Delete one record. Returns False if missing."""
