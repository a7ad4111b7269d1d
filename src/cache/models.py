# src/cache/models.py — v2
"""Cache domain model: CacheEntry."""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict

from bunkai.core.models import SentenceAnalysis


class CacheEntry(BaseModel):
    """One memoized analysis. Replaced wholesale, never updated in place."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: SentenceAnalysis
    created_at: datetime

    def is_expired(self, now: datetime, ttl: timedelta) -> bool:
        return now - self.created_at > ttl
