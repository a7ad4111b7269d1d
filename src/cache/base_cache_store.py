# src/cache/base_cache_store.py — v2
"""Abstract response cache interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bunkai.core.models import SentenceAnalysis


class BaseCacheStore(ABC):
    """Time-bounded memoization of successful analyses."""

    @abstractmethod
    async def get(self, key: str) -> SentenceAnalysis | None:
        """Return the cached analysis, or None on miss or expiry."""

    @abstractmethod
    async def set(self, key: str, value: SentenceAnalysis) -> None:
        """Store an analysis, replacing any previous entry for key."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove an entry if present."""

    @abstractmethod
    async def clear(self) -> None:
        """Remove every entry."""

    @abstractmethod
    async def size(self) -> int:
        """Number of physically stored entries (expired ones included)."""
