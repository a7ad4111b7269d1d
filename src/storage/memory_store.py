# src/storage/memory_store.py — v1
"""In-memory history and conversation stores.

Reference implementations of the storage interfaces, used by the CLI and
tests. Records are keyed by id and scoped to their owning user.
"""

from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone

from bunkai.core.models import (
    Conversation,
    ConversationMessage,
    ConversationScore,
    SentenceAnalysis,
)
from bunkai.storage.base_conversation_store import BaseConversationStore
from bunkai.storage.base_history_store import BaseHistoryStore, HistoryRecord


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MemoryHistoryStore(BaseHistoryStore):
    """History kept in a dict."""

    def __init__(self) -> None:
        self._records: dict[str, HistoryRecord] = {}
        self._lock = threading.Lock()

    async def save(
        self,
        user_id: str,
        sentence: str,
        provider: str,
        model: str,
        analysis: SentenceAnalysis,
    ) -> HistoryRecord:
        record = HistoryRecord(
            id=uuid.uuid4().hex,
            user_id=user_id,
            sentence=sentence,
            provider=provider,
            model=model,
            analysis=analysis,
            created_at=_utcnow(),
        )
        with self._lock:
            self._records[record.id] = record
        return record

    async def list_for_user(self, user_id: str) -> list[HistoryRecord]:
        with self._lock:
            records = [r for r in self._records.values() if r.user_id == user_id]
        return sorted(records, key=lambda r: r.created_at, reverse=True)

    async def get(self, record_id: str, user_id: str) -> HistoryRecord | None:
        with self._lock:
            record = self._records.get(record_id)
        if record is None or record.user_id != user_id:
            return None
        return record

    async def delete(self, record_id: str, user_id: str) -> bool:
        with self._lock:
            record = self._records.get(record_id)
            if record is None or record.user_id != user_id:
                return False
            del self._records[record_id]
            return True


class MemoryConversationStore(BaseConversationStore):
    """Conversations kept in a dict; each update replaces the stored copy."""

    def __init__(self) -> None:
        self._conversations: dict[str, Conversation] = {}
        self._lock = threading.Lock()

    async def create(
        self,
        user_id: str,
        topic: str,
        provider: str,
        model: str,
        initial_message: ConversationMessage,
    ) -> Conversation:
        now = _utcnow()
        conversation = Conversation(
            id=uuid.uuid4().hex,
            user_id=user_id,
            topic=topic,
            messages=[initial_message],
            provider=provider,
            model=model,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            self._conversations[conversation.id] = conversation
        return conversation.model_copy(deep=True)

    async def get(self, conversation_id: str, user_id: str) -> Conversation | None:
        with self._lock:
            conversation = self._owned(conversation_id, user_id)
            return conversation.model_copy(deep=True) if conversation else None

    async def list_for_user(self, user_id: str) -> list[Conversation]:
        with self._lock:
            owned = [
                c.model_copy(deep=True)
                for c in self._conversations.values()
                if c.user_id == user_id
            ]
        return sorted(owned, key=lambda c: c.updated_at, reverse=True)

    async def append_messages(
        self,
        conversation_id: str,
        user_id: str,
        messages: list[ConversationMessage],
    ) -> bool:
        with self._lock:
            conversation = self._owned(conversation_id, user_id)
            if conversation is None or conversation.is_complete:
                return False
            self._conversations[conversation_id] = conversation.model_copy(
                update={
                    "messages": [*conversation.messages, *messages],
                    "updated_at": _utcnow(),
                }
            )
            return True

    async def complete(
        self, conversation_id: str, user_id: str, score: ConversationScore
    ) -> bool:
        with self._lock:
            conversation = self._owned(conversation_id, user_id)
            if conversation is None or conversation.is_complete:
                return False
            self._conversations[conversation_id] = conversation.model_copy(
                update={"is_complete": True, "score": score, "updated_at": _utcnow()}
            )
            return True

    async def delete(self, conversation_id: str, user_id: str) -> bool:
        with self._lock:
            if self._owned(conversation_id, user_id) is None:
                return False
            del self._conversations[conversation_id]
            return True

    def _owned(self, conversation_id: str, user_id: str) -> Conversation | None:
        conversation = self._conversations.get(conversation_id)
        if conversation is None or conversation.user_id != user_id:
            return None
        return conversation
