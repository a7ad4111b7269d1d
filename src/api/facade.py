# src/api/facade.py — v2
"""Public API facade: the composition root the transport edge talks to.

Usage:
    from bunkai.api.facade import Bunkai
    app = Bunkai.from_settings()
    result = await app.analyze("私は美しい花を見ました。", "anthropic", "claude-sonnet-4-5-20250929")

The facade owns one cache instance for its lifetime and wires the engines to
the stores. Engines raise; the facade only adds validation, memoization and
the best-effort history and cache writes that must never fail a request.
"""

from __future__ import annotations

import logging

from bunkai.analysis.engine import analyze_sentence
from bunkai.api.models import AnalyzeResult, TurnResult
from bunkai.cache.base_cache_store import BaseCacheStore
from bunkai.cache.cache_factory import create_cache_store
from bunkai.cache.keys import build_cache_key
from bunkai.config.settings import Settings, load_settings
from bunkai.conversation import engine as conversation_engine
from bunkai.conversation.engine import ConversationCompleteError, ensure_active
from bunkai.core.models import Conversation, ConversationMessage, ConversationScore
from bunkai.core.validation import (
    require_text,
    validate_analysis_request,
    validate_conversation_request,
)
from bunkai.logging.context import set_request_context
from bunkai.storage.base_conversation_store import (
    BaseConversationStore,
    ConversationNotFoundError,
)
from bunkai.storage.base_history_store import BaseHistoryStore, HistoryRecord
from bunkai.storage.memory_store import MemoryConversationStore, MemoryHistoryStore

logger = logging.getLogger(__name__)


class Bunkai:
    """Analysis and conversation orchestration for one process."""

    def __init__(
        self,
        settings: Settings | None = None,
        cache_store: BaseCacheStore | None = None,
        history_store: BaseHistoryStore | None = None,
        conversation_store: BaseConversationStore | None = None,
    ) -> None:
        self._settings = settings
        self.cache_store = cache_store
        self.history_store = history_store
        self.conversation_store = conversation_store or MemoryConversationStore()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Bunkai:
        """Build a facade with the configured cache and in-memory stores."""
        settings = settings or load_settings()
        return cls(
            settings=settings,
            cache_store=create_cache_store(settings),
            history_store=MemoryHistoryStore(),
            conversation_store=MemoryConversationStore(),
        )

    @property
    def settings(self) -> Settings:
        # Unpinned settings are reloaded per call so rotated keys are picked up.
        return self._settings or load_settings()

    # --- Sentence analysis ---

    async def analyze(
        self,
        sentence: str,
        provider: str,
        model: str,
        user_id: str | None = None,
    ) -> AnalyzeResult:
        """Analyze a sentence, serving repeats from the cache.

        Raises:
            ValidationError: Malformed sentence, provider or model.
            ConfigurationError, ProviderError, SchemaViolationError: From the engine.
        """
        validate_analysis_request(sentence, provider, model)
        set_request_context("analyze", provider=provider, model=model)

        key = build_cache_key(provider, model, sentence)
        analysis = await self._cache_get(key)
        cached = analysis is not None
        if analysis is None:
            analysis = await analyze_sentence(sentence, provider, model, self.settings)
            await self._cache_set(key, analysis)
        else:
            logger.debug("Cache hit for %s/%s", provider, model)

        saved = False
        if user_id is not None and self.history_store is not None:
            try:
                await self.history_store.save(user_id, sentence, provider, model, analysis)
                saved = True
            except Exception as e:
                logger.warning("Failed to save history: %s", e)

        return AnalyzeResult(
            sentence=sentence,
            provider=provider,
            model=model,
            analysis=analysis,
            cached=cached,
            saved_to_history=saved,
        )

    async def list_history(self, user_id: str) -> list[HistoryRecord]:
        if self.history_store is None:
            return []
        return await self.history_store.list_for_user(user_id)

    async def delete_history(self, record_id: str, user_id: str) -> bool:
        if self.history_store is None:
            return False
        return await self.history_store.delete(record_id, user_id)

    # --- Conversation practice ---

    async def start_conversation(
        self, user_id: str, topic: str, provider: str, model: str
    ) -> Conversation:
        """Create a conversation seeded with the assistant's greeting."""
        validate_conversation_request(topic, provider, model)
        set_request_context("start_conversation", provider=provider, model=model)

        greeting = await conversation_engine.generate_greeting(
            topic, provider, model, self.settings
        )
        conversation = await self.conversation_store.create(
            user_id,
            topic,
            provider,
            model,
            ConversationMessage(role="assistant", content=greeting),
        )
        logger.info("Started conversation %s on %r", conversation.id, topic)
        return conversation

    async def send_message(
        self, conversation_id: str, user_id: str, message: str
    ) -> TurnResult:
        """Apply one user turn; score and complete the conversation if it ended.

        Nothing is written unless the reply succeeds. If scoring fails after
        the closing turn was stored, the conversation stays Active and
        unscored; ``finish_conversation`` retries the scoring.

        Raises:
            ValidationError: Empty message.
            ConversationNotFoundError: Unknown id for this user.
            ConversationCompleteError: The conversation already completed.
        """
        require_text(message, "message", "Invalid message")
        conversation = await self._load(conversation_id, user_id)
        ensure_active(conversation)
        set_request_context(
            "send_message", provider=conversation.provider, model=conversation.model
        )

        user_message = ConversationMessage(role="user", content=message)
        reply = await conversation_engine.reply(
            conversation.topic,
            conversation.messages,
            message,
            conversation.provider,
            conversation.model,
            self.settings,
        )
        assistant_message = ConversationMessage(role="assistant", content=reply.message)

        appended = await self.conversation_store.append_messages(
            conversation_id, user_id, [user_message, assistant_message]
        )
        if not appended:
            # Completed by a concurrent turn between load and append.
            raise ConversationCompleteError(conversation_id)

        if not reply.is_conversation_complete:
            return TurnResult(message=assistant_message, is_complete=False)

        all_messages = [*conversation.messages, user_message, assistant_message]
        result = await self._score_and_complete(conversation, all_messages, user_id)
        return TurnResult(message=assistant_message, is_complete=True, score=result)

    async def finish_conversation(
        self, conversation_id: str, user_id: str
    ) -> ConversationScore:
        """Score and complete an Active conversation on demand."""
        conversation = await self._load(conversation_id, user_id)
        ensure_active(conversation)
        set_request_context(
            "finish_conversation", provider=conversation.provider, model=conversation.model
        )
        return await self._score_and_complete(conversation, conversation.messages, user_id)

    async def get_conversation(
        self, conversation_id: str, user_id: str
    ) -> Conversation | None:
        return await self.conversation_store.get(conversation_id, user_id)

    async def list_conversations(self, user_id: str) -> list[Conversation]:
        return await self.conversation_store.list_for_user(user_id)

    async def delete_conversation(self, conversation_id: str, user_id: str) -> bool:
        return await self.conversation_store.delete(conversation_id, user_id)

    # --- Internal helpers ---

    async def _load(self, conversation_id: str, user_id: str) -> Conversation:
        conversation = await self.conversation_store.get(conversation_id, user_id)
        if conversation is None:
            raise ConversationNotFoundError(conversation_id)
        return conversation

    async def _score_and_complete(
        self,
        conversation: Conversation,
        messages: list[ConversationMessage],
        user_id: str,
    ) -> ConversationScore:
        result = await conversation_engine.score(
            conversation.topic,
            messages,
            conversation.provider,
            conversation.model,
            self.settings,
        )
        if not await self.conversation_store.complete(conversation.id, user_id, result):
            raise ConversationCompleteError(conversation.id)
        logger.info("Conversation %s complete, score=%d", conversation.id, result.score)
        return result

    async def _cache_get(self, key: str):
        if self.cache_store is None:
            return None
        try:
            return await self.cache_store.get(key)
        except Exception as e:
            logger.warning("Cache lookup failed: %s", e)
            return None

    async def _cache_set(self, key: str, value) -> None:
        if self.cache_store is None:
            return
        try:
            await self.cache_store.set(key, value)
        except Exception as e:
            logger.warning("Cache write failed: %s", e)
