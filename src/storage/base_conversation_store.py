# src/storage/base_conversation_store.py — v1
"""Abstract conversation store.

The store owns the authoritative Conversation record. It refuses to append
to a completed conversation and treats completion as a one-way transition.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bunkai.core.models import Conversation, ConversationMessage, ConversationScore


class ConversationNotFoundError(LookupError):
    """No conversation with that id belongs to the user."""

    def __init__(self, conversation_id: str) -> None:
        self.conversation_id = conversation_id
        super().__init__("Conversation not found")


class BaseConversationStore(ABC):
    """Persistence interface for practice conversations."""

    @abstractmethod
    async def create(
        self,
        user_id: str,
        topic: str,
        provider: str,
        model: str,
        initial_message: ConversationMessage,
    ) -> Conversation:
        """Create an Active conversation seeded with the greeting."""

    @abstractmethod
    async def get(self, conversation_id: str, user_id: str) -> Conversation | None:
        """Fetch a conversation owned by user_id."""

    @abstractmethod
    async def list_for_user(self, user_id: str) -> list[Conversation]:
        """All of a user's conversations, most recently updated first."""

    @abstractmethod
    async def append_messages(
        self,
        conversation_id: str,
        user_id: str,
        messages: list[ConversationMessage],
    ) -> bool:
        """Append messages to an Active conversation.

        Returns False if the conversation is missing or already complete.
        """

    @abstractmethod
    async def complete(
        self, conversation_id: str, user_id: str, score: ConversationScore
    ) -> bool:
        """Mark complete and attach the score.

        Returns False if missing or already complete; the score is set once.
        """

    @abstractmethod
    async def delete(self, conversation_id: str, user_id: str) -> bool:
        """Delete a conversation. Returns False if missing."""
