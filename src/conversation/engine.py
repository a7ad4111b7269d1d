# src/conversation/engine.py — v1
"""Conversation practice engine.

Per conversation the state machine is ``Active -> Complete``. The engine
holds no state: the owning store passes history in, and the engine's
``is_conversation_complete`` flag is the only trigger for the transition.
A failed reply or score raises and leaves the conversation untouched, so the
caller can retry the turn.
"""

from __future__ import annotations

import logging
import math

from bunkai.config.settings import Settings, load_settings
from bunkai.conversation.prompts import (
    GREETING_INSTRUCTION,
    build_score_prompt,
    build_system_prompt,
)
from bunkai.core.models import (
    Conversation,
    ConversationMessage,
    ConversationReply,
    ConversationScore,
)
from bunkai.llm.client_factory import create_chat_model
from bunkai.llm.contracts import ConversationReplyContract, ConversationScoreContract
from bunkai.llm.models import Message
from bunkai.llm.structured import invoke_structured

logger = logging.getLogger(__name__)


class ConversationCompleteError(Exception):
    """A turn was submitted to a conversation that has already completed."""

    def __init__(self, conversation_id: str) -> None:
        self.conversation_id = conversation_id
        super().__init__("Conversation is already complete")


def ensure_active(conversation: Conversation) -> None:
    """Precondition for ``reply``: the conversation must still be Active.

    Raises:
        ConversationCompleteError: If the conversation is complete.
    """
    if conversation.is_complete:
        raise ConversationCompleteError(conversation.id)


async def generate_greeting(
    topic: str,
    provider: str,
    model: str,
    settings: Settings | None = None,
) -> str:
    """Produce the seed assistant message of a new conversation."""
    settings = settings or load_settings()
    client = create_chat_model(provider, model, settings)
    result = await invoke_structured(
        client,
        [Message(role="user", content=GREETING_INSTRUCTION)],
        ConversationReplyContract,
        system=build_system_prompt(topic),
        timeout_s=settings.llm_timeout_s,
        temperature=settings.llm_temperature,
    )
    logger.info("Generated greeting: provider=%s, model=%s", provider, model)
    return result.message


async def reply(
    topic: str,
    history: list[ConversationMessage],
    user_message: str,
    provider: str,
    model: str,
    settings: Settings | None = None,
) -> ConversationReply:
    """Answer the user's message in context of the full prior history."""
    settings = settings or load_settings()
    client = create_chat_model(provider, model, settings)
    result = await invoke_structured(
        client,
        build_messages(history, user_message),
        ConversationReplyContract,
        system=build_system_prompt(topic),
        timeout_s=settings.llm_timeout_s,
        temperature=settings.llm_temperature,
    )
    logger.info(
        "Conversation reply: provider=%s, model=%s, history=%d, complete=%s",
        provider, model, len(history), result.isConversationComplete,
    )
    return ConversationReply(
        message=result.message,
        is_conversation_complete=result.isConversationComplete,
    )


async def score(
    topic: str,
    messages: list[ConversationMessage],
    provider: str,
    model: str,
    settings: Settings | None = None,
) -> ConversationScore:
    """Evaluate the user's side of a finished conversation.

    The returned score is always an integer in [0, 100], whatever the model
    produced.
    """
    settings = settings or load_settings()
    client = create_chat_model(provider, model, settings)
    prompt = build_score_prompt(topic, format_transcript(messages))
    result = await invoke_structured(
        client,
        [Message(role="user", content=prompt)],
        ConversationScoreContract,
        timeout_s=settings.llm_timeout_s,
        temperature=settings.llm_temperature,
    )
    value = clamp_score(result.score)
    if value != result.score:
        logger.debug("Score %r normalized to %d", result.score, value)
    return ConversationScore(
        score=value,
        did_well=list(result.didWell),
        needs_improvement=list(result.needsImprovement),
    )


def build_messages(
    history: list[ConversationMessage], user_message: str
) -> list[Message]:
    """Prior turns plus the new user message, in order.

    Providers require the first turn to come from the user, so a history that
    opens with the assistant greeting is preceded by the instruction that
    produced it.
    """
    messages: list[Message] = []
    if history and history[0].role == "assistant":
        messages.append(Message(role="user", content=GREETING_INSTRUCTION))
    messages.extend(Message(role=m.role, content=m.content) for m in history)
    messages.append(Message(role="user", content=user_message))
    return messages


def format_transcript(messages: list[ConversationMessage]) -> str:
    return "\n".join(
        f"{'User' if m.role == 'user' else 'Partner'}: {m.content}" for m in messages
    )


def clamp_score(value: float) -> int:
    """Round to the nearest integer and clamp to [0, 100]."""
    if not math.isfinite(value):
        raise ValueError(f"score must be finite, got {value!r}")
    return int(min(100, max(0, round(value))))
