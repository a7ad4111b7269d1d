# src/llm/base_client.py — v2
"""Abstract LLM client interface (the chat-model handle)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from bunkai.llm.models import LLMResponse, Message


class BaseLLMClient(ABC):
    """Unified interface for all LLM providers."""

    @abstractmethod
    async def complete(
        self,
        messages: list[Message],
        system: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
        response_format: type[BaseModel] | None = None,
    ) -> LLMResponse:
        """Text completion, optionally constrained to a structured contract."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Provider identifier (anthropic, openai, google, xai, ...)."""

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Model identifier passed through to the remote API."""
