# src/llm/adapters/openai_adapter.py — v2
"""OpenAI chat-completions adapter implementing BaseLLMClient.

Uses the official openai SDK. Also serves the OpenAI-compatible vendors
(xAI, OpenRouter, Cerebras, Fireworks) through ``base_url``.
"""

from __future__ import annotations

import time
from typing import Any

from pydantic import BaseModel

from bunkai.llm.base_client import BaseLLMClient
from bunkai.llm.models import LLMResponse, Message


class OpenAIAdapter(BaseLLMClient):
    """OpenAI (and OpenAI-compatible) chat adapter."""

    def __init__(
        self,
        model: str = "gpt-5-mini",
        api_key: str = "",
        base_url: str | None = None,
        provider: str = "openai",
        max_tokens_default: int = 4096,
        timeout_s: float = 60.0,
        **kwargs: Any,
    ):
        self._model = model
        self._api_key = api_key
        self._base_url = base_url
        self._provider = provider
        self._max_tokens_default = max_tokens_default
        self._timeout_s = timeout_s

    async def complete(
        self,
        messages: list[Message],
        system: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
        response_format: type[BaseModel] | None = None,
    ) -> LLMResponse:
        import openai

        client = openai.AsyncOpenAI(
            api_key=self._api_key, base_url=self._base_url, timeout=self._timeout_s
        )
        oai_messages: list[dict[str, Any]] = []
        if system:
            oai_messages.append({"role": "system", "content": system})
        for m in messages:
            oai_messages.append({"role": m.role, "content": m.content})

        kwargs: dict[str, Any] = {
            "model": self._model,
            "messages": oai_messages,
        }
        # Native OpenAI reasoning models reject max_tokens.
        limit = max_tokens or self._max_tokens_default
        if self._base_url is None:
            kwargs["max_completion_tokens"] = limit
        else:
            kwargs["max_tokens"] = limit
        if temperature is not None:
            kwargs["temperature"] = temperature
        if response_format is not None:
            kwargs["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": response_format.__name__,
                    "schema": response_format.model_json_schema(),
                },
            }

        t0 = time.monotonic()
        resp = await client.chat.completions.create(**kwargs)
        latency = int((time.monotonic() - t0) * 1000)

        choice = resp.choices[0]
        usage = resp.usage
        return LLMResponse(
            content=choice.message.content or "",
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            model=self._model,
            provider=self._provider,
            latency_ms=latency,
            raw_response=resp,
        )

    @property
    def provider_name(self) -> str:
        return self._provider

    @property
    def model_name(self) -> str:
        return self._model
