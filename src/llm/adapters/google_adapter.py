# src/llm/adapters/google_adapter.py — v3
"""Google Gemini adapter implementing BaseLLMClient.

Uses google-generativeai SDK. Structured outputs request JSON via the mime
type only; the SDK schema converter rejects pydantic JSON schema keywords
such as `default`, so the contract is enforced by the prompt and validated
after the call.
"""

from __future__ import annotations

import time
from typing import Any

from pydantic import BaseModel

from bunkai.llm.base_client import BaseLLMClient
from bunkai.llm.models import LLMResponse, Message


class GoogleAdapter(BaseLLMClient):
    """Google Gemini adapter."""

    def __init__(
        self,
        model: str = "gemini-2.5-flash",
        api_key: str = "",
        max_tokens_default: int = 4096,
        timeout_s: float = 60.0,
        **kwargs: Any,
    ):
        self._model = model
        self._api_key = api_key
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
        import google.generativeai as genai

        genai.configure(api_key=self._api_key)
        model = genai.GenerativeModel(
            self._model,
            system_instruction=system,
        )

        gen_config: dict[str, Any] = {
            "max_output_tokens": max_tokens or self._max_tokens_default,
        }
        if temperature is not None:
            gen_config["temperature"] = temperature
        if response_format is not None:
            gen_config["response_mime_type"] = "application/json"

        # Convert messages to Gemini format
        contents = []
        for m in messages:
            if m.role == "system":
                continue
            role = "model" if m.role == "assistant" else "user"
            contents.append({"role": role, "parts": [{"text": m.content}]})

        t0 = time.monotonic()
        resp = await model.generate_content_async(
            contents,
            generation_config=gen_config,
            request_options={"timeout": self._timeout_s},
        )
        latency = int((time.monotonic() - t0) * 1000)

        usage = getattr(resp, "usage_metadata", None)
        return LLMResponse(
            content=resp.text or "",
            input_tokens=getattr(usage, "prompt_token_count", 0) if usage else 0,
            output_tokens=getattr(usage, "candidates_token_count", 0) if usage else 0,
            model=self._model,
            provider="google",
            latency_ms=latency,
            raw_response=resp,
        )

    @property
    def provider_name(self) -> str:
        return "google"

    @property
    def model_name(self) -> str:
        return self._model
