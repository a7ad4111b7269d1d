# src/llm/structured.py — v1
"""Invoke a model under a structured-output contract.

Raw provider text is parsed as JSON, then validated against the contract
before anything downstream sees it. Nothing here retries.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from bunkai.config.settings import ConfigurationError
from bunkai.llm.base_client import BaseLLMClient
from bunkai.llm.errors import ProviderError, SchemaViolationError
from bunkai.llm.models import Message

logger = logging.getLogger(__name__)

ContractT = TypeVar("ContractT", bound=BaseModel)

_MAX_ERROR_DETAILS = 5


async def invoke_structured(
    client: BaseLLMClient,
    messages: list[Message],
    contract: type[ContractT],
    system: str | None = None,
    timeout_s: float = 60.0,
    temperature: float | None = None,
) -> ContractT:
    """Call the model and return a validated contract instance.

    Raises:
        ProviderError: The call failed or exceeded ``timeout_s``.
        SchemaViolationError: The reply is not valid JSON for ``contract``.
    """
    provider, model = client.provider_name, client.model_name
    try:
        response = await asyncio.wait_for(
            client.complete(
                messages,
                system=system,
                temperature=temperature,
                response_format=contract,
            ),
            timeout=timeout_s,
        )
    except ConfigurationError:
        raise
    except asyncio.TimeoutError as e:
        raise ProviderError(provider, model, f"timed out after {timeout_s:.0f}s") from e
    except Exception as e:
        raise ProviderError(provider, model, str(e) or type(e).__name__) from e

    logger.debug(
        "LLM reply: provider=%s model=%s contract=%s latency_ms=%d tokens=%d/%d",
        provider, model, contract.__name__, response.latency_ms,
        response.input_tokens, response.output_tokens,
    )
    return parse_contract(response.content, contract)


def parse_contract(content: str, contract: type[ContractT]) -> ContractT:
    """Validate raw model text against a contract.

    Raises:
        SchemaViolationError: On invalid JSON or any contract mismatch.
    """
    text = _strip_fences(content)
    if not text:
        raise SchemaViolationError(contract.__name__, "empty response")
    try:
        return contract.model_validate_json(text)
    except PydanticValidationError as e:
        raise SchemaViolationError(contract.__name__, _summarize(e)) from e


def _strip_fences(content: str) -> str:
    """Remove a surrounding markdown code fence, if any."""
    text = content.strip()
    if text.startswith("```"):
        lines = [line for line in text.split("\n") if not line.strip().startswith("```")]
        text = "\n".join(lines).strip()
    return text


def _summarize(error: PydanticValidationError) -> str:
    details = []
    for err in error.errors()[:_MAX_ERROR_DETAILS]:
        loc = ".".join(str(part) for part in err["loc"]) or "<root>"
        details.append(f"{loc}: {err['msg']}")
    more = error.error_count() - len(details)
    if more > 0:
        details.append(f"... and {more} more")
    return "; ".join(details)
