# src/llm/errors.py — v1
"""Failures of a remote model call."""

from __future__ import annotations


class ProviderError(Exception):
    """The remote model call failed (network, rate limit, non-2xx, timeout).

    Retryable by the caller; engines never retry internally.
    """

    def __init__(self, provider: str, model: str, message: str) -> None:
        self.provider = provider
        self.model = model
        super().__init__(f"{provider}/{model}: {message}")


class SchemaViolationError(Exception):
    """The model reply did not conform to its structured-output contract.

    Not retried with identical input; the same prompt is likely to fail again.
    """

    def __init__(self, contract: str, message: str) -> None:
        self.contract = contract
        super().__init__(f"Response violates {contract}: {message}")
