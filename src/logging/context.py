# src/logging/context.py — v2
"""Contextual logging support — attach request_id, operation, provider, model to log records."""

from __future__ import annotations

import contextvars
import uuid
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging — set per inbound request.
_request_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)
_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation", default=None
)
_provider: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "provider", default=None
)
_model: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "model", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    request_id: str | None = None
    operation: str | None = None
    provider: str | None = None
    model: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        request_id=_request_id.get(),
        operation=_operation.get(),
        provider=_provider.get(),
        model=_model.get(),
    )


def set_request_context(
    operation: str,
    provider: str | None = None,
    model: str | None = None,
    request_id: str | None = None,
) -> str:
    """Set request-level context. Returns the request id in effect."""
    rid = request_id or uuid.uuid4().hex[:12]
    _request_id.set(rid)
    _operation.set(operation)
    _provider.set(provider)
    _model.set(model)
    return rid


def clear_context() -> None:
    """Reset all context variables."""
    _request_id.set(None)
    _operation.set(None)
    _provider.set(None)
    _model.set(None)
