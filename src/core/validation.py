# src/core/validation.py — v1
"""Input guards used at the transport edge before the engines are called."""

from __future__ import annotations

import re

MODEL_ID_PATTERN = re.compile(r"^[A-Za-z0-9\-_./: ]+$")
MAX_MODEL_ID_LENGTH = 200


class ValidationError(ValueError):
    """Caller-supplied input failed a local format check. Never retried."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


def is_valid_model_id(value: object) -> bool:
    """True for a non-empty string of at most 200 allowed characters."""
    return (
        isinstance(value, str)
        and 0 < len(value) <= MAX_MODEL_ID_LENGTH
        and MODEL_ID_PATTERN.fullmatch(value) is not None
    )


def is_valid_provider(value: object) -> bool:
    """True if value names a registered provider."""
    from bunkai.config.providers import PROVIDER_REGISTRY

    return isinstance(value, str) and value in PROVIDER_REGISTRY


def require_text(value: object, field: str, message: str | None = None) -> str:
    """Return value if it is a non-empty string, else raise ValidationError."""
    if not isinstance(value, str) or not value:
        raise ValidationError(message or f"Invalid {field}", field=field)
    return value


def validate_analysis_request(sentence: object, provider: object, model: object) -> None:
    """Gate an analysis request.

    Raises:
        ValidationError: On the first malformed field.
    """
    require_text(sentence, "sentence", "Invalid sentence provided")
    _validate_provider_and_model(provider, model)


def validate_conversation_request(topic: object, provider: object, model: object) -> None:
    """Gate a new-conversation request."""
    require_text(topic, "topic", "Invalid topic")
    _validate_provider_and_model(provider, model)


def _validate_provider_and_model(provider: object, model: object) -> None:
    if not is_valid_provider(provider):
        raise ValidationError("Invalid provider specified", field="provider")
    if not is_valid_model_id(model):
        raise ValidationError("Invalid model specified", field="model")
