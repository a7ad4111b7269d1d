# src/config/settings.py — v2
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for deployment-specific settings: provider API keys,
LLM call limits, response cache and logging.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is missing or internally inconsistent.

    A deployment fault rather than a transient one: never retried.
    """


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === LLM PROVIDERS ===
    default_provider: str = "anthropic"
    default_model: str = "claude-sonnet-4-5-20250929"
    llm_max_tokens: int = 4096
    llm_temperature: float | None = None
    llm_timeout_s: float = 60.0

    # Provider API keys (read at call time, see llm/client_factory.py)
    anthropic_api_key: str = ""
    openai_api_key: str = ""
    google_api_key: str = ""
    xai_api_key: str = ""
    openrouter_api_key: str = ""
    cerebras_api_key: str = ""
    fireworks_api_key: str = ""

    # === Cache ===
    cache_enabled: bool = True
    cache_backend: Literal["memory", "redis"] = "memory"
    cache_ttl_seconds: int = 3600
    cache_sweep_threshold: int = 100
    cache_redis_url: str = ""

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("llm_timeout_s")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("llm_timeout_s must be > 0")
        return v

    @field_validator("cache_ttl_seconds")
    @classmethod
    def validate_ttl(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("cache_ttl_seconds must be > 0")
        return v

    @field_validator("cache_sweep_threshold")
    @classmethod
    def validate_sweep_threshold(cls, v: int) -> int:
        if v < 1:
            raise ValueError("cache_sweep_threshold must be >= 1")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        from bunkai.config.providers import PROVIDER_REGISTRY
        from bunkai.core.validation import is_valid_model_id

        errors: list[str] = []

        if self.cache_enabled and self.cache_backend == "redis" and not self.cache_redis_url:
            errors.append("CACHE_BACKEND=redis requires CACHE_REDIS_URL")

        if self.default_provider not in PROVIDER_REGISTRY:
            errors.append(
                f"DEFAULT_PROVIDER {self.default_provider!r} is not a known provider"
            )

        if not is_valid_model_id(self.default_model):
            errors.append(f"DEFAULT_MODEL {self.default_model!r} is not a valid model id")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    def api_key_for(self, provider_id: str) -> str:
        """Return the configured API key for a provider ('' if unset)."""
        from bunkai.config.providers import get_provider

        identity = get_provider(provider_id)
        if identity is None:
            return ""
        return getattr(self, identity.settings_field, "") or ""


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-call config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
