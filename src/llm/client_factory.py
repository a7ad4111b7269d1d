# src/llm/client_factory.py — v3
"""Factory: instantiate an LLM client from a provider id and model name.

A fresh client is built for every call. The provider's credential is read
from settings at call time, so a rotated key takes effect without restart.
"""

from __future__ import annotations

import importlib
import logging

from bunkai.config.providers import get_provider, list_providers
from bunkai.config.settings import ConfigurationError, Settings, load_settings
from bunkai.core.validation import ValidationError
from bunkai.llm.base_client import BaseLLMClient

logger = logging.getLogger(__name__)

# Adapter kind → adapter class path (lazy import).
_ADAPTER_REGISTRY: dict[str, str] = {
    "anthropic": "bunkai.llm.adapters.anthropic_adapter.AnthropicAdapter",
    "openai": "bunkai.llm.adapters.openai_adapter.OpenAIAdapter",
    "google": "bunkai.llm.adapters.google_adapter.GoogleAdapter",
}


def create_chat_model(
    provider: str,
    model: str,
    settings: Settings | None = None,
) -> BaseLLMClient:
    """Instantiate the adapter for a provider.

    Args:
        provider: Provider identifier (anthropic, openai, google, xai, ...).
        model: Model name, passed through unvalidated.
        settings: Application settings. Loaded from the environment when None.

    Returns:
        Configured BaseLLMClient instance.

    Raises:
        ValidationError: If the provider is not registered.
        ConfigurationError: If the provider's API key is not set.
    """
    identity = get_provider(provider)
    if identity is None:
        raise ValidationError(
            f"Unsupported LLM provider: {provider!r}. "
            f"Available: {', '.join(p.id for p in list_providers())}",
            field="provider",
        )

    settings = settings or load_settings()
    api_key = settings.api_key_for(identity.id)
    if not api_key:
        raise ConfigurationError(
            f"Server Error: Key not properly set for {identity.display_name} "
            f"({identity.credential_env_key})."
        )

    init_kwargs: dict[str, object] = {
        "model": model,
        "api_key": api_key,
        "max_tokens_default": settings.llm_max_tokens,
        "timeout_s": settings.llm_timeout_s,
    }
    if identity.adapter == "openai":
        init_kwargs["base_url"] = identity.base_url
        init_kwargs["provider"] = identity.id

    adapter_cls = _import_class(_ADAPTER_REGISTRY[identity.adapter])
    logger.debug("Creating LLM client: provider=%s, model=%s", provider, model)
    return adapter_cls(**init_kwargs)


def _import_class(class_path: str) -> type:
    """Dynamically import a class from its fully qualified path."""
    module_path, class_name = class_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)
