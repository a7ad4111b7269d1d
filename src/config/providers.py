# src/config/providers.py — v1
"""Static provider registry.

One ProviderIdentity per supported LLM vendor. The ``adapter`` tag selects the
SDK family used to build a client; OpenAI-compatible vendors share the OpenAI
adapter and differ only by ``base_url``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

AdapterKind = Literal["anthropic", "openai", "google"]


class ProviderIdentity(BaseModel):
    """Connection parameters for one provider."""

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    credential_env_key: str
    adapter: AdapterKind
    base_url: str | None = None

    @property
    def settings_field(self) -> str:
        """Name of the Settings attribute holding this provider's key."""
        return self.credential_env_key.lower()


PROVIDER_REGISTRY: dict[str, ProviderIdentity] = {
    p.id: p
    for p in (
        ProviderIdentity(
            id="anthropic",
            display_name="Anthropic",
            credential_env_key="ANTHROPIC_API_KEY",
            adapter="anthropic",
        ),
        ProviderIdentity(
            id="openai",
            display_name="OpenAI",
            credential_env_key="OPENAI_API_KEY",
            adapter="openai",
        ),
        ProviderIdentity(
            id="google",
            display_name="Google Gemini",
            credential_env_key="GOOGLE_API_KEY",
            adapter="google",
        ),
        ProviderIdentity(
            id="xai",
            display_name="xAI",
            credential_env_key="XAI_API_KEY",
            adapter="openai",
            base_url="https://api.x.ai/v1",
        ),
        ProviderIdentity(
            id="openrouter",
            display_name="OpenRouter",
            credential_env_key="OPENROUTER_API_KEY",
            adapter="openai",
            base_url="https://openrouter.ai/api/v1",
        ),
        ProviderIdentity(
            id="cerebras",
            display_name="Cerebras",
            credential_env_key="CEREBRAS_API_KEY",
            adapter="openai",
            base_url="https://api.cerebras.ai/v1",
        ),
        ProviderIdentity(
            id="fireworks",
            display_name="Fireworks AI",
            credential_env_key="FIREWORKS_API_KEY",
            adapter="openai",
            base_url="https://api.fireworks.ai/inference/v1",
        ),
    )
}


def list_providers() -> list[ProviderIdentity]:
    """All registered providers in declaration order."""
    return list(PROVIDER_REGISTRY.values())


def get_provider(provider_id: str) -> ProviderIdentity | None:
    """Look up a provider by id. Returns None if unknown."""
    return PROVIDER_REGISTRY.get(provider_id)
