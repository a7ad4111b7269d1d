# tests/conftest.py — v2
"""Shared test fixtures for all unit and integration tests.

Provides settings without a .env file, sample analysis payloads and a
scripted mock LLM client. No test touches the network.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from bunkai.config.settings import Settings
from bunkai.logging.context import clear_context
from bunkai.core.models import (
    AttachedParticle,
    ConversationMessage,
    GrammarPoint,
    SentenceAnalysis,
    WordNode,
)
from bunkai.llm.models import LLMResponse

SAMPLE_SENTENCE = "私は美しい花を見ました。"
SAMPLE_MODEL = "claude-sonnet-4-5-20250929"


# === FIXTURES: Isolation ===


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by setup_logging() and clear log context."""
    yield
    root = logging.getLogger("bunkai")
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    clear_context()


# === FIXTURES: Settings ===


@pytest.fixture
def settings() -> Settings:
    """Settings with a fake Anthropic key and no .env lookup."""
    return Settings(
        _env_file=None,
        anthropic_api_key="test-anthropic-key",
        openai_api_key="test-openai-key",
        google_api_key="test-google-key",
        xai_api_key="test-xai-key",
        openrouter_api_key="",
        cerebras_api_key="",
        fireworks_api_key="",
    )


# === FIXTURES: Sample data ===


@pytest.fixture
def sample_analysis_payload() -> dict:
    """Contract-shaped reply for 私は美しい花を見ました。"""
    return {
        "directTranslation": "I (topic) beautiful flower (object) saw.",
        "words": [
            {
                "id": "w1",
                "text": "私",
                "reading": "わたし",
                "partOfSpeech": "pronoun",
                "position": 0,
                "isTopic": True,
                "attachedParticle": {
                    "text": "は",
                    "reading": "は",
                    "description": "Marks <strong>私</strong> as the topic.",
                },
            },
            {
                "id": "w2",
                "text": "美しい",
                "reading": "うつくしい",
                "partOfSpeech": "i-adjective",
                "modifies": ["w3"],
                "position": 1,
            },
            {
                "id": "w3",
                "text": "花",
                "reading": "はな",
                "partOfSpeech": "noun",
                "modifies": ["w4"],
                "position": 2,
                "attachedParticle": {
                    "text": "を",
                    "description": "Marks the direct object of <em>見ました</em>.",
                },
            },
            {
                "id": "w4",
                "text": "見ました",
                "reading": "みました",
                "partOfSpeech": "verb",
                "position": 3,
            },
        ],
        "explanation": "<p>A simple <strong>SOV</strong> sentence.</p>",
        "isFragment": False,
        "grammarPoints": [
            {"title": "は (Topic Marker)", "explanation": "Marks 私 as the topic."},
            {"title": "ました (Polite Past)", "explanation": "見る in polite past form."},
        ],
    }


@pytest.fixture
def sample_analysis_json(sample_analysis_payload: dict) -> str:
    return json.dumps(sample_analysis_payload, ensure_ascii=False)


@pytest.fixture
def sample_analysis() -> SentenceAnalysis:
    """Minimal valid SentenceAnalysis."""
    return SentenceAnalysis(
        direct_translation="I (topic) flower saw.",
        words=[
            WordNode(
                id="w1",
                text="私",
                part_of_speech="pronoun",
                position=0,
                is_topic=True,
                modifies=[],
                attached_particle=AttachedParticle(text="は", description="topic"),
            ),
            WordNode(id="w2", text="見ました", part_of_speech="verb", position=1),
        ],
        explanation="<p>Simple.</p>",
        is_fragment=False,
        grammar_points=[GrammarPoint(title="は", explanation="Topic marker.")],
    )


@pytest.fixture
def sample_messages() -> list[ConversationMessage]:
    return [
        ConversationMessage(role="assistant", content="いらっしゃいませ！"),
        ConversationMessage(role="user", content="コーヒーをください。"),
    ]


# === FIXTURES: Mock LLM ===


def make_response(content: str, provider: str = "anthropic", model: str = SAMPLE_MODEL) -> LLMResponse:
    return LLMResponse(
        content=content,
        input_tokens=100,
        output_tokens=50,
        model=model,
        provider=provider,
        latency_ms=12,
    )


def make_mock_client(*contents: str, provider: str = "anthropic", model: str = SAMPLE_MODEL) -> MagicMock:
    """Mock BaseLLMClient whose complete() returns each content in turn."""
    client = MagicMock()
    client.provider_name = provider
    client.model_name = model
    client.complete = AsyncMock(
        side_effect=[make_response(c, provider, model) for c in contents]
    )
    return client


@pytest.fixture
def make_client():
    """Factory fixture: make_client(*contents) -> scripted mock client."""
    return make_mock_client


@pytest.fixture
def mock_llm_client(sample_analysis_json: str) -> MagicMock:
    """Mock client answering one analysis request."""
    return make_mock_client(sample_analysis_json)
