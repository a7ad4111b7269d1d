# tests/unit/core/test_validation.py — v1
"""Tests for core/validation.py — transport-edge input guards."""

from __future__ import annotations

import pytest

from bunkai.core.validation import (
    ValidationError,
    is_valid_model_id,
    is_valid_provider,
    require_text,
    validate_analysis_request,
    validate_conversation_request,
)


class TestModelId:
    @pytest.mark.parametrize(
        "value",
        [
            "claude-sonnet-4-5-20250929",
            "gpt-5-mini",
            "meta-llama/llama-3.3-70b-instruct:free",
            "accounts/fireworks/models/qwen3",
            "a",
        ],
    )
    def test_valid(self, value):
        assert is_valid_model_id(value)

    @pytest.mark.parametrize("value", ["", "x" * 201, "bad<id>", "semi;colon", None, 42])
    def test_invalid(self, value):
        assert not is_valid_model_id(value)

    def test_max_length_accepted(self):
        assert is_valid_model_id("x" * 200)


class TestProvider:
    def test_registered(self):
        assert is_valid_provider("openrouter")

    def test_unregistered(self):
        assert not is_valid_provider("mystery")
        assert not is_valid_provider(None)


class TestRequireText:
    def test_returns_value(self):
        assert require_text("abc", "field") == "abc"

    @pytest.mark.parametrize("value", ["", None, 3])
    def test_rejects(self, value):
        with pytest.raises(ValidationError) as exc_info:
            require_text(value, "field")
        assert exc_info.value.field == "field"
        assert str(exc_info.value) == "Invalid field"


class TestAnalysisRequest:
    def test_valid(self):
        validate_analysis_request("私は学生です。", "anthropic", "claude-sonnet-4-5-20250929")

    def test_empty_sentence(self):
        with pytest.raises(ValidationError, match="Invalid sentence provided"):
            validate_analysis_request("", "anthropic", "m")

    def test_bad_provider(self):
        with pytest.raises(ValidationError, match="Invalid provider specified"):
            validate_analysis_request("文", "mystery", "m")

    def test_bad_model(self):
        with pytest.raises(ValidationError, match="Invalid model specified"):
            validate_analysis_request("文", "anthropic", "")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate_analysis_request(None, "anthropic", "m")


class TestConversationRequest:
    def test_empty_topic(self):
        with pytest.raises(ValidationError, match="Invalid topic"):
            validate_conversation_request("", "anthropic", "m")

    def test_valid(self):
        validate_conversation_request("ordering coffee", "google", "gemini-2.5-flash")
