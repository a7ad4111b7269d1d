# tests/unit/core/test_models.py — v2
"""Tests for core/models.py — shared domain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bunkai.core.models import (
    Conversation,
    ConversationMessage,
    ConversationScore,
    WordNode,
)


class TestWordNode:
    def test_negative_position_rejected(self):
        with pytest.raises(ValidationError):
            WordNode(id="w1", text="花", part_of_speech="noun", position=-1)

    def test_optional_fields_default(self):
        w = WordNode(id="w1", text="花", part_of_speech="noun", position=0)
        assert w.reading is None
        assert w.modifies is None
        assert w.attached_particle is None
        assert w.is_topic is None

    def test_frozen(self):
        w = WordNode(id="w1", text="花", part_of_speech="noun", position=0)
        with pytest.raises(ValidationError):
            w.text = "木"  # type: ignore[misc]


class TestSentenceAnalysis:
    def test_frozen(self, sample_analysis):
        with pytest.raises(ValidationError):
            sample_analysis.is_fragment = True  # type: ignore[misc]

    def test_json_roundtrip(self, sample_analysis):
        restored = type(sample_analysis).model_validate_json(sample_analysis.model_dump_json())
        assert restored == sample_analysis


class TestConversationModels:
    def test_message_has_timestamp(self):
        m = ConversationMessage(role="user", content="こんにちは")
        assert m.timestamp.tzinfo is not None

    def test_system_role_rejected(self):
        with pytest.raises(ValidationError):
            ConversationMessage(role="system", content="x")  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [-1, 101])
    def test_score_bounds(self, value):
        with pytest.raises(ValidationError):
            ConversationScore(score=value, did_well=[], needs_improvement=[])

    def test_conversation_defaults(self):
        c = Conversation(
            id="c1",
            user_id="u1",
            topic="ordering coffee",
            messages=[ConversationMessage(role="assistant", content="いらっしゃいませ")],
            provider="anthropic",
            model="claude-sonnet-4-5-20250929",
        )
        assert c.is_complete is False
        assert c.score is None
        assert len(c.messages) == 1
