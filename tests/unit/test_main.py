# tests/unit/test_main.py — v2
"""Tests for main.py — CLI entry point."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

import pytest

from bunkai.api.models import AnalyzeResult, TurnResult
from bunkai.config.settings import ConfigurationError
from bunkai.core.models import Conversation, ConversationMessage, ConversationScore
from bunkai.main import _build_parser, main

_LOAD = "bunkai.main._load_settings"


# ---------------------------------------------------------------------------
# Parser tests
# ---------------------------------------------------------------------------

class TestBuildParser:
    def test_version_flag(self):
        parser = _build_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["--version"])
        assert exc_info.value.code == 0

    def test_analyze_subcommand(self):
        args = _build_parser().parse_args(
            ["analyze", "私は学生です。", "-p", "openai", "-m", "gpt-5-mini", "--json"]
        )
        assert args.command == "analyze"
        assert args.sentence == "私は学生です。"
        assert args.provider == "openai"
        assert args.model == "gpt-5-mini"
        assert args.json is True

    def test_analyze_defaults(self):
        args = _build_parser().parse_args(["analyze", "文"])
        assert args.provider is None
        assert args.model is None
        assert args.json is False

    def test_converse_subcommand(self):
        args = _build_parser().parse_args(["-v", "converse", "ordering coffee"])
        assert args.verbose is True
        assert args.topic == "ordering coffee"

    def test_providers_subcommand(self):
        args = _build_parser().parse_args(["providers"])
        assert args.command == "providers"


# ---------------------------------------------------------------------------
# main() tests
# ---------------------------------------------------------------------------

class TestMain:
    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_providers(self, settings, capsys):
        with patch(_LOAD, return_value=settings):
            assert main(["providers"]) == 0
        out = capsys.readouterr().out
        assert "anthropic" in out
        assert "configured" in out
        assert "FIREWORKS_API_KEY" in out
        assert "missing key" in out

    def test_analyze_json(self, settings, sample_analysis, capsys):
        result = AnalyzeResult(
            sentence="文", provider="anthropic", model="m", analysis=sample_analysis
        )
        with patch(_LOAD, return_value=settings), patch(
            "bunkai.api.facade.Bunkai.analyze", new=AsyncMock(return_value=result)
        ) as analyze:
            assert main(["analyze", "文", "--json"]) == 0

        analyze.assert_awaited_once_with("文", "anthropic", "claude-sonnet-4-5-20250929")
        printed = json.loads(capsys.readouterr().out)
        assert printed["direct_translation"] == sample_analysis.direct_translation

    def test_analyze_text(self, settings, sample_analysis, capsys):
        result = AnalyzeResult(
            sentence="文", provider="openai", model="gpt-5-mini", analysis=sample_analysis
        )
        with patch(_LOAD, return_value=settings), patch(
            "bunkai.api.facade.Bunkai.analyze", new=AsyncMock(return_value=result)
        ):
            assert main(["analyze", "文", "-p", "openai", "-m", "gpt-5-mini"]) == 0
        out = capsys.readouterr().out
        assert "Translation:" in out
        assert "見ました" in out

    def test_error_exit_code(self, settings, capsys):
        with patch(_LOAD, return_value=settings), patch(
            "bunkai.api.facade.Bunkai.analyze",
            new=AsyncMock(side_effect=ConfigurationError("no key")),
        ):
            assert main(["analyze", "文"]) == 1
        assert "no key" in capsys.readouterr().err

    def test_keyboard_interrupt(self, settings):
        with patch(_LOAD, return_value=settings), patch(
            "bunkai.api.facade.Bunkai.analyze",
            new=AsyncMock(side_effect=KeyboardInterrupt()),
        ):
            assert main(["analyze", "文"]) == 130

    def test_converse_until_complete(self, settings, capsys):
        conversation = Conversation(
            id="c1",
            user_id="cli",
            topic="ordering coffee",
            messages=[ConversationMessage(role="assistant", content="いらっしゃいませ！")],
            provider="anthropic",
            model="m",
        )
        turns = [
            TurnResult(
                message=ConversationMessage(role="assistant", content="ホットですか？"),
                is_complete=False,
            ),
            TurnResult(
                message=ConversationMessage(role="assistant", content="ありがとうございました"),
                is_complete=True,
                score=ConversationScore(score=90, did_well=["polite"], needs_improvement=["speed"]),
            ),
        ]
        with patch(_LOAD, return_value=settings), patch(
            "bunkai.api.facade.Bunkai.start_conversation",
            new=AsyncMock(return_value=conversation),
        ), patch(
            "bunkai.api.facade.Bunkai.send_message", new=AsyncMock(side_effect=turns)
        ) as send, patch("builtins.input", side_effect=["コーヒー", "", "はい"]):
            assert main(["converse", "ordering coffee"]) == 0

        assert send.await_count == 2
        out = capsys.readouterr().out
        assert "いらっしゃいませ！" in out
        assert "Score: 90/100" in out

    def test_converse_eof(self, settings):
        conversation = Conversation(
            id="c1",
            user_id="cli",
            topic="weather",
            messages=[ConversationMessage(role="assistant", content="こんにちは")],
            provider="anthropic",
            model="m",
        )
        with patch(_LOAD, return_value=settings), patch(
            "bunkai.api.facade.Bunkai.start_conversation",
            new=AsyncMock(return_value=conversation),
        ), patch("builtins.input", side_effect=EOFError()):
            assert main(["converse", "weather"]) == 0
