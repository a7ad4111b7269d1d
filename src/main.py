# src/main.py — v2
"""CLI entry point: analyze, converse, providers commands.

Usage:
    bunkai analyze "<sentence>" [-p provider] [-m model] [--json]
    bunkai converse "<topic>" [-p provider] [-m model]
    bunkai providers
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from bunkai.version import __version__

logger = logging.getLogger(__name__)

CLI_USER_ID = "cli"


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        settings = _load_settings(args.verbose)
        return asyncio.run(args.func(args, settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="bunkai",
        description=f"bunkai v{__version__} — Japanese sentence analysis and conversation practice",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- analyze ---
    p_analyze = subparsers.add_parser(
        "analyze", help="Break down a Japanese sentence",
    )
    p_analyze.add_argument("sentence", help="Sentence to analyze")
    _add_model_options(p_analyze)
    p_analyze.add_argument(
        "--json", action="store_true",
        help="Print the analysis as JSON",
    )
    p_analyze.set_defaults(func=_cmd_analyze)

    # --- converse ---
    p_converse = subparsers.add_parser(
        "converse", help="Practice a conversation on a topic",
    )
    p_converse.add_argument("topic", help="Conversation topic, e.g. 'ordering coffee'")
    _add_model_options(p_converse)
    p_converse.set_defaults(func=_cmd_converse)

    # --- providers ---
    p_providers = subparsers.add_parser(
        "providers", help="List providers and whether their key is set",
    )
    p_providers.set_defaults(func=_cmd_providers)

    return parser


def _add_model_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-p", "--provider", default=None,
        help="Provider id (default: DEFAULT_PROVIDER)",
    )
    parser.add_argument(
        "-m", "--model", default=None,
        help="Model id (default: DEFAULT_MODEL)",
    )


async def _cmd_analyze(args: argparse.Namespace, settings) -> int:
    """Analyze one sentence and print the breakdown."""
    from bunkai.api.facade import Bunkai

    app = Bunkai.from_settings(settings)
    result = await app.analyze(
        args.sentence,
        args.provider or settings.default_provider,
        args.model or settings.default_model,
    )

    if args.json:
        print(json.dumps(result.analysis.model_dump(mode="json"), ensure_ascii=False, indent=2))
    else:
        _print_analysis(result.analysis)
    return 0


async def _cmd_converse(args: argparse.Namespace, settings) -> int:
    """Run an interactive conversation until the partner ends it."""
    from bunkai.api.facade import Bunkai

    app = Bunkai.from_settings(settings)
    conversation = await app.start_conversation(
        CLI_USER_ID,
        args.topic,
        args.provider or settings.default_provider,
        args.model or settings.default_model,
    )
    print(f"Partner: {conversation.messages[0].content}")

    while True:
        try:
            text = await asyncio.to_thread(input, "You: ")
        except EOFError:
            print()
            return 0
        if not text.strip():
            continue

        turn = await app.send_message(conversation.id, CLI_USER_ID, text)
        print(f"Partner: {turn.message.content}")
        if turn.is_complete and turn.score is not None:
            _print_score(turn.score)
            return 0


async def _cmd_providers(args: argparse.Namespace, settings) -> int:
    """List registered providers."""
    from bunkai.config.providers import list_providers

    for identity in list_providers():
        status = "configured" if settings.api_key_for(identity.id) else "missing key"
        print(f"  {identity.id:12s} {identity.display_name:16s} {identity.credential_env_key:20s} {status}")
    return 0


def _print_analysis(analysis: object) -> None:
    """Print a human-readable summary of a SentenceAnalysis."""
    print(f"\nTranslation:  {analysis.direct_translation}")
    if analysis.is_fragment:
        print("  (fragment)")
    print("\nWords:")
    for word in analysis.words:
        reading = f" ({word.reading})" if word.reading else ""
        line = f"  {word.position:3d}  {word.text}{reading}  [{word.part_of_speech}]"
        if word.is_topic:
            line += "  topic"
        if word.modifies:
            line += f"  -> {', '.join(word.modifies)}"
        if word.attached_particle:
            line += f"  +{word.attached_particle.text}"
        print(line)
    if analysis.grammar_points:
        print("\nGrammar points:")
        for point in analysis.grammar_points:
            print(f"  - {point.title}: {point.explanation}")


def _print_score(score: object) -> None:
    print(f"\nConversation complete. Score: {score.score}/100")
    if score.did_well:
        print("  Did well:")
        for item in score.did_well:
            print(f"    - {item}")
    if score.needs_improvement:
        print("  Needs improvement:")
        for item in score.needs_improvement:
            print(f"    - {item}")


def _load_settings(verbose: bool):
    """Load settings and configure logging for CLI usage."""
    from bunkai.config.settings import load_settings
    from bunkai.logging.logger import setup_logging, setup_logging_from_settings

    settings = load_settings()
    if verbose:
        setup_logging(level="DEBUG", log_format="text")
    else:
        setup_logging_from_settings(settings)
    # Quiet noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    return settings


if __name__ == "__main__":
    sys.exit(main())
