"""Command-line interface for scanning and publishing game builds.

This module provides the `game-publish` entry point. Command lines meant
for copy/paste go to stdout; progress, warnings and errors go to stderr.
"""

import argparse
import json
import os
import sys
from pathlib import Path

from .config import EXAMPLE_CONFIG, load_publish_config
from .core.errors import PublishError
from .core.types import PublishOptions
from .feedback import (
    FeedbackApiError,
    ItchClient,
    feedback_report,
    format_breakdown,
    format_comments,
    format_game_list,
    format_game_stats,
    format_ratings,
    sentiment_breakdown,
)
from .pipeline import PublishPipeline
from .publisher import ChannelPublisher
from .registry import DEFAULT_ENGINE, EngineRegistry

API_KEY_ENV = "ITCH_IO_API_KEY"
ANALYTICS_URL = "https://itch.io/game/analytics/"
COMMENT_LIMIT = 20
SENTIMENT_COMMENT_LIMIT = 50


def run_scan(args: argparse.Namespace) -> int:
    """Classify a build root and print the butler commands without running them."""
    pipeline = PublishPipeline(EngineRegistry.get_profile(args.engine))
    _, targets = pipeline.scan(Path(args.build_root))

    options = PublishOptions(version=args.version, ignore_patterns=tuple(args.ignore))
    print("\nButler commands:\n", file=sys.stderr)
    for line in pipeline.publisher.command_lines(targets, args.destination, options):
        print(line)
    return 0


def run_publish(args: argparse.Namespace) -> int:
    """Scan a build root and push every detected platform."""
    pipeline = PublishPipeline(EngineRegistry.get_profile(args.engine))
    options = PublishOptions(
        version=args.version,
        dry_run=args.dry_run,
        ignore_patterns=tuple(args.ignore),
    )

    result = pipeline.run(Path(args.build_root), args.destination, options)
    return result.exit_code(allow_partial=args.allow_partial)


def run_push_config(args: argparse.Namespace) -> int:
    """Push the channels listed in a JSON publish config."""
    config = load_publish_config(Path(args.config))

    pipeline = PublishPipeline(publisher=ChannelPublisher())
    result = pipeline.run_targets(
        config.targets(),
        config.destination_id,
        config.options(dry_run=args.dry_run),
    )
    return result.exit_code(allow_partial=args.allow_partial)


def _client_from_env() -> ItchClient | None:
    api_key = os.environ.get(API_KEY_ENV)
    if not api_key:
        print(f"Error: Set the {API_KEY_ENV} environment variable", file=sys.stderr)
        return None
    return ItchClient(api_key)


def _report_lines(client: ItchClient, game_id: str) -> list[str]:
    """Ratings, recent comments and sentiment; a failed section is reported and skipped."""
    lines: list[str] = []

    try:
        lines += format_ratings(client.get_ratings(game_id)) + [""]
    except FeedbackApiError as e:
        print(f"Warning: Could not fetch ratings: {e}", file=sys.stderr)

    try:
        comments = client.get_comments(game_id, limit=SENTIMENT_COMMENT_LIMIT)
    except FeedbackApiError as e:
        print(f"Warning: Could not fetch comments: {e}", file=sys.stderr)
        comments = []

    lines += feedback_report(comments)
    lines += ["", f"View full analytics at: {ANALYTICS_URL}{game_id}"]
    return lines


def run_feedback(args: argparse.Namespace) -> int:
    """Print comments, ratings or sentiment for one game."""
    client = _client_from_env()
    if client is None:
        return 1

    if args.command == "ratings":
        lines = format_ratings(client.get_ratings(args.game_id))
    elif args.command == "comments":
        lines = format_comments(client.get_comments(args.game_id, limit=COMMENT_LIMIT))
    elif args.command == "sentiment":
        comments = client.get_comments(args.game_id, limit=SENTIMENT_COMMENT_LIMIT)
        lines = format_breakdown(sentiment_breakdown(comments))
    else:
        lines = _report_lines(client, args.game_id)

    print("\n".join(lines).rstrip())
    return 0


def run_analytics(args: argparse.Namespace) -> int:
    """Print view and download stats for one game, or for every game on the account."""
    client = _client_from_env()
    if client is None:
        return 1

    if args.game_id:
        lines = format_game_stats(client.get_game(args.game_id))
    else:
        lines = format_game_list(client.list_games())

    print("\n".join(lines))
    return 0


def _add_publish_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--version", help="Version string passed to --userversion")
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Glob pattern passed to butler's --ignore (repeatable, kept in order)",
    )


def build_parser() -> argparse.ArgumentParser:
    EngineRegistry.discover_engines()
    engines = EngineRegistry.list_engines()

    parser = argparse.ArgumentParser(
        prog="game-publish",
        description="Detect per-platform game builds and publish them with butler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print butler commands for a Godot export folder
  game-publish scan ./build myname/my-game

  # Push a Ren'Py build, tagging the version
  game-publish publish ./build myname/my-vn --engine renpy --version 1.0.0

  # Preview a config-driven push
  game-publish push-config publish.json --dry-run

  # Views and downloads for every game on the account
  game-publish analytics

Expected build structure:
  build/
    windows/    (.exe)
    linux/      (executable)
    macos/      (.app or .zip)
    web/        (index.html)
        """,
    )
    subparsers = parser.add_subparsers(dest="subcommand", required=True)

    scan = subparsers.add_parser("scan", help="Classify builds and print butler commands")
    scan.add_argument("build_root", help="Directory holding one folder per platform")
    scan.add_argument("destination", help="itch.io target, e.g. username/game")
    scan.add_argument("--engine", choices=engines, default=DEFAULT_ENGINE)
    _add_publish_options(scan)
    scan.set_defaults(handler=run_scan)

    publish = subparsers.add_parser("publish", help="Classify builds and push each platform")
    publish.add_argument("build_root", help="Directory holding one folder per platform")
    publish.add_argument("destination", help="itch.io target, e.g. username/game")
    publish.add_argument("--engine", choices=engines, default=DEFAULT_ENGINE)
    _add_publish_options(publish)
    publish.add_argument("--dry-run", action="store_true", help="Show commands without uploading")
    publish.add_argument(
        "--allow-partial",
        action="store_true",
        help="Exit 0 when at least one channel succeeded",
    )
    publish.set_defaults(handler=run_publish)

    push_config = subparsers.add_parser(
        "push-config",
        help="Push channels listed in a JSON config",
        description="Example config:\n" + json.dumps(EXAMPLE_CONFIG, indent=2),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    push_config.add_argument("config", help="Path to the JSON publish config")
    push_config.add_argument("--dry-run", action="store_true", help="Show commands without uploading")
    push_config.add_argument(
        "--allow-partial",
        action="store_true",
        help="Exit 0 when at least one channel succeeded",
    )
    push_config.set_defaults(handler=run_push_config)

    feedback = subparsers.add_parser(
        "feedback",
        help=f"Show ratings, comments and sentiment (needs {API_KEY_ENV})",
    )
    feedback.add_argument("game_id", help="itch.io game id")
    feedback.add_argument(
        "command",
        nargs="?",
        default="report",
        choices=["comments", "ratings", "sentiment", "report"],
    )
    feedback.set_defaults(handler=run_feedback)

    analytics = subparsers.add_parser(
        "analytics",
        help=f"Show views and downloads (needs {API_KEY_ENV})",
    )
    analytics.add_argument("game_id", nargs="?", help="itch.io game id; omit to list every game")
    analytics.set_defaults(handler=run_analytics)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the game-publish command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return args.handler(args)
    except PublishError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
