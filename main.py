#!/usr/bin/env python3
"""
Idea Capture - Save a summarized, web-enriched idea.

Command-line entry point for running the full pipeline:
  - Search the web for pages related to the idea (Tavily)
  - Summarize and tag the idea (Gemini)
  - Save the result to MongoDB
  - Print the saved id, summary and tags

Usage:
    python main.py "New mobile app for dog walkers"
    python main.py I have a great idea for a new mobile app for dog walkers
    python main.py --dry-run "Idea text"     # Save to memory, not MongoDB
    python main.py --verbose "Idea text"     # Show progress on stderr

Exit codes:
    0  idea saved
    1  no idea given, or any search/model/database error
"""

import argparse
import json
import sys
from typing import Iterable

from src.pipeline import IdeaPipeline, PipelineResult
from src.config import (
    Settings,
    print_config_summary,
    validate_config,
)


USAGE_MESSAGE = (
    'Please provide your idea. Example: python main.py "New mobile app for dog walkers"'
)


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="idea-capture",
        description="Summarize, tag and save an idea with related web results.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "New mobile app for dog walkers"
  %(prog)s New mobile app for dog walkers      Words are joined with spaces
  %(prog)s --dry-run "Idea text"               Skip MongoDB, keep result in memory
  %(prog)s -v "Idea text"                      Show progress on stderr
  %(prog)s -v app -n for walkers               Options go first; the later "-n" is idea text
        """,
    )

    parser.add_argument(
        "idea",
        nargs=argparse.REMAINDER,
        help="Free-text idea; every word from the first one on is idea text",
    )

    parser.add_argument(
        "--dry-run", "-n",
        action="store_true",
        help="Search and summarize but do not write to MongoDB",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show progress and tracebacks on stderr",
    )

    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show current configuration and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 1.0.0",
    )

    return parser


def build_idea_text(words: Iterable[str]) -> str:
    """Join invocation words with single spaces and trim the result."""
    return " ".join(words).strip()


def show_config() -> None:
    """Display current configuration."""
    print("=" * 60)
    print("Idea Capture Configuration")
    print("=" * 60)
    print_config_summary()

    errors = validate_config()
    if errors:
        print("\nConfiguration warnings:")
        for error in errors:
            print(f"  ⚠️  {error}")
    else:
        print("\n✓ Configuration valid")
    print("=" * 60)


def print_report(result: PipelineResult) -> None:
    """Print the saved idea report to stdout."""
    print("Saved idea:", json.dumps(result.to_report(), indent=2, ensure_ascii=False))


def main(argv: list = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 = success, 1 = error).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.show_config:
        show_config()
        return 0

    idea = build_idea_text(args.idea)
    if not idea:
        print(USAGE_MESSAGE, file=sys.stderr)
        return 1

    if args.verbose and args.dry_run:
        print("Mode: DRY RUN (no database writes)", file=sys.stderr)

    try:
        pipeline = IdeaPipeline(
            Settings.from_env(),
            dry_run=args.dry_run,
            verbose=args.verbose,
        )
        result = pipeline.run(idea)
        print_report(result)

        if args.verbose:
            print(f"Finished in {result.duration_seconds:.2f}s", file=sys.stderr)
        return 0

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
