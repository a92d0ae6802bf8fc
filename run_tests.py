#!/usr/bin/env python3
"""
Test Runner Script for Idea Capture

Usage:
    python run_tests.py                    # Run all tests
    python run_tests.py --category cli     # Run specific category
    python run_tests.py --quick            # Stop on first failure
    python run_tests.py --verbose          # Verbose output
    python run_tests.py --list             # List available categories
"""

import argparse
import subprocess
import sys
from datetime import datetime
from pathlib import Path

# Test categories mapping
TEST_CATEGORIES = {
    "config": "tests/test_system_config_validation.py",
    "cli": "tests/test_system_cli_behavior.py",
    "unit_models": "tests/test_models.py",
    "unit_search": "tests/test_search.py",
    "unit_summarizer": "tests/test_summarizer.py",
    "unit_storage": "tests/test_storage.py",
    "unit_pipeline": "tests/test_pipeline.py",
}

CATEGORY_DESCRIPTIONS = {
    "config": "Configuration validation - env vars, defaults, masking",
    "cli": "CLI behavior - idea joining, end-to-end runs, exit codes",
    "unit_models": "Unit tests - idea record model",
    "unit_search": "Unit tests - Tavily search client",
    "unit_summarizer": "Unit tests - Gemini summarizer and JSON cleanup",
    "unit_storage": "Unit tests - MongoDB and memory stores",
    "unit_pipeline": "Unit tests - pipeline orchestration",
}


def list_categories():
    """Print available test categories."""
    print("\n" + "=" * 60)
    print("AVAILABLE TEST CATEGORIES")
    print("=" * 60)

    print("\n📋 System Tests:")
    for key, desc in CATEGORY_DESCRIPTIONS.items():
        if not key.startswith("unit_"):
            print(f"  {key:17} - {desc}")

    print("\n📋 Unit Tests:")
    for key, desc in CATEGORY_DESCRIPTIONS.items():
        if key.startswith("unit_"):
            print(f"  {key:17} - {desc}")

    print("\n" + "=" * 60)


def run_tests(categories=None, verbose=False, quick=False):
    """Run tests with specified options."""
    cmd = [sys.executable, "-m", "pytest"]

    paths = [
        TEST_CATEGORIES[cat]
        for cat in (categories or [])
        if cat in TEST_CATEGORIES and Path(TEST_CATEGORIES[cat]).exists()
    ]
    cmd.extend(paths or ["tests/"])

    if verbose:
        cmd.append("-v")
    else:
        cmd.append("--tb=short")

    if quick:
        cmd.extend(["-x", "--ff"])

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print("\n" + "=" * 60)
    print("IDEA CAPTURE TEST RUNNER")
    print("=" * 60)
    print(f"Started:    {timestamp}")
    print(f"Categories: {', '.join(categories) if categories else 'ALL'}")
    print("=" * 60 + "\n")

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def main():
    parser = argparse.ArgumentParser(
        description="Run Idea Capture tests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--category", "-c",
        type=str,
        help="Test category to run (comma-separated for multiple)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show verbose output",
    )
    parser.add_argument(
        "--quick", "-q",
        action="store_true",
        help="Quick mode - stop on first failure",
    )
    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="List available test categories",
    )

    args = parser.parse_args()

    if args.list:
        list_categories()
        return 0

    categories = None
    if args.category:
        categories = [c.strip() for c in args.category.split(",")]

    return run_tests(categories=categories, verbose=args.verbose, quick=args.quick)


if __name__ == "__main__":
    sys.exit(main())
