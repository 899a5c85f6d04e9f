#!/usr/bin/env python3
"""
Code Mentor - Main Entry Point

Detects common mistakes in a code snippet and explains them at the
learner's skill level.

Usage:
    python -m code_mentor.main analyze solution.py --language python --skill-level beginner
    python -m code_mentor.main progress --chart progress.png
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import MentorConfig
from .models import IssueType, Language, SkillLevel
from .pipeline import run_analysis_sync
from .tools import (
    JsonFileStorage,
    ProgressTracker,
    format_progress,
    format_report,
    result_to_dict,
)
from .utils import calculate_metrics, format_metrics_report, get_logger, setup_logging


LANGUAGE_CHOICES = [lang.value for lang in Language]
SKILL_CHOICES = [level.value for level in SkillLevel]
RESOLVABLE_TYPES = [t.value for t in IssueType if t is not IssueType.SUCCESS]


def _make_tracker(config: MentorConfig) -> ProgressTracker:
    tracker = ProgressTracker(JsonFileStorage(config.progress_file))
    tracker.load()
    return tracker


def _read_code(path) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def cmd_analyze(args, config: MentorConfig) -> int:
    """Handle 'analyze' subcommand."""
    logger = get_logger()

    try:
        code = _read_code(args.file)
    except OSError as e:
        logger.error(f"Cannot read {args.file}: {e}")
        return 1

    if not code.strip():
        logger.warning("No code to analyze")
        return 0

    if args.language:
        config.language = args.language
    if args.skill_level:
        config.skill_level = args.skill_level
    if args.delay is not None:
        config.analysis_delay = args.delay
    if args.no_progress:
        config.track_progress = False

    tracker = _make_tracker(config) if config.track_progress else None

    result = run_analysis_sync(
        code,
        config.language,
        config.skill_level,
        tracker=tracker,
        delay=config.analysis_delay,
    )

    if args.json:
        print(json.dumps(result_to_dict(result), indent=2))
    else:
        print(format_report(result))
        print()
        print(format_metrics_report(calculate_metrics(list(result.issues))))
    return 0


def cmd_progress(args, config: MentorConfig) -> int:
    """Handle 'progress' subcommand."""
    logger = get_logger()
    tracker = _make_tracker(config)

    if args.reset:
        tracker.reset()
        logger.info("Progress reset")

    if args.resolve:
        if tracker.mark_resolved(args.resolve, args.count) is None:
            return 1

    progress = tracker.snapshot()
    print(format_progress(progress))

    if args.chart:
        from .utils.chart import render_progress_chart

        try:
            path = render_progress_chart(progress, args.chart)
        except ValueError as e:
            logger.error(f"Cannot render chart: {e}")
            return 1
        logger.info(f"Chart saved: {path}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Code Mentor - adaptive feedback on code snippets"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Analyze a code snippet")
    analyze_parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Source file to analyze (default: read stdin)"
    )
    analyze_parser.add_argument(
        "--language", "-l",
        choices=LANGUAGE_CHOICES,
        help="Language of the snippet (default: CODE_MENTOR_LANGUAGE or python)"
    )
    analyze_parser.add_argument(
        "--skill-level", "-s",
        choices=SKILL_CHOICES,
        help="Learner skill level (default: CODE_MENTOR_SKILL_LEVEL or beginner)"
    )
    analyze_parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Simulated analysis delay in seconds"
    )
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON"
    )
    analyze_parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not record this analysis in saved progress"
    )

    # progress command
    progress_parser = subparsers.add_parser("progress", help="Show saved progress")
    progress_parser.add_argument(
        "--resolve",
        choices=RESOLVABLE_TYPES,
        help="Mark issues of this type as resolved"
    )
    progress_parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="How many issues to mark resolved (default: 1)"
    )
    progress_parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear saved progress"
    )
    progress_parser.add_argument(
        "--chart",
        help="Render a progress chart to this image path"
    )

    return parser


def log_settings(args):
    """Log level and stream for a parsed command line."""
    level = logging.DEBUG if args.debug else logging.INFO
    if getattr(args, "json", False):
        # stdout carries only the JSON document
        return (level if args.debug else logging.WARNING), sys.stderr
    return level, sys.stdout


def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    level, stream = log_settings(args)
    setup_logging(level=level, stream=stream)
    logger = get_logger()

    try:
        config = MentorConfig.from_env()
        if args.command == "analyze":
            code = cmd_analyze(args, config)
        else:
            code = cmd_progress(args, config)
    except Exception as e:
        logger.exception(f"Command failed: {e}")
        sys.exit(1)

    sys.exit(code)


if __name__ == "__main__":
    main()
