#!/usr/bin/env python3
"""
Env File Diff Tool

This tool compares two .env files and reports variables that are missing,
extra, or set to different values. Values are masked unless explicitly
requested.

Usage:
    envdiff [options] .env.example .env
    python -m envdiff.tools.diff [options] file1 file2
"""

import argparse
import logging
import sys

from envdiff.compare import compare_env_files
from envdiff.exceptions import EnvdiffError, EnvFileNotFoundError, SettingsError
from envdiff.formatter import format_diff
from envdiff.models import LogLevel, OutputFormat
from envdiff.settings import configure_logging, load_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the compare command."""
    parser = argparse.ArgumentParser(
        prog="envdiff",
        description="Compare two .env files and show differences",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  envdiff .env.example .env
  envdiff .env.staging .env.production --show-values
  envdiff .env.example .env --strict --json
  envdiff .env.local .env.production --color --show-values""",
    )

    parser.add_argument("file1", help="First env file (baseline)")

    parser.add_argument("file2", help="Second env file (comparison)")

    parser.add_argument(
        "--show-values",
        action="store_true",
        default=None,
        help="Show actual values (default: masked)",
    )

    parser.add_argument(
        "--color",
        action="store_true",
        help="Enhanced visual diff with colors and side-by-side view",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output (text output only; --color always uses color)",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Exit with code 1 if any differences found",
    )

    parser.add_argument("--json", action="store_true", help="Output as JSON")

    parser.add_argument(
        "--config", "-c", help="Settings file path (default: discover .envdiff.yaml)"
    )

    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        help="Logging level for diagnostics on stderr",
    )

    return parser


def _output_format(args: argparse.Namespace) -> OutputFormat | None:
    if args.json:
        return OutputFormat.JSON
    if args.color:
        return OutputFormat.VISUAL
    return None


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(
            args.config,
            show_values=args.show_values,
            strict=args.strict,
            output_format=_output_format(args),
            use_color=False if args.no_color else None,
            log_level=args.log_level,
        )
    except SettingsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.log_level)

    try:
        comparison = compare_env_files(args.file1, args.file2)
    except EnvFileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except EnvdiffError as e:
        logger.error(f"Comparison failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(
        format_diff(
            comparison,
            output_format=settings.output_format,
            show_values=settings.show_values,
            use_color=settings.use_color,
        )
    )

    if settings.strict and comparison.diff.has_differences:
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
