#!/usr/bin/env python3
"""
Env Template Scaffolding Tool

This tool creates a new env file from an existing one, replacing real
values with placeholders while keeping comments and blank lines.

Usage:
    envdiff-template [options] .env .env.example
    python -m envdiff.tools.scaffold [options] source target
"""

import argparse
import logging
import sys

from envdiff.exceptions import EnvdiffError, SettingsError, TemplateError
from envdiff.models import LogLevel
from envdiff.settings import configure_logging, load_settings
from envdiff.template import generate_from_template

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the template command."""
    parser = argparse.ArgumentParser(
        prog="envdiff-template",
        description="Generate an env file with placeholder values from a source file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  envdiff-template .env .env.example
  envdiff-template .env .env.example --overwrite --no-comments
  envdiff-template .env.production .env.example --placeholder REPLACE_ME""",
    )

    parser.add_argument("source", help="Env file to derive the template from")

    parser.add_argument("target", help="Path of the file to generate")

    parser.add_argument(
        "--overwrite", action="store_true", help="Replace the target if it exists"
    )

    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Drop comment lines from the generated file",
    )

    parser.add_argument(
        "--placeholder", help="Use this value for every variable in the output"
    )

    parser.add_argument(
        "--config", "-c", help="Settings file path (default: discover .envdiff.yaml)"
    )

    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        help="Logging level for diagnostics on stderr",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(
            args.config,
            placeholder=args.placeholder,
            preserve_comments=False if args.no_comments else None,
            log_level=args.log_level,
        )
    except SettingsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.log_level)

    try:
        target = generate_from_template(
            args.source,
            args.target,
            overwrite=args.overwrite,
            preserve_comments=settings.preserve_comments,
            placeholder=settings.placeholder,
        )
    except TemplateError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except EnvdiffError as e:
        logger.error(f"Template generation failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Generated {target} from {args.source}")
    sys.exit(0)


if __name__ == "__main__":
    main()
