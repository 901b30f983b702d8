# src/main.py — v1
"""CLI entry point.

Usage:
    htmlvalid <file|directory|url> [--allfiles] [-v]

Exit codes:
     0  every validated file was valid
     1  at least one file was invalid
    -1  no path given, or the directory was empty
    -2  path is neither a file, a directory nor a URL (or unknown flags)
    -3  the validation service could not be reached
    -4  the user declined to process a large batch
     2  invalid configuration
     3  unexpected internal error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from htmlvalid.batch.runner import BatchRunner
from htmlvalid.batch.scanner import scan_directory
from htmlvalid.config.settings import ConfigurationError, Settings, load_settings
from htmlvalid.core.models import RunVerdict
from htmlvalid.logging.logger import setup_logging
from htmlvalid.report.console import ConsoleReporter
from htmlvalid.validation.classifier import is_url
from htmlvalid.validation.validator import HtmlValidator
from htmlvalid.version import __version__

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130
EXIT_FATAL = 3


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args, unknown = parser.parse_known_args(argv)

    try:
        settings = load_settings(**_settings_overrides(args))
    except (ConfigurationError, ValidationError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    setup_logging(
        level="DEBUG" if args.verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )

    reporter = ConsoleReporter(program_name=settings.program_name, version=__version__)
    reporter.header()

    if unknown:
        logger.error("Unrecognized arguments: %s", " ".join(unknown))
        reporter.invalid_input()
        return int(RunVerdict.INVALID_PATH)

    if args.target is None:
        reporter.invalid_input()
        return int(RunVerdict.EMPTY_INPUT)

    candidates = _resolve_candidates(args.target)
    if candidates is None:
        logger.error("Not a file, directory or URL: %s", args.target)
        reporter.invalid_input()
        return int(RunVerdict.INVALID_PATH)

    errors_warnings_only = settings.errors_warnings_only
    if args.allfiles % 2:
        errors_warnings_only = not errors_warnings_only

    try:
        return _run(settings, reporter, candidates, errors_warnings_only)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return EXIT_INTERRUPTED
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return EXIT_FATAL


def _run(
    settings: Settings,
    reporter: ConsoleReporter,
    candidates: list[str],
    errors_warnings_only: bool,
) -> int:
    threshold = settings.confirm_threshold
    with HtmlValidator(settings) as validator:
        runner = BatchRunner(
            validator,
            confirm=lambda count: reporter.confirm(count, threshold),
            on_start=reporter.validating,
            on_report=reporter.file_report,
            on_connection_failure=reporter.connection_failure,
            confirm_threshold=threshold,
            errors_warnings_only=errors_warnings_only,
        )
        result = runner.run(candidates)

    if result.verdict in (RunVerdict.ALL_VALID, RunVerdict.SOME_INVALID):
        reporter.summary(result)
    return result.exit_code


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="htmlvalid",
        description=f"HTMLValid v{__version__} — validate HTML/CSS files with the W3C services",
    )
    parser.add_argument(
        "target", nargs="?", default=None,
        help="HTML/CSS file, directory (scanned recursively) or http(s) URL",
    )
    parser.add_argument(
        "--allfiles", "--af", action="count", default=0,
        help="Display all files, not only those with errors or warnings",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--user-agent", default=None,
        help="User-Agent sent to the validator (default: HTMLValid)",
    )
    parser.add_argument(
        "--threshold", type=int, default=None,
        help="Ask for confirmation above this many files (default: 5)",
    )
    return parser


def _settings_overrides(args: argparse.Namespace) -> dict[str, object]:
    overrides: dict[str, object] = {}
    if args.user_agent is not None:
        overrides["user_agent"] = args.user_agent
    if args.threshold is not None:
        overrides["confirm_threshold"] = args.threshold
    return overrides


def _resolve_candidates(target: str) -> list[str] | None:
    """Turn the CLI target into an ordered candidate list.

    Returns None when the target is neither a URL, a file nor a directory.
    """
    if is_url(target):
        return [target]
    path = Path(target)
    if path.is_dir():
        return [str(p) for p in scan_directory(path)]
    if path.is_file():
        return [str(path)]
    return None


def cli() -> None:
    """Console-script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
