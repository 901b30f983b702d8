# src/report/console.py — v1
"""Console presentation — header, confirmation prompt, per-file lines, summary.

Everything the operator sees goes through ConsoleReporter so the batch
runner stays free of formatting concerns.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from datetime import datetime
from pathlib import PurePath
from typing import IO

from htmlvalid.batch.models import BatchResult, FileReport

_YES = {"y", "yes"}
_NO = {"n", "no"}


def compact_path(path: str, length: int = 15) -> str:
    """Shorten a path with '...' while keeping the file name intact.

    Only applies when the directory part is longer than ``length``:
    ``/home/user/projects/site/main.css`` → ``/home/user/proj.../main.css``.
    """
    if not path:
        return path
    name = PurePath(path.replace("\\", "/")).name
    if len(path) - len(name) <= length:
        return path

    separator = "\\" if "\\" in path and "/" not in path else "/"
    match = re.match(rf"^(.{{{length}}}).+?([^\\/]+)$", path, re.DOTALL)
    if match is None:
        return path
    return f"{match.group(1)}...{separator}{match.group(2)}"


class ConsoleReporter:
    """Writes the human-facing report to a text stream."""

    def __init__(
        self,
        program_name: str = "HTMLValid",
        version: str = "",
        stream: IO[str] | None = None,
        input_fn: Callable[[str], str] | None = None,
    ) -> None:
        self._program_name = program_name
        self._version = version
        self._stream = stream or sys.stdout
        self._input = input_fn if input_fn is not None else input

    def _write(self, text: str = "") -> None:
        print(text, file=self._stream)

    def header(self) -> None:
        name = self._program_name
        self._write("=" * 57)
        self._write(f"  {name}")
        self._write(f"  Build: {self._version}")
        self._write("")
        self._write("  Usage:")
        self._write(f"    {name.lower()} \"HTMLFile/Folder\" [--allfiles]")
        self._write("")
        self._write("  --allfiles|--af: Display all files")
        self._write("  --help|-h: Additional help")
        self._write("  --version: Version number")
        self._write("=" * 57)

    def invalid_input(self) -> None:
        self._write(f"Please pass a valid HTML/CSS file or directory to {self._program_name}.")

    def confirm(self, count: int, threshold: int) -> bool:
        """Ask the operator whether to go on with a large batch.

        Re-asks until the answer is Y or N. Raises EOFError/KeyboardInterrupt
        if input is closed or interrupted; the runner treats that as "no".
        """
        plural = "s" if count > 1 else ""
        self._write(
            f"The directory contains more than {threshold} files and could take "
            f"anywhere between {count} second{plural} to complete."
        )
        self._write("")
        self._write(
            "This is a FREE service and thus W3C recommends a one second "
            "waiting period between uploads."
        )
        self._write("")
        prompt = "Would you like to continue processing? (Y or N) "
        while True:
            answer = self._input(prompt).strip().lower()
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            prompt = "Please enter either Y or N: "

    def validating(self) -> None:
        self._write("")
        self._write("Validating . . .")
        self._write("")

    def file_report(self, report: FileReport) -> None:
        outcome = report.outcome
        label = "Valid" if outcome.is_valid else "Invalid"
        self._write(
            f"The {outcome.kind.label} file {compact_path(report.candidate)} was {label}."
        )
        if outcome.has_issues:
            self._write("! It appears there are additional issues that should be addressed: ")
            if outcome.error_count > 0:
                self._write(f"Errors: {outcome.error_count}")
            if outcome.warning_count > 0:
                self._write(f"Warnings: {outcome.warning_count}")
        self._write("")

    def connection_failure(self, candidate: str) -> None:
        self._write("An error occurred connecting to W3C's validation service.")
        self._write("Please try again or contact your local administrator.")

    def summary(self, result: BatchResult, now: datetime | None = None) -> None:
        now = now or datetime.now()
        seconds = int(result.duration_seconds)
        plural = "" if seconds == 1 else "s"
        self._write(f"Created: {now:%Y-%m-%d %H:%M:%S}")
        self._write(f"Files: {result.tally.files_processed}")
        self._write(f"Valid: {result.tally.files_valid}")
        self._write(f"Running: {seconds} second{plural}.")
