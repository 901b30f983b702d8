# src/batch/runner.py — v1
"""Batch runner — validate an ordered candidate list with pacing and confirmation.

State machine:
    IDLE → CONFIRMING (only above the confirm threshold) → PROCESSING → FINISHED
    CONFIRMING → ABORTED   (operator declines)
    PROCESSING → ABORTED   (validator unreachable)

Candidates are processed strictly one at a time. Between two dispatched
candidates the runner blocks for PACE_INTERVAL_SECONDS, as the W3C services
ask of free clients. Unsupported candidates are skipped without pacing and
without touching the tally. Files are read before the pacing delay, so
an unreadable file costs no wait.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable, Sequence
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from htmlvalid.batch.models import BatchResult, BatchTally, FileReport
from htmlvalid.core.models import ContentKind, RunVerdict
from htmlvalid.logging.context import clear_context, set_candidate_context, set_run_context

if TYPE_CHECKING:
    from htmlvalid.validation.validator import HtmlValidator

logger = logging.getLogger(__name__)

PACE_INTERVAL_SECONDS = 1.0
DEFAULT_CONFIRM_THRESHOLD = 5


class RunnerState(str, Enum):
    IDLE = "idle"
    CONFIRMING = "confirming"
    PROCESSING = "processing"
    FINISHED = "finished"
    ABORTED = "aborted"


class BatchRunner:
    """Run a batch of candidates through a validator.

    Args:
        validator: Anything with classify(target), prepare(target, kind)
            and submit(target, kind, request).
        confirm: Called with the candidate count when it exceeds the
            threshold; must return True to proceed. None means proceed.
        on_start: Called once when processing begins (after confirmation).
        on_report: Called for each validated file that should be shown.
        on_connection_failure: Called once with the candidate that failed.
        confirm_threshold: Candidate count above which confirmation is asked.
        errors_warnings_only: Only report files with errors or warnings.
        sleep: Blocking sleep used for pacing (injectable for tests).
    """

    def __init__(
        self,
        validator: HtmlValidator,
        confirm: Callable[[int], bool] | None = None,
        on_start: Callable[[], None] | None = None,
        on_report: Callable[[FileReport], None] | None = None,
        on_connection_failure: Callable[[str], None] | None = None,
        confirm_threshold: int = DEFAULT_CONFIRM_THRESHOLD,
        errors_warnings_only: bool = True,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self._validator = validator
        self._confirm = confirm
        self._on_start = on_start
        self._on_report = on_report
        self._on_connection_failure = on_connection_failure
        self._confirm_threshold = confirm_threshold
        self._errors_warnings_only = errors_warnings_only
        self._sleep = sleep if sleep is not None else time.sleep
        self._state = RunnerState.IDLE
        self._tally = BatchTally()
        self._reports: list[FileReport] = []

    @property
    def state(self) -> RunnerState:
        return self._state

    @property
    def tally(self) -> BatchTally:
        return self._tally

    def run(self, candidates: Sequence[str | Path]) -> BatchResult:
        """Process candidates in the order given and return the batch result."""
        t0 = time.perf_counter()
        items = [str(c) for c in candidates]

        self._state = RunnerState.IDLE
        self._tally = BatchTally()
        self._reports = []

        run_id = uuid.uuid4().hex[:12]
        set_run_context(run_id)
        logger.info("Batch started: %d candidates", len(items))
        try:
            verdict = self._run(items)
        finally:
            clear_context()

        duration = time.perf_counter() - t0
        logger.info(
            "Batch finished: verdict=%s processed=%d valid=%d (%.1fs)",
            verdict.name, self._tally.files_processed, self._tally.files_valid, duration,
        )
        return BatchResult(
            verdict=verdict,
            tally=self._tally,
            reports=list(self._reports),
            candidates_total=len(items),
            duration_seconds=round(duration, 2),
        )

    def _run(self, items: list[str]) -> RunVerdict:
        if not items:
            self._state = RunnerState.FINISHED
            return RunVerdict.EMPTY_INPUT

        if len(items) > self._confirm_threshold:
            self._state = RunnerState.CONFIRMING
            if not self._ask_confirmation(len(items)):
                self._state = RunnerState.ABORTED
                logger.info("Batch cancelled by user")
                return RunVerdict.USER_CANCELLED

        self._state = RunnerState.PROCESSING
        if self._on_start is not None:
            self._on_start()
        paced = len(items) >= 2
        dispatched = False

        for candidate in items:
            set_candidate_context(candidate)
            kind = self._validator.classify(candidate)
            if kind is ContentKind.UNSUPPORTED:
                logger.debug("Skipping unsupported candidate %s", candidate)
                continue

            request = self._validator.prepare(candidate, kind)
            if request is None:
                logger.debug("Skipping unreadable candidate %s", candidate)
                continue

            if dispatched and paced:
                logger.debug("Pacing for %.1fs", PACE_INTERVAL_SECONDS)
                self._sleep(PACE_INTERVAL_SECONDS)
            dispatched = True

            outcome = self._validator.submit(candidate, kind, request)
            if not outcome.connected:
                self._state = RunnerState.ABORTED
                logger.error("Cannot reach the validation service, aborting at %s", candidate)
                if self._on_connection_failure is not None:
                    self._on_connection_failure(candidate)
                return RunVerdict.CONNECTION_FAILURE

            self._tally.files_processed += 1
            if outcome.is_valid:
                self._tally.files_valid += 1

            report = FileReport(candidate=candidate, outcome=outcome)
            self._reports.append(report)

            if self._errors_warnings_only and not outcome.has_issues:
                continue
            if self._on_report is not None:
                self._on_report(report)

        self._state = RunnerState.FINISHED
        if self._tally.all_valid:
            return RunVerdict.ALL_VALID
        return RunVerdict.SOME_INVALID

    def _ask_confirmation(self, count: int) -> bool:
        if self._confirm is None:
            return True
        try:
            return bool(self._confirm(count))
        except (EOFError, KeyboardInterrupt):
            return False
