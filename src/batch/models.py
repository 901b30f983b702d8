# src/batch/models.py — v1
"""Batch processing models: BatchTally, FileReport, BatchResult."""

from __future__ import annotations

from pydantic import BaseModel, Field

from htmlvalid.core.models import RunVerdict, ValidationOutcome


class BatchTally(BaseModel):
    """Running counters for one batch. Owned by the runner only."""

    files_processed: int = 0
    files_valid: int = 0

    @property
    def all_valid(self) -> bool:
        return self.files_processed > 0 and self.files_valid == self.files_processed


class FileReport(BaseModel):
    """A validated candidate and its outcome."""

    candidate: str
    outcome: ValidationOutcome


class BatchResult(BaseModel):
    """Summary of a batch run."""

    verdict: RunVerdict
    tally: BatchTally = Field(default_factory=BatchTally)
    reports: list[FileReport] = Field(default_factory=list)
    candidates_total: int = 0
    duration_seconds: float = 0.0

    @property
    def exit_code(self) -> int:
        return int(self.verdict)
