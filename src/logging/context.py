# src/logging/context.py — v1
"""Contextual logging support — attach run_id and candidate to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Set once per batch run, candidate updated per file.
_run_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "run_id", default=None
)
_candidate: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "candidate", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    run_id: str | None = None
    candidate: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(run_id=_run_id.get(), candidate=_candidate.get())


def set_run_context(run_id: str) -> None:
    """Set run-level context (called once per batch run)."""
    _run_id.set(run_id)
    _candidate.set(None)


def set_candidate_context(candidate: str | None) -> None:
    """Set the candidate currently being validated."""
    _candidate.set(candidate)


def clear_context() -> None:
    """Reset all context variables."""
    _run_id.set(None)
    _candidate.set(None)
