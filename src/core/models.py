# src/core/models.py — v1
"""Shared Pydantic domain models used across modules.

Validation and batch code both import these from here.
"""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field


# === CLASSIFICATION ===


class ContentKind(str, Enum):
    """What a validation candidate is, decided once by the classifier."""

    CSS = "css"
    HTML = "html"
    URL = "url"
    UNSUPPORTED = "unsupported"

    @property
    def label(self) -> str:
        """Upper-case label used in console output (CSS, HTML, URL)."""
        return self.value.upper()


class ValidationStatus(str, Enum):
    """Textual verdict reported by the remote validator."""

    ABORT = "abort"
    INVALID = "invalid"
    VALID = "valid"


# === WIRE MODELS ===


class ValidationRequest(BaseModel):
    """A fully-encoded request, ready to be sent to a validator endpoint."""

    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    body: bytes | None = None
    headers: dict[str, str] = Field(default_factory=dict)


class RawResponse(BaseModel):
    """Status code and headers of a completed HTTP exchange."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


class ConnectionFailure(BaseModel):
    """The HTTP exchange could not be completed (DNS, timeout, TLS...)."""

    model_config = ConfigDict(frozen=True)

    reason: str
    error_type: str = "unknown"


# === OUTCOMES ===


class ValidationOutcome(BaseModel):
    """Normalized result of one validation attempt."""

    model_config = ConfigDict(frozen=True)

    connected: bool = False
    status: ValidationStatus = ValidationStatus.ABORT
    kind: ContentKind
    error_count: int = 0
    warning_count: int = 0

    @property
    def is_valid(self) -> bool:
        return self.status is ValidationStatus.VALID

    @property
    def has_issues(self) -> bool:
        return self.error_count > 0 or self.warning_count > 0


class RunVerdict(IntEnum):
    """Terminal result of one run. Values are the process exit codes."""

    USER_CANCELLED = -4
    CONNECTION_FAILURE = -3
    INVALID_PATH = -2
    EMPTY_INPUT = -1
    ALL_VALID = 0
    SOME_INVALID = 1
