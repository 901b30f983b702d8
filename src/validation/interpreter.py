# src/validation/interpreter.py — v1
"""Result interpreter — turn a raw validator response into a ValidationOutcome.

The validators report through response headers:
    X-W3C-Validator-Status    valid | invalid | abort
    X-W3C-Validator-Errors    integer
    X-W3C-Validator-Warnings  integer (markup validator only)

interpret() is total: missing or garbled data degrades to Abort / 0 / 0,
and a ConnectionFailure (or None) yields connected=False.
"""

from __future__ import annotations

import logging

from htmlvalid.core.models import (
    ConnectionFailure,
    ContentKind,
    RawResponse,
    ValidationOutcome,
    ValidationStatus,
)

logger = logging.getLogger(__name__)

STATUS_HEADER = "X-W3C-Validator-Status"
ERRORS_HEADER = "X-W3C-Validator-Errors"
WARNINGS_HEADER = "X-W3C-Validator-Warnings"

# Status codes that count as "reached the validator". 401/403/405 are
# kept for wire compatibility with the legacy W3C endpoints.
CONNECTED_STATUS_CODES: frozenset[int] = frozenset(
    {200, 301, 302, 303, 304, 307, 401, 403, 405}
)

_STATUS_MAP: dict[str, ValidationStatus] = {
    "valid": ValidationStatus.VALID,
    "invalid": ValidationStatus.INVALID,
    "abort": ValidationStatus.ABORT,
}


# Counts beyond a signed 32-bit integer are treated as garbage.
MAX_COUNT = 2**31 - 1


def is_connected(status_code: int | None) -> bool:
    """True when the status code is in the connected allow-list."""
    return status_code in CONNECTED_STATUS_CODES


def parse_count(value: str | None) -> int:
    """Parse a header count permissively; anything unparseable is 0.

    Only plain ASCII digits with an optional leading '+' are accepted.
    Negative or out-of-range values also give 0.
    """
    if value is None:
        return 0
    text = value.strip()
    if text.startswith("+"):
        text = text[1:]
    if not (text.isascii() and text.isdigit()):
        return 0
    count = int(text)
    return count if count <= MAX_COUNT else 0


def parse_status(value: str | None) -> ValidationStatus:
    """Map the textual status case-insensitively; unknown means ABORT."""
    if value is None:
        return ValidationStatus.ABORT
    return _STATUS_MAP.get(value.strip().lower(), ValidationStatus.ABORT)


def interpret(
    response: RawResponse | ConnectionFailure | None,
    kind: ContentKind,
) -> ValidationOutcome:
    """Build the normalized outcome for one validated candidate."""
    if not isinstance(response, RawResponse):
        return ValidationOutcome(connected=False, kind=kind)

    error_count = parse_count(response.header(ERRORS_HEADER))
    status = parse_status(response.header(STATUS_HEADER))

    warning_count = 0
    if kind is ContentKind.HTML:
        warning_count = parse_count(response.header(WARNINGS_HEADER))

    if status is ValidationStatus.VALID and error_count > 0:
        logger.warning(
            "Validator reported valid with %d errors, treating as invalid",
            error_count,
        )
        status = ValidationStatus.INVALID

    return ValidationOutcome(
        connected=is_connected(response.status_code),
        status=status,
        kind=kind,
        error_count=error_count,
        warning_count=warning_count,
    )
