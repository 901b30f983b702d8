# tests/unit/validation/test_interpreter.py — v1
"""Tests for validation/interpreter.py — response → ValidationOutcome."""

from __future__ import annotations

import pytest

from htmlvalid.core.models import (
    ConnectionFailure,
    ContentKind,
    RawResponse,
    ValidationStatus,
)
from htmlvalid.validation.interpreter import (
    CONNECTED_STATUS_CODES,
    interpret,
    is_connected,
    parse_count,
    parse_status,
)


def _response(status_code: int = 200, **headers: str) -> RawResponse:
    mapped = {
        "status": "X-W3C-Validator-Status",
        "errors": "X-W3C-Validator-Errors",
        "warnings": "X-W3C-Validator-Warnings",
    }
    return RawResponse(
        status_code=status_code,
        headers={mapped[k]: v for k, v in headers.items()},
    )


class TestConnectedAllowList:
    def test_allow_list_is_exact(self):
        assert CONNECTED_STATUS_CODES == {200, 301, 302, 303, 304, 307, 401, 403, 405}

    @pytest.mark.parametrize("code", [200, 301, 302, 303, 304, 307, 401, 403, 405])
    def test_connected(self, code: int):
        assert is_connected(code) is True
        assert interpret(_response(code), ContentKind.HTML).connected is True

    @pytest.mark.parametrize("code", [201, 204, 308, 400, 404, 429, 500, 502, 503])
    def test_not_connected(self, code: int):
        assert is_connected(code) is False
        assert interpret(_response(code), ContentKind.CSS).connected is False

    def test_none_not_connected(self):
        assert is_connected(None) is False


class TestParseHelpers:
    @pytest.mark.parametrize("value,expected", [
        ("0", 0), ("12", 12), (" 3 ", 3), (None, 0), ("", 0),
        ("abc", 0), ("1.5", 0), ("-4", 0), ("+7", 7),
        ("١٢", 0), ("1_000", 0), ("\u00b2", 0), ("0x10", 0),
        ("2147483647", 2147483647), ("2147483648", 0), ("9" * 50, 0),
    ])
    def test_parse_count(self, value, expected):
        assert parse_count(value) == expected

    @pytest.mark.parametrize("value,expected", [
        ("Valid", ValidationStatus.VALID),
        ("VALID", ValidationStatus.VALID),
        ("invalid", ValidationStatus.INVALID),
        ("Invalid", ValidationStatus.INVALID),
        ("Abort", ValidationStatus.ABORT),
        ("maybe", ValidationStatus.ABORT),
        ("", ValidationStatus.ABORT),
        (None, ValidationStatus.ABORT),
    ])
    def test_parse_status(self, value, expected):
        assert parse_status(value) is expected


class TestInterpret:
    def test_valid_html(self):
        outcome = interpret(
            _response(status="Valid", errors="0", warnings="2"), ContentKind.HTML,
        )
        assert outcome.connected is True
        assert outcome.status is ValidationStatus.VALID
        assert outcome.kind is ContentKind.HTML
        assert outcome.error_count == 0
        assert outcome.warning_count == 2

    def test_invalid_css(self):
        outcome = interpret(_response(status="Invalid", errors="7"), ContentKind.CSS)
        assert outcome.status is ValidationStatus.INVALID
        assert outcome.error_count == 7
        assert outcome.warning_count == 0

    def test_css_never_reports_warnings(self):
        outcome = interpret(
            _response(status="Valid", errors="0", warnings="9"), ContentKind.CSS,
        )
        assert outcome.warning_count == 0

    def test_url_never_reports_warnings(self):
        outcome = interpret(
            _response(status="Valid", errors="0", warnings="9"), ContentKind.URL,
        )
        assert outcome.warning_count == 0

    def test_header_names_case_insensitive(self):
        response = RawResponse(
            status_code=200,
            headers={"x-w3c-validator-status": "invalid", "x-w3c-validator-errors": "3"},
        )
        outcome = interpret(response, ContentKind.HTML)
        assert outcome.status is ValidationStatus.INVALID
        assert outcome.error_count == 3

    def test_valid_with_errors_is_not_valid(self):
        outcome = interpret(_response(status="Valid", errors="2"), ContentKind.HTML)
        assert outcome.status is ValidationStatus.INVALID
        assert outcome.error_count == 2

    def test_valid_implies_zero_errors(self):
        for errors in ("0", "1", "abc", "99"):
            outcome = interpret(_response(status="Valid", errors=errors), ContentKind.CSS)
            if outcome.status is ValidationStatus.VALID:
                assert outcome.error_count == 0

    def test_missing_headers_default(self):
        outcome = interpret(_response(), ContentKind.HTML)
        assert outcome.connected is True
        assert outcome.status is ValidationStatus.ABORT
        assert outcome.error_count == 0
        assert outcome.warning_count == 0

    def test_connection_failure(self):
        outcome = interpret(ConnectionFailure(reason="refused"), ContentKind.HTML)
        assert outcome.connected is False
        assert outcome.status is ValidationStatus.ABORT
        assert outcome.error_count == 0
        assert outcome.warning_count == 0
        assert outcome.kind is ContentKind.HTML

    def test_none_response(self):
        outcome = interpret(None, ContentKind.CSS)
        assert outcome.connected is False
        assert outcome.status is ValidationStatus.ABORT

    @pytest.mark.parametrize("headers", [
        {"status": "\x00\x01", "errors": "NaN", "warnings": "--"},
        {"status": "valid ", "errors": "١٢"},
        {"errors": "9" * 50},
        {"warnings": ""},
    ])
    def test_total_on_garbled_headers(self, headers):
        outcome = interpret(_response(**headers), ContentKind.HTML)
        assert outcome.error_count == 0
        assert outcome.warning_count == 0
