# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides a fake W3C validator (httpx.MockTransport handler), settings
without .env loading, and small HTML/CSS sample trees.
No network access — all HTTP is mocked.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx
import pytest

from htmlvalid.config.settings import Settings
from htmlvalid.validation.client import ValidationClient
from htmlvalid.validation.validator import HtmlValidator


def w3c_response(
    status: str | None = "Valid",
    errors: int | str | None = 0,
    warnings: int | str | None = None,
    status_code: int = 200,
) -> httpx.Response:
    """Build a response carrying the X-W3C-Validator-* headers."""
    headers: dict[str, str] = {}
    if status is not None:
        headers["X-W3C-Validator-Status"] = status
    if errors is not None:
        headers["X-W3C-Validator-Errors"] = str(errors)
    if warnings is not None:
        headers["X-W3C-Validator-Warnings"] = str(warnings)
    return httpx.Response(status_code, headers=headers, text="")


class FakeValidatorService:
    """Records every request and replays queued responses or exceptions."""

    def __init__(self, *responses: httpx.Response | Exception) -> None:
        self.requests: list[httpx.Request] = []
        self._queue = list(responses)

    def queue(self, *responses: httpx.Response | Exception) -> None:
        self._queue.extend(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self._queue.pop(0) if self._queue else w3c_response()
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def fake_service() -> FakeValidatorService:
    return FakeValidatorService()


@pytest.fixture
def validator(settings: Settings, fake_service: FakeValidatorService) -> HtmlValidator:
    """HtmlValidator wired to the fake service."""
    client = ValidationClient(
        user_agent=settings.user_agent,
        transport=fake_service.transport(),
    )
    with HtmlValidator(settings, client=client) as v:
        yield v


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Directory with one HTML and one CSS file."""
    (tmp_path / "index.html").write_text(
        "<!DOCTYPE html><html><head><title>t</title></head><body></body></html>",
        encoding="utf-8",
    )
    (tmp_path / "style.css").write_text("body { color: red; }", encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_response():
    """Factory for X-W3C-Validator-* responses."""
    return w3c_response


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers main() installs so they never outlive capsys streams."""
    yield
    logging.getLogger("htmlvalid").handlers.clear()
