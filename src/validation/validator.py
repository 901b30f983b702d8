# src/validation/validator.py — v1
"""Validator facade — classify → read → build → send → interpret for one candidate.

Usage:
    with HtmlValidator(settings) as validator:
        outcome = validator.validate("site/index.html")
"""

from __future__ import annotations

import logging
from pathlib import Path

from htmlvalid.config.settings import Settings
from htmlvalid.core.models import ContentKind, ValidationOutcome, ValidationRequest
from htmlvalid.validation.classifier import classify_target
from htmlvalid.validation.client import ValidationClient
from htmlvalid.validation.interpreter import interpret
from htmlvalid.validation.request_builder import build_request

logger = logging.getLogger(__name__)


class HtmlValidator:
    """Validate single candidates against the configured W3C endpoints."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: ValidationClient | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._client = client or ValidationClient(
            user_agent=self._settings.user_agent,
            timeout=self._settings.request_timeout_seconds,
        )

    def classify(self, target: str | Path) -> ContentKind:
        return classify_target(target)

    def validate(
        self, target: str | Path, kind: ContentKind | None = None,
    ) -> ValidationOutcome:
        """Validate one candidate.

        Args:
            target: File path or http(s) URL.
            kind: Pre-computed classification. Classified here if None.

        Returns:
            ValidationOutcome. Unsupported or unreadable candidates come
            back with kind=UNSUPPORTED and no network call is made.
        """
        if kind is None:
            kind = self.classify(target)
        request = self.prepare(target, kind)
        if request is None:
            return ValidationOutcome(kind=ContentKind.UNSUPPORTED)
        return self.submit(target, kind, request)

    def prepare(self, target: str | Path, kind: ContentKind) -> ValidationRequest | None:
        """Read the candidate and build its request. None means skip it."""
        if kind is ContentKind.UNSUPPORTED:
            return None
        content = self._read_content(target, kind)
        if content is None:
            return None
        return build_request(
            kind,
            content,
            want_source_report=self._settings.report_source,
            css_endpoint=self._settings.css_validator_url,
            html_endpoint=self._settings.html_validator_url,
        )

    def submit(
        self, target: str | Path, kind: ContentKind, request: ValidationRequest,
    ) -> ValidationOutcome:
        """Send a prepared request and interpret the reply."""
        response = self._client.send(request)
        outcome = interpret(response, kind)
        logger.info(
            "Validated %s (%s): status=%s errors=%d warnings=%d connected=%s",
            target, kind.value, outcome.status.value,
            outcome.error_count, outcome.warning_count, outcome.connected,
        )
        return outcome

    def _read_content(self, target: str | Path, kind: ContentKind) -> str | None:
        """Return the text to validate, or None if the file can't be read."""
        if kind is ContentKind.URL:
            return str(target)
        try:
            raw = Path(target).read_bytes()
        except OSError:
            logger.warning("Cannot read %s, skipping", target, exc_info=True)
            return None
        # Bytes are decoded as-is so line endings reach the validator untouched.
        return raw.decode("utf-8-sig", errors="replace")

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HtmlValidator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
