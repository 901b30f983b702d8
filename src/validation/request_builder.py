# src/validation/request_builder.py — v1
"""Request builder — encode content into a validator request.

CSS goes to the CSS validator as a GET with ``text=<content>``.
HTML goes to the markup validator as a form POST with ``uploaded_file=<content>``.
URLs go to the markup validator as a GET with ``uri=<url>``.

Content is percent-encoded with an empty safe set, so every reserved
character (space, ``&``, ``%``, ``+``, ``=``, ``/``, controls) is escaped.
"""

from __future__ import annotations

from urllib.parse import quote

from htmlvalid.core.models import ContentKind, ValidationRequest

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def encode_content(content: str) -> str:
    """Percent-encode content, escaping everything but unreserved characters."""
    return quote(content, safe="", encoding="utf-8", errors="strict")


def build_request(
    kind: ContentKind,
    content: str,
    want_source_report: bool,
    css_endpoint: str,
    html_endpoint: str,
) -> ValidationRequest:
    """Build the request for one candidate.

    Args:
        kind: Classified content kind. Must not be UNSUPPORTED.
        content: Raw file content (or the URL for ContentKind.URL).
        want_source_report: Ask the validator to include its source report.
        css_endpoint: CSS validator URL.
        html_endpoint: Markup validator URL.

    Returns:
        A ValidationRequest ready for ValidationClient.send().

    Raises:
        ValueError: If kind is UNSUPPORTED; callers filter those out first.
    """
    encoded = encode_content(content)

    if kind is ContentKind.CSS:
        query = f"text={encoded}"
        if want_source_report:
            query += "&ss=1"
        return ValidationRequest(method="GET", url=_join_query(css_endpoint, query))

    if kind is ContentKind.HTML:
        body = f"uploaded_file={encoded}"
        if want_source_report:
            body += "&output=text"
        return ValidationRequest(
            method="POST",
            url=html_endpoint,
            body=body.encode("ascii"),
            headers={"Content-Type": FORM_CONTENT_TYPE},
        )

    if kind is ContentKind.URL:
        query = f"uri={encoded}"
        if want_source_report:
            query += "&output=text"
        return ValidationRequest(method="GET", url=_join_query(html_endpoint, query))

    raise ValueError(f"Cannot build a validation request for {kind.value!r} content")


def _join_query(endpoint: str, query: str) -> str:
    separator = "&" if "?" in endpoint else "?"
    return f"{endpoint}{separator}{query}"
