# src/validation/classifier.py — v1
"""File classifier — decide whether a candidate is CSS, HTML, URL or unsupported.

Classification is a pure function of the path suffix and the file metadata.
Missing and zero-length files are unsupported regardless of extension.
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlsplit

from htmlvalid.core.models import ContentKind

logger = logging.getLogger(__name__)

# Supported file extensions mapped to content kinds
SUPPORTED_EXTENSIONS: dict[str, ContentKind] = {
    ".css": ContentKind.CSS,
    ".htm": ContentKind.HTML,
    ".html": ContentKind.HTML,
}

_URL_SCHEMES = ("http", "https")


def classify(path: str | Path) -> ContentKind:
    """Classify a filesystem path by extension and non-empty content."""
    path = Path(path)
    kind = SUPPORTED_EXTENSIONS.get(path.suffix.lower(), ContentKind.UNSUPPORTED)
    if kind is ContentKind.UNSUPPORTED:
        return kind

    try:
        if not path.is_file() or path.stat().st_size == 0:
            return ContentKind.UNSUPPORTED
    except OSError:
        logger.debug("Cannot stat %s, treating as unsupported", path, exc_info=True)
        return ContentKind.UNSUPPORTED
    return kind


def is_url(value: str) -> bool:
    """True for absolute http(s) URLs with a host."""
    parts = urlsplit(value)
    return parts.scheme.lower() in _URL_SCHEMES and bool(parts.netloc)


def classify_target(target: str | Path) -> ContentKind:
    """Classify a CLI target, which may be a URL or a filesystem path."""
    if isinstance(target, str) and is_url(target):
        return ContentKind.URL
    return classify(target)
