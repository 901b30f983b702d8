# src/validation/client.py — v1
"""HTTP client for the remote validators.

Sends exactly one request per call, with no retries. Network-level
failures come back as a ConnectionFailure value instead of an exception,
so callers can tell "could not talk to the validator" apart from a
response carrying a failing validation status.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from htmlvalid.config.settings import DEFAULT_USER_AGENT
from htmlvalid.core.models import ConnectionFailure, RawResponse, ValidationRequest

logger = logging.getLogger(__name__)


def _classify_error(error: Exception) -> str:
    """Map an httpx exception to a short failure type."""
    if isinstance(error, httpx.TimeoutException):
        return "timeout"
    if isinstance(error, httpx.ConnectError):
        return "connect"
    if isinstance(error, (httpx.RemoteProtocolError, httpx.DecodingError)):
        return "protocol"
    if isinstance(error, httpx.TooManyRedirects):
        return "redirects"
    if isinstance(error, httpx.InvalidURL):
        return "invalid_url"
    if isinstance(error, UnicodeEncodeError):
        return "encoding"
    return "transport"


class ValidationClient:
    """Synchronous validator client built on httpx.

    Usage:
        with ValidationClient(user_agent="HTMLValid", timeout=30.0) as client:
            response = client.send(request)
    """

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
        **client_kwargs: Any,
    ) -> None:
        self._user_agent = (
            user_agent if user_agent and user_agent.strip() else DEFAULT_USER_AGENT
        )
        self._client = httpx.Client(
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
            **client_kwargs,
        )

    @property
    def user_agent(self) -> str:
        return self._user_agent

    def send(self, request: ValidationRequest) -> RawResponse | ConnectionFailure:
        """Issue one HTTP request and return its status + headers."""
        headers = dict(request.headers)
        headers["User-Agent"] = self._user_agent

        logger.debug("%s %s", request.method, request.url[:120])
        try:
            response = self._client.request(
                request.method,
                request.url,
                content=request.body,
                headers=headers,
            )
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            error_type = _classify_error(exc)
            logger.warning(
                "Validator request failed (%s): %s", error_type, exc,
            )
            return ConnectionFailure(reason=str(exc) or type(exc).__name__, error_type=error_type)

        logger.debug("Validator responded %d", response.status_code)
        return RawResponse(
            status_code=response.status_code,
            headers=dict(response.headers.items()),
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ValidationClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
