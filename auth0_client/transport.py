"""Low-level HTTP transport for the Auth0 APIs.

The rest of the package only needs something with an ``execute`` method;
``RequestsTransport`` is the default implementation backed by a
``requests.Session``. Tests inject their own.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol

import requests

from .exceptions import TransportError

REQUEST_TIMEOUT = 5

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Raw HTTP response as seen by the invocation layer."""
    status_code: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)
    url: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class Transport(Protocol):
    """Capability used to perform one HTTP round trip."""

    def execute(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> TransportResponse:
        ...


class RequestsTransport:
    """HTTP transport built on a shared ``requests.Session``.

    Connection pooling, TLS and timeouts are handled here. Nothing is retried.

    Usage:
        transport = RequestsTransport(timeout=10)
        resp = transport.execute("GET", "https://tenant.auth0.com/api/v2/users")
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = REQUEST_TIMEOUT):
        """Initialize the transport.

        Args:
            session: Session to reuse (a new one is created if omitted)
            timeout: Per-request timeout in seconds
        """
        self.session = session or requests.Session()
        self.timeout = timeout

    def execute(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> TransportResponse:
        """Execute a request and return the raw response.

        Raises:
            TransportError: On DNS, connection or timeout failure
        """
        try:
            resp = self.session.request(
                method,
                url,
                headers=headers,
                params=params,
                json=json,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.debug(f"{method} {url} failed: {exc}")
            raise TransportError(str(exc), url) from exc

        return TransportResponse(
            status_code=resp.status_code,
            body=resp.content or b"",
            headers=dict(resp.headers),
            url=resp.url or url,
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
