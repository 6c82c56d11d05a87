"""Auth0-specific exceptions for error handling."""
from __future__ import annotations
from typing import Any, Optional


class Auth0Error(Exception):
    """Base exception for all Auth0 client operations."""
    pass


class ValidationError(Auth0Error, ValueError):
    """A request builder could not be finalized.

    Raised when a required parameter is missing or a parameter holds a value
    of the wrong type. The caller fixes its input and tries again.
    """
    pass


class MissingCredentialError(Auth0Error):
    """The context lacks a credential the chosen flow needs (e.g. a client secret)."""
    pass


class TransportError(Auth0Error):
    """Network-level failure: DNS, connection refused, timeout.

    Attributes:
        endpoint: URL that could not be reached
    """

    def __init__(self, message: str, endpoint: str):
        self.message = message
        self.endpoint = endpoint
        super().__init__(f"{endpoint}: {message}")


class ApiError(Auth0Error):
    """Non-2xx HTTP response from an Auth0 API.

    Attributes:
        status_code: HTTP status code
        message: Error description from the response, or its raw text
        endpoint: API endpoint that failed
        error_code: Machine-readable error code when the body carries one
        body: Decoded JSON error body, if the body was JSON
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        endpoint: str,
        error_code: Optional[str] = None,
        body: Any = None,
    ):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        self.error_code = error_code
        self.body = body
        super().__init__(f"[{status_code}] {endpoint}: {message}")


class DecodeError(Auth0Error):
    """A 2xx response body does not match the expected response shape.

    Attributes:
        endpoint: API endpoint whose response failed to decode
    """

    def __init__(self, message: str, endpoint: str):
        self.message = message
        self.endpoint = endpoint
        super().__init__(f"{endpoint}: {message}")
