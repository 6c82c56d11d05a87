"""Tenant domain and credentials shared by every request built from them."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Union
from urllib.parse import urlsplit

from .exceptions import MissingCredentialError, ValidationError


@dataclass(frozen=True)
class ClientCredentials:
    """Application credentials used by the Authentication API."""
    client_id: str
    client_secret: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class BearerToken:
    """Pre-issued Management API token."""
    token: str = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.token, str) or not self.token or any(ch in self.token for ch in "\r\n"):
            raise ValidationError("Auth0 token is not a valid header value")

    @property
    def header(self) -> str:
        return f"Bearer {self.token}"


@dataclass(frozen=True)
class Context:
    """Immutable domain + credentials bundle.

    Requests keep a reference to the context they were built from; the
    context is never copied or re-validated after construction, so one
    instance can be shared by any number of threads.

    Args:
        domain: Absolute tenant URL (e.g. ``https://tenant.eu.auth0.com``)
        auth: Client credentials or a bearer token

    Raises:
        ValidationError: If domain is not an absolute URL
    """
    domain: str
    auth: Union[ClientCredentials, BearerToken]

    def __post_init__(self) -> None:
        parts = urlsplit(self.domain or "")
        if not parts.scheme or not parts.netloc:
            raise ValidationError(f"Auth0 domain is not a valid url: {self.domain!r}")
        # Normalize to a trailing slash so endpoint joins keep any base path
        if not self.domain.endswith("/"):
            object.__setattr__(self, "domain", self.domain + "/")

    def url(self, path: str) -> str:
        """Append an endpoint path to the tenant domain.

        Dot segments in the path are kept, never resolved.
        """
        return self.domain + path.lstrip("/")

    @property
    def client_id(self) -> str:
        if not isinstance(self.auth, ClientCredentials):
            raise MissingCredentialError("Context holds no client credentials")
        return self.auth.client_id

    @property
    def client_secret(self) -> Optional[str]:
        if not isinstance(self.auth, ClientCredentials):
            return None
        return self.auth.client_secret

    def require_client_secret(self) -> str:
        """Return the client secret or fail for flows that cannot run without it.

        Raises:
            MissingCredentialError: If the context was built without a secret
        """
        secret = self.client_secret
        if secret is None:
            raise MissingCredentialError("Missing client_secret")
        return secret

    def authorization_header(self) -> Optional[str]:
        """Authorization header value, or None for unauthenticated endpoints."""
        if isinstance(self.auth, BearerToken):
            return self.auth.header
        return None
