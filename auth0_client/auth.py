"""Authentication API: token issuance through the supported grant flows.

Each flow is its own builder type; all of them POST a JSON body and carry
the application's credentials in that body, never in a header.

Usage:
    auth = AuthenticationApi("https://tenant.eu.auth0.com", "client-id", "secret")
    token = auth.get_token("https://tenant.eu.auth0.com/api/v2/").send()

    token = (
        auth.login("alice", "p4ssw0rd")
        .scopes(["openid", "profile"])
        .realm("Username-Password-Authentication")
        .send()
    )
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterable, Optional, Tuple

from . import models
from .builder import Request, RequestBuilder
from .context import ClientCredentials, Context
from .encoding import SPACE, WireRequest, encode_body, join
from .exceptions import ValidationError
from .transport import RequestsTransport, Transport

GET_TOKEN_ENDPOINT = "/oauth/token"
DEVICE_CODE_ENDPOINT = "/oauth/device/code"

GRANT_TYPE_CLIENT_CREDENTIALS = "client_credentials"
GRANT_TYPE_AUTHORIZATION_CODE = "authorization_code"
GRANT_TYPE_RESOURCE_OWNER_PASSWORD = "http://auth0.com/oauth/grant-type/password-realm"


class AuthenticationApi:
    """Entry point for the Authentication API.

    Args:
        domain: Tenant URL (e.g. ``https://tenant.eu.auth0.com``)
        client_id: Application's Client ID
        client_secret: Application's Client Secret, required by confidential flows
        transport: HTTP transport (defaults to a requests-based one)
    """

    def __init__(
        self,
        domain: str,
        client_id: str,
        client_secret: Optional[str] = None,
        transport: Optional[Transport] = None,
    ):
        self.context = Context(domain, ClientCredentials(client_id, client_secret))
        self.transport = transport or RequestsTransport()

    def __repr__(self) -> str:
        return f"AuthenticationApi(domain={self.context.domain!r}, client_id={self.context.client_id!r})"

    def get_token(self, audience: str) -> "ClientCredentialsFlowBuilder":
        """Request an access token with the client's own credentials.

        Args:
            audience: Identifier of the API the token is for

        Raises:
            MissingCredentialError: If no client secret was configured
        """
        secret = self.context.require_client_secret()
        return ClientCredentialsFlowBuilder(
            self.context,
            self.transport,
            grant_type=GRANT_TYPE_CLIENT_CREDENTIALS,
            client_id=self.context.client_id,
            client_secret=secret,
            audience=audience,
        )

    def get_token_with_auth_code(self, code: str) -> "AuthorizationCodeFlowBuilder":
        """Exchange an authorization code for tokens (confidential clients).

        Raises:
            MissingCredentialError: If no client secret was configured
        """
        secret = self.context.require_client_secret()
        return AuthorizationCodeFlowBuilder(
            self.context,
            self.transport,
            grant_type=GRANT_TYPE_AUTHORIZATION_CODE,
            client_id=self.context.client_id,
            client_secret=secret,
        ).code(code)

    def get_token_with_auth_code_pkce(self, code: str, code_verifier: str) -> "AuthorizationCodeFlowBuilder":
        """Exchange an authorization code for tokens using PKCE.

        The code verifier replaces the client secret, which is never sent.
        """
        return (
            AuthorizationCodeFlowBuilder(
                self.context,
                self.transport,
                grant_type=GRANT_TYPE_AUTHORIZATION_CODE,
                client_id=self.context.client_id,
            )
            .code(code)
            .code_verifier(code_verifier)
        )

    def login(self, username: str, password: str) -> "ResourceOwnerPasswordFlowBuilder":
        """Log in with the user's credentials (resource owner password, realm variant)."""
        return (
            ResourceOwnerPasswordFlowBuilder(
                self.context,
                self.transport,
                grant_type=GRANT_TYPE_RESOURCE_OWNER_PASSWORD,
                client_id=self.context.client_id,
                client_secret=self.context.client_secret,
            )
            .username(username)
            .password(password)
        )

    def get_device_code(self) -> "DeviceCodeBuilder":
        """Start the device authorization flow.

        Only the device/user code pair is requested; polling ``/oauth/token``
        with the device code is left to the caller.
        """
        return DeviceCodeBuilder(self.context, self.transport, client_id=self.context.client_id)


# ─────────────────────────────────────────────────────────────────────────────
# Finalized requests
# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class TokenRequest(Request):
    response_model: ClassVar[Any] = models.AccessToken

    endpoint: ClassVar[str] = GET_TOKEN_ENDPOINT

    def body(self) -> Dict[str, Any]:
        """Subclasses implement: the token endpoint parameters, before omission of absent values."""
        raise NotImplementedError

    def to_wire(self) -> WireRequest:
        return WireRequest("POST", self.endpoint, body=encode_body(self.body()))


@dataclass(frozen=True)
class ClientCredentialsFlow(TokenRequest):
    """Get an access token by using the client's credentials."""
    grant_type: str = GRANT_TYPE_CLIENT_CREDENTIALS
    client_id: str = ""
    client_secret: str = ""
    audience: str = ""

    def __repr__(self) -> str:
        return f"ClientCredentialsFlow(client_id={self.client_id!r}, audience={self.audience!r})"

    def body(self) -> Dict[str, Any]:
        return {
            "grant_type": self.grant_type,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "audience": self.audience,
        }


@dataclass(frozen=True)
class AuthorizationCodeFlow(TokenRequest):
    """Exchange an authorization code for tokens."""
    grant_type: str = GRANT_TYPE_AUTHORIZATION_CODE
    client_id: str = ""
    client_secret: Optional[str] = None
    code: str = ""
    code_verifier: Optional[str] = None
    redirect_uri: Optional[str] = None

    def __repr__(self) -> str:
        return f"AuthorizationCodeFlow(client_id={self.client_id!r}, pkce={self.code_verifier is not None})"

    def body(self) -> Dict[str, Any]:
        return {
            "grant_type": self.grant_type,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "code": self.code,
            "code_verifier": self.code_verifier,
            "redirect_uri": self.redirect_uri,
        }


@dataclass(frozen=True)
class ResourceOwnerPasswordFlow(TokenRequest):
    """Get an access token by using the user's credentials."""
    grant_type: str = GRANT_TYPE_RESOURCE_OWNER_PASSWORD
    client_id: str = ""
    client_secret: Optional[str] = None
    audience: Optional[str] = None
    username: str = ""
    password: str = ""
    scope: Tuple[str, ...] = ()
    realm: Optional[str] = None

    def __repr__(self) -> str:
        return f"ResourceOwnerPasswordFlow(client_id={self.client_id!r}, username={self.username!r})"

    def body(self) -> Dict[str, Any]:
        return {
            "grant_type": self.grant_type,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "audience": self.audience,
            "username": self.username,
            "password": self.password,
            "scope": join(self.scope, SPACE),
            "realm": self.realm,
        }


@dataclass(frozen=True)
class DeviceCodeRequest(TokenRequest):
    """Request a device code for input-constrained devices."""
    response_model: ClassVar[Any] = models.DeviceCode

    endpoint: ClassVar[str] = DEVICE_CODE_ENDPOINT

    client_id: str = ""
    audience: Optional[str] = None
    scope: Tuple[str, ...] = ()

    def body(self) -> Dict[str, Any]:
        return {
            "client_id": self.client_id,
            "audience": self.audience,
            "scope": join(self.scope, SPACE),
        }


# ─────────────────────────────────────────────────────────────────────────────
# Builders
# ─────────────────────────────────────────────────────────────────────────────
class _ScopeMixin:
    """Append helpers for the space-separated ``scope`` parameter."""

    def scope(self, scope: str):
        """Append one element to the list of scopes."""
        return self._append("scope", [scope])

    def scopes(self, scopes: Iterable[str]):
        """Append the contents of an iterable to the list of scopes."""
        return self._append("scope", scopes)


class _AudienceMixin:

    def audience(self, audience: str):
        """The unique identifier of the target API you want to access."""
        return self._set_str("audience", audience)


class ClientCredentialsFlowBuilder(_AudienceMixin, RequestBuilder):
    request_class = ClientCredentialsFlow


class AuthorizationCodeFlowBuilder(RequestBuilder):
    request_class = AuthorizationCodeFlow
    required = ("code",)

    def code(self, code: str) -> "AuthorizationCodeFlowBuilder":
        """The authorization code received from the ``/authorize`` call."""
        return self._set_str("code", code)

    def code_verifier(self, code_verifier: str) -> "AuthorizationCodeFlowBuilder":
        """Cryptographically random key used to generate the PKCE code challenge."""
        return self._set_str("code_verifier", code_verifier)

    def redirect_uri(self, redirect_uri: str) -> "AuthorizationCodeFlowBuilder":
        """Must match the ``redirect_uri`` passed to ``/authorize``."""
        return self._set_str("redirect_uri", redirect_uri)

    def _validate(self, values: Dict[str, Any]) -> None:
        if values.get("client_secret") is None and not values.get("code_verifier"):
            raise ValidationError("Authorization code exchange needs a client_secret or a code_verifier")


class ResourceOwnerPasswordFlowBuilder(_ScopeMixin, _AudienceMixin, RequestBuilder):
    request_class = ResourceOwnerPasswordFlow
    required = ("username", "password")
    list_params = ("scope",)

    def username(self, username: str) -> "ResourceOwnerPasswordFlowBuilder":
        """Resource owner's identifier, such as a username or email address."""
        return self._set_str("username", username)

    def password(self, password: str) -> "ResourceOwnerPasswordFlowBuilder":
        return self._set_str("password", password)

    def realm(self, realm: str) -> "ResourceOwnerPasswordFlowBuilder":
        """Connection (realm) the user belongs to, for multi-realm tenants."""
        return self._set_str("realm", realm)


class DeviceCodeBuilder(_ScopeMixin, _AudienceMixin, RequestBuilder):
    request_class = DeviceCodeRequest
    list_params = ("scope",)
