"""Client (application) representation from the Management API."""
from __future__ import annotations
from typing import List, Optional

from pydantic import Field, NonNegativeInt

from .base import Auth0Model


class OidcLogoutConfig(Auth0Model):
    """Configuration for OIDC backchannel logout."""

    backchannel_logout_urls: List[str] = []


class JwtConfiguration(Auth0Model):
    """Configuration related to JWTs for the client."""

    lifetime_in_seconds: Optional[NonNegativeInt] = None
    secret_encoded: Optional[bool] = None
    scopes: Optional[dict] = None
    alg: Optional[str] = None


class SigningKey(Auth0Model):
    """Certificate used for signing tokens."""

    pkcs7: str
    cert: str
    subject: Optional[str] = None


class EncryptionKey(Auth0Model):
    """Key used to encrypt WS-Fed responses."""

    pub: str
    cert: str
    subject: Optional[str] = None


class Client(Auth0Model):
    """Represents a client as returned by ``/api/v2/clients``.

    Every field is optional because ``fields``/``include_fields`` let the
    caller trim the response down to any subset.
    """

    client_id: Optional[str] = None
    tenant: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    # "global" is a keyword
    global_: Optional[bool] = Field(None, alias="global")
    client_secret: Optional[str] = None
    app_type: Optional[str] = None
    logo_uri: Optional[str] = None
    is_first_party: Optional[bool] = None
    oidc_conformant: Optional[bool] = None
    callbacks: List[str] = []
    allowed_origins: List[str] = []
    web_origins: List[str] = []
    client_aliases: List[str] = []
    allowed_clients: List[str] = []
    allowed_logout_urls: List[str] = []
    oidc_logout: Optional[OidcLogoutConfig] = None
    grant_types: List[str] = []
    jwt_configuration: Optional[JwtConfiguration] = None
    signing_keys: List[SigningKey] = []
    encryption_key: Optional[EncryptionKey] = None
    sso: Optional[bool] = None
    sso_disabled: Optional[bool] = None
    cross_origin_authentication: Optional[bool] = None
    cross_origin_loc: Optional[str] = None
    custom_login_page_on: Optional[bool] = None
    custom_login_page: Optional[str] = None
    custom_login_page_preview: Optional[str] = None
    form_template: Optional[str] = None
    addons: Optional[dict] = None
    token_endpoint_auth_method: Optional[str] = None
    client_metadata: Optional[dict] = None
    mobile: Optional[dict] = None
    initiate_login_uri: Optional[str] = None
    native_social_login: Optional[dict] = None
    refresh_token: Optional[dict] = None
    organization_usage: Optional[str] = None
    organization_require_behavior: Optional[str] = None
    client_authentication_methods: Optional[dict] = None
    require_pushed_authorization_requests: Optional[bool] = None
    access_token: Optional[dict] = None
    signed_request_object: Optional[dict] = None
    compliance_level: Optional[str] = None
