"""Auth0 Authentication and Management API client library.

Architecture:
- context.py: Immutable tenant domain + credentials
- builder.py: Request builders and the frozen requests they finalize into
- encoding.py: Wire encoding (query strings, JSON bodies, joined lists)
- transport.py: requests-based HTTP transport
- invocation.py: Status handling and response decoding
- pagination.py: Envelope shared by paged and unpaged list responses
- auth.py: Token issuance flows
- management.py, users.py, clients.py: Management API resources
- exceptions.py: Typed exceptions for error handling

Usage:
    from auth0_client import AuthenticationApi, ManagementApi

    auth = AuthenticationApi("https://tenant.eu.auth0.com", "client-id", "secret")
    token = auth.get_token("https://tenant.eu.auth0.com/api/v2/").send()

    mgmt = ManagementApi("https://tenant.eu.auth0.com", token.access_token)
    page = mgmt.users().list().fields(["user_id", "email"]).send()
"""
from .auth import (
    AuthenticationApi,
    AuthorizationCodeFlow,
    AuthorizationCodeFlowBuilder,
    ClientCredentialsFlow,
    ClientCredentialsFlowBuilder,
    DeviceCodeBuilder,
    DeviceCodeRequest,
    ResourceOwnerPasswordFlow,
    ResourceOwnerPasswordFlowBuilder,
)
from .clients import Clients, GetClient, ListClients
from .context import BearerToken, ClientCredentials, Context
from .encoding import WireRequest, encode
from .exceptions import (
    ApiError,
    Auth0Error,
    DecodeError,
    MissingCredentialError,
    TransportError,
    ValidationError,
)
from .management import ManagementApi
from .pagination import Page
from .transport import REQUEST_TIMEOUT, RequestsTransport, TransportResponse
from .users import GetUser, ListUsers, SearchEngine, Users

__all__ = [
    # Entry points
    "AuthenticationApi",
    "ManagementApi",
    "Users",
    "Clients",

    # Context
    "Context",
    "ClientCredentials",
    "BearerToken",

    # Requests
    "ClientCredentialsFlow",
    "ClientCredentialsFlowBuilder",
    "AuthorizationCodeFlow",
    "AuthorizationCodeFlowBuilder",
    "ResourceOwnerPasswordFlow",
    "ResourceOwnerPasswordFlowBuilder",
    "DeviceCodeRequest",
    "DeviceCodeBuilder",
    "ListUsers",
    "GetUser",
    "ListClients",
    "GetClient",
    "SearchEngine",

    # Wire / transport
    "WireRequest",
    "encode",
    "Page",
    "RequestsTransport",
    "TransportResponse",
    "REQUEST_TIMEOUT",

    # Exceptions
    "Auth0Error",
    "ValidationError",
    "MissingCredentialError",
    "TransportError",
    "ApiError",
    "DecodeError",
]
