"""Pytest shared fixtures: recording transport and canned Auth0 payloads."""
import json
import pathlib
import sys
from types import SimpleNamespace
from typing import Any, Optional

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from auth0_client import AuthenticationApi, ManagementApi, TransportResponse

DOMAIN = "https://t.example.com"
CLIENT_ID = "xxxyyyzzz"
CLIENT_SECRET = "secret_of_xxxyyyzzz"
API_TOKEN = "mgmt-api-token-0123456789"


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    """
    Prevent unit tests from reaching the network through requests.

    Integration tests are explicitly marked with @pytest.mark.integration and
    are allowed to perform real HTTP calls by skipping this fixture.
    """
    if request.node.get_closest_marker("integration"):
        return

    def _stub_request(self, method, url, *args, **kwargs):
        raise RuntimeError(f"Unexpected HTTP {method} in unit test: {url}")

    monkeypatch.setattr(requests.Session, "request", _stub_request)


# ─────────────────────────────────────────────────────────────────────────────
# Recording transport
# ─────────────────────────────────────────────────────────────────────────────
class RecordingTransport:
    """In-memory transport: records every call and replays queued responses."""

    def __init__(self):
        self.calls = []
        self._responses = []

    def respond(self, payload: Any = None, status_code: int = 200, body: Optional[bytes] = None):
        if body is None:
            body = json.dumps(payload).encode() if payload is not None else b""
        self._responses.append(
            TransportResponse(status_code=status_code, body=body, headers={"Content-Type": "application/json"})
        )
        return self

    def fail_with(self, exc: Exception):
        self._responses.append(exc)
        return self

    def execute(self, method, url, headers=None, params=None, json=None):
        self.calls.append(
            SimpleNamespace(method=method, url=url, headers=headers or {}, params=params or {}, json=json)
        )
        if not self._responses:
            raise AssertionError(f"Unexpected HTTP {method} {url}: no response queued")
        resp = self._responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture()
def transport():
    return RecordingTransport()


@pytest.fixture()
def auth(transport):
    """Authentication API for a public client (no secret)."""
    return AuthenticationApi(DOMAIN, CLIENT_ID, transport=transport)


@pytest.fixture()
def auth_with_secret(transport):
    return AuthenticationApi(DOMAIN, CLIENT_ID, CLIENT_SECRET, transport=transport)


@pytest.fixture()
def mgmt(transport):
    return ManagementApi(DOMAIN, API_TOKEN, transport=transport)


# ─────────────────────────────────────────────────────────────────────────────
# Payloads
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture()
def tokens_payload():
    return {
        "access_token": "eyJz93a...k4laUWw",
        "refresh_token": "GEbRxBN...edjnXbL",
        "id_token": "eyJ0XAi...4faeEoQ",
        "token_type": "Bearer",
        "expires_in": 86400,
    }


@pytest.fixture()
def device_code_payload():
    return {
        "device_code": "Ag_EE...ko1p",
        "user_code": "QTZL-MCBW",
        "verification_uri": "https://t.example.com/activate",
        "verification_uri_complete": "https://t.example.com/activate?user_code=QTZL-MCBW",
        "expires_in": 900,
        "interval": 5,
    }


@pytest.fixture()
def user_payload():
    return {
        "user_id": "auth0|507f1f77bcf86cd799439020",
        "email": "john.doe@gmail.com",
        "email_verified": False,
        "username": "johndoe",
        "created_at": "2023-05-14T09:21:00.000Z",
        "updated_at": "2023-06-01T12:00:00.000Z",
        "identities": [
            {
                "connection": "Initial-Connection",
                "user_id": "507f1f77bcf86cd799439020",
                "provider": "auth0",
                "isSocial": False,
                "profileData": {"email": "john.doe@gmail.com", "locale": "en"},
            }
        ],
        "app_metadata": {"plan": "gold"},
        "user_metadata": {},
        "name": "John Doe",
        "nickname": "johnny",
        "multifactor": ["guardian"],
        "last_ip": "203.0.113.7",
        "last_login": "2023-06-01T11:59:00.000Z",
        "logins_count": 3,
        "blocked": False,
    }


@pytest.fixture()
def users_list_payload(user_payload):
    second = dict(user_payload, user_id="auth0|507f1f77bcf86cd799439021", email="jane.doe@gmail.com")
    return [user_payload, second]


@pytest.fixture()
def users_paged_payload(users_list_payload):
    return {"start": 0, "limit": 50, "length": 14, "total": 14, "users": users_list_payload}


@pytest.fixture()
def client_payload():
    return {
        "client_id": "AaiyAPdpYdesoKnqjj8HJqRn4T5titww",
        "tenant": "t",
        "name": "My application",
        "global": False,
        "app_type": "regular_web",
        "is_first_party": True,
        "oidc_conformant": True,
        "callbacks": ["https://app.example.com/callback"],
        "grant_types": ["authorization_code", "refresh_token"],
        "jwt_configuration": {"lifetime_in_seconds": 36000, "secret_encoded": False, "alg": "RS256"},
        "signing_keys": [{"pkcs7": "-----BEGIN PKCS7-----", "cert": "-----BEGIN CERTIFICATE-----", "subject": "/CN=t"}],
        "sso_disabled": False,
        "token_endpoint_auth_method": "client_secret_post",
    }


@pytest.fixture()
def clients_list_payload(client_payload):
    second = dict(client_payload, client_id="BbiyAPdpYdesoKnqjj8HJqRn4T5titwx", name="Native", app_type="native")
    return [client_payload, second]


@pytest.fixture()
def clients_paged_payload(clients_list_payload):
    return {"start": 0, "limit": 50, "length": 14, "total": 14, "clients": clients_list_payload}
