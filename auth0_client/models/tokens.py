"""Models returned by the Authentication API."""
from __future__ import annotations
from typing import Optional

from pydantic import NonNegativeInt

from .base import Auth0Model


class AccessToken(Auth0Model):
    """The access token received as a response of an authentication flow.

    Example JSON from ``POST /oauth/token``:
    {
        "access_token": "eyJz93a...k4laUWw",
        "refresh_token": "GEbRxBN...edjnXbL",
        "id_token": "eyJ0XAi...4faeEoQ",
        "token_type": "Bearer",
        "expires_in": 86400
    }
    """

    access_token: str
    token_type: str
    expires_in: NonNegativeInt
    refresh_token: Optional[str] = None
    id_token: Optional[str] = None
    scope: Optional[str] = None


class DeviceCode(Auth0Model):
    """Device/user code pair returned by ``POST /oauth/device/code``.

    The device later polls ``/oauth/token`` every ``interval`` seconds until
    the user has entered ``user_code`` at ``verification_uri``.
    """

    device_code: str
    user_code: str
    verification_uri: str
    verification_uri_complete: str
    expires_in: NonNegativeInt
    interval: NonNegativeInt
