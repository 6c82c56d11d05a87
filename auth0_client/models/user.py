"""User representation from the Management API."""
from __future__ import annotations
from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field, NonNegativeInt

from .base import Auth0Model


class ProfileData(Auth0Model):
    """Additional profile information for a linked identity.

    Provider-specific attributes are kept as extra fields.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    email: Optional[str] = None
    email_verified: Optional[bool] = None
    name: Optional[str] = None
    username: Optional[str] = None
    given_name: Optional[str] = None
    phone_number: Optional[str] = None
    phone_verified: Optional[bool] = None
    family_name: Optional[str] = None


class Identity(Auth0Model):
    """A 3rd party account linked to a user."""

    connection: str
    user_id: str
    provider: str
    is_social: Optional[bool] = Field(None, alias="isSocial")
    access_token: Optional[str] = None
    access_token_secret: Optional[str] = None
    refresh_token: Optional[str] = None
    profile_data: Optional[ProfileData] = Field(None, alias="profileData")


class User(Auth0Model):
    """Represents a user as returned by ``/api/v2/users``.

    Example JSON:
    {
        "user_id": "auth0|507f1f77bcf86cd799439020",
        "email": "john.doe@gmail.com",
        "email_verified": false,
        "created_at": "2023-05-14T09:21:00.000Z",
        "identities": [{"connection": "Initial-Connection", "user_id": "507f...", "provider": "auth0"}],
        "logins_count": 3
    }
    """

    user_id: Optional[str] = None
    email: Optional[str] = None
    email_verified: Optional[bool] = None
    username: Optional[str] = None
    phone_number: Optional[str] = None
    phone_verified: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    identities: List[Identity] = []
    app_metadata: Optional[dict] = None
    user_metadata: Optional[dict] = None
    picture: Optional[str] = None
    name: Optional[str] = None
    nickname: Optional[str] = None
    multifactor: List[str] = []
    last_ip: Optional[str] = None
    last_login: Optional[datetime] = None
    last_password_reset: Optional[datetime] = None
    logins_count: Optional[NonNegativeInt] = None
    blocked: Optional[bool] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
