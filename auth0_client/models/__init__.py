"""Typed models for Auth0 API responses."""
from .client import Client, EncryptionKey, JwtConfiguration, OidcLogoutConfig, SigningKey
from .tokens import AccessToken, DeviceCode
from .user import Identity, ProfileData, User

__all__ = [
    "AccessToken",
    "Client",
    "DeviceCode",
    "EncryptionKey",
    "Identity",
    "JwtConfiguration",
    "OidcLogoutConfig",
    "ProfileData",
    "SigningKey",
    "User",
]
