"""Settings loader with environment variable and Docker secrets integration.

The API classes never read configuration on their own; hosts that keep
their Auth0 credentials in the environment or in ``/run/secrets`` call
``load_settings()`` and build the APIs from the result.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..auth import AuthenticationApi
from ..management import ManagementApi
from ..transport import REQUEST_TIMEOUT, RequestsTransport

SECRETS_DIR = Path("/run/secrets")

logger = logging.getLogger(__name__)


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = SECRETS_DIR / secret_name

    if secret_file.is_file():
        secret_value = secret_file.read_text().strip()
        if secret_value:
            logger.debug(f"Loaded {secret_name} from {SECRETS_DIR}")
            return secret_value

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.debug(f"Loaded {env_var} from environment")
            return secret_value

    return None


@dataclass
class Auth0Settings:
    """Auth0 tenant configuration container."""
    domain: str
    client_id: str
    client_secret: Optional[str] = field(default=None, repr=False)
    management_api_token: Optional[str] = field(default=None, repr=False)
    timeout: float = REQUEST_TIMEOUT

    def transport(self) -> RequestsTransport:
        return RequestsTransport(timeout=self.timeout)

    def authentication_api(self) -> AuthenticationApi:
        return AuthenticationApi(self.domain, self.client_id, self.client_secret, transport=self.transport())

    def management_api(self) -> ManagementApi:
        """Build a Management API client from the configured token.

        Raises:
            RuntimeError: If no management API token is configured
        """
        if not self.management_api_token:
            raise RuntimeError("AUTH0_MANAGEMENT_API_TOKEN not found in /run/secrets or environment")
        return ManagementApi(self.domain, self.management_api_token, transport=self.transport())


def _require(secret_name: str, env_var: str) -> str:
    value = (_load_secret_from_file(secret_name, env_var) or "").strip()
    if not value:
        raise RuntimeError(f"{env_var} not found in {SECRETS_DIR} or environment")
    return value


def load_settings() -> Auth0Settings:
    """Load Auth0 settings, each value from /run/secrets/<name> first and the environment second.

    File names are the lower-cased variable names (``auth0_domain``,
    ``auth0_client_id``, ``auth0_client_secret``, ...).

    Raises:
        RuntimeError: If AUTH0_DOMAIN or AUTH0_CLIENT_ID is missing, or
            AUTH0_TIMEOUT is not a number
    """
    domain = _require("auth0_domain", "AUTH0_DOMAIN")
    # Bare tenant hostnames are common in dashboards; assume https
    if "://" not in domain:
        domain = f"https://{domain}"

    raw_timeout = (_load_secret_from_file("auth0_timeout", "AUTH0_TIMEOUT") or "").strip()
    try:
        timeout = float(raw_timeout) if raw_timeout else REQUEST_TIMEOUT
    except ValueError as exc:
        raise RuntimeError(f"AUTH0_TIMEOUT must be a number of seconds, got {raw_timeout!r}") from exc

    return Auth0Settings(
        domain=domain,
        client_id=_require("auth0_client_id", "AUTH0_CLIENT_ID"),
        client_secret=_load_secret_from_file("auth0_client_secret", "AUTH0_CLIENT_SECRET"),
        management_api_token=_load_secret_from_file("auth0_management_api_token", "AUTH0_MANAGEMENT_API_TOKEN"),
        timeout=timeout,
    )
