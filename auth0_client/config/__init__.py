"""Optional settings loader for hosts that configure the client from the environment."""
from .settings import Auth0Settings, load_settings

__all__ = ["Auth0Settings", "load_settings"]
