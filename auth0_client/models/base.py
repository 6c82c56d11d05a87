"""Common configuration for Auth0 response models."""
from pydantic import BaseModel, ConfigDict


class Auth0Model(BaseModel):
    """Immutable deserialization target for an Auth0 API response.

    Fields the remote schema adds later are ignored rather than rejected.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
