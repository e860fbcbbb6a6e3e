"""
Models shared by the manager and its sub-services.

This module defines the credential value, the per-instance client
configuration and the OAuth2 token endpoint response.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..constants import (
    AUTHORITY,
    CONTENT_TYPE,
    DEFAULT_API_VERSION,
    DEFAULT_GRANT_TYPE,
    DEFAULT_TIMEOUT_SECONDS,
    RESOURCE,
)
from ..errors import ConfigurationError

REQUIRED_CREDENTIALS = ("client_id", "client_key", "tenant_id")


class Credentials(BaseModel):
    """Service principal credentials. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    client_id: str = Field(..., min_length=1, description="Application (client) id")
    client_key: str = Field(
        ..., min_length=1, repr=False, description="Client secret"
    )
    tenant_id: str = Field(..., min_length=1, description="Azure AD tenant id")

    @classmethod
    def from_options(cls, **options: Any) -> "Credentials":
        """
        Build credentials, failing with ConfigurationError on missing values.

        Args:
            **options: client_id, client_key and tenant_id; None or empty
                strings count as missing

        Returns:
            Credentials instance

        Raises:
            ConfigurationError: If any mandatory credential is absent
        """
        missing = [name for name in REQUIRED_CREDENTIALS if not options.get(name)]
        if missing:
            raise ConfigurationError(
                f"Missing mandatory credential(s): {', '.join(missing)}",
                user_action="Provide client_id, client_key and tenant_id",
            )
        return cls(**{name: options[name] for name in REQUIRED_CREDENTIALS})


class ClientConfig(BaseModel):
    """Scoping and transport settings for one manager instance."""

    subscription_id: str | None = Field(
        None, description="Subscription id; defaults to the first one found"
    )
    resource_group: str | None = Field(None, description="Default resource group")
    api_version: str = Field(DEFAULT_API_VERSION, description="REST API version")
    grant_type: str = Field(DEFAULT_GRANT_TYPE, description="OAuth2 grant type")
    content_type: str = Field(
        CONTENT_TYPE, frozen=True, description="Content type of every request"
    )
    base_url: str = Field(RESOURCE, description="Resource Manager base URL")
    authority: str = Field(AUTHORITY, description="Azure AD authority URL")
    timeout: float = Field(DEFAULT_TIMEOUT_SECONDS, gt=0)
    verify_ssl: bool = True


class TokenResponse(BaseModel):
    """Body returned by the Azure AD token endpoint."""

    model_config = ConfigDict(extra="allow")

    access_token: str
    token_type: str | None = None
    expires_in: str | int | None = None
    resource: str | None = None
