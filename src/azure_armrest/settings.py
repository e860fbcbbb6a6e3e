"""Centralized azure-armrest settings using pydantic-settings.

Settings are loaded from environment variables (or a ``.env`` file) and can be
used to build a manager with ``ArmrestManager.from_settings()``. Constructor
arguments always take precedence.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    AUTHORITY,
    DEFAULT_API_VERSION,
    DEFAULT_GRANT_TYPE,
    DEFAULT_TIMEOUT_SECONDS,
    RESOURCE,
)


class Settings(BaseSettings):
    """Client configuration loaded from environment variables.

    Credentials have no defaults; a manager built from settings without them
    fails with ConfigurationError.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Credentials
    client_id: str | None = Field(
        default=None,
        validation_alias="AZURE_CLIENT_ID",
        description="Application (client) id of the service principal",
    )
    client_key: str | None = Field(
        default=None,
        validation_alias="AZURE_CLIENT_SECRET",
        description="Client secret of the service principal",
    )
    tenant_id: str | None = Field(
        default=None,
        validation_alias="AZURE_TENANT_ID",
        description="Azure AD tenant id",
    )

    # Scoping
    subscription_id: str | None = Field(
        default=None,
        validation_alias="AZURE_SUBSCRIPTION_ID",
        description="Subscription id (empty = first subscription found)",
    )
    resource_group: str | None = Field(
        default=None,
        validation_alias="AZURE_RESOURCE_GROUP",
        description="Default resource group",
    )

    # REST behaviour
    api_version: str = Field(
        default=DEFAULT_API_VERSION,
        validation_alias="ARMREST_API_VERSION",
        description="REST API version used for discovery calls",
    )
    grant_type: str = Field(
        default=DEFAULT_GRANT_TYPE,
        validation_alias="ARMREST_GRANT_TYPE",
        description="OAuth2 grant type used for the token request",
    )
    authority_url: str = Field(
        default=AUTHORITY,
        validation_alias="ARMREST_AUTHORITY_URL",
        description="Azure AD authority URL",
    )
    resource_url: str = Field(
        default=RESOURCE,
        validation_alias="ARMREST_RESOURCE_URL",
        description="Resource Manager base URL",
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        validation_alias="ARMREST_TIMEOUT_SECONDS",
        description="HTTP request timeout in seconds",
    )
    verify_ssl: bool = Field(
        default=True,
        validation_alias="ARMREST_VERIFY_SSL",
        description="Verify TLS certificates",
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        validation_alias="ARMREST_LOG_LEVEL",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_logs: bool = Field(
        default=False,
        validation_alias="ARMREST_JSON_LOGS",
        description="Enable JSON formatted logging",
    )
    correlation_ids: bool = Field(
        default=True,
        validation_alias="ARMREST_CORRELATION_IDS",
        description="Enable correlation IDs in logs",
    )


# Global settings instance - initialized once at module import
settings = Settings()
