"""
Typed views over subscription and resource group documents.

The manager returns raw JSON documents; these models give callers attribute
access to the commonly used fields while keeping unknown fields around.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Subscription(BaseModel):
    """A subscription document as returned by GET /subscriptions."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = None
    subscription_id: str | None = Field(None, alias="subscriptionId")
    display_name: str | None = Field(None, alias="displayName")
    state: str | None = None

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Subscription":
        return cls.model_validate(document)


class ResourceGroup(BaseModel):
    """A resource group document."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = None
    name: str | None = None
    location: str | None = None
    tags: dict[str, str] | None = None
    properties: dict[str, Any] | None = None

    @property
    def provisioning_state(self) -> str | None:
        if not self.properties:
            return None
        return self.properties.get("provisioningState")

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "ResourceGroup":
        return cls.model_validate(document)

    @classmethod
    def from_list_document(cls, document: dict[str, Any]) -> list["ResourceGroup"]:
        """Build models from the body returned by resource_groups()."""
        return [cls.model_validate(item) for item in document.get("value", [])]
