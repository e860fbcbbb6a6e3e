"""
Base class for nested resources under a resource group.

A sub-service addresses resources of the shape

    subscriptions/{sub}/resourceGroups/{rg}/providers/{provider}/
        {service_name}/{resource_name}/{subservice_name}/{subresource_name}

for example routes under a route table. Subclasses only supply the three
path parameters; all CRUD calls go through the shared manager.
"""

import logging
from typing import TYPE_CHECKING, Any

from ..errors import ConfigurationError, DecodingError
from ..manager import decode_json

if TYPE_CHECKING:
    from ..manager import ArmrestManager

logger = logging.getLogger(__name__)


class ResourceGroupBasedSubservice:
    """
    CRUD access to one category of nested resource within a resource group.

    The sub-service does not own the manager's lifecycle; closing the
    manager makes every sub-service built on it unusable.
    """

    def __init__(
        self,
        manager: "ArmrestManager",
        service_name: str,
        subservice_name: str,
        provider: str,
        resource_group: str | None = None,
        api_version: str | None = None,
    ) -> None:
        """
        Initialize the sub-service.

        Args:
            manager: Manager used for authenticated requests
            service_name: Parent collection segment, e.g. "routeTables"
            subservice_name: Child collection segment, e.g. "routes"
            provider: Resource provider namespace, e.g. "Microsoft.Network"
            resource_group: Resource group override (default: the manager's)
            api_version: API version override (default: the manager's)
        """
        self.manager = manager
        self.service_name = service_name
        self.subservice_name = subservice_name
        self.provider = provider
        self._resource_group = resource_group
        self._api_version = api_version

    @property
    def resource_group(self) -> str | None:
        return self._resource_group or self.manager.resource_group

    @property
    def api_version(self) -> str:
        return self._api_version or self.manager.api_version

    def build_url(
        self,
        resource_name: str,
        subresource_name: str | None = None,
        resource_group: str | None = None,
    ) -> str:
        """
        Build the URL for a collection or a single nested resource.

        Args:
            resource_name: Name of the parent resource (e.g. the route table)
            subresource_name: Name of the nested resource; omit for the collection
            resource_group: Resource group (default: the sub-service's)

        Returns:
            Absolute URL including the api-version query string

        Raises:
            ConfigurationError: If no subscription or resource group is known
        """
        resource_group = resource_group or self.resource_group
        if not resource_group:
            raise ConfigurationError(
                f"No resource group specified for {self.provider}/{self.service_name}",
                user_action="Pass resource_group to the call, the service or the manager",
            )

        subscription_id = self.manager.subscription_id
        if not subscription_id:
            raise ConfigurationError(
                "No subscription id available",
                user_action="Call get_token() first or pass subscription_id to the manager",
            )

        segments = [
            "subscriptions",
            subscription_id,
            "resourceGroups",
            resource_group,
            "providers",
            self.provider,
            self.service_name,
            resource_name,
            self.subservice_name,
        ]
        if subresource_name:
            segments.append(subresource_name)

        path = "/".join(segments)
        return f"{self.manager.base_url}{path}?api-version={self.api_version}"

    def list(
        self, resource_name: str, resource_group: str | None = None
    ) -> list[dict[str, Any]]:
        """
        List the nested resources of a parent resource.

        Returns:
            The "value" array of the response body
        """
        self.manager.ensure_authenticated()
        resource_group = resource_group or self.resource_group
        url = self.build_url(resource_name, resource_group=resource_group)
        logger.debug(
            f"Listing {self.subservice_name} of {self.service_name}/{resource_name}",
            extra={"provider": self.provider, "resource_group": resource_group},
        )

        document = decode_json(self.manager.rest_get(url), url)
        if not isinstance(document, dict) or "value" not in document:
            raise DecodingError(
                f"{self.subservice_name} listing is malformed", field="value"
            )
        return document["value"]

    def get(
        self,
        resource_name: str,
        subresource_name: str,
        resource_group: str | None = None,
    ) -> Any:
        """Return a single nested resource document."""
        self.manager.ensure_authenticated()
        url = self.build_url(resource_name, subresource_name, resource_group)
        return decode_json(self.manager.rest_get(url), url)

    def create(
        self,
        resource_name: str,
        subresource_name: str,
        body: dict[str, Any] | None = None,
        resource_group: str | None = None,
    ) -> Any:
        """
        Create (or replace) a nested resource.

        Args:
            resource_name: Parent resource name
            subresource_name: Name of the resource to create
            body: JSON request body, typically {"properties": {...}}
            resource_group: Resource group (default: the sub-service's)

        Returns:
            The resource document returned by the API
        """
        self.manager.ensure_authenticated()
        resource_group = resource_group or self.resource_group
        url = self.build_url(resource_name, subresource_name, resource_group)
        logger.info(
            f"Creating {self.subservice_name}/{subresource_name} in "
            f"{self.service_name}/{resource_name}",
            extra={"provider": self.provider, "resource_group": resource_group},
        )
        return decode_json(self.manager.rest_put(url, body or {}), url)

    def update(
        self,
        resource_name: str,
        subresource_name: str,
        body: dict[str, Any] | None = None,
        resource_group: str | None = None,
    ) -> Any:
        """Update a nested resource. ARM uses the same PUT as create."""
        return self.create(resource_name, subresource_name, body, resource_group)

    def delete(
        self,
        resource_name: str,
        subresource_name: str,
        resource_group: str | None = None,
    ) -> Any:
        """
        Delete a nested resource.

        Returns:
            The response document, or None when the API returns no body
        """
        self.manager.ensure_authenticated()
        resource_group = resource_group or self.resource_group
        url = self.build_url(resource_name, subresource_name, resource_group)
        logger.info(
            f"Deleting {self.subservice_name}/{subresource_name} from "
            f"{self.service_name}/{resource_name}",
            extra={"provider": self.provider, "resource_group": resource_group},
        )
        return decode_json(self.manager.rest_delete(url), url)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(provider={self.provider!r}, "
            f"service={self.service_name!r}, subservice={self.subservice_name!r}, "
            f"resource_group={self.resource_group!r})"
        )
