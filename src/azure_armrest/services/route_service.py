"""Routes within network route tables."""

from typing import TYPE_CHECKING

from ..constants import PROVIDER_NETWORK
from .base_service import ResourceGroupBasedSubservice

if TYPE_CHECKING:
    from ..manager import ArmrestManager


class RouteService(ResourceGroupBasedSubservice):
    """Manage routes under route tables (Microsoft.Network/routeTables/*/routes)."""

    def __init__(
        self,
        manager: "ArmrestManager",
        resource_group: str | None = None,
        api_version: str | None = None,
    ) -> None:
        super().__init__(
            manager,
            "routeTables",
            "routes",
            PROVIDER_NETWORK,
            resource_group=resource_group,
            api_version=api_version,
        )
