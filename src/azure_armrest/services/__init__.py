"""
Sub-services for resource-group scoped Azure resources.

Each sub-service is a stateless request builder sharing one authenticated
ArmrestManager.
"""

from .base_service import ResourceGroupBasedSubservice
from .route_service import RouteService

__all__ = [
    "ResourceGroupBasedSubservice",
    "RouteService",
]
