"""
azure-armrest - A client library for the Azure Resource Manager REST API.

This package provides:
- OAuth2 client-credentials authentication against Azure AD
- Subscription and resource group discovery
- Resource-group scoped sub-services (e.g. routes under route tables)
"""

from .errors import (
    ArmrestError,
    AuthenticationError,
    ConfigurationError,
    DecodingError,
    HttpError,
)
from .manager import ArmrestManager, connect
from .observability import setup_logging, setup_logging_from_settings
from .services import ResourceGroupBasedSubservice, RouteService

__version__ = "0.1.0"

__all__ = [
    "ArmrestManager",
    "connect",
    "setup_logging",
    "setup_logging_from_settings",
    "ResourceGroupBasedSubservice",
    "RouteService",
    "ArmrestError",
    "AuthenticationError",
    "ConfigurationError",
    "DecodingError",
    "HttpError",
]
