"""
Pydantic models for azure-armrest.

Request-side models (Credentials, ClientConfig) are validated at construction
time; response-side models are lenient views over the raw JSON documents.
"""

from .common import ClientConfig, Credentials, TokenResponse
from .resources import ResourceGroup, Subscription

__all__ = [
    "Credentials",
    "ClientConfig",
    "TokenResponse",
    "Subscription",
    "ResourceGroup",
]
