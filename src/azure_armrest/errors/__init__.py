"""
Error handling module for azure-armrest.

Every error raised by the library derives from ArmrestError, so callers can
catch the whole family at once or pick out a single category.
"""

from .armrest_errors import (
    ArmrestError,
    AuthenticationError,
    ConfigurationError,
    DecodingError,
    HttpError,
)

__all__ = [
    "ArmrestError",
    "ConfigurationError",
    "AuthenticationError",
    "HttpError",
    "DecodingError",
]
