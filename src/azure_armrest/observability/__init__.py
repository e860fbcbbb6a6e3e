"""
Observability utilities for azure-armrest.

Currently structured logging with correlation id tracking.
"""

from .logging import (
    CorrelationIDFilter,
    StructuredFormatter,
    get_correlation_id,
    set_correlation_id,
    setup_logging,
    setup_logging_from_settings,
)

__all__ = [
    "CorrelationIDFilter",
    "StructuredFormatter",
    "get_correlation_id",
    "set_correlation_id",
    "setup_logging",
    "setup_logging_from_settings",
]
