"""
Structured logging utilities for azure-armrest.

This module provides correlation ID tracking and a JSON formatter so that
request logs from the manager can be grouped per logical caller operation.
"""

import json
import logging
import uuid
from contextvars import ContextVar
from datetime import UTC, datetime

from ..settings import Settings, settings

# Context variable for tracking correlation IDs across calls
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")

# Extra attributes copied into JSON log lines when present on a record
STRUCTURED_FIELDS = (
    "http_method",
    "url",
    "http_status",
    "response_body",
    "subscription_id",
    "resource_group",
    "provider",
    "tenant_id",
    "error_type",
)


class CorrelationIDFilter(logging.Filter):
    """Logging filter that adds correlation ID to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Add correlation ID to the log record.

        Args:
            record: The log record to process

        Returns:
            True to allow the record to be processed
        """
        current_correlation_id = correlation_id.get()
        if not current_correlation_id:
            current_correlation_id = generate_correlation_id()
            correlation_id.set(current_correlation_id)

        record.correlation_id = current_correlation_id
        return True


class StructuredFormatter(logging.Formatter):
    """
    Structured JSON formatter for logs with correlation ID support.

    Formats log records as one JSON object per line.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "correlation_id": getattr(record, "correlation_id", ""),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for field in STRUCTURED_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        return json.dumps(log_data)


def generate_correlation_id() -> str:
    """Generate a short 8-character correlation ID."""
    return str(uuid.uuid4())[:8]


def set_correlation_id(corr_id: str) -> str:
    """
    Set the correlation ID for the current context.

    Args:
        corr_id: Correlation ID to set

    Returns:
        The correlation ID that was set
    """
    correlation_id.set(corr_id)
    return corr_id


def get_correlation_id() -> str:
    """Get the current correlation ID, or empty string if none set."""
    return correlation_id.get("")


def setup_logging(
    log_level: str = "INFO",
    enable_json_formatting: bool = False,
    correlation_id_enabled: bool = True,
) -> None:
    """
    Set up logging for applications using azure-armrest.

    Replaces any handlers on the root logger with a single stream handler.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        enable_json_formatting: Whether to use JSON formatting
        correlation_id_enabled: Whether to enable correlation ID tracking
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()

    if enable_json_formatting:
        formatter = StructuredFormatter()
    elif correlation_id_enabled:
        formatter = logging.Formatter(
            "%(asctime)s - %(correlation_id)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    handler.setFormatter(formatter)

    if correlation_id_enabled:
        handler.addFilter(CorrelationIDFilter())

    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # httpx logs every request at INFO, including the token endpoint
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def setup_logging_from_settings(source: Settings | None = None) -> None:
    """
    Set up logging from ARMREST_LOG_LEVEL, ARMREST_JSON_LOGS and
    ARMREST_CORRELATION_IDS.

    Args:
        source: Settings to read (default: the module-level settings)
    """
    source = source or settings
    setup_logging(
        log_level=source.log_level,
        enable_json_formatting=source.json_logs,
        correlation_id_enabled=source.correlation_ids,
    )
