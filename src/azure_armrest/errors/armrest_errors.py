"""
Error hierarchy for azure-armrest.

Errors carry a category and an optional hint telling the user what to do.
Nothing in the library retries; every error propagates to the caller.
"""

from ..constants import (
    CATEGORY_AUTHENTICATION,
    CATEGORY_CONFIGURATION,
    CATEGORY_DECODING,
    CATEGORY_HTTP,
)


class ArmrestError(Exception):
    """
    Base error class for all azure-armrest exceptions.

    Provides categorization and user guidance for resolution.
    """

    def __init__(
        self,
        message: str,
        category: str,
        user_action: str | None = None,
    ):
        """
        Initialize armrest error.

        Args:
            message: Human-readable error description
            category: Error category (configuration, authentication, http, decoding)
            user_action: What the user should do to resolve the issue
        """
        super().__init__(message)
        self.message = message
        self.category = category
        self.user_action = user_action

    def __str__(self) -> str:
        """Enhanced string representation with user guidance."""
        base_msg = super().__str__()
        if self.user_action:
            return f"{base_msg}\nAction required: {self.user_action}"
        return base_msg


class ConfigurationError(ArmrestError):
    """Missing or invalid client configuration."""

    def __init__(self, message: str, user_action: str | None = None):
        super().__init__(
            message=message,
            category=CATEGORY_CONFIGURATION,
            user_action=user_action or "Review and correct the client configuration",
        )


class AuthenticationError(ArmrestError):
    """Token acquisition failed, or a request was made without a token."""

    def __init__(self, message: str, user_action: str | None = None):
        super().__init__(
            message=message,
            category=CATEGORY_AUTHENTICATION,
            user_action=user_action
            or "Check the client id, client key and tenant id, then call get_token()",
        )


class HttpError(ArmrestError):
    """Non-2xx response or transport failure from the REST API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
        user_action: str | None = None,
    ):
        if status_code:
            message = f"HTTP {status_code}: {message}"

        super().__init__(
            message=message,
            category=CATEGORY_HTTP,
            user_action=user_action,
        )
        self.status_code = status_code
        self.response_body = response_body

    def body_preview(self, limit: int = 2048) -> str | None:
        """Return a truncated preview of the response body for logging."""

        if self.response_body is None:
            return None

        if len(self.response_body) <= limit:
            return self.response_body

        return f"{self.response_body[:limit]}...<truncated>"


class DecodingError(ArmrestError):
    """Response body is not valid JSON or lacks an expected field."""

    def __init__(self, message: str, field: str | None = None):
        if field:
            message = f"Missing field '{field}': {message}"
        super().__init__(message=message, category=CATEGORY_DECODING)
        self.field = field
