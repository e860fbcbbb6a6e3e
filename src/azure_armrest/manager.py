"""
Azure Resource Manager REST client.

This module provides ArmrestManager, the authenticated entry point to the
Azure Resource Manager REST API. It handles:
- OAuth2 client-credentials token acquisition against Azure AD
- Defaulting the subscription to the first one visible to the principal
- Subscription and resource group discovery
- Authenticated GET/PUT/POST/DELETE helpers shared with sub-services

Every public operation performs at most a couple of blocking round trips and
never retries; errors propagate to the caller.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from .constants import (
    AUTHORITY,
    DEFAULT_API_VERSION,
    DEFAULT_GRANT_TYPE,
    DEFAULT_TIMEOUT_SECONDS,
    RESOURCE,
    TOKEN_PATH,
    TOKEN_PREFIX,
)
from .errors import AuthenticationError, ConfigurationError, DecodingError, HttpError
from .models import ClientConfig, Credentials, Subscription, TokenResponse
from .settings import Settings, settings

logger = logging.getLogger(__name__)


def decode_json(response: httpx.Response, url: str) -> Any:
    """
    Decode a JSON response body.

    Args:
        response: Response with a buffered body
        url: Request URL, used in the error message

    Returns:
        Parsed document, or None for an empty body

    Raises:
        DecodingError: If the body is not valid JSON
    """
    if not response.content:
        return None

    try:
        return response.json()
    except ValueError as e:
        logger.error(
            f"Response from {url} is not valid JSON",
            extra={"url": url, "http_status": response.status_code},
        )
        raise DecodingError(f"Response from {url} is not valid JSON: {e}") from e


class ArmrestManager:
    """
    Authenticated client for the Azure Resource Manager REST API.

    Construct it with service principal credentials, call get_token() once,
    then use the discovery methods or hand the manager to sub-services such
    as RouteService. The manager owns exactly one bearer token.
    """

    def __init__(
        self,
        client_id: str | None = None,
        client_key: str | None = None,
        tenant_id: str | None = None,
        *,
        subscription_id: str | None = None,
        resource_group: str | None = None,
        api_version: str | None = DEFAULT_API_VERSION,
        grant_type: str | None = DEFAULT_GRANT_TYPE,
        base_url: str = RESOURCE,
        authority: str = AUTHORITY,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        verify_ssl: bool = True,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the manager.

        Args:
            client_id: Azure client id. Mandatory.
            client_key: The key (secret) for the client id. Mandatory.
            tenant_id: Azure tenant id. Mandatory.
            subscription_id: Subscription id. If omitted, get_token() picks
                the first subscription returned by the API.
            resource_group: Default resource group for resource group calls
            api_version: REST API version (default: 2015-01-01)
            grant_type: OAuth2 grant type (default: client_credentials)
            base_url: Resource Manager base URL, with trailing slash
            authority: Azure AD authority URL
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify TLS certificates
            http_client: Optional httpx.Client to use instead of an owned one

        Raises:
            ConfigurationError: If a credential is missing or a setting is invalid
        """
        self.credentials = Credentials.from_options(
            client_id=client_id, client_key=client_key, tenant_id=tenant_id
        )

        try:
            self.config = ClientConfig(
                subscription_id=subscription_id or None,
                resource_group=resource_group or None,
                api_version=api_version or DEFAULT_API_VERSION,
                grant_type=grant_type or DEFAULT_GRANT_TYPE,
                base_url=base_url,
                authority=authority,
                timeout=timeout,
                verify_ssl=verify_ssl,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid client configuration: {e}") from e

        # Set by get_token()
        self.token: str | None = None

        self._http_client = http_client
        self._owns_http_client = http_client is None

        logger.debug(f"Initialized armrest manager for tenant {tenant_id}")

    @classmethod
    def from_settings(
        cls, source: Settings | None = None, **overrides: Any
    ) -> "ArmrestManager":
        """
        Build a manager from environment-backed settings.

        Args:
            source: Settings instance (default: the module-level settings)
            **overrides: Constructor arguments that take precedence

        Returns:
            Unauthenticated ArmrestManager
        """
        source = source or settings
        options: dict[str, Any] = {
            "client_id": source.client_id,
            "client_key": source.client_key,
            "tenant_id": source.tenant_id,
            "subscription_id": source.subscription_id,
            "resource_group": source.resource_group,
            "api_version": source.api_version,
            "grant_type": source.grant_type,
            "base_url": source.resource_url,
            "authority": source.authority_url,
            "timeout": source.timeout_seconds,
            "verify_ssl": source.verify_ssl,
        }
        options.update(overrides)
        return cls(**options)

    # Configuration accessors

    @property
    def client_id(self) -> str:
        return self.credentials.client_id

    @property
    def tenant_id(self) -> str:
        return self.credentials.tenant_id

    @property
    def subscription_id(self) -> str | None:
        """The subscription (billing unit) used for scoped calls."""
        return self.config.subscription_id

    @subscription_id.setter
    def subscription_id(self, value: str | None) -> None:
        self.config.subscription_id = value

    @property
    def resource_group(self) -> str | None:
        """The default resource group within the subscription."""
        return self.config.resource_group

    @resource_group.setter
    def resource_group(self, value: str | None) -> None:
        self.config.resource_group = value

    @property
    def api_version(self) -> str:
        return self.config.api_version

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def content_type(self) -> str:
        return self.config.content_type

    @property
    def grant_type(self) -> str:
        return self.config.grant_type

    @property
    def token_url(self) -> str:
        """Azure AD token endpoint for this tenant."""
        return f"{self.config.authority.rstrip('/')}/{self.tenant_id}/{TOKEN_PATH}"

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(tenant_id={self.tenant_id!r}, "
            f"subscription_id={self.subscription_id!r}, "
            f"authenticated={self.is_authenticated})"
        )

    # HTTP client lifecycle

    def _get_client(self) -> httpx.Client:
        """Get or create the httpx client (lazy initialization)."""
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.Client(
                verify=self.config.verify_ssl,
                timeout=httpx.Timeout(self.config.timeout),
                follow_redirects=False,
            )
            self._owns_http_client = True
            logger.debug(f"Created httpx client for {self.base_url}")
        return self._http_client

    def close(self) -> None:
        """
        Close the underlying httpx client if this manager created it.

        An injected client belongs to the caller and is left open and in use.
        """
        if self._owns_http_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> "ArmrestManager":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # Authentication

    def get_token(self) -> "ArmrestManager":
        """
        Obtain a bearer token, used for all other methods.

        This also sets subscription_id to the first subscription found if it
        was not given to the constructor. Must be called before any other
        request method.

        Returns:
            The manager itself, so calls can be chained

        Raises:
            AuthenticationError: If the token request fails or returns no token
            ConfigurationError: If the subscription must be defaulted but the
                principal sees no subscriptions
        """
        auth_data = {
            "grant_type": self.grant_type,
            "client_id": self.credentials.client_id,
            "client_secret": self.credentials.client_key,
            "resource": self.base_url,
        }

        try:
            client = self._get_client()
            response = client.post(
                self.token_url,
                data=auth_data,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
            response.raise_for_status()
            token_data = TokenResponse.model_validate(response.json())

        except httpx.HTTPStatusError as e:
            logger.error(
                f"Failed to authenticate with Azure AD: {e}",
                extra={
                    "tenant_id": self.tenant_id,
                    "http_status": e.response.status_code,
                },
            )
            raise AuthenticationError(
                f"Token request failed with HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(
                f"Failed to authenticate with Azure AD: {e}",
                extra={"tenant_id": self.tenant_id},
            )
            raise AuthenticationError(f"Token request failed: {e}") from e
        except ValidationError as e:
            logger.error(
                "Token response has no access_token",
                extra={"tenant_id": self.tenant_id},
            )
            raise AuthenticationError(
                "Token response did not contain an access_token"
            ) from e
        except ValueError as e:
            logger.error(
                "Token response is not valid JSON", extra={"tenant_id": self.tenant_id}
            )
            raise AuthenticationError(f"Token response is not valid JSON: {e}") from e

        self.token = TOKEN_PREFIX + token_data.access_token
        logger.info(
            "Successfully authenticated with Azure AD",
            extra={"tenant_id": self.tenant_id},
        )

        if not self.subscription_id:
            try:
                self.subscription_id = self._default_subscription_id()
            except Exception:
                # A half-initialized manager must not look authenticated
                self.token = None
                raise

        return self

    acquire_token = get_token

    def _default_subscription_id(self) -> str:
        subscriptions = self.subscriptions()
        if not subscriptions:
            raise ConfigurationError(
                "No subscriptions are visible to this client",
                user_action="Pass subscription_id or grant the service principal access to a subscription",
            )

        subscription = Subscription.from_document(subscriptions[0])
        if not subscription.subscription_id:
            raise DecodingError(
                "first subscription in the listing has no id", field="subscriptionId"
            )

        logger.info(
            f"Defaulting to subscription {subscription.subscription_id}",
            extra={"subscription_id": subscription.subscription_id},
        )
        return subscription.subscription_id

    def ensure_authenticated(self) -> None:
        """Raise AuthenticationError unless get_token() has succeeded."""
        if not self.token:
            raise AuthenticationError("no token: call get_token() before making requests")

    # Discovery

    def subscriptions(self) -> list[dict[str, Any]]:
        """
        Return the list of subscriptions for the tenant.

        Returns:
            The "value" array of the response body
        """
        url = f"{self.base_url}subscriptions?api-version={self.api_version}"

        document = decode_json(self.rest_get(url), url)
        if not isinstance(document, dict) or "value" not in document:
            raise DecodingError("subscription listing is malformed", field="value")
        return document["value"]

    list_subscriptions = subscriptions

    def subscription_info(self, subscription_id: str | None = None) -> Any:
        """
        Return information for a subscription.

        Args:
            subscription_id: Subscription to look up (default: the manager's)
        """
        subscription_id = subscription_id or self.subscription_id
        url = f"{self.base_url}subscriptions/{subscription_id}"
        url += f"?api-version={self.api_version}"

        return decode_json(self.rest_get(url), url)

    get_subscription_info = subscription_info

    def resource_groups(self) -> Any:
        """
        Return the resource groups of the current subscription.

        Unlike subscriptions(), this returns the whole response body rather
        than its "value" array; existing callers rely on that shape.
        """
        url = f"{self.base_url}subscriptions/{self.subscription_id}"
        url += f"/resourcegroups?api-version={self.api_version}"

        return decode_json(self.rest_get(url), url)

    list_resource_groups = resource_groups

    def resource_group_info(self, resource_group: str | None = None) -> Any:
        """
        Return information for a resource group.

        Args:
            resource_group: Resource group name (default: the manager's)

        Raises:
            ConfigurationError: If no resource group is given or configured
        """
        self.ensure_authenticated()

        resource_group = resource_group or self.resource_group
        if not resource_group:
            raise ConfigurationError("No resource group specified")

        url = f"{self.base_url}subscriptions/{self.subscription_id}"
        url += f"/resourcegroups/{resource_group}?api-version={self.api_version}"

        return decode_json(self.rest_get(url), url)

    get_resource_group_info = resource_group_info

    # REST verb methods

    def _make_request(self, method: str, url: str, body: Any = None) -> httpx.Response:
        """
        Make an authenticated request to the Resource Manager API.

        Args:
            method: HTTP method (GET, PUT, POST, DELETE)
            url: Fully built request URL, query string included
            body: Optional JSON-serializable request body

        Returns:
            Response object with body already buffered

        Raises:
            AuthenticationError: If no token has been acquired
            HttpError: On non-2xx responses or transport failures
        """
        self.ensure_authenticated()

        client = self._get_client()
        headers = {
            "Content-Type": self.content_type,
            "Authorization": self.token,
        }

        try:
            response = client.request(method, url, headers=headers, json=body)
            response.raise_for_status()
            return response

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            response_body = e.response.text or "<no content>"
            error = HttpError(
                f"{method} {url} failed",
                status_code=status_code,
                response_body=response_body,
            )
            logger.error(
                f"Request failed: {method} {url} - HTTP {status_code}",
                extra={
                    "http_method": method,
                    "url": url,
                    "http_status": status_code,
                    "response_body": error.body_preview(1024),
                },
            )
            raise error from e

        except httpx.HTTPError as e:
            # Connection errors, timeouts and the like
            logger.error(
                f"Request failed: {method} {url} - {e}",
                extra={"http_method": method, "url": url},
            )
            raise HttpError(f"{method} {url} failed: {e}", status_code=None) from e

    def rest_get(self, url: str) -> httpx.Response:
        return self._make_request("GET", url)

    def rest_put(self, url: str, body: Any = None) -> httpx.Response:
        return self._make_request("PUT", url, body)

    def rest_post(self, url: str, body: Any = None) -> httpx.Response:
        return self._make_request("POST", url, body)

    def rest_delete(self, url: str) -> httpx.Response:
        return self._make_request("DELETE", url)


def connect(*args: Any, **kwargs: Any) -> ArmrestManager:
    """
    Create an ArmrestManager and authenticate it in one step.

    Takes the same arguments as ArmrestManager. The returned manager always
    holds a token, so no request can be made unauthenticated.

    Example:
        manager = connect(client_id, client_key, tenant_id)
        for group in manager.resource_groups()["value"]:
            print(group["name"])
    """
    manager = ArmrestManager(*args, **kwargs)
    try:
        return manager.get_token()
    except Exception:
        manager.close()
        raise
