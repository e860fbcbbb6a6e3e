"""
Constants used throughout azure-armrest.

This module defines:
- Azure AD and Resource Manager endpoint URLs
- Default request settings (API version, grant type, content type)
"""

# Azure AD authority; the tenant id and "/oauth2/token" are appended to it
AUTHORITY = "https://login.windows.net/"

# Resource Manager endpoint, used both as the token resource and the REST base URL
RESOURCE = "https://management.azure.com/"

TOKEN_PATH = "oauth2/token"

# Request defaults
DEFAULT_API_VERSION = "2015-01-01"
DEFAULT_GRANT_TYPE = "client_credentials"
CONTENT_TYPE = "application/json"
DEFAULT_TIMEOUT_SECONDS = 60.0

TOKEN_PREFIX = "Bearer "

# Provider namespaces
PROVIDER_NETWORK = "Microsoft.Network"

# Error categories
CATEGORY_CONFIGURATION = "configuration"
CATEGORY_AUTHENTICATION = "authentication"
CATEGORY_HTTP = "http"
CATEGORY_DECODING = "decoding"
