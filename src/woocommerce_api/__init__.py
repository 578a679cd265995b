"""WooCommerce REST API client library.

Import WooCommerceAPI and WooCommerceConfig from here for API access.

Internal modules:
- authentication: Auth strategy selection (OAuth1, query string, Basic)
- config: Immutable configuration and environment loading
- oauth_signer: OAuth 1.0a HMAC-SHA256 signing
- query_canonicalizer: Sorted, percent-encoded query strings
- request_builder: Request descriptor assembly
- request_executor: Dispatch through aiohttp
- session_manager: HTTP session lifecycle
- url_builder: Endpoint URL composition
"""

from .client import WooCommerceAPI
from .client_helpers.errors import WooCommerceClientError
from .config import ConfigurationError, WooCommerceConfig, load_config_from_env
from .exceptions import InvalidParameterError, InvalidPortError, SignatureInvariantError, UrlError
from .request_descriptor import RequestDescriptor

__all__ = [
    "ConfigurationError",
    "InvalidParameterError",
    "InvalidPortError",
    "RequestDescriptor",
    "SignatureInvariantError",
    "UrlError",
    "WooCommerceAPI",
    "WooCommerceClientError",
    "WooCommerceConfig",
    "load_config_from_env",
]
