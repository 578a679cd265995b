"""Immutable client configuration and its loaders."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .errors import ConfigurationError
from .runtime import env_bool, env_float, env_str

logger = logging.getLogger(__name__)

DEFAULT_WP_API_PREFIX = "wp-json"
DEFAULT_API_VERSION = "v3"
DEFAULT_ENCODING = "utf-8"
DEFAULT_ENV_PREFIX = "WOOCOMMERCE_"

_HTTPS_PATTERN = re.compile(r"^https", re.IGNORECASE)

# Option bag keys, camelCase first, mapped onto dataclass fields.
_OPTION_ALIASES = {
    "url": "url",
    "consumerKey": "consumer_key",
    "consumer_key": "consumer_key",
    "consumerSecret": "consumer_secret",
    "consumer_secret": "consumer_secret",
    "wpAPIPrefix": "wp_api_prefix",
    "wp_api_prefix": "wp_api_prefix",
    "version": "version",
    "verifySsl": "verify_ssl",
    "verify_ssl": "verify_ssl",
    "encoding": "encoding",
    "queryStringAuth": "query_string_auth",
    "query_string_auth": "query_string_auth",
    "port": "port",
    "timeout": "timeout",
    "axiosOptions": "transport_options",
    "transportOptions": "transport_options",
    "transport_options": "transport_options",
}

_REQUIRED_FIELDS = ("url", "consumer_key", "consumer_secret")
_REQUIRED_OPTION_NAMES = {"url": "url", "consumer_key": "consumerKey", "consumer_secret": "consumerSecret"}


@dataclass(frozen=True)
class WooCommerceConfig:
    """Configuration for the WooCommerce REST API client."""

    url: str
    consumer_key: str
    consumer_secret: str
    wp_api_prefix: str = DEFAULT_WP_API_PREFIX
    version: str = DEFAULT_API_VERSION
    verify_ssl: bool = True
    encoding: str = DEFAULT_ENCODING
    query_string_auth: bool = False
    port: str = ""
    timeout: Optional[float] = None
    transport_options: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        for name in _REQUIRED_FIELDS:
            if not getattr(self, name):
                raise ConfigurationError.missing_value(_REQUIRED_OPTION_NAMES[name], "required to build requests")

        for name in ("verify_ssl", "query_string_auth"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError.invalid_value(name, value, "Expected a boolean")
        if self.timeout is not None:
            if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout < 0:
                raise ConfigurationError.invalid_value("timeout", self.timeout, "Expected non-negative seconds")

        port = "" if self.port is None else str(self.port)
        object.__setattr__(self, "port", port)
        object.__setattr__(self, "transport_options", MappingProxyType(dict(self.transport_options or {})))

    @property
    def is_https(self) -> bool:
        """Whether requests travel over TLS."""
        return bool(_HTTPS_PATTERN.match(self.url))

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]]) -> "WooCommerceConfig":
        """Build a config from an option bag, applying defaults for absent keys.

        Explicit falsy values (``verifySsl=False``) are honored; only a missing
        key or ``None`` falls back to the default.
        """
        options = options or {}
        for name in _REQUIRED_FIELDS:
            option_name = _REQUIRED_OPTION_NAMES[name]
            if not (options.get(option_name) or options.get(name)):
                raise ConfigurationError.missing_value(option_name, "required to build requests")

        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            field_name = _OPTION_ALIASES.get(key)
            if field_name is None:
                logger.debug("Ignoring unknown WooCommerce option %r", key)
                continue
            if value is None:
                continue
            kwargs[field_name] = value
        return cls(**kwargs)


def load_config_from_env(prefix: str = DEFAULT_ENV_PREFIX) -> WooCommerceConfig:
    """Build a config from ``<prefix>*`` environment variables."""
    url = env_str(f"{prefix}URL", required=True)
    consumer_key = env_str(f"{prefix}CONSUMER_KEY", required=True)
    consumer_secret = env_str(f"{prefix}CONSUMER_SECRET", required=True, strip=False)

    return WooCommerceConfig(
        url=url,
        consumer_key=consumer_key,
        consumer_secret=consumer_secret,
        wp_api_prefix=env_str(f"{prefix}WP_API_PREFIX", or_value=DEFAULT_WP_API_PREFIX),
        version=env_str(f"{prefix}VERSION", or_value=DEFAULT_API_VERSION),
        verify_ssl=bool(env_bool(f"{prefix}VERIFY_SSL", or_value=True)),
        encoding=env_str(f"{prefix}ENCODING", or_value=DEFAULT_ENCODING),
        query_string_auth=bool(env_bool(f"{prefix}QUERY_STRING_AUTH", or_value=False)),
        port=env_str(f"{prefix}PORT", or_value=""),
        timeout=env_float(f"{prefix}TIMEOUT"),
    )


__all__ = ["WooCommerceConfig", "load_config_from_env"]
