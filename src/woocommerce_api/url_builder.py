"""Endpoint URL composition."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional
from urllib.parse import SplitResult, quote, urlsplit, urlunsplit

from .exceptions import InvalidPortError, UrlError
from .query_canonicalizer import normalize_query_string

if TYPE_CHECKING:
    from .config import WooCommerceConfig

logger = logging.getLogger(__name__)

# Sub-delimiters and ":@" are legal in a path segment; "%" keeps existing escapes.
_PATH_SAFE = "/%:@!$&'()*+,;="


def _split(url: str) -> SplitResult:
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise UrlError(url, "cannot be parsed", exc) from exc
    if not parts.scheme or not parts.hostname:
        raise UrlError(url, "missing scheme or host")
    return parts


class UrlBuilder:
    """Compose ``<url>/<prefix>/<version>/<endpoint>`` for a configured store."""

    def __init__(self, config: WooCommerceConfig) -> None:
        self._config = config

    def endpoint_url(self, endpoint: str) -> str:
        """Fully-qualified endpoint URL with the configured port spliced in.

        The path after the base URL is percent-encoded with existing escapes
        kept. A query string on ``endpoint`` is left to the canonicalizer.
        """
        base = self._config.url if self._config.url.endswith("/") else f"{self._config.url}/"
        endpoint_path, separator, endpoint_query = endpoint.partition("?")
        path = quote(f"{self._config.wp_api_prefix}/{self._config.version}/{endpoint_path}", safe=_PATH_SAFE)
        url = f"{base}{path}{separator}{endpoint_query}"
        parts = _split(url)
        if self._config.port:
            url = self._inject_port(url, parts, self._config.port)
        return url

    def build(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Endpoint URL; plain HTTP folds ``params`` into a canonical query."""
        url = self.endpoint_url(endpoint)
        if not self._config.is_https:
            return normalize_query_string(url, params)
        return url

    @staticmethod
    def _inject_port(url: str, parts: SplitResult, port: str) -> str:
        userinfo, _, _ = parts.netloc.rpartition("@")
        userinfo = f"{userinfo}@" if userinfo else ""
        host = parts.hostname if ":" not in parts.hostname else f"[{parts.hostname}]"
        spliced = urlunsplit((parts.scheme, f"{userinfo}{host}:{port}", parts.path, parts.query, parts.fragment))

        try:
            parsed_port = urlsplit(spliced).port
        except ValueError as exc:
            raise InvalidPortError(url, port, exc) from exc
        if parsed_port is None:
            raise InvalidPortError(url, port)
        logger.debug("Injected port %s into %s", parsed_port, parts.hostname)
        return spliced


__all__ = ["UrlBuilder"]
