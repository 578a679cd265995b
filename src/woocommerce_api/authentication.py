"""Authentication strategy selection for WooCommerce requests."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

import aiohttp

from .oauth_signer import OAuthSigner
from .query_canonicalizer import ParameterSet

if TYPE_CHECKING:
    from .config import WooCommerceConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthMaterial:
    """Query parameters and transport settings that authenticate one request."""

    params: Dict[str, str] = field(default_factory=dict)
    auth: Optional[aiohttp.BasicAuth] = None
    ssl: Optional[bool] = None


class AuthenticationHelper:
    """Pick OAuth1, query-string or Basic credentials per request.

    Plain HTTP always signs with OAuth1; the secret never travels unencrypted.
    HTTPS sends the credentials as ``consumer_key``/``consumer_secret`` query
    parameters when ``query_string_auth`` is set, HTTP Basic auth otherwise.
    """

    def __init__(self, config: WooCommerceConfig) -> None:
        self._config = config
        self._signer = OAuthSigner(config.consumer_key, config.consumer_secret)

    def resolve(self, method: str, url: str, params: Optional[Mapping[str, Any]] = None) -> AuthMaterial:
        """
        Compute auth material for a request.

        Args:
            method: HTTP method
            url: Request URL as produced by UrlBuilder.build
            params: Caller query parameters

        Returns:
            AuthMaterial for the request
        """
        if not self._config.is_https:
            logger.debug("Signing %s %s with OAuth1", method, url)
            return AuthMaterial(params=self._signer.authorize(method, url))

        ssl = None if self._config.verify_ssl else False
        caller_params = ParameterSet.from_mapping(params).as_dict()

        if self._config.query_string_auth:
            logger.debug("Using query string credentials for %s %s", method, url)
            merged = {
                "consumer_key": self._config.consumer_key,
                "consumer_secret": self._config.consumer_secret,
            }
            merged.update(caller_params)
            return AuthMaterial(params=merged, ssl=ssl)

        logger.debug("Using HTTP Basic credentials for %s %s", method, url)
        return AuthMaterial(
            params=caller_params,
            auth=aiohttp.BasicAuth(self._config.consumer_key, self._config.consumer_secret),
            ssl=ssl,
        )


__all__ = ["AuthMaterial", "AuthenticationHelper"]
