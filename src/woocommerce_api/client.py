"""Fail-fast WooCommerce REST client - slim coordinator."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

import aiohttp

from .authentication import AuthenticationHelper
from .config import WooCommerceConfig
from .request_builder import RequestBuilder
from .request_descriptor import RequestDescriptor
from .request_executor import RequestExecutor
from .session_manager import SessionManager
from .url_builder import UrlBuilder

__all__ = ["WooCommerceAPI"]

logger = logging.getLogger(__name__)


class WooCommerceAPI:
    """Authenticated client for the WooCommerce REST API.

    Accepts either a ready ``WooCommerceConfig`` or the option bag understood
    by ``WooCommerceConfig.from_options``. Verb methods return the
    ``aiohttp.ClientResponse`` with its body already read.
    """

    def __init__(
        self,
        options: Union[WooCommerceConfig, Mapping[str, Any], None] = None,
        *,
        session_manager: Optional[SessionManager] = None,
    ) -> None:
        if isinstance(options, WooCommerceConfig):
            self._config = options
        else:
            self._config = WooCommerceConfig.from_options(options)

        self._url_builder = UrlBuilder(self._config)
        self._auth_helper = AuthenticationHelper(self._config)
        self._request_builder = RequestBuilder(self._config, self._url_builder, self._auth_helper)
        self._session_manager = session_manager if session_manager is not None else SessionManager()
        self._executor = RequestExecutor(self._session_manager)

    @property
    def config(self) -> WooCommerceConfig:
        """Configuration this client was built with."""
        return self._config

    async def initialize(self) -> None:
        """Initialize the client's HTTP session."""
        await self._session_manager.initialize()

    async def close(self) -> None:
        """Close the client's HTTP session."""
        await self._session_manager.close()

    async def __aenter__(self) -> "WooCommerceAPI":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def build_request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Any] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> RequestDescriptor:
        """Build the authenticated request without sending it."""
        return self._request_builder.build(method, endpoint, data, params)

    async def api_request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Any] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> aiohttp.ClientResponse:
        """Execute a raw API request."""
        descriptor = self.build_request(method, endpoint, data, params)
        return await self._executor.execute(descriptor)

    async def get(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> aiohttp.ClientResponse:
        """GET ``endpoint`` with optional query parameters."""
        return await self.api_request("GET", endpoint, None, params)

    async def post(
        self, endpoint: str, data: Any, params: Optional[Mapping[str, Any]] = None
    ) -> aiohttp.ClientResponse:
        """POST a JSON body to ``endpoint``."""
        return await self.api_request("POST", endpoint, data, params)

    async def put(
        self, endpoint: str, data: Any, params: Optional[Mapping[str, Any]] = None
    ) -> aiohttp.ClientResponse:
        """PUT a JSON body to ``endpoint``."""
        return await self.api_request("PUT", endpoint, data, params)

    async def delete(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> aiohttp.ClientResponse:
        """DELETE ``endpoint``."""
        return await self.api_request("DELETE", endpoint, None, params)

    async def options(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> aiohttp.ClientResponse:
        """OPTIONS request against ``endpoint``."""
        return await self.api_request("OPTIONS", endpoint, None, params)

    async def read_json(self, response: aiohttp.ClientResponse) -> Any:
        """Decode a response body as JSON using the configured encoding."""
        return await response.json(encoding=self._config.encoding, content_type=None)
