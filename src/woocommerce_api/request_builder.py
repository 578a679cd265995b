"""Request assembly for the WooCommerce API."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

import aiohttp

from .request_descriptor import DESCRIPTOR_FIELDS, RequestDescriptor

if TYPE_CHECKING:
    from .authentication import AuthenticationHelper
    from .config import WooCommerceConfig
    from .url_builder import UrlBuilder

logger = logging.getLogger(__name__)

CLIENT_VERSION = "0.1.0"
USER_AGENT = f"WooCommerce REST API - Python Client/{CLIENT_VERSION}"
JSON_CONTENT_TYPE = "application/json;charset=utf-8"


class RequestBuilder:
    """Builds authenticated request descriptors - slim coordinator."""

    def __init__(
        self,
        config: WooCommerceConfig,
        url_builder: UrlBuilder,
        auth_helper: AuthenticationHelper,
    ) -> None:
        self._config = config
        self._url_builder = url_builder
        self._auth_helper = auth_helper

    def build(
        self,
        method: str,
        endpoint: str,
        data: Optional[Any] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> RequestDescriptor:
        """Build a descriptor; transport options override every computed field."""
        method_upper = method.upper()
        url = self._url_builder.build(endpoint, params)
        auth_material = self._auth_helper.resolve(method_upper, url, params)

        headers: Dict[str, str] = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }
        body: Optional[bytes] = None
        if data is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE
            body = json.dumps(data).encode("utf-8")

        timeout = None
        if self._config.timeout is not None:
            timeout = aiohttp.ClientTimeout(total=self._config.timeout)

        descriptor = RequestDescriptor(
            method=method_upper,
            url=url,
            headers=headers,
            params=auth_material.params,
            data=body,
            auth=auth_material.auth,
            ssl=auth_material.ssl,
            timeout=timeout,
            encoding=self._config.encoding,
        )
        return self.apply_transport_options(descriptor, self._config.transport_options)

    @staticmethod
    def apply_transport_options(descriptor: RequestDescriptor, options: Mapping[str, Any]) -> RequestDescriptor:
        """Overlay caller transport options on a descriptor."""
        if not options:
            return descriptor
        overrides = {key: value for key, value in options.items() if key in DESCRIPTOR_FIELDS}
        extra = {key: value for key, value in options.items() if key not in DESCRIPTOR_FIELDS}
        if overrides:
            logger.debug("Transport options override %s", sorted(overrides))
        return dataclasses.replace(descriptor, extra={**descriptor.extra, **extra}, **overrides)


__all__ = ["CLIENT_VERSION", "JSON_CONTENT_TYPE", "RequestBuilder", "USER_AGENT"]
