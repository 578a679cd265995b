"""Transport-agnostic description of one authenticated request."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import aiohttp
from yarl import URL

from .query_canonicalizer import normalize_query_string

DESCRIPTOR_FIELDS = ("method", "url", "headers", "params", "data", "auth", "ssl", "timeout")


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything needed to dispatch a request through aiohttp."""

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict, hash=False)
    params: Mapping[str, str] = field(default_factory=dict, hash=False)
    data: Optional[bytes] = None
    auth: Optional[aiohttp.BasicAuth] = None
    ssl: Optional[bool] = None
    timeout: Optional[aiohttp.ClientTimeout] = None
    encoding: str = "utf-8"
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        for name in ("headers", "params", "extra"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name) or {})))

    @property
    def full_url(self) -> str:
        """URL with ``params`` folded into a canonical, sorted query."""
        return normalize_query_string(self.url, self.params)

    def to_request_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``aiohttp.ClientSession.request``.

        The canonical URL is sent as already-encoded so its bytes reach the
        server exactly as signed.
        """
        kwargs: Dict[str, Any] = {
            "method": self.method,
            "url": URL(self.full_url, encoded=True),
            "headers": dict(self.headers),
        }
        if self.data is not None:
            kwargs["data"] = self.data
        if self.auth is not None:
            kwargs["auth"] = self.auth
        if self.ssl is not None:
            kwargs["ssl"] = self.ssl
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        kwargs.update(self.extra)
        return kwargs


__all__ = ["DESCRIPTOR_FIELDS", "RequestDescriptor"]
