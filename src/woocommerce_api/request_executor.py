"""Request dispatch for the WooCommerce API."""

import asyncio
import logging
from typing import Any, Dict

import aiohttp

from .request_descriptor import RequestDescriptor
from .session_manager import SessionManager

logger = logging.getLogger(__name__)


class RequestExecutor:
    """Send a descriptor through the shared session. No retries at this layer."""

    def __init__(self, session_manager: SessionManager) -> None:
        self._session_manager = session_manager

    async def execute(self, descriptor: RequestDescriptor) -> aiohttp.ClientResponse:
        """Dispatch ``descriptor`` and return the transport response unchanged.

        The body is read before the connection is released so callers can use
        ``response.json()`` / ``response.text()`` afterwards. Transport errors,
        including non-2xx statuses, propagate as aiohttp raises them.
        """
        await self._session_manager.initialize()
        session = self._session_manager.get_session()
        request_kwargs = self._request_kwargs(descriptor)
        try:
            async with session.request(**request_kwargs) as response:
                await response.read()
                logger.debug("WooCommerce %s %s -> %s", descriptor.method, descriptor.url, response.status)
                return response
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.debug("WooCommerce %s %s failed: %s", descriptor.method, descriptor.url, exc)
            raise

    @staticmethod
    def _request_kwargs(descriptor: RequestDescriptor) -> Dict[str, Any]:
        kwargs = descriptor.to_request_kwargs()
        kwargs.setdefault("raise_for_status", True)
        return kwargs
