"""HTTP session management for the WooCommerce API client."""

from __future__ import annotations

import asyncio
from typing import Optional

import aiohttp


class SessionManager:
    """Manages HTTP session lifecycle for the WooCommerce API."""

    def __init__(self) -> None:
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Ensure the HTTP session is ready."""
        async with self._session_lock:
            if self._session is not None and not self._session.closed:
                return
            self._session = aiohttp.ClientSession()

    async def close(self) -> None:
        """Close the HTTP session if one exists."""
        async with self._session_lock:
            if self._session is not None:
                await self._session.close()
                self._session = None

    def get_session(self) -> aiohttp.ClientSession:
        """Get the current session, raising if not initialized."""
        if self._session is None:
            raise RuntimeError("HTTP session not initialized")
        return self._session

    @property
    def session(self) -> Optional[aiohttp.ClientSession]:
        """Access the current session without raising if absent."""
        return self._session

    def set_session(self, value: Optional[aiohttp.ClientSession]) -> None:
        """Override the managed session (callers may share their own)."""
        self._session = value
