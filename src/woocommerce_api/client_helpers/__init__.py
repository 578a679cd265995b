"""Helper modules for the WooCommerce API client."""

from __future__ import annotations

from .errors import WooCommerceClientError, WooCommerceErrorBase

__all__ = [
    "WooCommerceClientError",
    "WooCommerceErrorBase",
]
