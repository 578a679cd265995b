"""Shared error types for WooCommerce API helpers."""

from typing import Any


class WooCommerceErrorBase(RuntimeError):
    """Base error that attaches provided keyword fields as attributes."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class WooCommerceClientError(WooCommerceErrorBase):
    """Raised when a request cannot be built."""
