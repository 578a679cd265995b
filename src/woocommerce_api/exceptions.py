"""API helpers exception classes."""

from typing import Any, Optional

from .client_helpers.errors import WooCommerceClientError


# URL exceptions
class UrlError(WooCommerceClientError):
    """Composed endpoint URL is not parseable."""

    def __init__(self, url: str, reason: str = "", cause: Optional[BaseException] = None) -> None:
        msg = f"Invalid request URL {url!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
        self.url = url
        self.__cause__ = cause


class InvalidPortError(UrlError):
    """Configured port cannot be spliced into the URL."""

    def __init__(self, url: str, port: Any, cause: Optional[BaseException] = None) -> None:
        super().__init__(url, f"port {port!r} is not a valid TCP port", cause)
        self.port = port


# Parameter exceptions
class InvalidParameterError(WooCommerceClientError):
    """Query parameter is nested deeper than one level."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Query parameter {key!r} is nested more than one level deep")
        self.key = key


# Signing exceptions
class SignatureInvariantError(WooCommerceClientError):
    """OAuth signing was attempted without key material."""

    def __init__(self) -> None:
        super().__init__("OAuth signing requires a non-empty consumer key and secret")


__all__ = [
    "UrlError",
    "InvalidPortError",
    "InvalidParameterError",
    "SignatureInvariantError",
]
