"""OAuth 1.0a request signing for plain-HTTP stores."""

from __future__ import annotations

import base64
import secrets
import time
from dataclasses import dataclass
from typing import Dict, Optional

from cryptography.hazmat.primitives import hashes, hmac

from .exceptions import SignatureInvariantError
from .query_canonicalizer import canonical_parameter_string, parse_query, percent_encode, split_url

SIGNATURE_METHOD = "HMAC-SHA256"
OAUTH_VERSION = "1.0"


@dataclass(frozen=True)
class SignatureMaterial:
    """Per-request signing inputs."""

    consumer_key: str
    consumer_secret: str
    nonce: str
    timestamp: str
    signature_method: str = SIGNATURE_METHOD


class OAuthSigner:
    """Produce ``oauth_*`` query parameters signed with HMAC-SHA256."""

    def __init__(self, consumer_key: str, consumer_secret: str) -> None:
        """
        Initialize the signer.

        Args:
            consumer_key: WooCommerce consumer key
            consumer_secret: WooCommerce consumer secret
        """
        self._consumer_key = consumer_key
        self._consumer_secret = consumer_secret

    def material(self, *, nonce: Optional[str] = None, timestamp: Optional[int] = None) -> SignatureMaterial:
        """Fresh nonce and timestamp unless explicitly supplied."""
        if not self._consumer_key or not self._consumer_secret:
            raise SignatureInvariantError()
        return SignatureMaterial(
            consumer_key=self._consumer_key,
            consumer_secret=self._consumer_secret,
            nonce=nonce if nonce is not None else secrets.token_urlsafe(24),
            timestamp=str(timestamp if timestamp is not None else int(time.time())),
        )

    def authorize(
        self,
        method: str,
        url: str,
        *,
        nonce: Optional[str] = None,
        timestamp: Optional[int] = None,
    ) -> Dict[str, str]:
        """
        Sign a request and return the OAuth parameters to attach.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Request URL, possibly carrying a query string
            nonce: Override for the random nonce
            timestamp: Override for the epoch-seconds timestamp

        Returns:
            ``oauth_*`` parameters including ``oauth_signature``

        Raises:
            SignatureInvariantError: If key material is empty
        """
        material = self.material(nonce=nonce, timestamp=timestamp)
        oauth_params = {
            "oauth_consumer_key": material.consumer_key,
            "oauth_nonce": material.nonce,
            "oauth_signature_method": material.signature_method,
            "oauth_timestamp": material.timestamp,
            "oauth_version": OAUTH_VERSION,
        }
        base_string = self.signature_base_string(method, url, oauth_params)
        oauth_params["oauth_signature"] = self.sign(base_string, material.consumer_secret)
        return oauth_params

    @staticmethod
    def signature_base_string(method: str, url: str, oauth_params: Dict[str, str]) -> str:
        """``METHOD&enc(url)&enc(sorted params)`` over URL query and OAuth params."""
        base_url, query = split_url(url)
        pairs = parse_query(query) + list(oauth_params.items())
        return "&".join(
            (
                method.upper(),
                percent_encode(base_url),
                percent_encode(canonical_parameter_string(pairs)),
            )
        )

    @staticmethod
    def sign(base_string: str, consumer_secret: str) -> str:
        """Base64 HMAC-SHA256 of ``base_string`` keyed by ``enc(secret)&``."""
        if not consumer_secret:
            raise SignatureInvariantError()
        key = f"{percent_encode(consumer_secret)}&".encode("utf-8")
        mac = hmac.HMAC(key, hashes.SHA256())
        mac.update(base_string.encode("utf-8"))
        return base64.b64encode(mac.finalize()).decode("utf-8")


__all__ = ["OAUTH_VERSION", "OAuthSigner", "SIGNATURE_METHOD", "SignatureMaterial"]
