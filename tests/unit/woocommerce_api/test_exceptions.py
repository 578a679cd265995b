"""Tests for woocommerce_api exceptions."""

from woocommerce_api.client_helpers.errors import WooCommerceClientError
from woocommerce_api.exceptions import InvalidParameterError, InvalidPortError, SignatureInvariantError, UrlError


def test_url_error_message_and_cause():
    cause = ValueError("bad")
    err = UrlError("http://x", "cannot be parsed", cause)
    assert str(err) == "Invalid request URL 'http://x': cannot be parsed"
    assert err.url == "http://x"
    assert err.__cause__ is cause
    assert isinstance(err, WooCommerceClientError)


def test_invalid_port_error():
    err = InvalidPortError("http://x:abc", "abc")
    assert isinstance(err, UrlError)
    assert err.port == "abc"
    assert "'abc' is not a valid TCP port" in str(err)


def test_invalid_parameter_error():
    err = InvalidParameterError("filter[date]")
    assert err.key == "filter[date]"
    assert "more than one level" in str(err)


def test_signature_invariant_error():
    assert "non-empty consumer key and secret" in str(SignatureInvariantError())
