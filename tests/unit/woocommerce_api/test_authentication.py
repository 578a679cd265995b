"""Tests for woocommerce_api authentication."""

from unittest.mock import patch

import aiohttp

from woocommerce_api.authentication import AuthenticationHelper, AuthMaterial
from woocommerce_api.config import WooCommerceConfig

HTTPS_URL = "https://example.com/wp-json/v3/products"
HTTP_URL = "http://example.com/wp-json/v3/products?per_page=5"


def test_https_basic_auth(https_config):
    material = AuthenticationHelper(https_config).resolve("GET", HTTPS_URL, {"per_page": 5})

    assert material.auth == aiohttp.BasicAuth("ck_test", "cs_test")
    assert material.params == {"per_page": "5"}
    assert "consumer_key" not in material.params
    assert material.ssl is None


def test_https_query_string_auth(https_query_auth_config):
    material = AuthenticationHelper(https_query_auth_config).resolve("GET", HTTPS_URL, {"per_page": 5})

    assert material.auth is None
    assert material.params == {"consumer_key": "ck_test", "consumer_secret": "cs_test", "per_page": "5"}


def test_https_query_string_auth_caller_params_win(https_query_auth_config):
    material = AuthenticationHelper(https_query_auth_config).resolve("GET", HTTPS_URL, {"consumer_key": "other"})
    assert material.params["consumer_key"] == "other"


def test_https_flattens_nested_params(https_config):
    material = AuthenticationHelper(https_config).resolve("GET", HTTPS_URL, {"filter": {"date": "2020"}})
    assert material.params == {"filter[date]": "2020"}


def test_https_flattens_list_params(https_config):
    material = AuthenticationHelper(https_config).resolve("GET", HTTPS_URL, {"include": [1, 2]})
    assert material.params == {"include[0]": "1", "include[1]": "2"}


def test_https_skip_verification():
    config = WooCommerceConfig(url="https://example.com", consumer_key="ck", consumer_secret="cs", verify_ssl=False)
    material = AuthenticationHelper(config).resolve("GET", HTTPS_URL)
    assert material.ssl is False


def test_http_uses_oauth_signer(http_config):
    helper = AuthenticationHelper(http_config)
    with patch.object(helper._signer, "authorize", return_value={"oauth_signature": "sig"}) as mock_authorize:
        material = helper.resolve("GET", HTTP_URL, {"per_page": 5})

    mock_authorize.assert_called_once_with("GET", HTTP_URL)
    assert material == AuthMaterial(params={"oauth_signature": "sig"})


def test_http_ignores_query_string_auth_and_verify_ssl():
    config = WooCommerceConfig(
        url="http://example.com",
        consumer_key="ck",
        consumer_secret="cs",
        query_string_auth=True,
        verify_ssl=False,
    )
    material = AuthenticationHelper(config).resolve("GET", HTTP_URL)

    assert material.auth is None
    assert material.ssl is None
    assert "consumer_secret" not in material.params
    assert "oauth_signature" in material.params
