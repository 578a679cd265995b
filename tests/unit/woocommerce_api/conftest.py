"""Shared fixtures for woocommerce_api tests."""

import pytest

from woocommerce_api.config import WooCommerceConfig


@pytest.fixture
def http_config():
    return WooCommerceConfig(url="http://example.com", consumer_key="ck_test", consumer_secret="cs_test")


@pytest.fixture
def https_config():
    return WooCommerceConfig(url="https://example.com", consumer_key="ck_test", consumer_secret="cs_test")


@pytest.fixture
def https_query_auth_config():
    return WooCommerceConfig(
        url="https://example.com",
        consumer_key="ck_test",
        consumer_secret="cs_test",
        query_string_auth=True,
    )
