"""Tests for woocommerce_api config runtime helpers."""

import pytest

from woocommerce_api.config.errors import ConfigurationError
from woocommerce_api.config.runtime import env_bool, env_float, env_str


def test_env_str_returns_value(monkeypatch):
    monkeypatch.setenv("WC_TEST_VALUE", "  hello  ")
    assert env_str("WC_TEST_VALUE") == "hello"


def test_env_str_falls_back_when_blank(monkeypatch):
    monkeypatch.setenv("WC_TEST_VALUE", "   ")
    assert env_str("WC_TEST_VALUE", or_value="fallback") == "fallback"


def test_env_str_required_missing(monkeypatch):
    monkeypatch.delenv("WC_TEST_VALUE", raising=False)
    with pytest.raises(ConfigurationError) as exc_info:
        env_str("WC_TEST_VALUE", required=True)
    assert "WC_TEST_VALUE" in str(exc_info.value)


@pytest.mark.parametrize("raw,expected", [("1", True), ("Yes", True), ("off", False), ("FALSE", False)])
def test_env_bool_parses(monkeypatch, raw, expected):
    monkeypatch.setenv("WC_TEST_FLAG", raw)
    assert env_bool("WC_TEST_FLAG") is expected


def test_env_bool_rejects_garbage(monkeypatch):
    monkeypatch.setenv("WC_TEST_FLAG", "maybe")
    with pytest.raises(ConfigurationError):
        env_bool("WC_TEST_FLAG")


def test_env_bool_default(monkeypatch):
    monkeypatch.delenv("WC_TEST_FLAG", raising=False)
    assert env_bool("WC_TEST_FLAG", or_value=True) is True


def test_env_float_parses(monkeypatch):
    monkeypatch.setenv("WC_TEST_TIMEOUT", "2.5")
    assert env_float("WC_TEST_TIMEOUT") == 2.5


def test_env_float_rejects_garbage(monkeypatch):
    monkeypatch.setenv("WC_TEST_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError) as exc_info:
        env_float("WC_TEST_TIMEOUT")
    assert "must be a float" in str(exc_info.value)
