"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _debug_logging(caplog):
    """Capture woocommerce_api debug logs."""
    caplog.set_level(logging.DEBUG, logger="woocommerce_api")
    yield
