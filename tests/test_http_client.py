"""
Tests for the shared HTTP client.
"""

import pytest

from portfolio_analyzer import http_client
from portfolio_analyzer.config import set_timeout, set_verify_ssl


@pytest.fixture(autouse=True)
def fresh_client():
    http_client.close_http_client()
    set_timeout(None)
    set_verify_ssl(True)
    yield
    http_client.close_http_client()
    set_timeout(None)
    set_verify_ssl(True)


def test_client_is_reused():
    first = http_client._get_http_client()
    assert http_client._get_http_client() is first


def test_client_recreated_when_settings_change():
    first = http_client._get_http_client()
    set_timeout(3)
    second = http_client._get_http_client()

    assert second is not first
    assert first.is_closed
    assert second.timeout.read == 3


def test_client_recreated_after_close():
    first = http_client._get_http_client()
    http_client.close_http_client()

    assert first.is_closed
    assert http_client._get_http_client() is not first
