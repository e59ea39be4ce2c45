"""Shared HTTP client handling."""

import httpx

from portfolio_analyzer.config import get_timeout, get_verify_ssl

_http_client: httpx.Client | None = None
_http_client_settings: tuple[bool, float] | None = None


def _get_http_client() -> httpx.Client:
    """Get or create a global HTTP client with connection pooling.

    Recreates the client if the SSL verification or timeout setting has changed.
    """
    global _http_client, _http_client_settings
    current_settings = (get_verify_ssl(), get_timeout())

    # Recreate client if settings changed or client is closed/None
    if (
        _http_client is None
        or _http_client.is_closed
        or _http_client_settings != current_settings
    ):
        # Close existing client if necessary
        if _http_client is not None and not _http_client.is_closed:
            _http_client.close()

        verify_ssl, timeout = current_settings
        _http_client = httpx.Client(
            verify=verify_ssl,
            timeout=timeout,
            follow_redirects=True,
            limits=httpx.Limits(
                max_connections=10,
                max_keepalive_connections=5,
                keepalive_expiry=30.0,
            ),
        )
        _http_client_settings = current_settings
    return _http_client


def close_http_client():
    """Close the global HTTP client. Call this when shutting down."""
    global _http_client, _http_client_settings
    if _http_client is not None and not _http_client.is_closed:
        _http_client.close()
        _http_client = None
        _http_client_settings = None
