"""
Session utilities for repository server access.

This module provides utilities for creating and configuring HTTP clients
shared by every worker that talks to one server.
"""

from typing import Optional, Tuple
import logging
import httpx
from httpx import HTTPTransport

# ============================================================================
# HTTP Configuration Constants
# ============================================================================

# Connection retries at the transport level; failed requests are never retried
MAX_RETRIES = 0

# Default connection pool size
DEFAULT_MAX_CONNECTIONS = 100


def create_session(
    auth: Optional[Tuple[str, str]] = None,
    timeout: Optional[float] = None,
    max_connections: int = DEFAULT_MAX_CONNECTIONS,
) -> httpx.Client:
    """
    Create an httpx client with basic authentication and connection pooling.

    Args:
        auth: Optional (username, password) pair for HTTP basic authentication
        timeout: Timeout in seconds, or None for no deadline (default: None)
        max_connections: Maximum number of connections in the pool (default: 100)

    Returns:
        Configured httpx.Client object with:
        - HTTP basic authentication on every request
        - HTTP/2 support when the h2 package is installed
        - Connection pooling sized for the worker pools using it
        - No request deadline unless one is given

    Example:
        >>> client = create_session(auth=("admin", "secret"))
        >>> response = client.get("https://nexus.example.com/service/local/status")
    """
    limits = httpx.Limits(
        max_connections=max_connections,
        max_keepalive_connections=max(20, max_connections // 5),
    )

    # Try to enable HTTP/2 if available, but don't fail if not
    try:
        import importlib.util  # pylint: disable=import-outside-toplevel

        use_http2 = importlib.util.find_spec("h2") is not None
    except (ImportError, AttributeError):
        use_http2 = False

    if not use_http2:
        logging.debug("HTTP/2 support not available (h2 package not installed)")

    transport = HTTPTransport(limits=limits, retries=MAX_RETRIES, http2=use_http2)

    return httpx.Client(
        transport=transport,
        auth=httpx.BasicAuth(*auth) if auth else None,
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
    )


__all__ = ["create_session", "MAX_RETRIES", "DEFAULT_MAX_CONNECTIONS"]
