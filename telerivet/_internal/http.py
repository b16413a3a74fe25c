"""Shared HTTP client configuration."""

import platform
import sys

import httpx

from telerivet._version import __version__

DEFAULT_API_URL = "https://api.telerivet.com/v1"
DEFAULT_CONNECT_TIMEOUT = 20.0
DEFAULT_READ_TIMEOUT = 35.0


def user_agent() -> str:
    """Return the User-Agent header sent with every request."""
    python_version = ".".join(str(part) for part in sys.version_info[:3])
    return (
        f"Telerivet Python Client/{__version__} "
        f"Python/{python_version} OS/{platform.system().lower()}"
    )


def create_http_client(
    api_key: str,
    *,
    base_url: str = DEFAULT_API_URL,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: float = DEFAULT_READ_TIMEOUT,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        api_key: Telerivet API key, sent as the basic auth username.
        base_url: Base URL for all requests.
        connect_timeout: Connect timeout in seconds.
        read_timeout: Read (and write/pool) timeout in seconds.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        base_url=base_url,
        auth=httpx.BasicAuth(api_key, ""),
        timeout=httpx.Timeout(read_timeout, connect=connect_timeout),
        headers={"User-Agent": user_agent()},
    )
