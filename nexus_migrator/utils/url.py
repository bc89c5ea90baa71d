"""
URL utilities for repository server access.

Base URLs from the configuration file are joined to node paths by plain
concatenation, so a base URL normally ends with ``/``.
"""

from ..models.config import EndpointConfig


def join_url(base_url: str, path: str) -> str:
    """
    Append a root-relative path to a base URL.

    Args:
        base_url: Base URL from the configuration file
        path: Path without a leading separator

    Returns:
        The concatenated URL

    Example:
        >>> join_url("https://nexus.example.com/content/", "org/lib/1.0/lib-1.0.jar")
        'https://nexus.example.com/content/org/lib/1.0/lib-1.0.jar'
    """
    return f"{base_url}{path}"


def listing_url(config: EndpointConfig, group_path: str) -> str:
    """Tree listing URL for a group on the source server."""
    return join_url(config.source_url, group_path)


def download_url(config: EndpointConfig, artifact_path: str) -> str:
    """Download URL for an artifact on the source server."""
    return join_url(config.source_download_url, artifact_path)


def upload_url(config: EndpointConfig, artifact_path: str) -> str:
    """Upload URL for an artifact on the target server."""
    return join_url(config.target_url, artifact_path)


__all__ = ["join_url", "listing_url", "download_url", "upload_url"]
