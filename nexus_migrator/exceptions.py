"""
Exception hierarchy for the migration pipeline.

Every per-message failure raised inside a pipeline stage is one of these
types. Workers forward them to the failure sink instead of letting them
escape the thread.
"""

from typing import Optional

# Maximum number of body characters carried into an error message
BODY_PREVIEW_LENGTH = 500


def _preview(body: str) -> str:
    """Trim a response body for inclusion in an error message."""
    if len(body) > BODY_PREVIEW_LENGTH:
        return body[:BODY_PREVIEW_LENGTH] + "..."
    return body


class MigratorError(RuntimeError):
    """Base exception for migration failures."""


class TransportError(MigratorError):
    """
    Raised when an HTTP exchange with the source or target server fails.

    Covers unexpected status codes on listing fetches, artifact downloads and
    artifact uploads, as well as connection-level failures (``status_code``
    is ``None`` in that case).
    """

    def __init__(self, url: str, status_code: Optional[int] = None, body: str = "") -> None:
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(f"URL:[{url}], StatusCode:[{status_code}], [{_preview(body)}]")


class DecodeError(MigratorError):
    """Raised when a tree listing body is not a valid tree node document."""

    def __init__(self, message: str, body: str = "") -> None:
        self.body = body
        super().__init__(f"{message} (body: {_preview(body)!r})" if body else message)


class ConfigError(MigratorError):
    """Raised when the configuration or credentials file is missing or malformed."""


__all__ = [
    "BODY_PREVIEW_LENGTH",
    "MigratorError",
    "TransportError",
    "DecodeError",
    "ConfigError",
]
