"""
Repository clients for the source and target servers.

The source client lists tree nodes and opens streaming artifact downloads;
the target client uploads artifact streams. One client per server is shared
by every worker thread.
"""

# Standard library imports
import logging
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional, Tuple

# Third-party imports
import httpx

# Local imports
from ..exceptions import TransportError
from ..utils.constants import HTTP_STATUS_CREATED, HTTP_STATUS_OK, JSON_ACCEPT
from ..utils.session import DEFAULT_MAX_CONNECTIONS, create_session


def _read_error_body(response: httpx.Response) -> str:
    """Read the body of an unexpected response for the error message."""
    try:
        response.read()
        return response.text
    except httpx.HTTPError as e:
        return f"<failed to read response body: {e}>"


class RepositoryClient:
    """Base client holding the authenticated session for one server."""

    def __init__(self, auth: Tuple[str, str], max_connections: int = DEFAULT_MAX_CONNECTIONS) -> None:
        """Initialize the client with basic authentication credentials.

        Args:
            auth: (username, password) pair for this server
            max_connections: Connection pool size, at least the number of workers using the client
        """
        self.session = self._create_session(auth, max_connections)

    def _create_session(self, auth: Tuple[str, str], max_connections: int) -> httpx.Client:
        """Create an httpx client without a request deadline."""
        return create_session(auth=auth, max_connections=max_connections)

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    def __enter__(self) -> "RepositoryClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class SourceRepositoryClient(RepositoryClient):
    """Client for reading tree listings and artifacts from the source server."""

    def fetch_tree_node(self, url: str) -> bytes:
        """Fetch one tree listing.

        Args:
            url: Listing URL of the node

        Returns:
            Raw response body

        Raises:
            TransportError: If the request fails or the status is not 200
        """
        logging.info("Fetching tree listing %s", url)
        try:
            response = self.session.get(url, headers={"Accept": JSON_ACCEPT})
        except httpx.HTTPError as e:
            raise TransportError(url, None, str(e)) from e

        if response.status_code != HTTP_STATUS_OK:
            raise TransportError(url, response.status_code, response.text)

        return response.content

    @contextmanager
    def open_artifact(self, url: str) -> Iterator[httpx.Response]:
        """Open a streaming download of one artifact.

        The response is closed when the context exits, whether or not the
        body was consumed.

        Args:
            url: Download URL of the artifact

        Yields:
            Streaming response with status 200

        Raises:
            TransportError: If the request fails or the status is not 200
        """
        request = self.session.build_request("GET", url, headers={"Accept": JSON_ACCEPT})
        try:
            response = self.session.send(request, stream=True)
        except httpx.HTTPError as e:
            raise TransportError(url, None, str(e)) from e

        try:
            if response.status_code != HTTP_STATUS_OK:
                raise TransportError(url, response.status_code, _read_error_body(response))
            yield response
        finally:
            response.close()


class TargetRepositoryClient(RepositoryClient):
    """Client for uploading artifacts to the target server."""

    def upload_artifact(self, url: str, content: Iterable[bytes], content_type: str) -> httpx.Response:
        """Upload an artifact from a stream of chunks.

        The chunks are sent with chunked transfer encoding as they are
        produced; the artifact is never held in memory as a whole.

        Args:
            url: Upload URL of the artifact
            content: Iterable of body chunks
            content_type: Content-Type of the artifact

        Returns:
            The fully read 201 response

        Raises:
            TransportError: If the request fails or the status is not 201
        """
        logging.info("Streaming TO: %s", url)
        try:
            response = self.session.put(url, content=content, headers={"Content-Type": content_type})
        except httpx.HTTPError as e:
            raise TransportError(url, None, str(e)) from e

        if response.status_code != HTTP_STATUS_CREATED:
            raise TransportError(url, response.status_code, response.text)

        return response


def create_clients(
    source_auth: Tuple[str, str],
    target_auth: Tuple[str, str],
    max_connections: Optional[int] = None,
) -> Tuple[SourceRepositoryClient, TargetRepositoryClient]:
    """Create the source and target clients.

    Args:
        source_auth: Source server (username, password)
        target_auth: Target server (username, password)
        max_connections: Optional connection pool size for both clients

    Returns:
        Tuple of (source_client, target_client)
    """
    pool = max_connections or DEFAULT_MAX_CONNECTIONS
    return SourceRepositoryClient(source_auth, pool), TargetRepositoryClient(target_auth, pool)


__all__ = ["RepositoryClient", "SourceRepositoryClient", "TargetRepositoryClient", "create_clients"]
