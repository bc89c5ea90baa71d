"""
Transferer stage: streams artifacts from the source server to the target.

The download response body is handed to the upload request as an iterator
of chunks, so only one chunk of an artifact is held in memory at a time.
"""

import logging
from typing import Iterator

import httpx

from ..api.repository_client import SourceRepositoryClient, TargetRepositoryClient
from ..exceptions import TransportError
from ..models.transfer import TransferJob
from ..utils.constants import STREAM_CHUNK_SIZE
from .workers import Stage


class SourceStream:
    """
    Chunk iterator over a streaming download.

    Read failures surface as TransportError for the download URL rather than
    as errors of the upload that is consuming the chunks.
    """

    def __init__(self, response: httpx.Response, url: str, chunk_size: int = STREAM_CHUNK_SIZE) -> None:
        self.url = url
        self.bytes_read = 0
        self._chunks = response.iter_bytes(chunk_size=chunk_size)

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        try:
            chunk = next(self._chunks)
        except httpx.HTTPError as e:
            raise TransportError(self.url, None, str(e)) from e
        self.bytes_read += len(chunk)
        return chunk

    def drain(self) -> None:
        """Read and discard whatever the upload left unread."""
        for _ in self:
            pass


class Transferer(Stage[TransferJob]):
    """Moves one artifact per transfer job."""

    def __init__(self, source: SourceRepositoryClient, target: TargetRepositoryClient) -> None:
        self.source = source
        self.target = target

    def process(self, item: TransferJob) -> None:
        logging.info("Streaming %s -> %s", item.source_url, item.target_url)
        with self.source.open_artifact(item.source_url) as response:
            stream = SourceStream(response, item.source_url)
            try:
                self.target.upload_artifact(item.target_url, stream, item.content_type)
            finally:
                stream.drain()
        logging.debug("Transferred %d bytes to %s", stream.bytes_read, item.target_url)


__all__ = ["SourceStream", "Transferer"]
