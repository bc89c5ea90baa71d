"""Fetcher stage: downloads tree listings from the source server."""

from ..api.repository_client import SourceRepositoryClient
from .workers import Channel, Stage


class Fetcher(Stage[str]):
    """Fetches a listing URL and forwards the raw body to the decoder."""

    def __init__(self, client: SourceRepositoryClient, output: Channel[bytes]) -> None:
        self.client = client
        self.output = output

    def process(self, item: str) -> None:
        self.output.put(self.client.fetch_tree_node(item))


__all__ = ["Fetcher"]
