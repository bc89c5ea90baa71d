"""Decoder stage: parses listing bodies into tree nodes."""

from pydantic import ValidationError

from ..exceptions import DecodeError
from ..models.nexus_api import TreeNode, TreeNodeResponse
from .workers import Channel, Stage


def decode_tree_node(body: bytes) -> TreeNode:
    """
    Parse a tree listing body.

    Args:
        body: Raw response body of a listing request

    Returns:
        The node held in the ``data`` field

    Raises:
        DecodeError: If the body is not JSON or does not match the listing schema
    """
    try:
        return TreeNodeResponse.model_validate_json(body).data
    except ValidationError as e:
        raise DecodeError(
            f"Malformed tree listing ({e.error_count()} error(s)): {e.errors()[0]['msg']}",
            body.decode("utf-8", errors="replace"),
        ) from e


class Decoder(Stage[bytes]):
    """Decodes a listing body and forwards the node to the planner."""

    def __init__(self, output: Channel[TreeNode]) -> None:
        self.output = output

    def process(self, item: bytes) -> None:
        self.output.put(decode_tree_node(item))


__all__ = ["decode_tree_node", "Decoder"]
