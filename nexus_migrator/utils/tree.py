"""
Tree classification and path derivation utilities.

These functions walk a single, already-fetched tree node in memory. The
recursion depth is bounded by the depth of one listing response; descending
into groups that were not part of the response happens by queueing new
listing requests, never by recursing here.
"""

from typing import List

from ..models.config import EndpointConfig
from ..models.nexus_api import TreeNode
from ..models.transfer import TransferJob
from .constants import (
    ARCHIVE_CONTENT_TYPE,
    ARTIFACT_TOKEN,
    DESCRIPTOR_CONTENT_TYPE,
    DESCRIPTOR_SUFFIX,
    DESCRIPTOR_TOKEN,
)
from .url import download_url, upload_url


def has_artifacts(node: TreeNode) -> bool:
    """
    Check whether a node bears leaf artifacts.

    Only the first child at each level is probed: if it is a leaf the whole
    node counts as artifact-bearing, otherwise the probe descends into that
    first child. Siblings are assumed to be homogeneous and are not inspected.

    Args:
        node: Tree node to inspect

    Returns:
        True if the first-child chain reaches a leaf, False otherwise
        (including for a node without children)

    Example:
        >>> has_artifacts(TreeNode(children=[TreeNode(leaf=True)]))
        True
        >>> has_artifacts(TreeNode(children=[]))
        False
    """
    if not node.children:
        return False

    first = node.children[0]
    if first.is_leaf:
        return True
    return has_artifacts(first)


def derive_companion_path(artifact_path: str) -> str:
    """
    Derive the descriptor file path from an artifact path.

    Replaces the first occurrence of the artifact token with the descriptor
    token; paths that contain the token more than once are rewritten at the
    first match only.

    Example:
        >>> derive_companion_path("org/lib/1.0/lib-1.0.jar")
        'org/lib/1.0/lib-1.0.pom'
    """
    return artifact_path.replace(ARTIFACT_TOKEN, DESCRIPTOR_TOKEN, 1)


def get_artifacts(node: TreeNode) -> List[str]:
    """
    Collect the paths of every artifact beneath a node.

    All descendants are walked. Each leaf contributes its path without the
    leading separator, followed by its descriptor path when the leaf has
    companion metadata.

    Args:
        node: Tree node to walk

    Returns:
        Artifact paths in tree order
    """
    artifacts: List[str] = []
    for child in node.children:
        if child.is_leaf:
            artifact_path = child.artifact_path
            artifacts.append(artifact_path)
            if child.has_companion_metadata:
                artifacts.append(derive_companion_path(artifact_path))
        else:
            artifacts.extend(get_artifacts(child))
    return artifacts


def get_groups(node: TreeNode) -> List[str]:
    """
    Collect the paths of the direct children that are groups.

    Args:
        node: Tree node to inspect

    Returns:
        Group paths without the leading separator
    """
    return [child.artifact_path for child in node.children if child.is_group]


def content_type_for(path: str) -> str:
    """
    Choose the upload Content-Type for an artifact path.

    Example:
        >>> content_type_for("org/lib/1.0/lib-1.0.pom")
        'application/xml'
        >>> content_type_for("org/lib/1.0/lib-1.0.jar")
        'application/java-archive'
    """
    if path.endswith(DESCRIPTOR_SUFFIX):
        return DESCRIPTOR_CONTENT_TYPE
    return ARCHIVE_CONTENT_TYPE


def build_transfer_job(artifact_path: str, config: EndpointConfig) -> TransferJob:
    """
    Build the transfer job for one artifact path.

    Args:
        artifact_path: Artifact path without the leading separator
        config: Endpoint configuration holding the download and upload base URLs

    Returns:
        TransferJob moving the artifact from the source to the target server
    """
    return TransferJob(
        source_url=download_url(config, artifact_path),
        target_url=upload_url(config, artifact_path),
        content_type=content_type_for(artifact_path),
    )


__all__ = [
    "has_artifacts",
    "derive_companion_path",
    "get_artifacts",
    "get_groups",
    "content_type_for",
    "build_transfer_job",
]
