"""
Pydantic models for the repository manager's tree-browsing API.

A listing request returns ``{"data": <node>}`` where every node carries its
children inline. Field names on the wire are camelCase; the models expose
snake_case attributes and accept either form.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..utils.constants import GROUP_KIND, PATH_SEPARATOR


class NexusBaseModel(BaseModel):
    """Base model for all tree API responses."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)  # Ignore fields we don't use


class TreeNode(NexusBaseModel):
    """
    One node of the source repository hierarchy.

    Attributes:
        kind: Node type marker (``"G"`` for groups)
        is_leaf: True when the node is an artifact file with nothing beneath it
        node_name: Display name of the node
        path: Root-relative location, starting with ``/``
        children: Child nodes, in listing order
        repository_id: Repository the node belongs to
        locally_available: Whether the artifact is cached on the source server
        artifact_timestamp: Last modification time reported by the server
        artifact_uri: Download URI of the artifact
        pom_uri: Download URI of the companion descriptor, empty when there is none
        group_id: Maven group coordinate
        artifact_id: Maven artifact coordinate
        version: Maven version coordinate
        extension: File extension of the artifact
        packaging: Declared packaging of the artifact
    """

    kind: str = Field(default="", alias="type")
    is_leaf: bool = Field(default=False, alias="leaf")
    node_name: str = Field(default="", alias="nodeName")
    path: str = ""
    children: List["TreeNode"] = Field(default_factory=list)
    repository_id: str = Field(default="", alias="repositoryId")
    locally_available: bool = Field(default=False, alias="locallyAvailable")
    artifact_timestamp: int = Field(default=0, alias="artifactTimestamp")
    artifact_uri: str = Field(default="", alias="artifactUri")
    pom_uri: str = Field(default="", alias="pomUri")
    group_id: str = Field(default="", alias="groupId")
    artifact_id: str = Field(default="", alias="artifactId")
    version: str = ""
    extension: str = ""
    packaging: str = ""

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        """Let null fields, children included, fall back to their defaults."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @property
    def is_group(self) -> bool:
        """Check if the node is a group container."""
        return self.kind == GROUP_KIND

    @property
    def has_companion_metadata(self) -> bool:
        """Check if a descriptor file accompanies this artifact."""
        return len(self.pom_uri) > 0

    @property
    def artifact_path(self) -> str:
        """Node path without its leading separator."""
        return self.path.removeprefix(PATH_SEPARATOR)


TreeNode.model_rebuild()


class TreeNodeResponse(NexusBaseModel):
    """Envelope returned by a tree listing request."""

    data: TreeNode


__all__ = ["NexusBaseModel", "TreeNode", "TreeNodeResponse"]
