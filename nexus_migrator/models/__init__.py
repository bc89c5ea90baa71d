"""
Pydantic models for nexus-migrator.

This package contains all Pydantic models used in the application:
- nexus_api: Models for tree listing responses
- base, transfer, config: Domain models
"""

# Tree API Response Models
from .nexus_api import NexusBaseModel, TreeNode, TreeNodeResponse

# Domain Models
from .base import MigratorBaseModel
from .transfer import TransferJob
from .config import Credentials, EndpointConfig, MigratorSettings

__all__ = [
    # Tree API Models
    "NexusBaseModel",
    "TreeNode",
    "TreeNodeResponse",
    # Domain Models
    "MigratorBaseModel",
    "TransferJob",
    "Credentials",
    "EndpointConfig",
    "MigratorSettings",
]
