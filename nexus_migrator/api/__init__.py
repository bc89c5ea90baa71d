"""
Repository server clients.

This package provides clients for the two servers involved in a migration:
- SourceRepositoryClient: tree listings and streaming artifact downloads
- TargetRepositoryClient: streaming artifact uploads
"""

from .repository_client import (
    RepositoryClient,
    SourceRepositoryClient,
    TargetRepositoryClient,
    create_clients,
)

__all__ = [
    "RepositoryClient",
    "SourceRepositoryClient",
    "TargetRepositoryClient",
    "create_clients",
]
