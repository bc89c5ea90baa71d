"""
Nexus Migrator - Copy repository artifacts between repository servers.

This package walks a source repository's tree listing API, and streams every
artifact (with its companion descriptor) to a target server under new
credentials.
"""

from ._version import __version__

# Import main classes and functions for easy access
from .api import SourceRepositoryClient, TargetRepositoryClient
from .exceptions import ConfigError, DecodeError, MigratorError, TransportError
from .models import MigratorSettings, TransferJob, TreeNode
from .pipeline import MigrationPipeline
from .utils import setup_logging, get_logger, create_session
from .utils.config_manager import load_settings
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "SourceRepositoryClient",
    "TargetRepositoryClient",
    "ConfigError",
    "DecodeError",
    "MigratorError",
    "TransportError",
    "MigratorSettings",
    "TransferJob",
    "TreeNode",
    "MigrationPipeline",
    "setup_logging",
    "get_logger",
    "create_session",
    "load_settings",
    "cli_main",
    "cli_group",
]
