"""
Utility modules for nexus-migrator.

Modules that depend on the models (config_manager, tree, url) are imported
from their own module paths to keep this package free of import cycles.
"""

from .logger import setup_logging, get_logger
from .session import create_session

from . import constants
from . import error_handling

__all__ = [
    "setup_logging",
    "get_logger",
    "create_session",
    "constants",
    "error_handling",
]
