"""Version information for nexus-migrator."""

__version__ = "1.0.0"
