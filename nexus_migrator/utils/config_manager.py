"""
Configuration management utilities.

This module loads the configuration and credentials files, both JSON,
and validates them into a single immutable settings object.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ..exceptions import ConfigError
from ..models.config import Credentials, EndpointConfig, MigratorSettings
from .constants import DEFAULT_AUTH_PATH, DEFAULT_CONFIG_PATH


class ConfigManager:
    """
    Manages loading and access to one JSON configuration file.

    The file is read lazily on first access and cached afterwards.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses default path.
        """
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from file.

        Returns:
            Dictionary containing configuration data

        Raises:
            ConfigError: If the file doesn't exist or doesn't hold a JSON object
        """
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            raise ConfigError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {self.config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration from {self.config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file {self.config_path} must contain a JSON object")

        logging.debug("Loaded configuration from %s", self.config_path)
        self._config = data
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a top-level configuration value by key.

        Args:
            key: Configuration key (e.g., "SourceURL")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self.load().get(key)
        return value if value is not None else default

    def reload(self) -> None:
        """Force reload configuration from file."""
        self._config = None
        self.load()


def _validation_message(error: ValidationError) -> str:
    """Summarize a pydantic validation error as one line."""
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc']) or '<root>'}: {item['msg']}" for item in error.errors()
    )


def load_settings(
    config_path: str = DEFAULT_CONFIG_PATH, auth_path: str = DEFAULT_AUTH_PATH
) -> MigratorSettings:
    """
    Load and validate the configuration and credentials files.

    Args:
        config_path: Path to the JSON file with SourceURL, TargetURL, SourceDownloadURL and Workers
        auth_path: Path to the JSON file with source and target usernames and passwords

    Returns:
        Immutable settings shared by every pipeline component

    Raises:
        ConfigError: If either file is missing, is not valid JSON, or lacks required fields
    """
    config_manager = ConfigManager(config_path)
    auth_manager = ConfigManager(auth_path)

    try:
        config = EndpointConfig.model_validate(config_manager.load())
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration file {config_manager.config_path}: {_validation_message(e)}") from e

    try:
        auth = Credentials.model_validate(auth_manager.load())
    except ValidationError as e:
        raise ConfigError(f"Invalid authentication file {auth_manager.config_path}: {_validation_message(e)}") from e

    logging.info(
        "Migrating from %s to %s with %d workers per stage",
        config.source_url,
        config.target_url,
        config.workers,
    )
    return MigratorSettings(config=config, auth=auth)


__all__ = ["ConfigManager", "load_settings"]
