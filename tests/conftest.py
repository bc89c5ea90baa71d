"""
Test fixtures for nexus-migrator tests.

This module provides configuration, settings and HTTP mocking fixtures.
Tree listing builders live in tests/helpers.py.
"""

import json
from pathlib import Path
from typing import Any, Dict

import pytest
import respx

from nexus_migrator.models import Credentials, EndpointConfig, MigratorSettings

from tests.helpers import SOURCE_DOWNLOAD_URL, SOURCE_LISTING_URL, TARGET_URL


@pytest.fixture
def config_data() -> Dict[str, Any]:
    """Configuration file contents."""
    return {
        "SourceURL": SOURCE_LISTING_URL,
        "TargetURL": TARGET_URL,
        "SourceDownloadURL": SOURCE_DOWNLOAD_URL,
        "Workers": 2,
    }


@pytest.fixture
def auth_data() -> Dict[str, str]:
    """Authentication file contents."""
    return {
        "SourceUser": "source-user",
        "SourcePassword": "source-secret",
        "TargetUser": "target-user",
        "TargetPassword": "target-secret",
    }


@pytest.fixture
def endpoint_config(config_data) -> EndpointConfig:
    """Validated endpoint configuration."""
    return EndpointConfig.model_validate(config_data)


@pytest.fixture
def credentials(auth_data) -> Credentials:
    """Validated credentials."""
    return Credentials.model_validate(auth_data)


@pytest.fixture
def settings(endpoint_config, credentials) -> MigratorSettings:
    """Settings shared by every pipeline component."""
    return MigratorSettings(config=endpoint_config, auth=credentials)


@pytest.fixture
def config_files(tmp_path: Path, config_data, auth_data):
    """Write configuration and authentication files, return their paths."""
    conf_path = tmp_path / "migrator-conf.json"
    auth_path = tmp_path / "migrator-auth.json"
    conf_path.write_text(json.dumps(config_data))
    auth_path.write_text(json.dumps(auth_data))
    return str(conf_path), str(auth_path)


@pytest.fixture
def httpx_mock():
    """Provide a respx router for HTTP mocking."""
    with respx.mock(assert_all_called=False) as router:
        yield router
