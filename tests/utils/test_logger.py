"""
Tests for logging utilities.

This module tests logging setup.
"""

import logging
from unittest.mock import patch

import pytest

from nexus_migrator.utils import get_logger, setup_logging
from nexus_migrator.utils.logger import LOG_FORMAT


class TestLoggingUtilities:
    """Test logging utility functions."""

    @pytest.mark.parametrize(
        "verbosity,level",
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (3, logging.DEBUG)],
    )
    def test_setup_logging_levels(self, verbosity, level):
        """Test each verbosity maps to its level."""
        with patch("logging.basicConfig") as mock_basic_config:
            setup_logging(verbosity=verbosity)

        mock_basic_config.assert_called_once_with(level=level, format=LOG_FORMAT)

    def test_http_logs_silenced(self):
        """Test HTTP client logs are silenced below verbosity 3."""
        with patch("logging.basicConfig"):
            setup_logging(verbosity=2)

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_http_logs_enabled(self):
        """Test HTTP client logs are enabled at verbosity 3."""
        with patch("logging.basicConfig"):
            setup_logging(verbosity=3)

        assert logging.getLogger("httpx").level == logging.DEBUG
        assert logging.getLogger("httpcore").level == logging.DEBUG

    def test_format_names_thread(self):
        """Test the format shows which worker logged each line."""
        assert "%(threadName)s" in LOG_FORMAT

    def test_get_logger(self):
        """Test get_logger returns the named logger."""
        assert get_logger("nexus_migrator.test") is logging.getLogger("nexus_migrator.test")
