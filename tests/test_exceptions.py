"""Tests for the migration exception hierarchy."""

import pytest

from nexus_migrator.exceptions import (
    BODY_PREVIEW_LENGTH,
    ConfigError,
    DecodeError,
    MigratorError,
    TransportError,
)


class TestTransportError:
    """Test TransportError."""

    def test_message_format(self):
        """Test the message names the URL, the status and the body."""
        error = TransportError("https://s/a.jar", 404, "missing")

        assert str(error) == "URL:[https://s/a.jar], StatusCode:[404], [missing]"
        assert error.url == "https://s/a.jar"
        assert error.status_code == 404
        assert error.body == "missing"

    def test_connection_failure(self):
        """Test a failure without a response has no status."""
        error = TransportError("https://s/a.jar", None, "connection refused")

        assert error.status_code is None
        assert "StatusCode:[None]" in str(error)

    def test_long_body_truncated_in_message(self):
        """Test only a preview of a long body appears in the message."""
        body = "x" * (BODY_PREVIEW_LENGTH + 100)
        error = TransportError("https://t/a.jar", 500, body)

        assert error.body == body
        assert "x" * (BODY_PREVIEW_LENGTH + 1) not in str(error)
        assert str(error).endswith("...]")

    def test_is_runtime_error(self):
        """Test the hierarchy can be caught as RuntimeError."""
        with pytest.raises(RuntimeError):
            raise TransportError("https://s/", 500)


class TestDecodeError:
    """Test DecodeError."""

    def test_message_without_body(self):
        """Test the message is used unchanged without a body."""
        assert str(DecodeError("Malformed tree listing")) == "Malformed tree listing"

    def test_message_with_body(self):
        """Test the body preview is appended to the message."""
        error = DecodeError("Malformed tree listing", "<html>")

        assert error.body == "<html>"
        assert str(error) == "Malformed tree listing (body: '<html>')"


def test_config_error_is_migrator_error():
    """Test ConfigError belongs to the hierarchy."""
    assert isinstance(ConfigError("missing"), MigratorError)
