"""
Error handling utilities for standardized failure logging.

Every failure that reaches the pipeline's failure sink is reported through
``report_failure`` so the operator sees one consistent line per dropped
listing or artifact.
"""

import logging
import sys
import traceback

from ..exceptions import DecodeError, TransportError
from .constants import (
    HTTP_SERVER_ERROR_MAX,
    HTTP_SERVER_ERROR_MIN,
    HTTP_STATUS_FORBIDDEN,
    HTTP_STATUS_NOT_FOUND,
    HTTP_STATUS_UNAUTHORIZED,
)


def handle_transport_error(error: TransportError) -> None:
    """
    Log a transport error with a message chosen by its status code.

    Args:
        error: The transport error to report
    """
    status = error.status_code

    if status in (HTTP_STATUS_UNAUTHORIZED, HTTP_STATUS_FORBIDDEN):
        logging.error(
            "Authentication failed for %s: Please check the credentials in the authentication file. %s",
            error.url,
            error,
        )
    elif status == HTTP_STATUS_NOT_FOUND:
        logging.error("Resource not found: %s", error)
    elif status is not None and HTTP_SERVER_ERROR_MIN <= status <= HTTP_SERVER_ERROR_MAX:
        logging.error("Server error: %s", error)
    elif status is None:
        logging.error("Connection error: %s", error)
    else:
        logging.error("HTTP error: %s", error)


def report_failure(error: BaseException, *, log_traceback: bool = True) -> None:
    """
    Report one failure taken from the failure sink.

    Args:
        error: The exception raised by a pipeline stage
        log_traceback: Whether to log the traceback at DEBUG level
    """
    if isinstance(error, TransportError):
        handle_transport_error(error)
    elif isinstance(error, DecodeError):
        logging.error("Failed to decode tree listing: %s", error)
    else:
        logging.error("Unexpected error: %s", error)

    if log_traceback and error.__traceback__ is not None:
        logging.debug("Traceback: %s", "".join(traceback.format_exception(error)))


def log_and_exit(message: str, exit_code: int = 1) -> None:
    """
    Log an error message and exit the program.

    Args:
        message: Error message to log
        exit_code: Exit code (default: 1)
    """
    logging.error(message)
    sys.exit(exit_code)


__all__ = [
    "handle_transport_error",
    "report_failure",
    "log_and_exit",
]
