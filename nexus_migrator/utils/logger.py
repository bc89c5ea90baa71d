"""
Logging configuration and utilities for the nexus-migrator package.

Every pipeline stage runs in its own worker threads, so the log format
carries the thread name to show which worker produced each line.
"""

import logging

# ============================================================================
# Logging Configuration Constants
# ============================================================================

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(threadName)s] %(message)s"

# ============================================================================
# Logging Setup Functions
# ============================================================================


def setup_logging(verbosity: int = 0) -> None:
    """
    Setup logging configuration with multi-level verbosity.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with HTTP logs)

    Verbosity Levels:
        0 (default): WARNING - Only warnings and failures
        1 (-d):      INFO - Every fetched listing and streamed artifact
        2 (-dd):     DEBUG - Verbose output with detailed information
        3+ (-ddd):   DEBUG - Maximum verbosity including HTTP request logs

    Example:
        >>> from nexus_migrator.utils.logger import setup_logging
        >>> setup_logging(1)  # INFO level
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # 2 or higher
        level = logging.DEBUG

    # basicConfig writes to stderr, which is where failures must be reported
    logging.basicConfig(level=level, format=LOG_FORMAT)

    # httpx logs every HTTP request at INFO level which clutters the output
    if verbosity < 3:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
    else:
        logging.getLogger("httpx").setLevel(logging.DEBUG)
        logging.getLogger("httpcore").setLevel(logging.DEBUG)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: Name for the logger (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


__all__ = [
    "LOG_FORMAT",
    "setup_logging",
    "get_logger",
]
