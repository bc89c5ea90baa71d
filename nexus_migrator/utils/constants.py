"""
Central constants for the nexus-migrator package.

This module consolidates all constants used throughout the codebase
to eliminate magic numbers and strings.
"""

# ============================================================================
# Tree Structure
# ============================================================================

# Node type marker the tree API uses for group containers
GROUP_KIND = "G"

# Separator at the start of every node path
PATH_SEPARATOR = "/"

# ============================================================================
# Artifact and Descriptor Files
# ============================================================================

# Token replaced in an artifact path to derive its companion descriptor path
ARTIFACT_TOKEN = "jar"
DESCRIPTOR_TOKEN = "pom"

# Suffix that marks a descriptor file
DESCRIPTOR_SUFFIX = ".pom"

# Content types sent with uploads
DESCRIPTOR_CONTENT_TYPE = "application/xml"
ARCHIVE_CONTENT_TYPE = "application/java-archive"

# ============================================================================
# HTTP
# ============================================================================

# Accept header sent with tree listing and artifact download requests
JSON_ACCEPT = "application/json"

# Expected status codes
HTTP_STATUS_OK = 200
HTTP_STATUS_CREATED = 201
HTTP_STATUS_UNAUTHORIZED = 401
HTTP_STATUS_FORBIDDEN = 403
HTTP_STATUS_NOT_FOUND = 404

# Server error status codes (5xx)
HTTP_SERVER_ERROR_MIN = 500
HTTP_SERVER_ERROR_MAX = 599

# Chunk size used when streaming artifacts from source to target
STREAM_CHUNK_SIZE = 65536

# ============================================================================
# Pipeline
# ============================================================================

# Capacity of each bounded stage channel
DEFAULT_QUEUE_CAPACITY = 100

# Seconds a worker waits on an empty channel before re-checking for stop
WORKER_POLL_INTERVAL = 0.5

# Stage names, used for worker thread names
FETCHER_STAGE = "fetcher"
DECODER_STAGE = "decoder"
PLANNER_STAGE = "planner"
TRANSFERER_STAGE = "transferer"

# ============================================================================
# Default Paths
# ============================================================================

DEFAULT_CONFIG_PATH = "./migrator-conf.json"
DEFAULT_AUTH_PATH = "./migrator-auth.json"

# ============================================================================
# Exit Codes
# ============================================================================

EXIT_GENERAL_ERROR = 1
EXIT_USER_INTERRUPT = 130  # User pressed Ctrl+C


__all__ = [
    # Tree Structure
    "GROUP_KIND",
    "PATH_SEPARATOR",
    # Artifact and Descriptor Files
    "ARTIFACT_TOKEN",
    "DESCRIPTOR_TOKEN",
    "DESCRIPTOR_SUFFIX",
    "DESCRIPTOR_CONTENT_TYPE",
    "ARCHIVE_CONTENT_TYPE",
    # HTTP
    "JSON_ACCEPT",
    "HTTP_STATUS_OK",
    "HTTP_STATUS_CREATED",
    "HTTP_STATUS_UNAUTHORIZED",
    "HTTP_STATUS_FORBIDDEN",
    "HTTP_STATUS_NOT_FOUND",
    "HTTP_SERVER_ERROR_MIN",
    "HTTP_SERVER_ERROR_MAX",
    "STREAM_CHUNK_SIZE",
    # Pipeline
    "DEFAULT_QUEUE_CAPACITY",
    "WORKER_POLL_INTERVAL",
    "FETCHER_STAGE",
    "DECODER_STAGE",
    "PLANNER_STAGE",
    "TRANSFERER_STAGE",
    # Default Paths
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_AUTH_PATH",
    # Exit Codes
    "EXIT_GENERAL_ERROR",
    "EXIT_USER_INTERRUPT",
]
