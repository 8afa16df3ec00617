"""
filetools Core: Constants and Type Definitions

This module provides library-wide constants, error codes, and the entry
classification used by the listing engine.
"""
from enum import Enum, IntEnum

# Version information
FILETOOLS_VERSION = "0.4.0"


# Error codes
class ErrorCode(IntEnum):
    """Standardized error codes for filetools operations."""

    SUCCESS = 0  # Operation completed successfully
    INVALID_INPUT = 1  # Bad path, not a directory, invalid filter
    NOT_FOUND = 2  # File or directory doesn't exist
    PERMISSION_DENIED = 3  # Insufficient permissions
    CONFLICT = 4  # Resource conflict
    INTERNAL_ERROR = 6  # Underlying platform I/O failure
    CANCELLED = 7  # Operation cancelled by the caller


class EntryKind(Enum):
    """Classification of a directory entry as seen by the listers."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"  # Broken symlinks, devices, sockets, unfollowed links


class ErrorPolicy(Enum):
    """What the recursive lister does when a subtree fails."""

    RAISE = "raise"  # Abort the whole listing with the first error
    COLLECT = "collect"  # Skip the failing entry and record the error


# Resource limits and defaults
class Limits:
    """Library limits and default values."""

    # Path limits
    MAX_PATH_LENGTH = 4096

    # Naming
    MAX_DIGIT_FILL = 64
    TIMESTAMP_FORMAT = "%d_%m_%Y_%Hh%Mm%Ss"


# Configuration keys
class ConfigKey:
    """Configuration key constants."""

    ROOT = "filetools"
    LISTING = "listing"
    LOGGING = "logging"

    # Listing configuration
    FOLLOW_SYMLINKS = "follow_symlinks"
    ON_ERROR = "on_error"
    DETECT_CYCLES = "detect_cycles"
    SORT_ENTRIES = "sort_entries"
    MAX_DEPTH = "max_depth"

    # Logging configuration
    LOG_LEVEL = "level"


# Default configuration values
DEFAULT_CONFIG = {
    ConfigKey.ROOT: {
        ConfigKey.LISTING: {
            ConfigKey.FOLLOW_SYMLINKS: True,
            ConfigKey.ON_ERROR: ErrorPolicy.RAISE.value,
            ConfigKey.DETECT_CYCLES: True,
            ConfigKey.SORT_ENTRIES: True,
            ConfigKey.MAX_DEPTH: None,
        },
        ConfigKey.LOGGING: {
            ConfigKey.LOG_LEVEL: "WARNING",
        },
    }
}
