"""
pathglob Core: Constants and Type Definitions

This module provides package-wide constants, error codes and the character
sets used by the pattern compiler and the directory walk.
"""
from enum import IntEnum
from typing import FrozenSet, TypeAlias

# Version information
PATHGLOB_VERSION = "1.0.0"


class ErrorCode(IntEnum):
    """Standardized error codes for pathglob operations."""

    SUCCESS = 0  # Operation completed successfully
    INVALID_INPUT = 1  # Bad option value, malformed configuration
    NOT_FOUND = 2  # File or resource doesn't exist
    PERMISSION_DENIED = 3  # Insufficient permissions
    INTERNAL_ERROR = 6  # Bug in pathglob
    TIMEOUT = 7  # Operation timed out


# Type aliases for clarity
Pattern: TypeAlias = str
SegmentPattern: TypeAlias = str
FilePath: TypeAlias = str


class Limits:
    """Resource limits and default values."""

    # Upper bound for a single regex evaluation against one entry name
    MATCH_TIMEOUT_SECONDS = 1.0

    # Negative depth means "no limit" for the ** wildcard
    UNLIMITED_DEPTH = -1


# Characters that switch off the no-wildcard fast path
GLOB_CHARACTERS: FrozenSet[str] = frozenset("*?[]{}")

# Characters escaped when copied literally into a segment regex
REGEX_SPECIAL_CHARS: FrozenSet[str] = frozenset("[\\^$.|?*+(){}")

RECURSIVE_WILDCARD = "**"
CURRENT_DIRECTORY = "."
PARENT_DIRECTORY = ".."

# Environment variable prefix read by the configuration manager
ENV_PREFIX = "PATHGLOB_"


class ConfigKey:
    """Configuration key constants."""

    ROOT = "pathglob"

    IGNORE_CASE = "ignore_case"
    DIRECTORIES_ONLY = "directories_only"
    MAX_DEPTH = "max_depth"
    CACHE_COMPILED_MATCHERS = "cache_compiled_matchers"
    THROW_ON_ERROR = "throw_on_error"

    LOGGING = "logging"
    LOG_LEVEL = "level"
    LOG_FILE = "file"


OPTION_KEYS = (
    ConfigKey.IGNORE_CASE,
    ConfigKey.DIRECTORIES_ONLY,
    ConfigKey.MAX_DEPTH,
    ConfigKey.CACHE_COMPILED_MATCHERS,
    ConfigKey.THROW_ON_ERROR,
)

# Default configuration values
DEFAULT_CONFIG = {
    ConfigKey.ROOT: {
        ConfigKey.IGNORE_CASE: True,
        ConfigKey.DIRECTORIES_ONLY: False,
        ConfigKey.MAX_DEPTH: Limits.UNLIMITED_DEPTH,
        ConfigKey.CACHE_COMPILED_MATCHERS: True,
        ConfigKey.THROW_ON_ERROR: False,
        ConfigKey.LOGGING: {
            ConfigKey.LOG_LEVEL: "INFO",
            ConfigKey.LOG_FILE: None,
        },
    }
}
