"""
filetools Core: Input Validators.

Validation for configuration, filter patterns, extensions and names supplied
by callers. Every validator returns True or raises ValidationError.
"""
import re
from typing import Any, Dict, Pattern

from filetools.core.constants import ConfigKey, ErrorCode, ErrorPolicy, Limits


class ValidationError(Exception):
    """Base exception for validation errors."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        """Initialize ValidationError.

        Args:
            message: Error message
            error_code: Associated error code
        """
        super().__init__(message)
        self.error_code = error_code


def validate_config(config: Dict[str, Any]) -> bool:
    """Validate a filetools configuration structure.

    Args:
        config: Configuration dictionary (as returned by ConfigManager.get_all)

    Returns:
        True if valid

    Raises:
        ValidationError: If configuration is invalid
    """
    if not isinstance(config, dict):
        raise ValidationError("Configuration must be a dictionary")

    section = config.get(ConfigKey.ROOT, {})
    if not isinstance(section, dict):
        raise ValidationError(f"'{ConfigKey.ROOT}' section must be a dictionary")

    if ConfigKey.LISTING in section:
        validate_listing_config(section[ConfigKey.LISTING])

    if ConfigKey.LOGGING in section:
        logging_section = section[ConfigKey.LOGGING]
        if not isinstance(logging_section, dict):
            raise ValidationError("Logging configuration must be a dictionary")
        level = logging_section.get(ConfigKey.LOG_LEVEL)
        if level is not None and str(level).upper() not in (
            "DEBUG",
            "INFO",
            "WARNING",
            "ERROR",
            "CRITICAL",
        ):
            raise ValidationError(f"Invalid log level: {level}")

    return True


def validate_listing_config(listing: Dict[str, Any]) -> bool:
    """Validate the listing section of the configuration.

    Args:
        listing: Listing configuration dictionary

    Returns:
        True if valid

    Raises:
        ValidationError: If the listing configuration is invalid
    """
    if not isinstance(listing, dict):
        raise ValidationError("Listing configuration must be a dictionary")

    valid_fields = {
        ConfigKey.FOLLOW_SYMLINKS,
        ConfigKey.ON_ERROR,
        ConfigKey.DETECT_CYCLES,
        ConfigKey.SORT_ENTRIES,
        ConfigKey.MAX_DEPTH,
    }
    unknown_fields = set(listing.keys()) - valid_fields
    if unknown_fields:
        raise ValidationError(
            f"Unknown listing configuration fields: {', '.join(sorted(unknown_fields))}"
        )

    for flag in (ConfigKey.FOLLOW_SYMLINKS, ConfigKey.DETECT_CYCLES, ConfigKey.SORT_ENTRIES):
        if flag in listing and not isinstance(listing[flag], bool):
            raise ValidationError(f"Listing {flag} must be boolean: {listing[flag]}")

    if ConfigKey.ON_ERROR in listing:
        policy = listing[ConfigKey.ON_ERROR]
        try:
            ErrorPolicy(policy)
        except ValueError:
            valid_policies = [p.value for p in ErrorPolicy]
            raise ValidationError(
                f"Invalid error policy: {policy}. Must be one of {valid_policies}"
            )

    max_depth = listing.get(ConfigKey.MAX_DEPTH)
    if max_depth is not None:
        if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
            raise ValidationError(f"Listing max_depth must be non-negative integer: {max_depth}")

    return True


def validate_pattern(pattern: str) -> bool:
    """Validate a filter pattern string.

    Args:
        pattern: Pattern text

    Returns:
        True if valid

    Raises:
        ValidationError: If pattern is invalid
    """
    if not isinstance(pattern, str):
        raise ValidationError(f"Pattern must be string, got {type(pattern)}")

    if not pattern:
        raise ValidationError("Pattern cannot be empty")

    if len(pattern) > Limits.MAX_PATH_LENGTH:
        raise ValidationError(f"Pattern exceeds maximum length ({Limits.MAX_PATH_LENGTH})")

    if "\x00" in pattern:
        raise ValidationError("Invalid pattern: contains null bytes")

    return True


def validate_regex(pattern: str) -> Pattern[str]:
    """Validate and compile a regex pattern.

    Args:
        pattern: Regular expression text

    Returns:
        Compiled pattern

    Raises:
        ValidationError: If the pattern is empty or does not compile
    """
    validate_pattern(pattern)

    try:
        return re.compile(pattern)
    except re.error as e:
        raise ValidationError(f"Failed to compile regex pattern: {e}")


def validate_extension(ext: str) -> bool:
    """Validate a bare file extension (no separators, no dots inside).

    Args:
        ext: Extension text, e.g. "lua"

    Returns:
        True if valid

    Raises:
        ValidationError: If the extension cannot be matched against a name
    """
    validate_pattern(ext)

    if "/" in ext or "\\" in ext:
        raise ValidationError(f"Extension cannot contain path separators: {ext}")

    if "." in ext:
        raise ValidationError(f"Extension cannot contain '.': {ext}")

    return True


def validate_digit_fill(number: int, fill: int) -> bool:
    """Validate arguments for zero-padded numeric names.

    Args:
        number: Number to render
        fill: Minimum width

    Returns:
        True if valid

    Raises:
        ValidationError: If number is negative or fill is out of range
    """
    if isinstance(number, bool) or not isinstance(number, int) or number < 0:
        raise ValidationError(f"Number must be non-negative integer: {number}")

    if isinstance(fill, bool) or not isinstance(fill, int) or fill < 0:
        raise ValidationError(f"Fill must be non-negative integer: {fill}")

    if fill > Limits.MAX_DIGIT_FILL:
        raise ValidationError(f"Fill exceeds maximum ({Limits.MAX_DIGIT_FILL})")

    return True
