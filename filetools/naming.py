"""
filetools: Name generation.

Pure helpers that build file or directory names; none of them touch the
filesystem.

Example:
    >>> generate_name("report", "pdf")
    PosixPath('report.pdf')
    >>> generate_n_digit_name(5, 4, "json")
    PosixPath('0005.json')
"""
import uuid
from datetime import datetime, timezone
from pathlib import Path

from filetools.core.constants import Limits
from filetools.core.validators import validate_digit_fill


def make_extension(ext: str) -> str:
    """Return ``ext`` with a single leading dot, or "" for an empty extension."""
    ext = ext.lstrip(".")
    if not ext:
        return ""
    return f".{ext}"


def generate_name(name: str, ext: str) -> Path:
    """Build ``name.ext``.

    Args:
        name: Base name
        ext: Extension, with or without leading dot; empty for none

    Returns:
        Path of the generated name
    """
    return Path(f"{name}{make_extension(ext)}")


def generate_timestamped_name(fname: str, ext: str) -> Path:
    """Build a name carrying the current UTC time.

    The timestamp format is ``DD_MM_YYYY_HHhMMmSSs``. The result is
    ``fname_<timestamp>.ext``, or ``<timestamp>.ext`` when fname is empty.

    Args:
        fname: Optional prefix
        ext: Extension, empty for none

    Returns:
        Path of the generated name
    """
    stamp = datetime.now(timezone.utc).strftime(Limits.TIMESTAMP_FORMAT)

    if not fname:
        return Path(f"{stamp}{make_extension(ext)}")

    return Path(f"{fname}_{stamp}{make_extension(ext)}")


def generate_uuid4_name(ext: str) -> Path:
    """Build a random UUIDv4 name, e.g. ``b1faa2c3-d25c-43bb-b578-9f259d7aabaf.log``."""
    return Path(f"{uuid.uuid4()}{make_extension(ext)}")


def generate_n_digit_name(number: int, fill: int, ext: str = "") -> Path:
    """Build a zero-padded numeric name.

    Args:
        number: Non-negative number
        fill: Minimum number of digits
        ext: Extension, empty for none

    Returns:
        Path such as ``0005.json`` (number=5, fill=4, ext="json")

    Raises:
        ValidationError: If number is negative or fill is out of range
    """
    validate_digit_fill(number, fill)
    return Path(f"{number:0{fill}d}{make_extension(ext)}")
