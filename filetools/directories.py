"""
filetools: Directory creation.

Idempotent wrappers over file_ops.create_directory. Creating a directory
that already exists succeeds; batch operations stop at the first failure
and leave already created directories in place.
"""
import os
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from filetools.core.file_ops import create_directories, create_directory
from filetools.core.logging import get_logger
from filetools.naming import generate_n_digit_name

PathLike = Union[str, os.PathLike]


def create_dir(path: PathLike) -> None:
    """Ensure a directory exists, creating missing parents.

    Raises:
        NotADirectory: If a non-directory already occupies the path
        FileOperationError: On any other failure
    """
    create_directory(path, parents=True, exist_ok=True)


def create_dirs(paths: Iterable[PathLike]) -> List[Path]:
    """Ensure several directories exist, in order.

    Args:
        paths: Directories to create; duplicates are fine

    Returns:
        The directories, in the order given

    Raises:
        FileOperationError: On the first directory that cannot be created
    """
    return create_directories(paths)


def create_multiple_directories(base: PathLike, names: Sequence[PathLike]) -> List[Path]:
    """Ensure ``base / name`` exists for every name.

    Args:
        base: Parent directory (created if missing)
        names: Directory names or relative paths under base

    Returns:
        The created directories
    """
    base_path = Path(base)
    return create_directories(base_path / name for name in names)


def create_numeric_directories(base: PathLike, start: int, end: int, fill: int) -> List[Path]:
    """Create zero-padded numbered directories ``start .. end - 1`` under base.

    Example: start=0, end=3, fill=4 creates 0000, 0001 and 0002.

    Args:
        base: Parent directory
        start: First number (inclusive)
        end: Last number (exclusive)
        fill: Minimum number of digits

    Returns:
        The created directories
    """
    base_path = Path(base)
    get_logger().debug("Creating numeric directories", base=str(base_path), start=start, end=end)
    return create_directories(
        base_path / generate_n_digit_name(number, fill) for number in range(start, end)
    )
