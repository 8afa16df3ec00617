"""
filetools Core: Path utilities.

Pure helpers over path strings and pathlib objects. None of these touch the
filesystem.
"""
import os
from pathlib import PurePath
from typing import Union

PathLike = Union[str, os.PathLike]


def get_filename(path: PathLike) -> str:
    """Return the final segment of a path ("" for an empty path or root)."""
    return PurePath(os.fspath(path)).name


def get_extension(path: PathLike) -> str:
    """Return the extension of the final path segment, without the dot.

    The extension is the text after the last '.' of the final segment.
    Names without a '.' and dot-files with no further '.' (".gitignore")
    have no extension.

    Args:
        path: Path or bare file name

    Returns:
        Extension text, or "" when the name has none
    """
    name = get_filename(path)
    stem = name.lstrip(".")
    if "." not in stem:
        return ""
    return name.rsplit(".", 1)[1]


def is_subdir(path: PathLike, directory: PathLike) -> bool:
    """Check whether a directory name appears as a component of a path.

    Only normal components are considered; anchors, "." and ".." never match.

    Args:
        path: Path to inspect
        directory: Directory name to look for (a single component)

    Returns:
        True if any component of path equals directory
    """
    target = os.fspath(directory)
    pure = PurePath(os.fspath(path))
    for part in pure.parts:
        if part in (pure.anchor, ".", ".."):
            continue
        if part == target:
            return True
    return False


def path_contains(path: PathLike, pattern: PathLike) -> bool:
    """Check whether the string form of pattern occurs inside path."""
    return os.fspath(pattern) in os.fspath(path)
