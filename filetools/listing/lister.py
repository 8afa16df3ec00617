#!/usr/bin/env python3
"""Shallow and recursive directory listing.

``list_items`` lists the direct children of a directory; ``list_nested``
walks the whole tree beneath it. Both partition matching entries into files
and directories and apply the same filter semantics at every level.

Traversal is depth-first and pre-order: the entries of a directory are
recorded before any of its subdirectories is entered. Every subdirectory is
descended into whether or not it matched the filter.

Errors abort the listing by default. With ``ErrorPolicy.COLLECT`` a failing
entry or subtree is skipped and recorded in ``ListingResult.errors``; errors
on the root itself always raise.

Example:
    >>> result = list_nested("/project", Filter.raw("py"))
    >>> sorted(str(p) for p in result.files)
    ['/project/pkg/mod.py', '/project/setup.py']
"""

import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set, Tuple, Union

from filetools.core.config import ConfigManager, get_config_manager
from filetools.core.constants import ConfigKey, EntryKind, ErrorPolicy
from filetools.core.errors import FileOperationError, ListingCancelled
from filetools.core.file_ops import directory_identity, open_directory, require_directory
from filetools.core.logging import get_logger
from filetools.listing.classifier import classify
from filetools.rules.patterns import Filter, matches

PathLike = Union[str, os.PathLike]


@dataclass
class ListingResult:
    """Files and directories found by a listing.

    Paths are the listing root joined with the entry names. ``errors`` is
    only populated when listing with ``ErrorPolicy.COLLECT``.
    """

    files: List[Path] = field(default_factory=list)
    directories: List[Path] = field(default_factory=list)
    errors: List[Tuple[Path, FileOperationError]] = field(default_factory=list)

    def all_paths(self) -> List[Path]:
        """Return files followed by directories."""
        return self.files + self.directories

    def __len__(self) -> int:
        return len(self.files) + len(self.directories)


@dataclass(frozen=True)
class ListOptions:
    """Traversal options shared by the shallow and recursive listers."""

    follow_symlinks: bool = True
    on_error: ErrorPolicy = ErrorPolicy.RAISE
    detect_cycles: bool = True
    sort_entries: bool = True
    max_depth: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.on_error, ErrorPolicy):
            object.__setattr__(self, "on_error", ErrorPolicy(self.on_error))
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative: {self.max_depth}")

    @classmethod
    def from_config(cls, config: Optional[ConfigManager] = None) -> "ListOptions":
        """Build options from the ``filetools.listing`` configuration section.

        Args:
            config: Configuration manager (defaults to the global one)

        Returns:
            ListOptions populated from configuration

        Raises:
            ConfigError: If the merged configuration is invalid
        """
        if config is None:
            config = get_config_manager()
        config.validate()

        prefix = f"{ConfigKey.ROOT}.{ConfigKey.LISTING}"
        defaults = cls()
        return cls(
            follow_symlinks=config.get(f"{prefix}.{ConfigKey.FOLLOW_SYMLINKS}", defaults.follow_symlinks),
            on_error=config.get(f"{prefix}.{ConfigKey.ON_ERROR}", defaults.on_error),
            detect_cycles=config.get(f"{prefix}.{ConfigKey.DETECT_CYCLES}", defaults.detect_cycles),
            sort_entries=config.get(f"{prefix}.{ConfigKey.SORT_ENTRIES}", defaults.sort_entries),
            max_depth=config.get(f"{prefix}.{ConfigKey.MAX_DEPTH}", defaults.max_depth),
        )


def _scan_level(
    directory: Path,
    filter: Optional[Filter],
    options: ListOptions,
    result: ListingResult,
) -> List[Path]:
    """List one directory into ``result`` and return its subdirectories."""
    with open_directory(directory) as entries:
        names = [entry.name for entry in entries]

    if options.sort_entries:
        names.sort()

    subdirectories = []
    for name in names:
        path = directory / name
        try:
            kind = classify(path, follow_symlinks=options.follow_symlinks)
        except FileOperationError as e:
            if options.on_error is ErrorPolicy.RAISE:
                raise
            get_logger().warning("Skipping unreadable entry", path=str(path), error=str(e))
            result.errors.append((path, e))
            continue

        if kind is EntryKind.OTHER:
            continue

        if filter is None or matches(filter, path):
            if kind is EntryKind.FILE:
                result.files.append(path)
            else:
                result.directories.append(path)

        if kind is EntryKind.DIRECTORY:
            subdirectories.append(path)

    return subdirectories


def list_items(
    root: PathLike,
    filter: Optional[Filter] = None,
    options: Optional[ListOptions] = None,
) -> ListingResult:
    """
    List the direct children of a directory.

    Args:
        root: Directory to list
        filter: Optional filter applied to every child
        options: Traversal options (defaults to ListOptions())

    Returns:
        ListingResult with matching files and directories

    Raises:
        NotFound: If root does not exist
        NotADirectory: If root is not a directory
        FileOperationError: If root or (with ErrorPolicy.RAISE) a child
            cannot be read
    """
    options = options or ListOptions()
    root_path = Path(root)
    require_directory(root_path)

    result = ListingResult()
    _scan_level(root_path, filter, options, result)

    get_logger().debug(
        "Listed directory",
        root=str(root_path),
        files=len(result.files),
        directories=len(result.directories),
    )
    return result


def list_nested(
    root: PathLike,
    filter: Optional[Filter] = None,
    options: Optional[ListOptions] = None,
    cancel_event: Optional[threading.Event] = None,
) -> ListingResult:
    """
    List every descendant of a directory, depth-first.

    With ``detect_cycles`` each physical directory (device and inode) is
    entered at most once, so symlinks forming a loop terminate. Without it
    a symlink loop is followed until the OS refuses the path.

    Args:
        root: Directory to walk
        filter: Optional filter applied to every entry at every depth
        options: Traversal options (defaults to ListOptions())
        cancel_event: Checked before each directory is visited

    Returns:
        ListingResult with matching files and directories from all depths

    Raises:
        NotFound: If root does not exist
        NotADirectory: If root is not a directory
        ListingCancelled: If cancel_event is set during the walk
        FileOperationError: On the first failure (with ErrorPolicy.RAISE)
    """
    options = options or ListOptions()
    logger = get_logger()
    root_path = Path(root)
    root_stat = require_directory(root_path)

    visited: Set[Tuple[int, int]] = set()
    if options.detect_cycles:
        visited.add((root_stat.st_dev, root_stat.st_ino))

    result = ListingResult()
    stack: List[Tuple[Path, int]] = [(root_path, 0)]

    with logger.add_context(root=str(root_path)):
        while stack:
            directory, depth = stack.pop()

            if cancel_event is not None and cancel_event.is_set():
                raise ListingCancelled(f"Listing cancelled at {directory}", directory)

            logger.debug("Visiting directory", path=str(directory), depth=depth)
            try:
                subdirectories = _scan_level(directory, filter, options, result)
            except FileOperationError as e:
                if depth == 0 or options.on_error is ErrorPolicy.RAISE:
                    raise
                logger.warning("Skipping unreadable directory", path=str(directory), error=str(e))
                result.errors.append((directory, e))
                continue

            if options.max_depth is not None and depth >= options.max_depth:
                continue

            pending = []
            for subdirectory in subdirectories:
                if options.detect_cycles:
                    try:
                        identity = directory_identity(subdirectory)
                    except FileOperationError as e:
                        if options.on_error is ErrorPolicy.RAISE:
                            raise
                        result.errors.append((subdirectory, e))
                        continue
                    if identity in visited:
                        logger.debug("Directory already visited", path=str(subdirectory))
                        continue
                    visited.add(identity)
                pending.append((subdirectory, depth + 1))

            # Reversed so the first subdirectory is visited first
            stack.extend(reversed(pending))

    logger.debug(
        "Listed tree",
        root=str(root_path),
        files=len(result.files),
        directories=len(result.directories),
        errors=len(result.errors),
    )
    return result


def list_files(path: PathLike, options: Optional[ListOptions] = None) -> List[Path]:
    """Files directly inside ``path``."""
    return list_items(path, None, options).files


def list_files_with_filter(
    path: PathLike, filter: Filter, options: Optional[ListOptions] = None
) -> List[Path]:
    """Files directly inside ``path`` that match ``filter``."""
    return list_items(path, filter, options).files


def list_nested_files(path: PathLike, options: Optional[ListOptions] = None) -> List[Path]:
    """Files at every depth beneath ``path``."""
    return list_nested(path, None, options).files


def list_nested_files_with_filter(
    path: PathLike, filter: Filter, options: Optional[ListOptions] = None
) -> List[Path]:
    """Files at every depth beneath ``path`` that match ``filter``."""
    return list_nested(path, filter, options).files


def list_directories(path: PathLike, options: Optional[ListOptions] = None) -> List[Path]:
    """Directories directly inside ``path``."""
    return list_items(path, None, options).directories


def list_directories_with_filter(
    path: PathLike, filter: Filter, options: Optional[ListOptions] = None
) -> List[Path]:
    """Directories directly inside ``path`` that match ``filter``."""
    return list_items(path, filter, options).directories


def list_nested_directories(path: PathLike, options: Optional[ListOptions] = None) -> List[Path]:
    """Directories at every depth beneath ``path``."""
    return list_nested(path, None, options).directories


def list_nested_directories_with_filter(
    path: PathLike, filter: Filter, options: Optional[ListOptions] = None
) -> List[Path]:
    """Directories at every depth beneath ``path`` that match ``filter``."""
    return list_nested(path, filter, options).directories
