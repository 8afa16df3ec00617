"""
filetools Listing: Entry classifier.

Decides whether a directory entry is listed as a file, as a directory, or
not at all.
"""
import os
from typing import Union

from filetools.core.constants import EntryKind
from filetools.core.file_ops import query_metadata


def classify(path: Union[str, os.PathLike], follow_symlinks: bool = True) -> EntryKind:
    """
    Classify a directory entry.

    Symlinks take the kind of their target. Dangling links, devices, FIFOs
    and sockets are OTHER, as is every symlink when ``follow_symlinks`` is
    False.

    Args:
        path: Entry path
        follow_symlinks: Resolve symlinks to their target

    Returns:
        EntryKind of the entry

    Raises:
        FileOperationError: If the entry metadata cannot be read (the entry
            vanished, permission denied, ...)
    """
    metadata = query_metadata(path, follow_symlinks=follow_symlinks)

    if metadata.is_dir:
        return EntryKind.DIRECTORY
    if metadata.is_file:
        return EntryKind.FILE
    return EntryKind.OTHER
