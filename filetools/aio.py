"""
filetools: asyncio front-end.

Coroutine versions of the listing and directory-creation API. Each call runs
the blocking implementation on a worker thread, so several listings can
proceed concurrently without blocking the event loop.

Example:
    >>> async def main():
    ...     a, b = await asyncio.gather(list_nested("/data"), list_nested("/logs"))
"""
import asyncio
import os
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Union

from filetools import directories
from filetools.listing import lister
from filetools.listing.lister import ListingResult, ListOptions
from filetools.rules.patterns import Filter

PathLike = Union[str, os.PathLike]


async def list_items(
    root: PathLike,
    filter: Optional[Filter] = None,
    options: Optional[ListOptions] = None,
) -> ListingResult:
    """Async variant of :func:`filetools.listing.lister.list_items`."""
    return await asyncio.to_thread(lister.list_items, root, filter, options)


async def list_nested(
    root: PathLike,
    filter: Optional[Filter] = None,
    options: Optional[ListOptions] = None,
) -> ListingResult:
    """Async variant of :func:`filetools.listing.lister.list_nested`.

    Cancelling the awaiting task stops the walk at the next directory
    boundary.
    """
    cancel_event = threading.Event()
    try:
        return await asyncio.to_thread(lister.list_nested, root, filter, options, cancel_event)
    except asyncio.CancelledError:
        cancel_event.set()
        raise


async def create_dir(path: PathLike) -> None:
    """Async variant of :func:`filetools.directories.create_dir`."""
    await asyncio.to_thread(directories.create_dir, path)


async def create_dirs(paths: Iterable[PathLike]) -> List[Path]:
    """Async variant of :func:`filetools.directories.create_dirs`."""
    return await asyncio.to_thread(directories.create_dirs, list(paths))
