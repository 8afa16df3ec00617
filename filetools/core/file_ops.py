"""
filetools Core: File operations.

The filesystem collaborator used by the listing engine and the public
directory-creation API:
- Directory creation (idempotent, with parents)
- Scoped child enumeration
- Metadata queries that resolve symlinks

Every OSError is translated into the FileOperationError taxonomy with the
original exception chained.
"""
import errno
import os
import stat
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

from filetools.core.constants import ErrorCode
from filetools.core.errors import FileOperationError, NotADirectory, error_from_os
from filetools.core.logging import get_logger

PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class EntryMetadata:
    """What the listers need to know about one directory entry.

    ``is_file`` and ``is_dir`` describe the symlink target when the entry was
    queried with ``follow_symlinks``; a dangling link has both False.
    """

    is_file: bool
    is_dir: bool
    is_symlink: bool


def create_directory(path: PathLike, parents: bool = True, exist_ok: bool = True) -> None:
    """Create a directory.

    Args:
        path: Directory to create
        parents: Create missing parent directories
        exist_ok: Treat an already existing directory as success

    Raises:
        FileOperationError: If the directory cannot be created
    """
    try:
        if parents:
            os.makedirs(path, exist_ok=exist_ok)
        else:
            os.mkdir(path)
    except FileExistsError as e:
        if not os.path.isdir(path):
            raise error_from_os(e, path, "create directory") from e
        if not exist_ok:
            raise FileOperationError(
                f"Directory already exists: {path}", ErrorCode.CONFLICT, path
            ) from e
    except OSError as e:
        raise error_from_os(e, path, "create directory") from e

    get_logger().debug("Directory ensured", path=os.fspath(path))


def create_directories(paths: Iterable[PathLike]) -> List[Path]:
    """Create several directories in order.

    Stops at the first failure; directories created before it are kept.

    Args:
        paths: Directories to create

    Returns:
        The created (or already existing) directories

    Raises:
        FileOperationError: On the first directory that cannot be created
    """
    created = []
    for path in paths:
        create_directory(path)
        created.append(Path(path))
    return created


def require_directory(path: PathLike) -> os.stat_result:
    """Check that a path exists and is a directory, following symlinks.

    Args:
        path: Path to check

    Returns:
        stat result of the directory

    Raises:
        NotFound: If the path does not exist
        NotADirectory: If the path is not a directory
        FileOperationError: On any other OS failure
    """
    try:
        st = os.stat(path)
    except OSError as e:
        raise error_from_os(e, path, "stat") from e

    if not stat.S_ISDIR(st.st_mode):
        raise NotADirectory(f"Path should be a directory, not a file: {path}", path)

    return st


def query_metadata(path: PathLike, follow_symlinks: bool = True) -> EntryMetadata:
    """Query entry metadata.

    Args:
        path: Entry path
        follow_symlinks: Describe the target of a symlink instead of the link

    Returns:
        EntryMetadata for the entry

    Raises:
        FileOperationError: If the entry vanished or cannot be inspected
    """
    try:
        lst = os.lstat(path)
    except OSError as e:
        raise error_from_os(e, path, "query metadata of") from e

    if not stat.S_ISLNK(lst.st_mode):
        return EntryMetadata(
            is_file=stat.S_ISREG(lst.st_mode),
            is_dir=stat.S_ISDIR(lst.st_mode),
            is_symlink=False,
        )

    if not follow_symlinks:
        return EntryMetadata(is_file=False, is_dir=False, is_symlink=True)

    try:
        target = os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        # Dangling link
        return EntryMetadata(is_file=False, is_dir=False, is_symlink=True)
    except OSError as e:
        if e.errno == errno.ELOOP:
            # Self-referencing link chain, treated like a dangling link
            return EntryMetadata(is_file=False, is_dir=False, is_symlink=True)
        raise error_from_os(e, path, "resolve symlink") from e

    return EntryMetadata(
        is_file=stat.S_ISREG(target.st_mode),
        is_dir=stat.S_ISDIR(target.st_mode),
        is_symlink=True,
    )


def directory_identity(path: PathLike) -> Tuple[int, int]:
    """Return (st_dev, st_ino) of the directory a path resolves to."""
    try:
        st = os.stat(path)
    except OSError as e:
        raise error_from_os(e, path, "stat") from e
    return st.st_dev, st.st_ino


@contextmanager
def open_directory(path: PathLike) -> Iterator[Iterator[os.DirEntry]]:
    """Open a directory for enumeration.

    The directory handle is released when the context exits, including on
    error. Enumeration is lazy and not restartable.

    Args:
        path: Directory to enumerate

    Yields:
        Iterator of os.DirEntry for the direct children

    Raises:
        FileOperationError: If the directory cannot be opened or read
    """
    try:
        scanner = os.scandir(path)
    except OSError as e:
        raise error_from_os(e, path, "list") from e

    with scanner:
        yield _iter_entries(scanner, path)


def _iter_entries(scanner: Iterator[os.DirEntry], path: PathLike) -> Iterator[os.DirEntry]:
    while True:
        try:
            entry = next(scanner)
        except StopIteration:
            return
        except OSError as e:
            raise error_from_os(e, path, "list") from e
        yield entry
