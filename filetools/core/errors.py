"""
filetools Core: Error taxonomy.

Every failure raised by the directory creation and listing API is a
FileOperationError subclass carrying an ErrorCode and the offending path.
Errors coming from the operating system are translated with error_from_os.
"""
import errno
from pathlib import Path
from typing import Optional, Union

from filetools.core.constants import ErrorCode


class FileOperationError(Exception):
    """Base exception for file operation errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        path: Optional[Union[str, Path]] = None,
    ):
        """Initialize FileOperationError.

        Args:
            message: Error message
            error_code: Associated error code
            path: Path the operation failed on, if known
        """
        super().__init__(message)
        self.error_code = error_code
        self.path = Path(path) if path is not None else None


class NotADirectory(FileOperationError):
    """The path exists but is not a directory."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message, ErrorCode.INVALID_INPUT, path)


class NotFound(FileOperationError):
    """The path does not exist at call time."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message, ErrorCode.NOT_FOUND, path)


class PermissionDenied(FileOperationError):
    """Metadata query or enumeration denied by the OS."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message, ErrorCode.PERMISSION_DENIED, path)


class IoError(FileOperationError):
    """Catch-all for underlying platform I/O failures."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message, ErrorCode.INTERNAL_ERROR, path)


class ListingCancelled(FileOperationError):
    """A listing was cancelled through its cancel event."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message, ErrorCode.CANCELLED, path)


def error_from_os(exc: OSError, path: Union[str, Path], action: str) -> FileOperationError:
    """Translate an OSError into the filetools error taxonomy.

    Args:
        exc: Exception raised by the operating system
        path: Path the operation was performed on
        action: Short description of the failed operation (e.g. "list")

    Returns:
        FileOperationError subclass matching the OS error
    """
    if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
        return NotFound(f"Path not found: {path}", path)
    if isinstance(exc, NotADirectoryError) or exc.errno == errno.ENOTDIR:
        return NotADirectory(f"Not a directory: {path}", path)
    if isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM):
        return PermissionDenied(f"Permission denied: {path}", path)
    if isinstance(exc, FileExistsError):
        # Only raised when something other than a directory is in the way
        return NotADirectory(f"Path exists and is not a directory: {path}", path)
    return IoError(f"Failed to {action} {path}: {exc}", path)
