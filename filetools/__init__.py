"""filetools - Filesystem traversal and naming utilities.

Public API:
- Directory creation: create_dir, create_dirs, create_multiple_directories,
  create_numeric_directories
- Listing: list_items, list_nested and the list_*files / list_*directories
  shortcuts, configured with ListOptions
- Filters: Filter, PatternType, matches
- Naming: generate_name, generate_timestamped_name, generate_uuid4_name,
  generate_n_digit_name
- Path predicates: is_subdir, path_contains

Example:
    >>> from filetools import Filter, list_nested
    >>> result = list_nested("/scripts", Filter.raw("lua"))
"""

from filetools.core.constants import FILETOOLS_VERSION, EntryKind, ErrorCode, ErrorPolicy
from filetools.core.errors import (
    FileOperationError,
    IoError,
    ListingCancelled,
    NotADirectory,
    NotFound,
    PermissionDenied,
)
from filetools.core.path_utils import is_subdir, path_contains
from filetools.core.validators import ValidationError
from filetools.directories import (
    create_dir,
    create_dirs,
    create_multiple_directories,
    create_numeric_directories,
)
from filetools.listing import (
    ListingResult,
    ListOptions,
    classify,
    list_directories,
    list_directories_with_filter,
    list_files,
    list_files_with_filter,
    list_items,
    list_nested,
    list_nested_directories,
    list_nested_directories_with_filter,
    list_nested_files,
    list_nested_files_with_filter,
)
from filetools.naming import (
    generate_n_digit_name,
    generate_name,
    generate_timestamped_name,
    generate_uuid4_name,
)
from filetools.rules import Filter, PatternType, matches

__version__ = FILETOOLS_VERSION

__all__ = [
    # Errors
    "ErrorCode",
    "FileOperationError",
    "NotADirectory",
    "NotFound",
    "PermissionDenied",
    "IoError",
    "ListingCancelled",
    "ValidationError",
    # Directory creation
    "create_dir",
    "create_dirs",
    "create_multiple_directories",
    "create_numeric_directories",
    # Filters
    "Filter",
    "PatternType",
    "matches",
    # Listing
    "EntryKind",
    "ErrorPolicy",
    "classify",
    "ListingResult",
    "ListOptions",
    "list_items",
    "list_nested",
    "list_files",
    "list_files_with_filter",
    "list_nested_files",
    "list_nested_files_with_filter",
    "list_directories",
    "list_directories_with_filter",
    "list_nested_directories",
    "list_nested_directories_with_filter",
    # Naming
    "generate_name",
    "generate_timestamped_name",
    "generate_uuid4_name",
    "generate_n_digit_name",
    # Path predicates
    "is_subdir",
    "path_contains",
]
