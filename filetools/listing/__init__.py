"""filetools Listing.

Directory listing engine:
- classify: file / directory / other, symlinks resolved
- list_items: direct children of a directory
- list_nested: every descendant, depth-first
"""

from .classifier import classify
from .lister import (
    ListingResult,
    ListOptions,
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

__all__ = [
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
]
