#!/usr/bin/env python3
r"""Filters deciding which listed entries are kept.

A Filter is an immutable tagged value; ``matches`` is the single dispatch
point over its tag:
- RAW: the final segment's extension equals the text exactly
- PATH: the full path contains the text
- REGEX: the regular expression finds a match anywhere in the full path
- GLOB: the final segment matches a shell-style pattern

Matching is case-sensitive and has no side effects.

Example:
    >>> matches(Filter.raw("lua"), "/scripts/init.lua")
    True
    >>> matches(Filter.regex(r"test_.*\.py$"), "src/test_api.py")
    True
"""

import fnmatch
import os
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Pattern, Union

from filetools.core.path_utils import get_extension, get_filename
from filetools.core.validators import validate_extension, validate_pattern, validate_regex


class PatternType(Enum):
    """Filter matching strategy."""

    RAW = "raw"  # Extension equality (lua, txt)
    PATH = "path"  # Substring of the full path (src/lib)
    REGEX = "regex"  # Regular expressions
    GLOB = "glob"  # Shell-style patterns on the name (*.py, data_??.csv)


@dataclass(frozen=True)
class Filter:
    """A single filter; build it with one of the classmethod constructors."""

    pattern_type: PatternType
    text: str
    compiled: Optional[Pattern[str]] = field(default=None, compare=False, repr=False)

    @classmethod
    def raw(cls, extension: str) -> "Filter":
        """Match entries whose extension is exactly ``extension``.

        Raises:
            ValidationError: If extension is empty or contains '.' or '/'
        """
        validate_extension(extension)
        return cls(PatternType.RAW, extension)

    @classmethod
    def path(cls, fragment: Union[str, os.PathLike]) -> "Filter":
        """Match entries whose full path contains ``fragment``."""
        text = os.fspath(fragment)
        validate_pattern(text)
        return cls(PatternType.PATH, text)

    @classmethod
    def regex(cls, pattern: str) -> "Filter":
        """Match entries whose full path contains a match for ``pattern``."""
        return cls(PatternType.REGEX, pattern, validate_regex(pattern))

    @classmethod
    def glob(cls, pattern: str) -> "Filter":
        """Match entries whose name matches the shell-style ``pattern``."""
        validate_pattern(pattern)
        return cls(PatternType.GLOB, pattern)


def matches(filter: Filter, name: Union[str, os.PathLike]) -> bool:
    """Check whether a candidate path or name is accepted by a filter.

    Args:
        filter: Filter to apply
        name: Candidate; RAW and GLOB look at its final segment, PATH and
            REGEX at the whole string

    Returns:
        True if the candidate matches
    """
    candidate = os.fspath(name)

    if filter.pattern_type is PatternType.RAW:
        return get_extension(candidate) == filter.text
    elif filter.pattern_type is PatternType.PATH:
        return filter.text in candidate
    elif filter.pattern_type is PatternType.REGEX:
        compiled = filter.compiled if filter.compiled is not None else re.compile(filter.text)
        return compiled.search(candidate) is not None
    elif filter.pattern_type is PatternType.GLOB:
        return fnmatch.fnmatchcase(get_filename(candidate), filter.text)

    raise ValueError(f"Unsupported filter type: {filter.pattern_type}")
