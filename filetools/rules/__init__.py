"""filetools Rules.

Filters that decide which listed entries end up in a listing result:
- PatternType: the closed set of matching strategies
- Filter: immutable filter value
- matches: single dispatch function over the filter type
"""

from .patterns import Filter, PatternType, matches

__all__ = [
    "PatternType",
    "Filter",
    "matches",
]
