"""
Wildcard path iteration over nested tables.
"""

from tablekit.iteration.values import (
    PathMatch,
    WildcardPathIterator,
    iter_matches,
    values,
)

__all__ = [
    "PathMatch",
    "WildcardPathIterator",
    "iter_matches",
    "values",
]
