"""
Core tablekit components.

This package provides pattern parsing, duck-typed field lookup and the type
aliases shared by the rest of the library.
"""

from tablekit.core.lookup import (
    MISSING,
    container_keys,
    is_container,
    resolve_field,
    supports_field_lookup,
)
from tablekit.core.path_utils import (
    DEFAULT_SYNTAX,
    PathPattern,
    PathSegment,
    PatternSyntax,
    validate_pattern_format,
)
from tablekit.core.types import FlagValue, Key, Table, WildcardKeys

__all__ = [
    "MISSING",
    "container_keys",
    "is_container",
    "resolve_field",
    "supports_field_lookup",
    "DEFAULT_SYNTAX",
    "PathPattern",
    "PathSegment",
    "PatternSyntax",
    "validate_pattern_format",
    "FlagValue",
    "Key",
    "Table",
    "WildcardKeys",
]
