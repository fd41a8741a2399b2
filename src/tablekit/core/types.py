"""
Core type definitions for tablekit.

This module contains the type aliases shared by the path iterator, the
formatters and the flag helpers.
"""

from collections.abc import Hashable, Mapping
from typing import Any

Key = Hashable

Table = Mapping[Any, Any]

WildcardKeys = tuple[Key, ...]

FlagValue = int
