"""
tablekit exception classes.

This package provides all exception types used throughout tablekit for
consistent error handling and reporting.
"""

from tablekit.exceptions.core import (
    BucketLookupError,
    FlagValueError,
    PatternError,
    TableKitError,
    TableTypeError,
)

__all__ = [
    "TableKitError",
    "PatternError",
    "TableTypeError",
    "FlagValueError",
    "BucketLookupError",
]
