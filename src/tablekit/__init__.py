"""
tablekit - helpers for nested, dictionary-like tables

tablekit provides a lazy wildcard path iterator (``values``), table dump and
string conversion helpers, bit-flag helpers and range bucket lookup.
"""

from importlib.metadata import version

from tablekit.buckets import Bucket, range_map_lookup
from tablekit.exceptions import PatternError, TableKitError
from tablekit.formatting import FormatSettings, print_table, table_to_string
from tablekit.iteration import WildcardPathIterator, iter_matches, values

__version__ = version("tablekit")

__all__ = [
    "__version__",
    "Bucket",
    "FormatSettings",
    "PatternError",
    "TableKitError",
    "WildcardPathIterator",
    "iter_matches",
    "print_table",
    "range_map_lookup",
    "table_to_string",
    "values",
]
