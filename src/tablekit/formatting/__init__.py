"""
Formatting helpers for nested tables.

This package provides the debugging dump (``format_table``/``print_table``),
the literal converter (``table_to_string``) and their shared settings.
"""

from tablekit.formatting.printing import format_table, print_table, table_identity
from tablekit.formatting.settings import FormatSettings
from tablekit.formatting.to_string import table_to_string

__all__ = [
    "FormatSettings",
    "format_table",
    "print_table",
    "table_identity",
    "table_to_string",
]
