"""
Human-readable dumps of nested tables.

Used for debugging: every entry is printed on its own line, child tables are
printed recursively with one more indent step, and tables that contain
themselves are reported instead of recursing forever.
"""

import logging
import sys
from collections.abc import Mapping
from typing import Any, TextIO

from tablekit.core.lookup import is_container
from tablekit.exceptions import TableTypeError
from tablekit.formatting.settings import FormatSettings

logger = logging.getLogger(__name__)


def table_identity(table: Mapping) -> str:
    """Return a short identity placeholder for a table, e.g. ``table: 0x7f...``."""
    return f"table: {id(table):#x}"


def _render_scalar(value: Any) -> str:
    if is_container(value):
        return table_identity(value)
    return repr(value)


def format_table(
    obj: Mapping,
    max_level: int | None = None,
    settings: FormatSettings | None = None,
) -> list[str]:
    """
    Format the contents of a table, recursing into child tables.

    Each entry produces a line of the form ``<indent><key>\\t<value>``. When
    a key is itself a table (a set of tables), recursion goes into the key
    rather than the value.

    Params:
        obj: Table to format
        max_level: Deepest level to recurse into; overrides settings.max_level
        settings: Formatting options

    Returns:
        List of output lines

    Raises:
        TableTypeError: If obj is not a mapping
    """
    if not is_container(obj):
        raise TableTypeError(obj, "print")

    settings = settings or FormatSettings()
    if max_level is None:
        max_level = settings.max_level

    lines: list[str] = []
    _format_level(obj, max_level, 0, settings, [obj], lines)
    return lines


def _format_level(
    obj: Mapping,
    max_level: int | None,
    level: int,
    settings: FormatSettings,
    ancestors: list[Mapping],
    lines: list[str],
) -> None:
    spacer = settings.indent * level
    for key, value in obj.items():
        lines.append(f"{spacer}{key}\t{_render_scalar(value)}")
        child = key if is_container(key) else value
        if not is_container(child):
            continue
        if max_level is not None and max_level <= level:
            continue
        if any(child is ancestor for ancestor in ancestors):
            logger.debug("Reference loop at level %d under key %r", level, key)
            lines.append(f"{spacer}{settings.indent}{settings.reference_loop_marker}")
            continue
        ancestors.append(child)
        _format_level(child, max_level, level + 1, settings, ancestors, lines)
        ancestors.pop()


def print_table(
    obj: Mapping,
    max_level: int | None = None,
    settings: FormatSettings | None = None,
    file: TextIO | None = None,
) -> None:
    """
    Print the contents of a table, recursing into child tables.

    Params:
        obj: Table to print
        max_level: Deepest level to recurse into
        settings: Formatting options
        file: Stream to write to (defaults to sys.stdout)

    Raises:
        TableTypeError: If obj is not a mapping
    """
    stream = file if file is not None else sys.stdout
    for line in format_table(obj, max_level, settings):
        print(line, file=stream)
