"""
Conversion of a table to a table-constructor literal.

Only values are rendered; keys are dropped. The output is meant for simple
configuration tables such as lists of numbers or strings, e.g.
``{1,2,"three"}``.
"""

from collections.abc import Mapping
from numbers import Number
from typing import Any

from tablekit.core.lookup import is_container
from tablekit.exceptions import TableTypeError
from tablekit.formatting.printing import table_identity
from tablekit.formatting.settings import FormatSettings


def table_to_string(
    table: Mapping,
    recursive: bool = False,
    settings: FormatSettings | None = None,
) -> str:
    """
    Render the values of a table as a brace-delimited literal.

    Params:
        table: Table whose values are rendered in iteration order
        recursive: Render child tables as literals too instead of as an
            identity placeholder. Only direct children are expanded;
            grandchildren are always placeholders.
        settings: Formatting options (only ``separator`` is used)

    Returns:
        The literal, ``{}`` for an empty table

    Raises:
        TableTypeError: If table is not a mapping

    Examples:
        {"a": 1, "b": "x", "c": None, "d": True} -> '{1,"x",nil,true}'
    """
    if not is_container(table):
        raise TableTypeError(table, "convert to string")

    settings = settings or FormatSettings()
    parts = [_render_value(value, recursive, settings) for value in table.values()]
    return "{" + settings.separator.join(parts) + "}"


def _render_value(value: Any, recursive: bool, settings: FormatSettings) -> str:
    if value is None:
        return "nil"
    # bool before Number: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Number):
        return str(value)
    if isinstance(value, str):
        return f'"{value}"'
    if is_container(value):
        if recursive:
            return table_to_string(value, recursive=False, settings=settings)
        return table_identity(value)
    return str(value)
