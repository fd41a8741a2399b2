"""
Configuration for the table formatters.
"""

from pydantic import BaseModel, ConfigDict, Field


class FormatSettings(BaseModel):
    """Options shared by ``format_table`` and ``table_to_string``.

    Params:
        indent: String repeated once per nesting level by ``format_table``
        max_level: Deepest nesting level ``format_table`` descends into
            (``None`` for unlimited, ``0`` for the top level only)
        reference_loop_marker: Text printed instead of recursing into a table
            that is already being printed
        separator: Text placed between values by ``table_to_string``
    """

    model_config = ConfigDict(frozen=True)

    indent: str = " "
    max_level: int | None = Field(default=None, ge=0)
    reference_loop_marker: str = "<reference loop>"
    separator: str = ","
