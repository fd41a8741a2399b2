"""
Small helpers for flat tables and lists.
"""

from collections.abc import Hashable, Iterable, Sequence
from typing import Any

from tablekit.core.lookup import is_container
from tablekit.core.types import Table
from tablekit.exceptions import TableTypeError


def compare_tables(t1: Table, t2: Table) -> bool:
    """
    Compare the entries of two simple (non-nested) tables.

    Values are compared with ``==``; nested tables are not descended into.

    Raises:
        TableTypeError: If either argument is not a mapping
    """
    for table in (t1, t2):
        if not is_container(table):
            raise TableTypeError(table, "compare")
    if len(t1) != len(t2):
        return False
    for key, value in t1.items():
        if key not in t2 or t2[key] != value:
            return False
    return True


def list_to_set(items: Iterable[Hashable]) -> set:
    """Convert a list to a set for membership tests."""
    return set(items)


def clone_list(items: Sequence[Any]) -> list:
    """Return a shallow copy of a list."""
    return list(items)
