"""
Duck-typed lookup helpers for nested tables.

A value met while walking a path falls into one of three kinds:

- a container (any ``Mapping``): its keys can be enumerated and its entries
  looked up;
- an indexable value: not a container, but able to resolve a named field,
  either a pydantic model or an object defining ``__getitem__``;
- a scalar: anything else.

Only containers can be enumerated. Indexable values only serve literal
lookups.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from tablekit.core.types import Key


class _Missing:
    """Sentinel type for a field that does not resolve."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

_NON_INDEXABLE = (str, bytes, bytearray)


def is_container(value: Any) -> bool:
    """Check if a value is a table whose keys can be enumerated."""
    return isinstance(value, Mapping)


def supports_field_lookup(value: Any) -> bool:
    """
    Check if a value can resolve a literal field name.

    Containers always can. Strings and bytes cannot, even though they define
    ``__getitem__``, because indexing them by name is never meaningful.
    """
    if is_container(value) or isinstance(value, BaseModel):
        return True
    if isinstance(value, _NON_INDEXABLE):
        return False
    return hasattr(type(value), "__getitem__")


def resolve_field(value: Any, name: Key) -> Any:
    """
    Look up a single field on a container or indexable value.

    Params:
        value: Container, pydantic model or ``__getitem__`` object
        name: Field name or key to look up

    Returns:
        The field value, or ``MISSING`` when the value has no such field or
        does not support field lookup at all. A field holding ``None`` is
        present and returns ``None``.
    """
    if is_container(value):
        # Membership first: indexing a defaultdict would insert the key.
        if name not in value:
            return MISSING
        return value[name]

    if isinstance(value, BaseModel):
        if name in type(value).model_fields:
            return getattr(value, name)
        extra = value.model_extra or {}
        return extra.get(name, MISSING)

    if not supports_field_lookup(value):
        return MISSING

    try:
        return value[name]
    except (LookupError, TypeError, AttributeError, ValueError):
        return MISSING


def container_keys(container: Mapping) -> tuple[Key, ...]:
    """
    Snapshot the keys of a container in its native enumeration order.

    Params:
        container: Mapping to enumerate

    Returns:
        Tuple of keys, in the order the mapping iterates them
    """
    return tuple(container)
