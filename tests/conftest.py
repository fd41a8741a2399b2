"""
Shared test fixtures for the tablekit test suite.
"""

import pytest
from pydantic import BaseModel, ConfigDict


class ModuleStub(BaseModel):
    """Pydantic model standing in for a non-table value with named fields."""

    model_config = ConfigDict(extra="allow")

    name: str
    remove: str | None = None


class FieldBag:
    """Plain object that resolves named fields through __getitem__."""

    def __init__(self, **fields):
        self._fields = fields

    def __getitem__(self, name):
        return self._fields[name]


class StrictRecord:
    """Record that reports unknown field names with ValueError, like numpy structured arrays."""

    def __init__(self, **fields):
        self._fields = fields

    def __getitem__(self, name):
        if name not in self._fields:
            raise ValueError(f"no field of name {name}")
        return self._fields[name]


@pytest.fixture
def environment():
    """Environment-like table with a mix of sub-tables, models and scalars.

    Usage:
        def test_something(environment):
            assert list(values(environment, "*.remove")) == [...]
    """
    return {
        "os": {"remove": "os.remove", "rename": "os.rename"},
        "table": {"insert": "table.insert", "remove": "table.remove"},
        "math": {"floor": "math.floor"},
        "version": "5.1",
        "io": ModuleStub(name="io", remove="io.remove"),
        "debug": FieldBag(remove="debug.remove"),
    }


@pytest.fixture
def three_levels():
    """Table nested three levels deep with uneven fan-out."""
    return {
        "a": {"b": {"c": 1, "d": 2}, "e": {"f": 3}},
        "g": {"h": {"i": 4}},
    }
