"""
Tests for the flat table helpers.
"""

import pytest

from tablekit.exceptions import TableTypeError
from tablekit.tables import clone_list, compare_tables, list_to_set


class TestCompareTables:
    """Test compare_tables."""

    def test_equal_tables(self):
        """Tables with the same entries compare equal regardless of order."""
        assert compare_tables({"a": 1, "b": 2}, {"b": 2, "a": 1})
        assert compare_tables({}, {})

    def test_different_values(self):
        """A differing value makes tables unequal."""
        assert not compare_tables({"a": 1}, {"a": 2})

    def test_different_keys(self):
        """Extra or missing keys make tables unequal."""
        assert not compare_tables({"a": 1}, {"a": 1, "b": 2})
        assert not compare_tables({"a": 1, "b": 2}, {"a": 1})
        assert not compare_tables({"a": None}, {"b": None})

    def test_nested_tables_compared_by_value(self):
        """Nested values are compared with ==, not descended into."""
        assert compare_tables({"a": {"x": 1}}, {"a": {"x": 1}})

    def test_non_table_rejected(self):
        """Both arguments must be mappings."""
        with pytest.raises(TableTypeError):
            compare_tables({"a": 1}, [("a", 1)])


class TestListHelpers:
    """Test list_to_set and clone_list."""

    def test_list_to_set(self):
        """Duplicates collapse into a set."""
        assert list_to_set(["a", "b", "a"]) == {"a", "b"}

    def test_clone_list_is_shallow_copy(self):
        """The clone is a new list holding the same items."""
        inner = {"x": 1}
        original = [1, inner]

        clone = clone_list(original)

        assert clone == original
        assert clone is not original
        assert clone[1] is inner
