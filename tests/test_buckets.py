"""
Tests for range bucket lookup.
"""

import pytest
from pydantic import ValidationError

from tablekit.buckets import Bucket, range_map_lookup
from tablekit.exceptions import BucketLookupError


class TestRangeMapLookup:
    """Test range_map_lookup."""

    def test_returns_bucket_value(self):
        """The first admitting bucket's value is returned."""
        buckets = [
            Bucket(upper=10, value="low"),
            Bucket(upper=100, value="mid"),
            Bucket(value="high"),
        ]

        assert range_map_lookup(5, buckets) == "low"
        assert range_map_lookup(10, buckets) == "low"
        assert range_map_lookup(11, buckets) == "mid"
        assert range_map_lookup(1000, buckets) == "high"

    def test_returns_index_without_value(self):
        """Buckets without a value report their 0-based index."""
        buckets = [{"upper": 3}, {"upper": 10}, {}]

        assert range_map_lookup(1, buckets) == 0
        assert range_map_lookup(5, buckets) == 1
        assert range_map_lookup(50, buckets) == 2

    def test_falsy_value_is_returned(self):
        """Zero and False are real values, not "no value"."""
        assert range_map_lookup(1, [Bucket(upper=5, value=0)]) == 0
        assert range_map_lookup(9, [Bucket(upper=5), Bucket(value=False)]) is False

    def test_no_bucket_matches(self):
        """A number above every bound raises BucketLookupError."""
        with pytest.raises(BucketLookupError) as exc_info:
            range_map_lookup(50, [{"upper": 10}, {"upper": 20}])

        assert exc_info.value.number == 50
        assert exc_info.value.bucket_count == 2
        assert isinstance(exc_info.value, LookupError)

    def test_empty_bucket_list(self):
        """No buckets means no match."""
        with pytest.raises(BucketLookupError):
            range_map_lookup(1, [])

    def test_invalid_bucket_mapping(self):
        """Mappings are validated as Bucket models."""
        with pytest.raises(ValidationError):
            range_map_lookup(1, [{"upper": "not a number"}])
