"""
Range bucket lookup.

A list of buckets partitions the number line into consecutive ranges, each
bounded above by ``upper``. The last bucket normally has no upper bound, so
that every number falls into some bucket.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from tablekit.exceptions import BucketLookupError


class Bucket(BaseModel):
    """One range bucket.

    Params:
        upper: Inclusive upper bound; ``None`` means unbounded
        value: Result for numbers in this bucket; ``None`` means "use the
            bucket's index"
    """

    model_config = ConfigDict(frozen=True)

    upper: float | None = None
    value: Any = None


def range_map_lookup(number: float, buckets: Iterable[Bucket | Mapping]) -> Any:
    """
    Find the first bucket whose upper bound is at least ``number``.

    Params:
        number: Value to place in a bucket
        buckets: Buckets in increasing ``upper`` order, as Bucket instances or
            mappings with ``upper``/``value`` keys

    Returns:
        The matching bucket's value, or its 0-based index when it has none

    Raises:
        BucketLookupError: If no bucket accepts the number

    Examples:
        range_map_lookup(5, [{"upper": 3}, {"upper": 10}, {}]) -> 1
        range_map_lookup(50, [{"upper": 10, "value": "low"}, {"value": "high"}]) -> "high"
    """
    count = 0
    for index, bucket in enumerate(buckets):
        count += 1
        if not isinstance(bucket, Bucket):
            bucket = Bucket.model_validate(bucket)
        if bucket.upper is None or bucket.upper >= number:
            return bucket.value if bucket.value is not None else index
    raise BucketLookupError(number, count)
