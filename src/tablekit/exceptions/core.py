"""
Exception classes for tablekit.

This module defines specific exception types for the error conditions that
can occur while parsing path patterns, formatting tables, manipulating flag
values and looking up range buckets.
"""


class TableKitError(Exception):
    """Base exception for all tablekit errors."""

    pass


class PatternError(TableKitError):
    """Raised when a wildcard path pattern cannot be parsed."""

    def __init__(self, pattern: object, reason: str):
        """
        Initialize the exception.

        Params:
            pattern: The rejected pattern (may not be a string)
            reason: Why the pattern is invalid
        """
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class TableTypeError(TableKitError, TypeError):
    """Raised when an operation that needs a table receives something else."""

    def __init__(self, value: object, operation: str):
        """
        Initialize the exception.

        Params:
            value: The offending value
            operation: Name of the operation that required a table
        """
        self.value = value
        self.operation = operation
        super().__init__(
            f"Tried to {operation} {value!r} ({type(value).__name__}), expected a mapping"
        )


class FlagValueError(TableKitError, ValueError):
    """Raised when a flag is not a single power of two."""

    def __init__(self, flag: object, reason: str = "must be a single power of two"):
        """
        Initialize the exception.

        Params:
            flag: The rejected flag value
            reason: Why the flag is invalid
        """
        self.flag = flag
        self.reason = reason
        super().__init__(f"Flag {flag!r} {reason}")


class BucketLookupError(TableKitError, LookupError):
    """Raised when no bucket accepts a number."""

    def __init__(self, number: float, bucket_count: int):
        """
        Initialize the exception.

        Params:
            number: The number that no bucket accepted
            bucket_count: How many buckets were searched
        """
        self.number = number
        self.bucket_count = bucket_count
        super().__init__(
            f"No bucket accepts {number!r} (searched {bucket_count} buckets); "
            "the last bucket should have no upper bound"
        )
