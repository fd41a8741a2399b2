"""
Lazy iteration over the deep children of a table.

``values(root, "*.remove")`` yields ``root[k]["remove"]`` for every key ``k``
of ``root`` that has a ``remove`` field. A pattern may hold any number of
wildcards. They are enumerated like the wheels of an odometer: the last
wildcard cycles fastest and carries into the one before it when its keys run
out.

Example:
    >>> env = {"os": {"remove": 1}, "table": {"remove": 2}, "math": {}}
    >>> list(values(env, "*.remove"))
    [1, 2]
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from attrs import frozen

from tablekit.core.lookup import MISSING, container_keys, is_container, resolve_field
from tablekit.core.path_utils import DEFAULT_SYNTAX, PathPattern, PatternSyntax
from tablekit.core.types import Key, WildcardKeys

logger = logging.getLogger(__name__)

_DEAD_END = object()


@dataclass
class _Wheel:
    """Enumeration cursor for one wildcard level."""

    segment_index: int
    container: Mapping
    keys: tuple[Key, ...]
    position: int = 0

    @property
    def key(self) -> Key:
        return self.keys[self.position]

    @property
    def value(self) -> Any:
        """Current entry, or MISSING if its key was deleted since the snapshot."""
        return resolve_field(self.container, self.key)


@frozen
class PathMatch:
    """A resolved value together with the wildcard keys that reached it."""

    keys: WildcardKeys
    value: Any


class WildcardPathIterator:
    """
    Forward-only iterator over every value a wildcard pattern reaches.

    Literal segments are resolved with ``resolve_field`` and may therefore step
    into containers, pydantic models or ``__getitem__`` objects. Wildcard
    segments enumerate the keys of a container; a non-container can never be
    the source of a wildcard.

    Paths that cannot be completed (missing field, scalar where a lookup is
    needed, empty container under a wildcard) are skipped silently. Once the
    outermost wildcard runs out of keys the iterator is exhausted for good.

    The root container is never modified. Mutating it while iterating gives
    unspecified results, but never raises: keys are snapshotted per level, so
    added keys may be missed, and a key deleted between calls is skipped as a
    dead end.
    """

    def __init__(
        self,
        root: Any,
        pattern: str | PathPattern,
        syntax: PatternSyntax = DEFAULT_SYNTAX,
    ):
        """
        Initialize the iterator.

        Params:
            root: Table to walk
            pattern: Dotted pattern string or an already parsed PathPattern
            syntax: Tokens used to parse a string pattern

        Raises:
            PatternError: If the pattern is empty or malformed
        """
        self.root = root
        if isinstance(pattern, PathPattern):
            self.pattern = pattern
        else:
            self.pattern = PathPattern.parse(pattern, syntax)
        self._wheels: list[_Wheel] = []
        self._keys: WildcardKeys = ()
        self._started = False
        self._exhausted = False

    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else f"keys={self._keys!r}"
        return f"{type(self).__name__}({str(self.pattern)!r}, {state})"

    def __iter__(self) -> "WildcardPathIterator":
        return self

    def __next__(self) -> Any:
        if self._exhausted:
            raise StopIteration

        # The previous value was produced by the current cursors; move on.
        if self._started and not self._advance():
            self._finish()
        self._started = True

        while not self._exhausted:
            value = self._resolve()
            if value is not _DEAD_END:
                self._keys = tuple(wheel.key for wheel in self._wheels)
                return value
            if not self._advance():
                self._finish()

        raise StopIteration

    @property
    def exhausted(self) -> bool:
        """Check if the iterator has signalled exhaustion."""
        return self._exhausted

    @property
    def keys(self) -> WildcardKeys:
        """Wildcard keys of the most recently produced value, outermost first."""
        return self._keys

    def _resolve(self) -> Any:
        """
        Walk the pattern from the innermost cursor to the end.

        Outer wildcard levels keep their keys, so resolution resumes at the
        container of the deepest level instead of at the root. Any level
        reached for the first time starts at its container's first key.

        Returns:
            The resolved value, or ``_DEAD_END`` if the path cannot be completed
        """
        segments = self.pattern.segments
        if self._wheels:
            wheel = self._wheels[-1]
            value = wheel.value
            start = wheel.segment_index + 1
            if value is MISSING:
                logger.debug(
                    "Dead end at segment %d of %r: key %r was removed",
                    wheel.segment_index,
                    self.pattern.original,
                    wheel.key,
                )
                return _DEAD_END
        else:
            value = self.root
            start = 0

        for index in range(start, len(segments)):
            segment = segments[index]
            if segment.is_wildcard:
                if not is_container(value):
                    logger.debug(
                        "Dead end at segment %d of %r: %s is not enumerable",
                        index,
                        self.pattern.original,
                        type(value).__name__,
                    )
                    return _DEAD_END
                keys = container_keys(value)
                if not keys:
                    logger.debug(
                        "Dead end at segment %d of %r: empty container",
                        index,
                        self.pattern.original,
                    )
                    return _DEAD_END
                wheel = _Wheel(segment_index=index, container=value, keys=keys)
                self._wheels.append(wheel)
                value = wheel.value
            else:
                value = resolve_field(value, segment.name)
                if value is MISSING:
                    logger.debug(
                        "Dead end at segment %d of %r: no field %r",
                        index,
                        self.pattern.original,
                        segment.name,
                    )
                    return _DEAD_END
        return value

    def _advance(self) -> bool:
        """
        Step the innermost wildcard level to its next key.

        A level that runs out of keys is dropped and the level above it is
        stepped instead (a carry). The level is rebuilt from its container's
        first key the next time resolution reaches it.

        Returns:
            False if there is no level left to step
        """
        while self._wheels:
            wheel = self._wheels[-1]
            wheel.position += 1
            if wheel.position < len(wheel.keys):
                return True
            self._wheels.pop()
            if self._wheels:
                logger.debug(
                    "Wildcard level %d of %r exhausted, carrying into level %d",
                    len(self._wheels) + 1,
                    self.pattern.original,
                    len(self._wheels),
                )
        return False

    def _finish(self) -> None:
        self._exhausted = True
        self._wheels.clear()
        logger.debug("Pattern %r exhausted", self.pattern.original)


def values(
    root: Any, pattern: str | PathPattern, syntax: PatternSyntax = DEFAULT_SYNTAX
) -> WildcardPathIterator:
    """
    Iterate over the deep children of a table.

    Params:
        root: Table to walk
        pattern: Dotted pattern, where ``*`` matches every key at its level
        syntax: Tokens used to parse the pattern

    Returns:
        A lazy WildcardPathIterator over the matching values

    Raises:
        PatternError: If the pattern is empty or malformed

    Examples:
        for fn in values(env, "*.remove"): fn()
        list(values({"x": {"p": 10}, "y": {"r": 30}}, "*.*")) -> [10, 30]
    """
    return WildcardPathIterator(root, pattern, syntax)


def iter_matches(
    root: Any, pattern: str | PathPattern, syntax: PatternSyntax = DEFAULT_SYNTAX
) -> Iterator[PathMatch]:
    """
    Iterate over matches of a pattern, keeping the wildcard keys of each.

    Params:
        root: Table to walk
        pattern: Dotted pattern, where ``*`` matches every key at its level
        syntax: Tokens used to parse the pattern

    Yields:
        PathMatch records in the same order ``values`` produces them

    Raises:
        PatternError: If the pattern is empty or malformed (raised on the
            first ``next`` call, as this is a generator)
    """
    iterator = WildcardPathIterator(root, pattern, syntax)
    for value in iterator:
        yield PathMatch(keys=iterator.keys, value=value)
