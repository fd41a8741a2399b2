"""
Wildcard path pattern parsing for tablekit.

A pattern is a dotted string such as ``"a.*.value"``. Each segment is either a
literal field name or the wildcard token, which stands for "every key at this
level". Patterns are parsed once and are immutable afterwards.
"""

from dataclasses import dataclass

from attrs import frozen

from tablekit.exceptions import PatternError


@frozen
class PatternSyntax:
    """Separator and wildcard tokens used when parsing a pattern."""

    separator: str = "."
    wildcard: str = "*"


DEFAULT_SYNTAX = PatternSyntax()


@dataclass(frozen=True)
class PathSegment:
    """One segment of a parsed pattern."""

    name: str
    is_wildcard: bool = False

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class PathPattern:
    """
    A parsed wildcard path pattern.

    Use ``PathPattern.parse`` rather than constructing instances directly so
    that the pattern is validated.
    """

    original: str
    segments: tuple[PathSegment, ...]

    def __str__(self) -> str:
        """Return the original pattern string."""
        return self.original

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def wildcard_count(self) -> int:
        """Number of wildcard segments, i.e. the number of enumeration levels."""
        return sum(1 for segment in self.segments if segment.is_wildcard)

    @property
    def has_wildcards(self) -> bool:
        """Check if this pattern enumerates anything."""
        return any(segment.is_wildcard for segment in self.segments)

    @classmethod
    def parse(cls, pattern: str, syntax: PatternSyntax = DEFAULT_SYNTAX) -> "PathPattern":
        """
        Parse a dotted pattern into segments.

        Params:
            pattern: Pattern string (e.g., "*.remove", "a.*.value", "*.*")
            syntax: Separator and wildcard tokens to use

        Returns:
            PathPattern with one PathSegment per separator-delimited part

        Raises:
            PatternError: If the pattern is empty or malformed

        Examples:
            "a.*.value" -> (a, *, value) with one wildcard
            "os.remove" -> (os, remove) with no wildcards
        """
        validate_pattern_format(pattern, syntax)
        segments = tuple(
            PathSegment(name=part, is_wildcard=part == syntax.wildcard)
            for part in pattern.split(syntax.separator)
        )
        return cls(original=pattern, segments=segments)


def validate_pattern_format(pattern: str, syntax: PatternSyntax = DEFAULT_SYNTAX) -> None:
    """
    Validate wildcard pattern format requirements.

    Params:
        pattern: Pattern string to validate
        syntax: Separator and wildcard tokens to validate against

    Raises:
        PatternError: If pattern format is invalid
    """
    if not pattern or not isinstance(pattern, str):
        raise PatternError(pattern, "must be a non-empty string")

    if pattern.strip() != pattern:
        raise PatternError(pattern, "must not have leading or trailing whitespace")

    for index, part in enumerate(pattern.split(syntax.separator)):
        if not part:
            raise PatternError(
                pattern, f"segment {index} is empty (stray '{syntax.separator}')"
            )
        if syntax.wildcard in part and part != syntax.wildcard:
            raise PatternError(
                pattern,
                f"segment {part!r} mixes the wildcard '{syntax.wildcard}' with other text",
            )
