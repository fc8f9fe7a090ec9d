"""Module pattern parsing for the include-imports option."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from importmatch.errors import MalformedPatternError
from importmatch.types import MatchEntry

if TYPE_CHECKING:
    from importmatch.identifiers import IdentifierPool

__all__ = ["parse_depth", "parse_pattern", "split_pattern_option", "WILDCARD"]

WILDCARD = "."


def _strip_exclude(pattern: str) -> tuple[bool, str]:
    if pattern.startswith("-"):
        return True, pattern[1:]
    return False, pattern


def parse_depth(pattern: str) -> int:
    """Return the component depth of a module pattern.

    A leading '-' is ignored. The wildcard '.' has depth 0; any other
    pattern has one more component than it has separators.

    Args:
        pattern: Raw module pattern, e.g. "foo.bar" or "-std".

    Returns:
        The number of components the pattern matches against.
    """
    _, body = _strip_exclude(pattern)
    if body == WILDCARD:
        return 0
    return body.count(".") + 1


def parse_pattern(pattern: str, pool: IdentifierPool) -> MatchEntry:
    """Parse a raw module pattern into a MatchEntry.

    Args:
        pattern: Raw module pattern. Grammar: -?(\\.|name(\\.name)*)
        pool: Identifier pool used to intern each component.

    Returns:
        A MatchEntry whose components are interned identifiers, outermost
        package first.

    Raises:
        MalformedPatternError: If any component is empty.
    """
    is_exclude, body = _strip_exclude(pattern)
    if body == WILDCARD:
        return MatchEntry(depth=0, is_exclude=is_exclude, components=(), pattern=pattern)

    names = body.split(".")
    if any(not name for name in names):
        raise MalformedPatternError(pattern=pattern)

    components = tuple(pool.intern(name) for name in names)
    return MatchEntry(
        depth=len(components),
        is_exclude=is_exclude,
        components=components,
        pattern=pattern,
    )


def split_pattern_option(values: Iterable[str]) -> list[str]:
    """Flatten repeated option values into raw patterns.

    Each value may itself be a comma-separated list, so
    ``["foo,-foo.bar", "baz"]`` yields ``["foo", "-foo.bar", "baz"]``.
    Declaration order is preserved. An empty value contributes nothing;
    items are not otherwise validated here.
    """
    patterns: list[str] = []
    for value in values:
        if not value:
            continue
        for item in value.split(","):
            patterns.append(item.strip())
    return patterns
