"""Match table construction and lookup.

Entries are kept sorted by depth, longest first, so a linear scan that
stops at the first hit always returns the most specific pattern. Ties
within a depth keep declaration order and built-in exclusions go last in
their depth group, so user patterns override them.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from importmatch.identifiers import Identifier, IdentifierPool
from importmatch.pattern import WILDCARD, parse_pattern
from importmatch.types import MatchEntry

logger = logging.getLogger(__name__)

__all__ = ["MatchTable", "DEFAULT_EXCLUDED_ROOTS"]

DEFAULT_EXCLUDED_ROOTS: tuple[str, ...] = ("std", "core", "etc", "object")


def _insert_index(entries: Sequence[MatchEntry], depth: int) -> int:
    index = 0
    while index < len(entries):
        if depth > entries[index].depth:
            break
        index += 1
    return index


class MatchTable:
    """Immutable, depth-sorted sequence of MatchEntry plus the default policy.

    Use MatchTable.build() to construct one from raw patterns.
    """

    def __init__(
        self,
        entries: Sequence[MatchEntry],
        include_by_default: bool = True,
        duplicates: Sequence[tuple[MatchEntry, MatchEntry]] = (),
    ) -> None:
        self._entries: tuple[MatchEntry, ...] = tuple(entries)
        self._include_by_default = include_by_default
        self._duplicates: tuple[tuple[MatchEntry, MatchEntry], ...] = tuple(duplicates)

    @classmethod
    def build(
        cls,
        patterns: Iterable[str],
        pool: IdentifierPool,
        default_exclusions: Iterable[str] = DEFAULT_EXCLUDED_ROOTS,
    ) -> MatchTable:
        """Parse raw patterns and build a sorted match table.

        Args:
            patterns: Raw module patterns in declaration order.
            pool: Identifier pool shared with the module loader.
            default_exclusions: Reserved top-level names excluded unless a
                user pattern says otherwise.

        Returns:
            A new MatchTable.

        Raises:
            MalformedPatternError: If any pattern has an empty component.
                No table is produced in that case.
        """
        entries: list[MatchEntry] = []
        duplicates: list[tuple[MatchEntry, MatchEntry]] = []
        include_by_default = True

        for raw in patterns:
            entry = parse_pattern(raw, pool)

            for existing in entries:
                if existing.same_target(entry):
                    duplicates.append((existing, entry))
                    cls._warn_duplicate(existing, entry)
                    break

            entries.insert(_insert_index(entries, entry.depth), entry)
            # An explicit inclusion narrows scope to only what is named.
            if include_by_default and not entry.is_exclude:
                logger.debug("Inclusive pattern '%s' switches default to exclusion", raw)
                include_by_default = False

        defaults = [
            MatchEntry(
                depth=1,
                is_exclude=True,
                components=(pool.intern(name),),
                pattern=f"-{name}",
                is_default=True,
            )
            for name in default_exclusions
        ]
        index = _insert_index(entries, 1)
        entries[index:index] = defaults

        table = cls(entries, include_by_default=include_by_default, duplicates=duplicates)
        logger.debug(
            "Built match table: %d entries, include_by_default=%s",
            len(table),
            include_by_default,
        )
        return table

    @staticmethod
    def _warn_duplicate(kept: MatchEntry, shadowed: MatchEntry) -> None:
        if kept.is_exclude != shadowed.is_exclude:
            logger.warning(
                "Module pattern '%s' conflicts with earlier pattern '%s'; the earlier one wins",
                shadowed.pattern,
                kept.pattern,
            )
        else:
            logger.warning(
                "Module pattern '%s' duplicates earlier pattern '%s' and has no effect",
                shadowed.pattern,
                kept.pattern,
            )

    @property
    def include_by_default(self) -> bool:
        """Decision applied when no entry matches."""
        return self._include_by_default

    @property
    def entries(self) -> tuple[MatchEntry, ...]:
        return self._entries

    @property
    def duplicates(self) -> list[tuple[MatchEntry, MatchEntry]]:
        """(kept, shadowed) pairs of user patterns naming the same module path."""
        return list(self._duplicates)

    def decide(self, module_path: Sequence[Identifier]) -> bool:
        """Return True if the module at module_path should be compiled.

        The first matching entry decides. A depth-0 entry matches
        unconditionally; it always sorts last, so reaching it means nothing
        more specific matched.
        """
        path = tuple(module_path)
        for entry in self._entries:
            if entry.depth == 0 or entry.matches(path):
                return not entry.is_exclude
        return self._include_by_default

    def describe(self) -> list[str]:
        """Render entries back to pattern syntax, in lookup order."""
        lines = []
        for entry in self._entries:
            body = ".".join(str(c) for c in entry.components) if entry.depth else WILDCARD
            text = f"-{body}" if entry.is_exclude else body
            if entry.is_default:
                text += " (default)"
            lines.append(text)
        return lines

    def __iter__(self) -> Iterator[MatchEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MatchTable(entries={self.describe()!r}, include_by_default={self._include_by_default})"
