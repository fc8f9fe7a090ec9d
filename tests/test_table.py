"""Tests for MatchTable construction and lookup."""

from __future__ import annotations

import logging
from typing import Callable

import pytest

from importmatch.errors import MalformedPatternError
from importmatch.identifiers import IdentifierPool
from importmatch.table import DEFAULT_EXCLUDED_ROOTS, MatchTable

PathFactory = Callable[[str], tuple]


# === Construction ===


class TestMatchTableBuild:
    """Tests for MatchTable.build() ordering and default policy."""

    def test_no_patterns_has_only_default_exclusions(self, pool: IdentifierPool) -> None:
        table = MatchTable.build([], pool)
        assert table.describe() == [f"-{name} (default)" for name in DEFAULT_EXCLUDED_ROOTS]
        assert table.include_by_default is True

    def test_sorted_by_depth_descending(self, pool: IdentifierPool) -> None:
        table = MatchTable.build(["a", "-b.c.d", ".", "e.f"], pool, default_exclusions=())
        assert [entry.depth for entry in table] == [3, 2, 1, 0]

    def test_equal_depth_keeps_declaration_order(self, pool: IdentifierPool) -> None:
        table = MatchTable.build(["x.y", "a", "-b", "c.d", "c"], pool, default_exclusions=())
        assert table.describe() == ["x.y", "c.d", "a", "-b", "c"]

    def test_defaults_follow_user_depth_one_entries(self, pool: IdentifierPool) -> None:
        """Built-in exclusions go after user depth-1 entries and before the wildcard."""
        table = MatchTable.build(["-.", "foo", "std.stdio"], pool, default_exclusions=("std", "core"))
        assert table.describe() == [
            "std.stdio",
            "foo",
            "-std (default)",
            "-core (default)",
            "-.",
        ]

    def test_default_entries_are_flagged(self, pool: IdentifierPool) -> None:
        table = MatchTable.build(["foo"], pool)
        defaults = [entry for entry in table if entry.is_default]
        assert [entry.components[0].name for entry in defaults] == list(DEFAULT_EXCLUDED_ROOTS)
        assert all(entry.is_exclude and entry.depth == 1 for entry in defaults)

    def test_exclude_only_keeps_include_by_default(self, pool: IdentifierPool) -> None:
        table = MatchTable.build(["-foo", "-bar.baz"], pool)
        assert table.include_by_default is True

    def test_first_inclusive_pattern_flips_default(self, pool: IdentifierPool) -> None:
        table = MatchTable.build(["-foo", "mylib", "-other"], pool)
        assert table.include_by_default is False

    def test_inclusive_wildcard_also_flips_default(self, pool: IdentifierPool) -> None:
        """'.' is inclusive; it flips the default but then matches everything anyway."""
        table = MatchTable.build(["."], pool)
        assert table.include_by_default is False

    def test_malformed_pattern_aborts_build(self, pool: IdentifierPool) -> None:
        with pytest.raises(MalformedPatternError) as exc_info:
            MatchTable.build(["foo", "foo..bar", "baz"], pool)
        assert exc_info.value.pattern == "foo..bar"

    def test_built_twice_gives_identical_decisions(
        self, pool: IdentifierPool, path: PathFactory
    ) -> None:
        patterns = ["-foo", "foo.bar", "mylib", "-std.internal"]
        first = MatchTable.build(patterns, pool)
        second = MatchTable.build(patterns, pool)
        for dotted in ["foo", "foo.bar.baz", "mylib.x", "std", "std.internal.x", "zzz"]:
            assert first.decide(path(dotted)) == second.decide(path(dotted))
        assert first.describe() == second.describe()


# === Duplicates ===


class TestMatchTableDuplicates:
    """Duplicate user patterns resolve first-wins and are reported."""

    def test_duplicate_is_reported(self, pool: IdentifierPool, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="importmatch.table"):
            table = MatchTable.build(["foo.bar", "foo.bar"], pool)
        assert len(table.duplicates) == 1
        kept, shadowed = table.duplicates[0]
        assert kept.pattern == "foo.bar"
        assert shadowed.pattern == "foo.bar"
        assert "duplicates earlier pattern" in caplog.text

    def test_conflicting_duplicate_first_wins(
        self, pool: IdentifierPool, path: PathFactory, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="importmatch.table"):
            table = MatchTable.build(["-foo.bar", "foo.bar"], pool)
        assert table.decide(path("foo.bar.x")) is False
        assert "conflicts with earlier pattern '-foo.bar'" in caplog.text

    def test_user_rule_for_reserved_root_is_not_a_duplicate(self, pool: IdentifierPool) -> None:
        table = MatchTable.build(["std"], pool)
        assert table.duplicates == []

    def test_distinct_patterns_have_no_duplicates(self, pool: IdentifierPool) -> None:
        table = MatchTable.build(["foo", "foo.bar", "-bar"], pool)
        assert table.duplicates == []


# === Lookup ===


class TestMatchTableDecide:
    """Tests for MatchTable.decide()."""

    def test_longer_inclusive_pattern_beats_shorter_exclusion(
        self, pool: IdentifierPool, path: PathFactory
    ) -> None:
        table = MatchTable.build(["-foo", "foo.bar"], pool)
        assert table.decide(path("foo.bar.baz")) is True

    def test_falls_through_to_shorter_exclusion(self, pool: IdentifierPool, path: PathFactory) -> None:
        table = MatchTable.build(["-foo", "foo.bar"], pool)
        assert table.decide(path("foo.other")) is False

    def test_longest_prefix_wins_regardless_of_declaration_order(
        self, pool: IdentifierPool, path: PathFactory
    ) -> None:
        for patterns in (["foo", "-foo.bar"], ["-foo.bar", "foo"]):
            table = MatchTable.build(patterns, pool)
            assert table.decide(path("foo.bar.baz")) is False
            assert table.decide(path("foo.baz")) is True

    def test_reserved_roots_excluded_by_default(self, pool: IdentifierPool, path: PathFactory) -> None:
        table = MatchTable.build([], pool)
        assert table.decide(path("std.stdio")) is False
        assert table.decide(path("core.memory")) is False
        assert table.decide(path("object")) is False
        assert table.decide(path("xyz")) is True

    def test_user_rule_overrides_reserved_root(self, pool: IdentifierPool, path: PathFactory) -> None:
        table = MatchTable.build(["std"], pool)
        assert table.decide(path("std.stdio")) is True
        assert table.decide(path("core.memory")) is False

    def test_inclusive_pattern_narrows_scope(self, pool: IdentifierPool, path: PathFactory) -> None:
        table = MatchTable.build(["mylib"], pool)
        assert table.decide(path("other")) is False
        assert table.decide(path("mylib")) is True
        assert table.decide(path("mylib.sub")) is True

    def test_pattern_longer_than_path_does_not_match(self, pool: IdentifierPool, path: PathFactory) -> None:
        table = MatchTable.build(["foo.bar.baz"], pool)
        assert table.decide(path("foo.bar")) is False

    def test_prefix_must_match_whole_components(self, pool: IdentifierPool, path: PathFactory) -> None:
        """'foo' does not match 'foobar'; components compare by identity, not by prefix."""
        table = MatchTable.build(["foo"], pool)
        assert table.decide(path("foobar")) is False

    def test_exclusive_wildcard_excludes_everything_unmatched(
        self, pool: IdentifierPool, path: PathFactory
    ) -> None:
        table = MatchTable.build(["-foo", "-."], pool)
        assert table.include_by_default is True
        assert table.decide(path("anything")) is False

    def test_inclusive_wildcard_keeps_default_exclusions(
        self, pool: IdentifierPool, path: PathFactory
    ) -> None:
        table = MatchTable.build(["foo", "."], pool)
        assert table.decide(path("anything.else")) is True
        assert table.decide(path("std.stdio")) is False

    def test_identifiers_from_another_pool_never_match(self, pool: IdentifierPool) -> None:
        table = MatchTable.build(["foo"], pool)
        other = IdentifierPool()
        assert table.decide((other.intern("foo"),)) is False

    def test_package_sentinel_participates(self, pool: IdentifierPool, path: PathFactory) -> None:
        table = MatchTable.build(["-foo.package"], pool)
        assert table.decide(path("foo") + (pool.package,)) is False
        assert table.decide(path("foo")) is True
