"""Shared test fixtures for the importmatch test suite."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from importmatch.identifiers import Identifier, IdentifierPool
from importmatch.matcher import ImportMatcher


@pytest.fixture
def pool() -> IdentifierPool:
    """A fresh identifier pool."""
    return IdentifierPool()


@pytest.fixture
def path(pool: IdentifierPool) -> Callable[[str], tuple[Identifier, ...]]:
    """Factory turning 'foo.bar' into a module path interned in the shared pool."""

    def factory(dotted: str) -> tuple[Identifier, ...]:
        return tuple(pool.intern(name) for name in dotted.split("."))

    return factory


@pytest.fixture
def make_matcher(pool: IdentifierPool) -> Callable[..., ImportMatcher]:
    """Factory for matchers sharing the test's identifier pool."""

    def factory(patterns: list[str], **kwargs: Any) -> ImportMatcher:
        return ImportMatcher(patterns=patterns, pool=pool, **kwargs)

    return factory


@pytest.fixture
def config_yaml(tmp_path: Any) -> str:
    """Write a sample config YAML file and return its path."""
    content = """
include_imports:
  enabled: true
  patterns: ["mylib", "-mylib.internal"]
  verbose: true
"""
    yaml_file = tmp_path / "importmatch.yaml"
    yaml_file.write_text(content)
    return str(yaml_file)
