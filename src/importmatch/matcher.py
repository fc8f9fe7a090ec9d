"""ImportMatcher: build-once owner of the match table."""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Sequence

from importmatch.errors import InvalidInputError
from importmatch.identifiers import Identifier, IdentifierPool
from importmatch.table import DEFAULT_EXCLUDED_ROOTS, MatchTable

__all__ = ["ImportMatcher"]


class ImportMatcher:
    """Decides whether imported modules are compiled, using include/exclude patterns.

    The table is built lazily on the first query and never changes
    afterwards. A failed build leaves the matcher unbuilt and the next
    query retries, raising the same error.

    Thread safety:
        Construction is serialized by an internal lock. Once built, decide()
        only reads and is safe to call concurrently.
    """

    def __init__(
        self,
        patterns: Iterable[str] = (),
        pool: IdentifierPool | None = None,
        default_exclusions: Iterable[str] = DEFAULT_EXCLUDED_ROOTS,
    ) -> None:
        """Initialize the matcher without building the table.

        Args:
            patterns: Raw module patterns in declaration order.
            pool: Identifier pool shared with the module loader. A new pool
                is created if omitted.
            default_exclusions: Reserved top-level names excluded by default.
        """
        self._patterns: tuple[str, ...] = tuple(patterns)
        self._pool = pool if pool is not None else IdentifierPool()
        self._default_exclusions: tuple[str, ...] = tuple(default_exclusions)
        self._table: MatchTable | None = None
        self._lock = threading.Lock()
        self._logger: logging.Logger = logging.getLogger("importmatch.matcher")

    @property
    def patterns(self) -> tuple[str, ...]:
        return self._patterns

    @property
    def pool(self) -> IdentifierPool:
        return self._pool

    @property
    def is_built(self) -> bool:
        return self._table is not None

    def build(self) -> tuple[MatchTable, bool]:
        """Build the match table once.

        Repeated calls return the same table object.

        Returns:
            The match table and its include-by-default policy.

        Raises:
            MalformedPatternError: If a pattern is malformed. The matcher
                stays unbuilt.
        """
        with self._lock:
            if self._table is None:
                self._table = MatchTable.build(
                    self._patterns,
                    self._pool,
                    default_exclusions=self._default_exclusions,
                )
            table = self._table
        return table, table.include_by_default

    @property
    def table(self) -> MatchTable:
        """The match table, built on first access."""
        return self.build()[0]

    @property
    def include_by_default(self) -> bool:
        return self.build()[1]

    def module_path(
        self,
        packages: Sequence[Identifier],
        name: Identifier,
        is_package_module: bool = False,
    ) -> tuple[Identifier, ...]:
        """Build the lookup key for a module.

        Args:
            packages: Enclosing package identifiers, outermost first.
            name: The module's own identifier.
            is_package_module: Whether the module is a package's own index
                module; appends the pool's package sentinel.

        Raises:
            InvalidInputError: If any component is not an Identifier.
        """
        path = tuple(packages) + (name,)
        if is_package_module:
            path += (self._pool.package,)
        for component in path:
            if not isinstance(component, Identifier):
                raise InvalidInputError(
                    message=f"Module path components must be Identifier, got {type(component).__name__}"
                )
        return path

    def decide(self, module_path: Sequence[Identifier]) -> bool:
        """Return True if the module at module_path should be compiled now.

        Args:
            module_path: Identifiers from the shared pool, outermost first.

        Returns:
            True to compile the module body, False for declaration-only.
        """
        table, _ = self.build()
        decision = table.decide(module_path)
        self._logger.debug(
            "Import decision: module=%s decision=%s",
            ".".join(str(c) for c in module_path),
            "include" if decision else "exclude",
        )
        return decision
