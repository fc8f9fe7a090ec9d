"""Identifier interning for module path components."""

from __future__ import annotations

import threading

from importmatch.errors import InvalidInputError

__all__ = ["Identifier", "IdentifierPool", "PACKAGE_SENTINEL"]

PACKAGE_SENTINEL = "package"


class Identifier:
    """An interned name handle.

    Identifiers are only ever created by an IdentifierPool. Equality and
    hashing are by identity, so two handles compare equal only when the
    same pool issued them for the same name.
    """

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Identifier({self.name!r})"

    def __str__(self) -> str:
        return self.name


class IdentifierPool:
    """Canonical store of Identifier handles.

    The pattern parser and the module loader must share one pool, otherwise
    identity comparison between pattern components and module path
    components never succeeds.

    Thread safety:
        Internally synchronized. intern() is safe to call concurrently.
    """

    def __init__(self) -> None:
        self._ids: dict[str, Identifier] = {}
        self._lock = threading.Lock()

    def intern(self, name: str) -> Identifier:
        """Return the canonical Identifier for name, creating it on first use.

        Raises:
            InvalidInputError: If name is empty or not a string.
        """
        if not isinstance(name, str) or not name:
            raise InvalidInputError(message=f"Identifier name must be a non-empty string, got {name!r}")
        with self._lock:
            ident = self._ids.get(name)
            if ident is None:
                ident = Identifier(name)
                self._ids[name] = ident
            return ident

    def lookup(self, name: str) -> Identifier | None:
        """Return the Identifier for name if it has been interned, else None."""
        with self._lock:
            return self._ids.get(name)

    @property
    def package(self) -> Identifier:
        """The trailing path component used for a package's own module."""
        return self.intern(PACKAGE_SENTINEL)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._ids

    def __len__(self) -> int:
        with self._lock:
            return len(self._ids)
