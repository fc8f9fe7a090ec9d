"""Matcher types: MatchEntry, CompiledImport."""

from __future__ import annotations

from dataclasses import dataclass, field

from importmatch.identifiers import Identifier

__all__ = ["MatchEntry", "CompiledImport"]


@dataclass(frozen=True)
class MatchEntry:
    """A single parsed module pattern.

    Attributes:
        depth: Number of leading module path components compared. Depth 0
            matches every module path.
        is_exclude: Whether a match means declaration-only instead of compile.
        components: Interned identifiers, outermost package first.
        pattern: The raw pattern string this entry was parsed from.
        is_default: Whether this is a built-in reserved-root exclusion.
    """

    depth: int
    is_exclude: bool
    components: tuple[Identifier, ...] = ()
    pattern: str = ""
    is_default: bool = False

    def matches(self, module_path: tuple[Identifier, ...]) -> bool:
        """Return True if this entry's components prefix module_path by identity."""
        if self.depth > len(module_path):
            return False
        for own, other in zip(self.components, module_path):
            if own is not other:
                return False
        return True

    def same_target(self, other: MatchEntry) -> bool:
        """Return True if both entries name the same component sequence."""
        return self.depth == other.depth and all(
            a is b for a, b in zip(self.components, other.components)
        )


@dataclass
class CompiledImport:
    """An imported module selected for full compilation."""

    packages: tuple[Identifier, ...]
    name: Identifier
    is_package_module: bool = False
    source_file: str | None = None
    module_path: tuple[Identifier, ...] = field(default=(), repr=False)

    @property
    def dotted_name(self) -> str:
        """Dotted module name, e.g. 'foo.bar'."""
        return ".".join([str(p) for p in self.packages] + [str(self.name)])
