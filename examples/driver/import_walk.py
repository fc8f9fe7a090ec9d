"""Minimal example driver: walk an import graph and pick modules to compile."""

from __future__ import annotations

from importmatch import IdentifierPool, ImportMatcher, ImportSelector

# Each module lists the modules it imports, by dotted name.
IMPORT_GRAPH: dict[str, list[str]] = {
    "app.main": ["app.util", "mylib.net", "std.stdio"],
    "app.util": ["mylib.internal.cache", "core.memory"],
    "mylib.net": ["mylib.internal.cache", "vendor.zlib"],
    "mylib.internal.cache": [],
    "vendor.zlib": [],
    "std.stdio": [],
    "core.memory": [],
}


def walk(root: str, patterns: list[str]) -> list[str]:
    """Return dotted names of imported modules selected for compilation, in visit order.

    Excluded imports are treated as declaration-only and their own imports
    are not followed.
    """
    pool = IdentifierPool()
    selector = ImportSelector(ImportMatcher(patterns=patterns, pool=pool))
    seen = {root}
    pending = [root]
    while pending:
        current = pending.pop(0)
        for imported in IMPORT_GRAPH.get(current, []):
            if imported in seen:
                continue
            seen.add(imported)
            *packages, name = [pool.intern(part) for part in imported.split(".")]
            if selector.should_compile_imported_module(packages, name, False):
                pending.append(imported)
    return [record.dotted_name for record in selector.compiled_imports]


if __name__ == "__main__":
    print(walk("app.main", ["app", "mylib", "-mylib.internal"]))
