"""Loader-facing hook deciding which imported modules get compiled."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from importmatch.identifiers import Identifier, IdentifierPool
from importmatch.matcher import ImportMatcher
from importmatch.types import CompiledImport

if TYPE_CHECKING:
    from importmatch.config import Config

__all__ = ["ImportSelector"]

_trace_logger = logging.getLogger("importmatch.compileimport")


class ImportSelector:
    """Called once per imported module, right after it is parsed.

    Selected modules are appended to compiled_imports, which the driver
    may own and consume for scheduling.
    """

    def __init__(
        self,
        matcher: ImportMatcher,
        enabled: bool = True,
        verbose: bool = False,
        compiled_imports: list[CompiledImport] | None = None,
    ) -> None:
        self._matcher = matcher
        self.enabled = enabled
        self.verbose = verbose
        self.compiled_imports: list[CompiledImport] = (
            compiled_imports if compiled_imports is not None else []
        )

    @classmethod
    def from_config(
        cls,
        config: Config,
        pool: IdentifierPool | None = None,
        extra_patterns: Sequence[str] = (),
        verbose: bool = False,
    ) -> ImportSelector:
        """Create a selector from the include_imports section of a Config.

        Args:
            config: Configuration holding the include_imports section.
            pool: Identifier pool shared with the module loader.
            extra_patterns: Patterns appended after the configured ones.
            verbose: Force tracing on even if the config leaves it off.
        """
        settings = config.include_imports
        matcher = ImportMatcher(
            patterns=list(settings.patterns) + list(extra_patterns),
            pool=pool,
            default_exclusions=settings.default_exclusions,
        )
        return cls(matcher, enabled=settings.enabled, verbose=verbose or settings.verbose)

    @property
    def matcher(self) -> ImportMatcher:
        return self._matcher

    def should_compile_imported_module(
        self,
        package_components: Sequence[Identifier],
        module_name: Identifier,
        is_package_module: bool,
        source_file: str | None = None,
    ) -> bool:
        """Return True if the loader should fully compile this import.

        Args:
            package_components: Enclosing package identifiers, outermost first.
            module_name: The module's own identifier.
            is_package_module: Whether this is a package's own index module.
            source_file: Optional source path, used only for tracing.

        Raises:
            MalformedPatternError: On the first call if a pattern is malformed.
        """
        if not self.enabled:
            return False

        path = self._matcher.module_path(package_components, module_name, is_package_module)
        if not self._matcher.decide(path):
            return False

        record = CompiledImport(
            packages=tuple(package_components),
            name=module_name,
            is_package_module=is_package_module,
            source_file=source_file,
            module_path=path,
        )
        if self.verbose:
            _trace_logger.info("compileimport (%s)", source_file or record.dotted_name)
        self.compiled_imports.append(record)
        return True
