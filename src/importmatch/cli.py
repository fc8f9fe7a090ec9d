"""importmatch CLI - inspect include-imports decisions from the command line."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional

import typer

from importmatch.config import Config
from importmatch.errors import ImportMatchError
from importmatch.identifiers import IdentifierPool
from importmatch.pattern import split_pattern_option
from importmatch.selector import ImportSelector

__all__ = ["app", "main"]

app = typer.Typer(
    name="importmatch",
    help="importmatch CLI - Decide which imported modules get compiled",
    no_args_is_help=True,
    add_completion=False,
)


def _fail(message: str) -> None:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


def _build_selector(config_path: Optional[str], include: List[str], verbose: bool) -> ImportSelector:
    """Combine config file patterns with command-line patterns.

    Config patterns come first, so command-line patterns only win on
    strictly more specific matches.
    """
    config = Config.load(config_path) if config_path else Config()
    return ImportSelector.from_config(
        config,
        IdentifierPool(),
        extra_patterns=split_pattern_option(include),
        verbose=verbose,
    )


@contextmanager
def _trace_to_stderr(enabled: bool) -> Iterator[None]:
    """Route compileimport trace lines to stderr for the duration of a command."""
    if not enabled:
        yield
        return
    trace_logger = logging.getLogger("importmatch.compileimport")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    previous_level = trace_logger.level
    trace_logger.addHandler(handler)
    trace_logger.setLevel(logging.INFO)
    try:
        yield
    finally:
        trace_logger.removeHandler(handler)
        trace_logger.setLevel(previous_level)


@app.command()
def check(
    modules: List[str] = typer.Argument(..., help="Dotted module names, e.g. foo.bar"),
    include: List[str] = typer.Option(
        [],
        "--include-imports",
        "-i",
        help="Module patterns, comma-separated or repeated (e.g. foo,-foo.bar)",
    ),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="Path to YAML config"),
    package: bool = typer.Option(False, "--package", help="Treat modules as package index modules"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Trace compiled imports"),
) -> None:
    """
    Print whether each module would be compiled (include) or declaration-only (exclude).

    \b
    Examples:
        importmatch check -i mylib mylib.sub other
        importmatch check -i -foo,foo.bar foo.bar.baz foo.other
    """
    try:
        selector = _build_selector(config_path, include, verbose)
        pool = selector.matcher.pool
        with _trace_to_stderr(selector.verbose):
            for dotted in modules:
                names = dotted.split(".")
                if any(not name for name in names):
                    _fail(f"Invalid module name '{dotted}'")
                components = [pool.intern(name) for name in names]
                selected = selector.should_compile_imported_module(components[:-1], components[-1], package)
                typer.echo(f"{'include' if selected else 'exclude'} {dotted}")
    except ImportMatchError as e:
        _fail(e.message)


@app.command()
def table(
    include: List[str] = typer.Option(
        [],
        "--include-imports",
        "-i",
        help="Module patterns, comma-separated or repeated",
    ),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="Path to YAML config"),
) -> None:
    """Print the match table in lookup order and the default policy."""
    try:
        selector = _build_selector(config_path, include, verbose=False)
        match_table = selector.matcher.table
    except ImportMatchError as e:
        _fail(e.message)
        return
    for line in match_table.describe():
        typer.echo(line)
    typer.echo(f"default: {'include' if match_table.include_by_default else 'exclude'}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
