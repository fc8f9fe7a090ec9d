"""importmatch - Include/exclude pattern matching for imported modules."""

from __future__ import annotations

# Core
from importmatch.identifiers import Identifier, IdentifierPool
from importmatch.matcher import ImportMatcher
from importmatch.selector import ImportSelector
from importmatch.table import DEFAULT_EXCLUDED_ROOTS, MatchTable
from importmatch.types import CompiledImport, MatchEntry

# Patterns
from importmatch.pattern import parse_depth, parse_pattern, split_pattern_option

# Config
from importmatch.config import Config, IncludeImportsSettings

# Errors
from importmatch.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    ImportMatchError,
    InvalidInputError,
    MalformedPatternError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Identifier",
    "IdentifierPool",
    "ImportMatcher",
    "ImportSelector",
    "MatchTable",
    "DEFAULT_EXCLUDED_ROOTS",
    # Types
    "MatchEntry",
    "CompiledImport",
    # Patterns
    "parse_depth",
    "parse_pattern",
    "split_pattern_option",
    # Config
    "Config",
    "IncludeImportsSettings",
    # Errors
    "ErrorCodes",
    "ImportMatchError",
    "MalformedPatternError",
    "ConfigError",
    "ConfigNotFoundError",
    "InvalidInputError",
]
