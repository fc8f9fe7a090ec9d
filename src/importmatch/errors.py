"""Error hierarchy for importmatch."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ImportMatchError",
    "ConfigNotFoundError",
    "ConfigError",
    "MalformedPatternError",
    "InvalidInputError",
    "ErrorCodes",
]


class ImportMatchError(Exception):
    """Base error for all importmatch errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(ImportMatchError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(ImportMatchError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class MalformedPatternError(ImportMatchError):
    """Raised when a module pattern has an empty component."""

    def __init__(self, pattern: str, reason: str = "empty module pattern component", **kwargs: Any) -> None:
        super().__init__(
            code="MALFORMED_PATTERN",
            message=f"Malformed module pattern '{pattern}': {reason}",
            details={"pattern": pattern, "reason": reason},
            **kwargs,
        )

    @property
    def pattern(self) -> str:
        """The raw pattern string that failed to parse."""
        return self.details["pattern"]


class InvalidInputError(ImportMatchError):
    """Raised for invalid input."""

    def __init__(self, message: str = "Invalid input", **kwargs: Any) -> None:
        super().__init__(code="GENERAL_INVALID_INPUT", message=message, **kwargs)


class ErrorCodes:
    """All importmatch error codes as constants.

    Use these instead of hardcoding error code strings.

    Example:
        if error.code == ErrorCodes.MALFORMED_PATTERN:
            report_bad_pattern(error.details["pattern"])
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    MALFORMED_PATTERN = "MALFORMED_PATTERN"
    GENERAL_INVALID_INPUT = "GENERAL_INVALID_INPUT"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
