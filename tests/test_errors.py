"""Tests for the importmatch error hierarchy."""

from __future__ import annotations

import pytest

from importmatch.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    ImportMatchError,
    InvalidInputError,
    MalformedPatternError,
)


class TestErrorHierarchy:
    """All errors share the ImportMatchError base and its fields."""

    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (MalformedPatternError(pattern="a..b"), ErrorCodes.MALFORMED_PATTERN),
            (ConfigNotFoundError(config_path="/x.yaml"), ErrorCodes.CONFIG_NOT_FOUND),
            (ConfigError("bad"), ErrorCodes.CONFIG_INVALID),
            (InvalidInputError(), ErrorCodes.GENERAL_INVALID_INPUT),
        ],
    )
    def test_codes(self, error: ImportMatchError, code: str) -> None:
        assert isinstance(error, ImportMatchError)
        assert error.code == code
        assert str(error) == f"[{code}] {error.message}"
        assert error.timestamp

    def test_malformed_pattern_details(self) -> None:
        err = MalformedPatternError(pattern="foo..bar")
        assert err.pattern == "foo..bar"
        assert err.details == {"pattern": "foo..bar", "reason": "empty module pattern component"}
        assert "'foo..bar'" in err.message

    def test_cause_is_kept(self) -> None:
        cause = ValueError("boom")
        err = ConfigError("wrapped", cause=cause)
        assert err.cause is cause

    def test_error_codes_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ErrorCodes().MALFORMED_PATTERN = "x"
