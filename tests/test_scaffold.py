"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined and distinct.
"""

from __future__ import annotations

import pytest

from grepfront import __version__
from grepfront.cli import exit_codes
from grepfront.cli.app import cli, main
from grepfront.exceptions import (
    ConfigurationError,
    DispatchConsistencyError,
    GrepfrontError,
    ScanEngineNotFoundError,
    ScanFailedError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [ConfigurationError, ScanEngineNotFoundError, ScanFailedError],
    )
    def test_user_errors_inherit_from_base(
        self, exc_class: type[GrepfrontError]
    ) -> None:
        assert issubclass(exc_class, GrepfrontError)

    def test_consistency_fault_is_not_a_user_error(self) -> None:
        assert not issubclass(DispatchConsistencyError, GrepfrontError)
        assert issubclass(DispatchConsistencyError, RuntimeError)

    def test_hint_is_stored(self) -> None:
        err = GrepfrontError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert GrepfrontError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2

    def test_not_implemented_is_99(self) -> None:
        assert exit_codes.NOT_IMPLEMENTED == 99

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_codes_are_distinct(self) -> None:
        codes = [
            exit_codes.SUCCESS,
            exit_codes.GENERAL_ERROR,
            exit_codes.UNEXPECTED_ERROR,
            exit_codes.NOT_IMPLEMENTED,
            exit_codes.KEYBOARD_INTERRUPT,
        ]
        assert len(set(codes)) == len(codes)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

class TestEntryPoints:
    def test_main_help_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["grepfront", "--help"]) == exit_codes.SUCCESS
        assert "Usage: grepfront" in capsys.readouterr().out

    def test_cli_exits_with_main_code(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli(["grepfront", "-h"])
        assert exc_info.value.code == exit_codes.SUCCESS
