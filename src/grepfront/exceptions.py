"""Custom exception hierarchy for grepfront.

Every user-visible error condition maps to a subclass of
:class:`GrepfrontError` so that the CLI error boundary can render a clean
message.  Internal consistency faults deliberately do NOT belong to this
hierarchy: they must surface as unexpected errors.

Hierarchy
---------
GrepfrontError
├── ConfigurationError
├── ScanEngineNotFoundError
└── ScanFailedError

RuntimeError
└── DispatchConsistencyError
"""

from __future__ import annotations


class GrepfrontError(Exception):
    """Base exception for all user-facing grepfront errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ----------------------------------------------------------

class ConfigurationError(GrepfrontError):
    """Raised when an environment setting holds an unusable value."""


# --- Scan engine -----------------------------------------------------------

class ScanEngineNotFoundError(GrepfrontError):
    """Raised when the scan engine executable cannot be located."""


class ScanFailedError(GrepfrontError):
    """Raised when the scan engine could not be run to completion."""


# --- Internal faults -------------------------------------------------------

class DispatchConsistencyError(RuntimeError):
    """Raised when a resolved subcommand has no entry in the dispatch table.

    Resolution only ever selects a table entry or the table's default,
    so reaching this is a programming error, not bad user input.
    """
