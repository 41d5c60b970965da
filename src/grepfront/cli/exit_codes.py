"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — command completed without error."""

GENERAL_ERROR: int = 1
"""A known GrepfrontError was caught. User-facing message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

NOT_IMPLEMENTED: int = 99
"""The subcommand exists but is a placeholder.  Never equal to
:data:`UNEXPECTED_ERROR`, so test suites can tell a stub from a crash."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
