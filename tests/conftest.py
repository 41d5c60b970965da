"""Shared pytest fixtures and configuration for the grepfront test suite.

Guidelines
----------
* No network access and no real subprocesses in any test.
* The scan engine must be mocked at the infra boundary.
* Core tests must be pure — no side effects.
* Tests must not depend on the caller's ``GREPFRONT_*`` environment.
"""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from grepfront.core.models import Outcome, SessionContext, Subcommand, SubcommandTable


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "GREPFRONT_IN_DOCKER",
        "GREPFRONT_APP_TOKEN",
        "GREPFRONT_CORE_BIN",
        "GREPFRONT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class RecordingHandler:
    """Handler double that remembers every argument vector it receives."""

    def __init__(self, outcome: Outcome | None = None) -> None:
        self.calls: list[tuple[str, ...]] = []
        self.contexts: list[SessionContext] = []
        self.outcome = outcome or Outcome.delegated(0)

    def __call__(self, argv: Sequence[str], context: SessionContext) -> Outcome:
        self.calls.append(tuple(argv))
        self.contexts.append(context)
        return self.outcome


@pytest.fixture
def recording_table() -> tuple[SubcommandTable, dict[str, RecordingHandler]]:
    """A table mirroring the real subcommand names with recording handlers."""
    names = ("ci", "login", "logout", "lsp", "publish", "scan", "shouldafound")
    handlers = {name: RecordingHandler() for name in names}
    table = SubcommandTable(
        entries=tuple(Subcommand(name, f"{name} help", handlers[name]) for name in names),
        default="scan",
    )
    return table, handlers


@pytest.fixture
def context() -> SessionContext:
    return SessionContext(subcommand="scan")
