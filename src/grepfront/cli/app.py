"""CLI application entry point and subcommand dispatch for grepfront.

This module is the **sole error boundary** for the entire application.
It catches :class:`~grepfront.exceptions.GrepfrontError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* Subcommand selection lives in :class:`~grepfront.core.dispatcher.Dispatcher`;
  this module only wires it to the process.
* Process-wide setup (session context, Git safe directories) runs here,
  after resolution and before the handler is invoked.
* This module is the only place that translates between handler
  outcomes and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from grepfront.cli import exit_codes
from grepfront.cli.commands import HELP_TEXT, SUBCOMMANDS, render_help
from grepfront.cli.console import console
from grepfront.cli.log import configure_logging
from grepfront.core.dispatcher import Dispatcher
from grepfront.core.models import HelpRequest, Outcome, OutcomeKind
from grepfront.exceptions import GrepfrontError
from grepfront.infra.git_config import maybe_set_git_safe_directories
from grepfront.infra.session import prepare_session
from grepfront.infra.settings import Settings

logger = logging.getLogger(__name__)

PROGRAM_NAME: str = "grepfront"

DISPATCHER: Dispatcher = Dispatcher(SUBCOMMANDS)


# ---------------------------------------------------------------------------
# Outcome translation
# ---------------------------------------------------------------------------

def exit_code_for(outcome: Outcome) -> int:
    """Map a handler outcome to the process exit code."""
    if outcome.kind is OutcomeKind.SUCCESS:
        return exit_codes.SUCCESS
    if outcome.kind is OutcomeKind.NOT_IMPLEMENTED:
        return exit_codes.NOT_IMPLEMENTED
    if outcome.kind is OutcomeKind.DELEGATED:
        return outcome.code
    raise AssertionError(f"Unhandled outcome kind: {outcome.kind!r}")


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def dispatch(
    argv: Sequence[str],
    settings: Settings,
    *,
    dispatcher: Dispatcher = DISPATCHER,
) -> int:
    """Route *argv* to its subcommand and return the exit code.

    Parameters
    ----------
    argv:
        Full argument vector, program name included.
    settings:
        Already-resolved process settings.
    dispatcher:
        Dispatcher to route with; the built-in subcommand table by default.
    """
    resolved = dispatcher.resolve(argv)

    if isinstance(resolved, HelpRequest):
        help_text = HELP_TEXT if dispatcher is DISPATCHER else render_help(dispatcher.table)
        sys.stdout.write(help_text)
        return exit_codes.SUCCESS

    context = prepare_session(settings, resolved.subcommand)
    maybe_set_git_safe_directories(settings)

    outcome = dispatcher.invoke(resolved, context)
    logger.debug("%s finished with %s", resolved.program_identity, outcome)
    return exit_code_for(outcome)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the grepfront CLI.

    Parameters
    ----------
    argv:
        Explicit argument vector **including** the program name.  When
        ``None`` (default), ``sys.argv`` is used.

    Returns
    -------
    int
        OS process exit code.
    """
    if argv is None:
        argv = sys.argv
    settings = Settings.from_environ()
    configure_logging(settings.log_level_number)
    return dispatch(argv, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: Sequence[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except GrepfrontError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unexpected error", exc_info=True)
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
