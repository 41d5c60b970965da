"""Subcommand resolution and invocation.

The dispatcher classifies a raw argument vector, selects a subcommand
from a :class:`~grepfront.core.models.SubcommandTable`, and rewrites
the vector so the handler sees itself invoked as an independent
program (``grepfront-scan ...``).

Rules
-----
* Resolution never fails on user input: anything unrecognised is an
  argument to the default subcommand.
* Only the bare two-element help form is intercepted; help flags after
  a subcommand belong to that subcommand's own parser.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from grepfront.core.models import (
    HelpRequest,
    Invocation,
    Outcome,
    SessionContext,
    SubcommandTable,
)
from grepfront.exceptions import DispatchConsistencyError

logger = logging.getLogger(__name__)

HELP_FLAGS: frozenset[str] = frozenset({"-h", "--help"})

SEPARATOR: str = "-"
"""Joins the program name and the subcommand in the rewritten ``argv[0]``."""


class Dispatcher:
    """Routes argument vectors to the handlers of a subcommand table."""

    def __init__(self, table: SubcommandTable) -> None:
        self._table: SubcommandTable = table

    @property
    def table(self) -> SubcommandTable:
        return self._table

    def resolve(self, argv: Sequence[str]) -> Invocation | HelpRequest:
        """Select the subcommand for *argv* and rewrite the vector.

        Raises
        ------
        ValueError
            If *argv* is empty (the program name is always present).
        """
        if not argv:
            raise ValueError("argv must contain at least the program name")

        if len(argv) == 2 and argv[1] in HELP_FLAGS:
            return HelpRequest()

        program_name, *rest = argv
        if not rest:
            subcommand, args = self._table.default, []
        elif rest[0] in self._table:
            subcommand, args = rest[0], rest[1:]
        else:
            # No subcommand given: the token is the default's first argument.
            subcommand, args = self._table.default, rest

        rewritten = (f"{program_name}{SEPARATOR}{subcommand}", *args)
        logger.debug("Resolved %r to %s as %r", list(argv), subcommand, rewritten)
        return Invocation(subcommand=subcommand, argv=rewritten)

    def invoke(self, invocation: Invocation, context: SessionContext) -> Outcome:
        """Hand *invocation* to its handler and return the handler's outcome.

        Raises
        ------
        DispatchConsistencyError
            If the selected subcommand is missing from the table.
        """
        entry = self._table.get(invocation.subcommand)
        if entry is None:
            raise DispatchConsistencyError(
                f"Subcommand {invocation.subcommand!r} was selected but has "
                f"no handler; known: {', '.join(self._table.names)}",
            )
        return entry.handler(invocation.argv, context)
