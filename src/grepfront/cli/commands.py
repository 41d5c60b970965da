"""The static subcommand table and the top-level help text.

Every routable subcommand is declared exactly once in
:data:`SUBCOMMANDS`; the dispatcher's membership check, its routing,
and the ``Commands:`` section of the help are all derived from it.
"""

from __future__ import annotations

from collections.abc import Sequence

from grepfront.cli.console import console
from grepfront.cli.scan import run_scan
from grepfront.core.models import Outcome, SessionContext, Subcommand, SubcommandTable

DEFAULT_SUBCOMMAND: str = "scan"


def not_implemented(argv: Sequence[str], context: SessionContext) -> Outcome:
    """Placeholder handler for subcommands that are not available yet."""
    console.print("This grepfront subcommand is not implemented")
    return Outcome.not_implemented()


SUBCOMMANDS: SubcommandTable = SubcommandTable(
    entries=(
        Subcommand("ci", "The recommended way to run grepfront in CI", not_implemented),
        Subcommand("login", "Obtain and save credentials for the grepfront service", not_implemented),
        Subcommand("logout", "Remove locally stored credentials", not_implemented),
        Subcommand("lsp", "[EXPERIMENTAL] Start the grepfront LSP server", not_implemented),
        Subcommand("publish", "Upload a rule to the grepfront registry", not_implemented),
        Subcommand("scan", "Run grepfront rules on files", run_scan),
        Subcommand("shouldafound", "Report a false negative in this project.", not_implemented),
    ),
    default=DEFAULT_SUBCOMMAND,
)


# ---------------------------------------------------------------------------
# Help text
# ---------------------------------------------------------------------------

_HELP_HEADER = """\
Usage: grepfront [OPTIONS] COMMAND [ARGS]...

  To get started quickly, run `grepfront scan --config auto`

  Run `grepfront SUBCOMMAND --help` for more information on each subcommand

  If no subcommand is passed, will run `{default}` subcommand by default

Options:
  -h, --help  Show this message and exit.

Commands:
"""


def render_help(table: SubcommandTable) -> str:
    """Build the top-level help text for *table*.

    Descriptions are aligned two columns past the longest name.
    """
    width = max(len(entry.name) for entry in table) + 2
    rows = "".join(f"  {entry.name:<{width}}{entry.description}\n" for entry in table)
    return _HELP_HEADER.format(default=table.default) + rows


HELP_TEXT: str = render_help(SUBCOMMANDS)
