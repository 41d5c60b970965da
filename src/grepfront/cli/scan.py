"""``grepfront scan`` — run rules over files through the scan engine.

The handler receives its rewritten argument vector (``grepfront-scan
...``) and parses it as an independent program, so ``grepfront scan
--help`` is answered here rather than by the dispatcher.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from grepfront.core.models import Outcome, ScanRequest, SessionContext
from grepfront.core.scan_service import ScanService
from grepfront.infra.scan_engine import SubprocessScanEngine

DEFAULT_CONFIG: str = "auto"
DEFAULT_TARGET: str = "."


def build_parser(prog: str) -> argparse.ArgumentParser:
    """Construct the ``scan`` argument parser."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Run grepfront rules on files.",
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="configs",
        action="append",
        metavar="CONFIG",
        help=(
            "Rule configuration: 'auto', a YAML file or directory, or a "
            "registry id.  May be repeated.  Defaults to 'auto'."
        ),
    )
    parser.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Output results in JSON format.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q",
        "--quiet",
        dest="verbosity",
        action="store_const",
        const=-1,
        help="Only output findings.",
    )
    verbosity.add_argument(
        "-v",
        "--verbose",
        dest="verbosity",
        action="store_const",
        const=1,
        help="Show more details about what rules are running.",
    )
    parser.set_defaults(verbosity=0)
    parser.add_argument(
        "targets",
        nargs="*",
        metavar="TARGET",
        help="Files or directories to scan.  Defaults to the current directory.",
    )
    return parser


def parse_scan_request(argv: Sequence[str]) -> ScanRequest:
    """Parse a rewritten ``scan`` argument vector into a :class:`ScanRequest`.

    Raises
    ------
    SystemExit
        On ``--help`` or invalid options (argparse behaviour).
    """
    parser = build_parser(argv[0])
    args = parser.parse_args(list(argv[1:]))
    return ScanRequest(
        configs=tuple(args.configs or (DEFAULT_CONFIG,)),
        targets=tuple(args.targets or (DEFAULT_TARGET,)),
        json_output=args.json_output,
        verbosity=args.verbosity,
    )


def run_scan(argv: Sequence[str], context: SessionContext) -> Outcome:
    """Handler bound to the ``scan`` subcommand."""
    request = parse_scan_request(argv)
    service = ScanService(SubprocessScanEngine())
    return Outcome.delegated(service.run(request, context))
