"""Core / service layer — pure dispatch logic and domain models.

Rules
-----
* No ``print()`` calls.
* No filesystem, network, or subprocess I/O.
* No imports from ``cli`` or ``infra``.
"""

from grepfront.core.dispatcher import Dispatcher
from grepfront.core.models import (
    HelpRequest,
    Invocation,
    Outcome,
    OutcomeKind,
    ScanRequest,
    SessionContext,
    Subcommand,
    SubcommandTable,
)
from grepfront.core.protocols import ScanEngine
from grepfront.core.scan_service import ScanService

__all__: list[str] = [
    "Dispatcher",
    "HelpRequest",
    "Invocation",
    "Outcome",
    "OutcomeKind",
    "ScanEngine",
    "ScanRequest",
    "ScanService",
    "SessionContext",
    "Subcommand",
    "SubcommandTable",
]
