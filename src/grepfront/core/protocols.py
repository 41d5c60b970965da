"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from typing import Protocol

from grepfront.core.models import ScanRequest, SessionContext


class ScanEngine(Protocol):
    """Contract for scan backends.

    Implementations must map backend-specific failures to
    :class:`~grepfront.exceptions.GrepfrontError` subclasses.
    """

    def run(self, request: ScanRequest, context: SessionContext) -> int:
        """Run a scan described by *request* and return its exit code.

        Raises
        ------
        ScanEngineNotFoundError
            When the backend is not installed.
        ScanFailedError
            When the backend could not be run.
        """
        ...  # pragma: no cover
