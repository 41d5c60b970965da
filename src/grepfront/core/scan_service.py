"""Core scan service — drives a scan through a pluggable engine.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``.
* Only :class:`~grepfront.exceptions.GrepfrontError` subclasses escape.
"""

from __future__ import annotations

import logging

from grepfront.core.models import ScanRequest, SessionContext
from grepfront.core.protocols import ScanEngine
from grepfront.exceptions import GrepfrontError, ScanFailedError

logger = logging.getLogger(__name__)


class ScanService:
    """Stateless service that runs scans.

    Parameters
    ----------
    engine:
        Any object satisfying the :class:`ScanEngine` protocol.
    """

    def __init__(self, engine: ScanEngine) -> None:
        self._engine: ScanEngine = engine

    def run(self, request: ScanRequest, context: SessionContext) -> int:
        """Run *request* and return the engine's exit code.

        Raises
        ------
        ScanFailedError
            When the engine fails with an error that is not already a
            :class:`GrepfrontError`.
        """
        logger.info(
            "Scanning %s with config %s",
            ", ".join(request.targets),
            ", ".join(request.configs),
        )
        try:
            return self._engine.run(request, context)
        except GrepfrontError:
            raise
        except Exception as exc:
            raise ScanFailedError(f"Unexpected scan engine error: {exc}") from exc
