"""Subprocess-backed implementation of :class:`~grepfront.core.protocols.ScanEngine`.

This module is the **only** place in the codebase that launches the
scan engine.  OS-level failures are caught here and re-raised as
:class:`~grepfront.exceptions.GrepfrontError` subclasses.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from grepfront.core.models import ScanRequest, SessionContext
from grepfront.exceptions import ScanEngineNotFoundError, ScanFailedError

logger = logging.getLogger(__name__)


class SubprocessScanEngine:
    """Concrete :class:`ScanEngine` that runs an external executable.

    The engine's stdout and stderr are inherited, so its report goes
    straight to the user's terminal.
    """

    def locate(self, context: SessionContext) -> Path:
        """Resolve the engine executable named in *context*.

        Raises
        ------
        ScanEngineNotFoundError
            When the executable is not on PATH.
        """
        found = shutil.which(context.engine_path)
        if found is None:
            raise ScanEngineNotFoundError(
                f"Scan engine {context.engine_path!r} is not installed or not on PATH.",
                hint="Install the engine, or point GREPFRONT_CORE_BIN at it.",
            )
        return Path(found)

    @staticmethod
    def build_command(executable: Path, request: ScanRequest) -> list[str]:
        """Translate *request* into the engine's command line."""
        command = [str(executable)]
        for config in request.configs:
            command.extend(("--config", config))
        if request.json_output:
            command.append("--json")
        if request.verbosity < 0:
            command.append("--quiet")
        elif request.verbosity > 0:
            command.append("--verbose")
        command.extend(request.targets)
        return command

    @staticmethod
    def build_env(context: SessionContext) -> dict[str, str]:
        """Return the engine's environment: ours plus session details."""
        env = dict(os.environ)
        env["GREPFRONT_USER_AGENT_TAGS"] = ",".join(sorted(context.user_agent_tags))
        if context.app_token is not None:
            env["GREPFRONT_APP_TOKEN"] = context.app_token
        return env

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def run(self, request: ScanRequest, context: SessionContext) -> int:
        """Run the engine and return its exit code.

        Raises
        ------
        ScanEngineNotFoundError
            When the executable is missing.
        ScanFailedError
            When the executable cannot be started.
        """
        command = self.build_command(self.locate(context), request)
        logger.debug("Running scan engine: %s", command)
        try:
            completed = subprocess.run(command, env=self.build_env(context), check=False)
        except OSError as exc:
            raise ScanFailedError(
                f"Could not start scan engine: {exc}",
                hint="Check that GREPFRONT_CORE_BIN points at an executable file.",
            ) from exc
        return completed.returncode
