"""Git configuration tweaks applied before a subcommand runs.

Inside the container image every path is trusted: the user explicitly
mounts the code directory and the image provides everything else.  Git
refuses to operate on repositories owned by another user unless they
are listed in ``safe.directory``.
"""

from __future__ import annotations

import logging
import subprocess

from grepfront.infra.settings import Settings

logger = logging.getLogger(__name__)

SAFE_DIRECTORY_COMMAND: tuple[str, ...] = (
    "git",
    "config",
    "--global",
    "--add",
    "safe.directory",
    # "*" rather than the cwd: targets may be absolute paths elsewhere.
    "*",
)


def maybe_set_git_safe_directories(settings: Settings) -> bool:
    """Mark every directory as safe for Git when running in Docker.

    Returns ``True`` when the option was set.  Failure is logged and
    never aborts the run; Git commands may fail later instead.
    """
    if not settings.in_docker:
        return False

    try:
        subprocess.run(
            SAFE_DIRECTORY_COMMAND,
            check=True,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        logger.info(
            "Failed to set the safe.directory Git config option. "
            "Git commands might fail: %s",
            exc,
        )
        return False
    return True
