"""Infrastructure layer — environment, Git, and scan engine integration.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Raw OS errors are re-raised as :class:`~grepfront.exceptions.GrepfrontError`
  subclasses or logged, never leaked.
"""

from grepfront.infra.git_config import maybe_set_git_safe_directories
from grepfront.infra.scan_engine import SubprocessScanEngine
from grepfront.infra.session import prepare_session
from grepfront.infra.settings import Settings

__all__: list[str] = [
    "Settings",
    "SubprocessScanEngine",
    "maybe_set_git_safe_directories",
    "prepare_session",
]
