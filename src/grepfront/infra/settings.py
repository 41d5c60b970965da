"""Process settings read from environment variables.

Settings are resolved once by the entry point and passed down
explicitly; nothing below the CLI layer reads ``os.environ``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from grepfront.exceptions import ConfigurationError

_TRUE_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})

_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_ENGINE_PATH: str = "grepfront-core"
DEFAULT_LOG_LEVEL: str = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    """Environment-derived configuration.

    Attributes
    ----------
    in_docker : bool
        ``GREPFRONT_IN_DOCKER`` — running inside the official image.
    app_token : str | None
        ``GREPFRONT_APP_TOKEN`` — credential for the remote service.
    engine_path : str
        ``GREPFRONT_CORE_BIN`` — scan engine executable name or path.
    log_level : str
        ``GREPFRONT_LOG_LEVEL`` — one of the standard logging level names.
    """

    in_docker: bool = False
    app_token: str | None = None
    engine_path: str = DEFAULT_ENGINE_PATH
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (defaults to :data:`os.environ`).

        Raises
        ------
        ConfigurationError
            If ``GREPFRONT_LOG_LEVEL`` is not a known level name.
        """
        env = os.environ if environ is None else environ

        log_level = env.get("GREPFRONT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level {log_level!r} in GREPFRONT_LOG_LEVEL.",
                hint=f"Use one of: {', '.join(_LOG_LEVELS)}",
            )

        return cls(
            in_docker=env.get("GREPFRONT_IN_DOCKER", "").strip().lower() in _TRUE_VALUES,
            app_token=env.get("GREPFRONT_APP_TOKEN", "").strip() or None,
            engine_path=env.get("GREPFRONT_CORE_BIN", "").strip() or DEFAULT_ENGINE_PATH,
            log_level=log_level,
        )
