"""Per-process session setup: authentication and telemetry tagging."""

from __future__ import annotations

import logging

from grepfront.core.models import SessionContext
from grepfront.infra.settings import Settings

logger = logging.getLogger(__name__)


def prepare_session(settings: Settings, subcommand: str) -> SessionContext:
    """Resolve the context handed to the handler of *subcommand*.

    The user agent is tagged with ``command/<subcommand>`` and the
    subcommand is recorded as a telemetry feature.
    """
    if settings.app_token is None:
        logger.debug("No app token configured; running anonymously")
    else:
        logger.debug("Authenticated with app token from environment")

    return SessionContext(
        subcommand=subcommand,
        app_token=settings.app_token,
        user_agent_tags=frozenset({f"command/{subcommand}"}),
        features={"subcommand": subcommand},
        in_docker=settings.in_docker,
        engine_path=settings.engine_path,
    )
