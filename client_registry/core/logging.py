"""
Logging.

Every record, whether emitted through structlog or by a stdlib logger such
as uvicorn's, is rendered by one stdout handler on the root logger. The
level and the renderer (``console`` for humans, ``json`` for collectors)
come from config/settings/logging.yaml.

Within a request, ``request_id``, ``method`` and ``path`` are merged into
each record from structlog's context variables (see ``middleware``).

Usage:
    logger = get_logger(__name__)
    logger.info("Client created", extra={"client_id": "2"})
"""

import logging
import sys
from typing import Any

import structlog

from client_registry.core.config import get_app_config

# Runs for structlog calls and for foreign stdlib records alike
_PRE_CHAIN = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def _render_chain(format_type: str) -> list[Any]:
    strip_meta = structlog.stdlib.ProcessorFormatter.remove_processors_meta
    if format_type == "json":
        return [
            strip_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [strip_meta, structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]


def setup_logging(level: str | None = None, format_type: str | None = None) -> None:
    """
    Route all logging through a single structlog-formatted stdout handler.

    Safe to call more than once; each call replaces the root handler.

    Args:
        level: Overrides the level from logging.yaml
        format_type: ``json`` or ``console``; overrides logging.yaml
    """
    config = get_app_config().logging
    level = (level or config.level).upper()

    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=_render_chain(format_type or config.format),
            foreign_pre_chain=_PRE_CHAIN,
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)

    # Keep uvicorn's per-request access lines out of INFO output
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    return structlog.get_logger(name)
