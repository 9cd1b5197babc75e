"""Structured logging for OpenFinder.

``setup_logging`` is called once from the application lifespan. structlog
events (the aggregator's ``provider_*`` / ``search_complete`` events) and
plain ``logging.getLogger`` records share one stdout handler.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from openfinder.config.settings import ObservabilitySettings

SERVICE_NAME = "openfinder"

# httpx logs one INFO line per provider request; a single search fans out to five.
_NOISY_LOGGERS = ("httpx", "httpcore")


def _add_service_name(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def setup_logging(settings: ObservabilitySettings | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        settings: Observability settings. Defaults to JSON at INFO level.
    """
    level_name = (settings.log_level if settings else "info").upper()
    level = getattr(logging, level_name, logging.INFO)
    log_format = settings.log_format if settings else "json"

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        _add_service_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if log_format == "console":
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force: the CLI may already have installed a bootstrap handler
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    quiet_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)
