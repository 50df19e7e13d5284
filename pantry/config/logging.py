"""Structured logging.

Modules log через stdlib ``logging.getLogger(__name__)`` з dotted event
names та ``extra={...}``. ``setup_logging()`` встановлює один root handler,
чий structlog ``ProcessorFormatter`` рендерить кожен record як JSON line
(``log_format="json"``) або кольоровий console рядок.

Usage:
    from pantry.config import setup_logging

    setup_logging()  # once, у composition root
    logging.getLogger(__name__).info("shopping_session.started", extra={"user_id": "user-1"})
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, Processor

from .settings import Settings, get_settings

SERVICE_NAME = "pantry-core"
SERVICE_VERSION = "0.1.0"

REDACTED = "[REDACTED]"

SENSITIVE_KEYS = frozenset({
    "password",
    "secret",
    "token",
    "authorization",
    "session_token",
    "access_token",
})


def _redact(value: Any) -> Any:
    if not isinstance(value, dict):
        return value
    return {
        key: REDACTED if key.lower() in SENSITIVE_KEYS else _redact(item)
        for key, item in value.items()
    }


def filter_sensitive_data(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Replace values of sensitive keys (також у nested dicts) з '[REDACTED]'."""
    return _redact(event_dict)


def _service_context(settings: Settings) -> Processor:
    service = {
        "service": SERVICE_NAME,
        "environment": settings.environment,
        "version": SERVICE_VERSION,
    }

    def add_service_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.update(service)
        return event_dict

    return add_service_context


def setup_logging(settings: Settings | None = None) -> None:
    """Route stdlib logging через structlog renderer.

    Args:
        settings: Defaults to ``get_settings()``; використовуються
            ``log_format``, ``log_level`` та ``environment``.
    """
    settings = settings or get_settings()

    pre_chain: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
        _service_context(settings),
        filter_sensitive_data,
    ]

    if settings.log_format == "json":
        # EventBus логує subscriber failures з exc_info
        render: list[Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        render = [structlog.dev.ConsoleRenderer(colors=True)]

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *render],
    )

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(settings.log_level)
