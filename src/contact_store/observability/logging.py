"""
contact_store.observability.logging

Structured logging configuration for the contact store.

Responsibilities:
- Configure `structlog` on top of stdlib logging, emitting JSON lines.
- Drop events below the configured level before any processing happens.
- Provide a small wrapper for obtaining bound loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(*, service_name: str, level: str, cache_loggers: bool = True) -> None:
    """
    JSON lines on stdout, routed through the stdlib logging tree.

    Repository lookups emit debug events on every call; with the level filter first in
    the chain those events cost one `isEnabledFor` check when the level is INFO or higher.
    `cache_loggers=False` keeps loggers reconfigurable (tests that capture logs rely on it).
    """

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)
    # basicConfig is a no-op once the root logger has handlers; set the level regardless.
    logging.getLogger().setLevel(numeric_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service_name(service_name),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=cache_loggers,
    )


def _add_service_name(service_name: str):
    # Every line carries `service`, unless the caller bound its own value.
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Operation-scoped metadata is bound via contextvars in `observability.context`.
