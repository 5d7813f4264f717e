"""
Structured logging setup (structlog).

Call setup_logging() once at startup; everywhere else just does
    logger = structlog.get_logger(__name__)
and logs events with key/value context.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict

from internhub.config import settings

# Keys whose values never reach the log output
SENSITIVE_KEYS = ("password", "token", "credential", "authorization", "secret")


def redact_sensitive(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Replace values of sensitive-looking keys (top level and one dict deep)."""
    for key, value in list(event_dict.items()):
        if any(s in key.lower() for s in SENSITIVE_KEYS):
            event_dict[key] = "[REDACTED]"
        elif isinstance(value, dict):
            event_dict[key] = {
                k: "[REDACTED]" if any(s in k.lower() for s in SENSITIVE_KEYS) else v
                for k, v in value.items()
            }
    return event_dict


def setup_logging() -> None:
    """Configure stdlib logging and structlog from settings.LOG_LEVEL / LOG_FORMAT."""
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    # SQLAlchemy echoes every statement at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_sensitive,
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.LOG_FORMAT == "json":
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.WriteLoggerFactory(),
        cache_logger_on_first_use=True,
    )
