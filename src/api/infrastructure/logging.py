"""Structlog configuration for Colloquy.

Every log line passes through ``redact_secrets`` before it is rendered, so
tenant API keys and database credentials never reach the log stream even
if a caller binds them by mistake.
"""

import logging
import os
import sys
from typing import Any

import structlog

REDACTED = "[redacted]"

SECRET_FIELDS = frozenset(
    {
        "api_key",
        "key",
        "key_hash",
        "x_api_key",
        "password",
        "authorization",
    }
)


def redact_secrets(
    logger: Any, method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Replace the values of secret-bearing fields."""
    for field in SECRET_FIELDS.intersection(event_dict):
        event_dict[field] = REDACTED
    return event_dict


def _wants_colors() -> bool:
    # FORCE_COLOR=1 enables colors in containers without a TTY
    force_color = os.environ.get("FORCE_COLOR", "").lower() in ("1", "true", "yes")
    return force_color or sys.stdout.isatty()


def configure_logging(debug: bool = False) -> None:
    """Configure structlog for the API process.

    Args:
        debug: Emit debug-level events (turn and transcript details).
            Info and above are emitted otherwise.
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_secrets,
    ]

    if _wants_colors():
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
