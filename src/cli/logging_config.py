"""Structured logging configuration using structlog."""

import logging
import re
import sys

import structlog

_EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

# Journal text fields are cut to a short preview
_TEXT_FIELDS = frozenset({"content", "text"})
PREVIEW_CHARS = 40


def _redact_sensitive(_, __, event_dict: dict) -> dict:
    """Structlog processor to mask e-mails and truncate journal text."""
    for key, value in event_dict.items():
        if not isinstance(value, str):
            continue
        if key in _TEXT_FIELDS and len(value) > PREVIEW_CHARS:
            value = f"{value[:PREVIEW_CHARS]}...[{len(value)} chars]"
        event_dict[key] = _EMAIL_PATTERN.sub("REDACTED@email", value)
    return event_dict


def setup_logging(json_mode: bool = False, level: str = "INFO") -> None:
    """Configure structlog with appropriate renderer.

    Args:
        json_mode: Use JSON renderer (for machine consumption).
                   False = console renderer (for the CLI).
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            [
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _redact_sensitive,
    ]

    renderer = structlog.processors.JSONRenderer() if json_mode else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)
