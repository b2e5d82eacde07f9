"""Structured logging configuration using structlog."""

import logging
import sys
from typing import TextIO

import structlog

from patreon_webhooks.config import settings


def configure_logging(
    log_level: str | None = None,
    json_output: bool | None = None,
    stream: TextIO | None = None,
) -> None:
    """Route stdlib and structlog records through one structlog formatter.

    Args:
        log_level: Logging level string; defaults to ``PATREON_LOG_LEVEL``.
        json_output: JSON lines if True, colored console if False; defaults
            to ``PATREON_LOG_JSON``.
        stream: Where records go. Defaults to stderr so tools that print
            results on stdout stay pipeable.
    """
    log_level = log_level or settings.log_level
    json_output = settings.log_json if json_output is None else json_output
    level = getattr(logging, log_level.upper(), logging.INFO)

    # ExtraAdder lifts ``extra={...}`` fields from stdlib records into the event.
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=stream is None and sys.stderr.isatty())
    )

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def bind_webhook_context(event: str, member_id: str | None = None) -> None:
    """Bind the webhook being handled to the current async context."""
    ctx = {"webhook_event": event}
    if member_id:
        ctx["member_id"] = member_id
    structlog.contextvars.bind_contextvars(**ctx)


def clear_webhook_context() -> None:
    structlog.contextvars.clear_contextvars()
