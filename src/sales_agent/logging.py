"""
Structured logging for the SalesAgent CRM core.

structlog is configured once on import. Every entry carries the operator's
business and the customer whose conversation is being worked on, when a
`logging_context` is active, so assist calls can be traced per conversation.
JSON output is meant for the HTTP service; the console renderer for local runs.
"""

import logging
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Generator

import structlog
from structlog.types import Processor

from .config import config

# Request-scoped fields merged into every entry when set
_CONTEXT_FIELDS: dict[str, ContextVar[str | None]] = {
    name: ContextVar(name, default=None)
    for name in ('trace_id', 'business_id', 'customer_id')
}


def get_trace_id() -> str | None:
    return _CONTEXT_FIELDS['trace_id'].get()


def get_business_id() -> str | None:
    return _CONTEXT_FIELDS['business_id'].get()


def get_customer_id() -> str | None:
    """Customer whose conversation is currently being handled, if any."""
    return _CONTEXT_FIELDS['customer_id'].get()


def add_context_info(
    logger: structlog.types.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor copying the active conversation context onto the entry."""
    for name, var in _CONTEXT_FIELDS.items():
        value = var.get()
        if value:
            event_dict[name] = value
    return event_dict


def _renderer(json_output: bool) -> list[Processor]:
    if json_output:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]


def configure_logging(json_output: bool = False, log_level: str | None = None) -> None:
    """
    (Re)configure structlog and the stdlib root logger.

    Args:
        json_output: Emit one JSON object per line instead of coloured console text
        log_level: Level name; falls back to LOG_LEVEL from the environment
    """
    level_num = getattr(logging, (log_level or config.LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(format='%(message)s', stream=sys.stdout, level=level_num)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_context_info,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt='iso'),
            *_renderer(json_output),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


@contextmanager
def logging_context(
    trace_id: str | None = None,
    business_id: str | None = None,
    customer_id: str | None = None,
) -> Generator[None, None, None]:
    """
    Bind conversation context for the duration of the block.

    Arguments left as None keep whatever the enclosing block set. Values are
    restored on exit, including when the block raises or is cancelled.

    Usage:
        with logging_context(business_id='b1', customer_id='3'):
            logger.info('assist.reply.completed')
    """
    requested = {'trace_id': trace_id, 'business_id': business_id, 'customer_id': customer_id}
    tokens = [
        (_CONTEXT_FIELDS[name], _CONTEXT_FIELDS[name].set(value))
        for name, value in requested.items()
        if value is not None
    ]
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


class RequestTimer:
    """Milliseconds elapsed since construction, for `duration_ms` log fields."""

    def __init__(self):
        self.start_time: float = time.perf_counter()

    @property
    def elapsed_ms(self) -> float:
        return round((time.perf_counter() - self.start_time) * 1000, 2)


# Development output by default; the HTTP service switches to JSON via scripts/serve.py
configure_logging(json_output=False)
