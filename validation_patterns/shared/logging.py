"""
Logging configuration for the application.

Sets up structured logging with a consistent format. Every record
carries the correlation identifier of the request being served, so
log lines can be matched with the ``traceId`` of an error response.
Logging must not change program behavior.
Never logs sensitive data (request bodies, secrets, raw payloads).
"""

import logging
import sys

from validation_patterns.shared.tracing import get_trace_id

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(trace_id)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
NO_TRACE = "-"


class TraceIdFilter(logging.Filter):
    """Attach the current request's trace id to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = get_trace_id() or NO_TRACE
        return True


def configure_logging(level: str = "INFO") -> None:
    """Configure structured logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(TraceIdFilter())

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
