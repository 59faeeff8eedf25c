"""
structlog on top of stdlib logging, written to stderr.

stdout belongs to the report (start.py prints the page there), so log lines
never go to it. LOG_FORMAT=json renders one JSON object per line for Lambda.
"""

import logging
import sys

import structlog

from ebike_status.config import LOG_FORMAT, LOG_LEVEL

_configured = False


def configure_logging(log_format: str | None = None, log_level: str | None = None) -> None:
    """Configure logging once per process; later calls are no-ops."""
    global _configured
    if _configured:
        return

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, (log_level or LOG_LEVEL).upper(), logging.INFO),
    )

    if (log_format or LOG_FORMAT).lower() == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
    _configured = True


def get_logger(name: str):
    return structlog.get_logger(name)
