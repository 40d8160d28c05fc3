"""Structured logging setup.

Loggers from ``get_logger`` hand their events to the standard library
logger of the same name, so an embedding application's logging config
decides where they go (nowhere below WARNING by default). The CLI calls
``setup_logging`` to render them on stderr:

    from docsrel.core.logging_config import setup_logging, get_logger

    setup_logging(level="DEBUG")
    logger = get_logger(__name__)
    logger.debug("fetched_page", project="docs", count=100)
"""

import logging
import sys
from typing import Any

import structlog


HANDLER_NAME = "docsrel"

_processors = [
    structlog.stdlib.filter_by_level,
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def setup_logging(level: str = "WARNING", json_output: bool = False) -> None:
    """Render docsrel and third-party logs on stderr.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR).
        json_output: Render JSON lines instead of the console format.
    """
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    # httpx logs each request through the standard library
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
        )
    )

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper()))


def get_logger(name: str) -> Any:
    """Get a structlog logger backed by the standard library logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
