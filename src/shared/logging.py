"""Logging for the coffeehouse services.

Both domains log through structlog, rendered onto the standard library's
root handlers. Production and staging emit one JSON object per line; every
other environment gets coloured console output with rich tracebacks.

Set ``LOG_DIR`` to also keep a size-rotated ``coffeehouse.log`` on disk.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

LEVELS_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}
JSON_ENVIRONMENTS = frozenset({"production", "staging"})

# Chatty at DEBUG; kept at WARNING whatever the environment.
QUIET_LOGGERS = ("asyncio", "httpx", "protean")

LOG_FILE_NAME = "coffeehouse.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def get_environment() -> str:
    """Name of the environment the service runs in, lowercased."""
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    """Root log level. ``LOG_LEVEL`` always wins over the environment default."""
    return os.getenv("LOG_LEVEL", LEVELS_BY_ENVIRONMENT.get(get_environment(), "INFO"))


def _root_handlers() -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    log_dir = os.getenv("LOG_DIR")
    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                path / LOG_FILE_NAME,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    return handlers


def _render_processors(environment: str) -> list[Any]:
    if environment in JSON_ENVIRONMENTS:
        return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]

    return [
        structlog.dev.ConsoleRenderer(
            exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=5),
        )
    ]


def configure_logging() -> None:
    """Install root handlers and the structlog pipeline.

    Safe to call more than once: handlers are replaced, not stacked.
    """
    logging.basicConfig(level=get_log_level(), format="%(message)s", handlers=_root_handlers(), force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            *_render_processors(get_environment()),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Bind request-scoped values onto every log line until ``clear_context``."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
