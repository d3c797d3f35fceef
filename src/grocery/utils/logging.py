"""Logging setup shared by the API, the CLI and the domain.

Records from Protean, FastAPI, SQLAlchemy and our own structlog loggers all
pass through the stdlib root logger, so one configuration covers them:
console output plus size-rotated files under ``logs/``.

Rendering depends on the environment (``ENVIRONMENT`` or ``PROTEAN_ENV``):
JSON lines in production and staging, a colored console everywhere else.
``LOG_LEVEL`` overrides the level chosen for the environment.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}
_JSON_ENVIRONMENTS = {"production", "staging"}
_NOISY_LOGGERS = ("asyncio", "httpx", "sqlalchemy.engine", "uvicorn.access")

_MAX_LOG_BYTES = 10 * 1024 * 1024
_LOG_BACKUPS = 5


def current_environment() -> str:
    return (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", _LEVELS.get(current_environment(), "INFO")).upper()


def _rotating_file(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(log_dir: str = "logs", log_file_prefix: str = "grocery") -> None:
    """Route the root logger to stdout, ``<prefix>.log`` and ``<prefix>_error.log``."""
    level = get_log_level()
    directory = Path(log_dir)
    directory.mkdir(exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [
        console,
        _rotating_file(directory / f"{log_file_prefix}.log", level),
        _rotating_file(directory / f"{log_file_prefix}_error.log", logging.ERROR),
    ]

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _renderer():
    if current_environment() in _JSON_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=4),
    )


def setup_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.MODULE,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            ),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _renderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(log_dir: str = "logs", log_file_prefix: str = "grocery") -> None:
    setup_stdlib_logging(log_dir=log_dir, log_file_prefix=log_file_prefix)
    setup_structlog()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Bind values to every log line emitted by the current request or task."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
