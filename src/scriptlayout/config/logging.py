"""Logging configuration for scriptlayout.

structlog events are handed to the standard library and rendered by a
``ProcessorFormatter``, so the same handlers (stderr plus an optional
rotating file) format both structlog events and plain ``logging`` records.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.processors import (
    CallsiteParameter,
    CallsiteParameterAdder,
    TimeStamper,
    add_log_level,
    dict_tracebacks,
)
from structlog.stdlib import ProcessorFormatter, add_logger_name, filter_by_level

from scriptlayout.config.settings import ScriptLayoutSettings

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 5


def _resolve_level(name: str) -> int:
    levels = logging.getLevelNamesMapping()
    level = levels.get(name.upper())
    if level is None:
        valid = sorted(level_name for level_name in levels if level_name != "NOTSET")
        raise ValueError(
            f"Invalid log level '{name}'. Valid levels are: {', '.join(valid)}"
        )
    return level


def _renderer(log_format: str) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "structured":
        return structlog.processors.KeyValueRenderer(
            key_order=["timestamp", "level", "logger", "event"],
            drop_missing=True,
        )
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.rich_traceback,
    )


def _shared_processors(settings: ScriptLayoutSettings) -> list[Any]:
    """Processors applied to structlog events and foreign records alike."""
    processors: list[Any] = [
        merge_contextvars,
        add_log_level,
        add_logger_name,
        TimeStamper(fmt="iso"),
    ]
    if settings.debug:
        processors.append(
            CallsiteParameterAdder(
                parameters=[
                    CallsiteParameter.FILENAME,
                    CallsiteParameter.LINENO,
                    CallsiteParameter.FUNC_NAME,
                ]
            )
        )
    return processors


def _build_handlers(
    settings: ScriptLayoutSettings, formatter: logging.Formatter, level: int
) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_file:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                filename=settings.log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUP_COUNT,
                encoding="utf-8",
            )
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
    return handlers


def configure_logging(settings: ScriptLayoutSettings) -> None:
    """Install handlers on the root logger and configure structlog.

    Args:
        settings: Application settings; only the logging fields are used.

    Raises:
        ValueError: If the log level is not a level known to the logging module.
    """
    level = _resolve_level(settings.log_level)
    shared = _shared_processors(settings)

    # The console renderer formats exc_info itself
    exception_processors = [] if settings.log_format == "console" else [dict_tracebacks]
    formatter = ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            ProcessorFormatter.remove_processors_meta,
            *exception_processors,
            _renderer(settings.log_format),
        ],
    )

    logging.basicConfig(
        level=level,
        handlers=_build_handlers(settings, formatter, level),
        force=True,
    )

    structlog.configure(
        processors=[
            filter_by_level,
            *shared,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger over the standard library logger ``name``.

    Nothing is configured here. Until :func:`configure_logging` runs, events
    go through whatever handlers and levels the host application has set up.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
