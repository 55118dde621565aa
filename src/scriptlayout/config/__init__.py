"""Settings and logging for scriptlayout.

Asking for a logger never loads settings or installs handlers; the CLI calls
:func:`configure_logging` once it has resolved its settings.
"""

from __future__ import annotations

from typing import Any

from scriptlayout.config.logging import configure_logging
from scriptlayout.config.logging import get_logger as _structlog_logger
from scriptlayout.config.settings import (
    ScriptLayoutSettings,
    clear_settings_cache,
    discover_config_files,
    get_settings,
    get_settings_for_cli,
    set_settings,
)

__all__ = [
    "ScriptLayoutSettings",
    "clear_settings_cache",
    "configure_logging",
    "discover_config_files",
    "get_logger",
    "get_settings",
    "get_settings_for_cli",
    "reset_settings",
    "set_settings",
]

_loggers: dict[str, Any] = {}


def get_logger(name: str) -> Any:
    """Return the cached logger for ``name``.

    Args:
        name: Logger name, usually ``__name__``.
    """
    logger = _loggers.get(name)
    if logger is None:
        logger = _loggers[name] = _structlog_logger(name)
    return logger


def reset_settings() -> None:
    """Forget cached settings and loggers."""
    clear_settings_cache()
    _loggers.clear()
