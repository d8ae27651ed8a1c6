"""
Logging setup for secret_santa.

Every module asks for ``get_logger(__name__)``. All loggers hang off the
``secret_santa`` base logger, which owns two handlers:

* a log file (``logging.file`` inside ``paths.logs_dir``), rotated when
  ``logging.rotate`` is set
* a console handler that stays at WARNING unless debug output is on, so the
  CLI's own rich output is not interleaved with INFO lines
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from secret_santa.config import get_config

BASE_LOGGER_NAME = "secret_santa"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured: bool = False
_log_file: Optional[Path] = None


def _config_level() -> int:
    cfg = get_config()
    if cfg.debug:
        return logging.DEBUG
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    return getattr(logging, level_name, logging.INFO)


def _file_handler(level: int) -> Optional[logging.Handler]:
    """Handler for the configured log file, or None if it cannot be opened."""
    global _log_file
    cfg = get_config()

    log_dir = cfg.resolve_path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
    path = log_dir / cfg.logging.get("file", "secret_santa.log")

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        if cfg.logging.get("rotate", False):
            handler: logging.Handler = RotatingFileHandler(
                path, maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8"
            )
        else:
            handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        return None

    _log_file = path
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure() -> Logger:
    global _configured
    base = logging.getLogger(BASE_LOGGER_NAME)
    if _configured:
        return base

    level = _config_level()
    base.setLevel(level)
    base.propagate = False

    file_handler = _file_handler(level)
    if file_handler is not None:
        base.addHandler(file_handler)

    console = StreamHandler()
    console.setLevel(logging.DEBUG if level == logging.DEBUG else logging.WARNING)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base.addHandler(console)

    if file_handler is None:
        base.warning("Could not open a log file; logging to the console only")

    _configured = True
    return base


def get_logger(name: str | None = None) -> Logger:
    """Logger under the ``secret_santa`` hierarchy, sharing the base handlers."""
    base = _configure()
    if not name or name == BASE_LOGGER_NAME:
        return base
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_debug(enabled: bool) -> None:
    """Switch the base logger and its handlers to DEBUG (or back to config)."""
    base = _configure()
    level = logging.DEBUG if enabled else _config_level()
    base.setLevel(level)
    for handler in base.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.setLevel(level)
        else:
            handler.setLevel(logging.DEBUG if level == logging.DEBUG else logging.WARNING)


def log_file() -> Optional[Path]:
    """Where file logging goes, or None when it is disabled."""
    _configure()
    return _log_file

