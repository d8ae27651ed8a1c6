# tests/test_logging.py

from __future__ import annotations

import logging

from secret_santa.config import get_config
from secret_santa.logging import get_logger, log_file


def test_module_loggers_share_base_handlers():
    log = get_logger("engine.solver")

    assert log.name == "secret_santa.engine.solver"
    assert log.propagate is True
    assert not log.handlers
    assert logging.getLogger("secret_santa").handlers


def test_log_file_follows_config():
    path = log_file()
    if path is None:
        return

    cfg = get_config()
    expected_dir = cfg.resolve_path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
    assert path.parent == expected_dir
