"""
Logging package for ``secret_santa``.

Use ``get_logger(__name__)`` in modules so every logger shares the project's
file and console handlers.
"""

from .logger import get_logger, log_file, set_debug

__all__ = [
    "get_logger",
    "log_file",
    "set_debug",
]
