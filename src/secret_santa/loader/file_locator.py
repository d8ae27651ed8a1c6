"""
File Locator

Resolves absolute, validated paths to dataset files.
"""

import os

from secret_santa.core.exceptions import DatasetNotFoundError
from secret_santa.logging import get_logger

log = get_logger(__name__)


def resolve_input_path(path: "str | os.PathLike[str]") -> str:
    """
    Convert a user-provided path into an absolute validated file path.

    Raises:
        DatasetNotFoundError: the path does not exist or is not a regular file.
    """
    abs_path = os.path.abspath(path)
    log.debug(f"Resolving dataset file: {abs_path}")

    if not os.path.exists(abs_path):
        log.error(f"Dataset file does not exist: {abs_path}")
        raise DatasetNotFoundError(f"Could not find {abs_path}")

    if not os.path.isfile(abs_path):
        log.error(f"Dataset path is not a file: {abs_path}")
        raise DatasetNotFoundError(f"Dataset path is not a file: {abs_path}")

    log.debug(f"Validated dataset file: {abs_path}")
    return abs_path
