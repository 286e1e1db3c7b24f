"""Delivery directory readiness checks."""

import os
from pathlib import Path
from typing import Union

from ..errors import ConfigurationError
from ..logging import get_logger

logger = get_logger(__name__)


def is_writable_directory(path: Union[str, Path]) -> bool:
    """Check that the path is an existing directory the process can write to."""
    path = Path(path)
    return path.is_dir() and os.access(path, os.W_OK | os.X_OK)


def ensure_delivery_directory(path: Union[str, Path]) -> Path:
    """
    Make sure the directory can be used for writing notifications.

    An existing path must be a writable directory; a missing path is created
    including its parents.

    Args:
        path: Directory for the signal meta-data files

    Returns:
        The directory as Path

    Raises:
        ConfigurationError: If the directory is not available
    """
    path = Path(path)

    if path.exists():
        if not is_writable_directory(path):
            raise ConfigurationError(
                f"Configuration error! Specified directory [{path}] is not available!",
                setting="targetDirectory"
            )
        return path

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigurationError(
            f"Configuration error! Specified directory [{path}] is not available!",
            setting="targetDirectory",
            context={"error": str(e)}
        ) from e

    logger.info("Created delivery directory", directory=str(path))
    return path
