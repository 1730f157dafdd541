"""Logging configuration.

The terminal belongs to the TUI, so log records go to a file.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO", log_file: Path | None = None) -> Path | None:
    """Install a file handler on the ``kubedeck`` logger.

    Args:
        level: Logging level name.
        log_file: Target file. When None, records go to the root handlers.

    Returns:
        The log file in use, or None when no file handler was installed.
    """
    package_logger = logging.getLogger("kubedeck")
    package_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    for handler in list(package_logger.handlers):
        if getattr(handler, "_kubedeck_handler", False):
            package_logger.removeHandler(handler)
            handler.close()

    if log_file is None:
        return None

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        logging.getLogger(__name__).warning("Unable to open log file %s", log_file)
        return None

    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    handler._kubedeck_handler = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
    package_logger.propagate = False
    return log_file


__all__ = ["configure_logging"]
