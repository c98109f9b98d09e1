"""Logging setup for the TUI.

The terminal belongs to Textual while the app runs, so records go to a
rotating log file and to the Textual devtools console
(``textual console``), never to stdout.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from textual.logging import TextualHandler

from kubedeck.constants.defaults import LOG_FILE_DEFAULT
from kubedeck.constants.limits import LOG_FILE_BACKUP_COUNT, LOG_FILE_MAX_BYTES

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_MARKER = "_kubedeck_handler"


def configure_logging(
    level: str | int = logging.INFO,
    log_file: Path | None = None,
) -> Path | None:
    """Configure the ``kubedeck`` logger.

    Safe to call more than once; handlers installed by a previous call are
    replaced.

    Args:
        level: Log level name or number.
        log_file: Target file. Defaults to the per-user state directory.

    Returns:
        The log file path in use, or None when the file could not be opened.
    """
    root = logging.getLogger("kubedeck")
    root.setLevel(level)
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)
            handler.close()

    textual_handler = TextualHandler()
    setattr(textual_handler, _HANDLER_MARKER, True)
    root.addHandler(textual_handler)

    target = log_file or LOG_FILE_DEFAULT
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            target,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError:
        root.warning("Cannot open log file %s, file logging disabled", target)
        return None

    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(file_handler, _HANDLER_MARKER, True)
    root.addHandler(file_handler)
    return target


__all__ = ["LOG_FORMAT", "configure_logging"]
