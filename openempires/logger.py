"""Logging setup writing to the console and a file."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_HANDLER_PREFIX = "openempires."
_PATTERN = "[%(asctime)s][%(levelname)s] %(threadName)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"


class _LowerLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        original = record.levelname
        record.levelname = original.lower()
        try:
            return super().format(record)
        finally:
            record.levelname = original


def init_logger(filename: str | Path) -> logging.Logger:
    """Send all log records at debug level and above to stdout and ``filename``.

    The file is truncated. Calling this again replaces the handlers it
    installed before.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if (handler.get_name() or "").startswith(_HANDLER_PREFIX):
            root.removeHandler(handler)
            handler.close()

    path = Path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)

    formatter = _LowerLevelFormatter(_PATTERN, _DATE_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.set_name(_HANDLER_PREFIX + "console")
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.set_name(_HANDLER_PREFIX + "file")

    for handler in (console, file_handler):
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.setLevel(logging.DEBUG)
    return root