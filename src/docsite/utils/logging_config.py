"""Logging configuration shared by the library and the server."""

from __future__ import annotations

import logging
import sys

from docsite.config import DOCSITE_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes present on every LogRecord; anything else came in through ``extra=``.
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
    # uvicorn duplicates its message with ANSI colours under this name.
    "color_message",
}

_configured = False


class ExtraFieldsFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {key: value for key, value in record.__dict__.items() if key not in _RESERVED_ATTRS}
        if not extras:
            return base
        pairs = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{base} [{pairs}]"


def configure_logging(level: str | int | None = None) -> None:
    """Install a single stream handler on the root logger.

    Safe to call more than once; only the first call installs the handler.
    Later calls only adjust the level when one is given.
    """
    global _configured

    root = logging.getLogger()
    if level is not None:
        root.setLevel(level)
    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ExtraFieldsFormatter(_LOG_FORMAT))
    root.addHandler(handler)
    if level is None:
        root.setLevel(DOCSITE_LOG_LEVEL.upper())
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger.

    Handlers are installed by the entry points through ``configure_logging``.
    """
    return logging.getLogger(name)
