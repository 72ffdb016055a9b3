"""Logging setup shared by the library, the CLI and the server."""

from __future__ import annotations

import logging
import sys

from lecturenotes.config import LECTURENOTES_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


class ExtraFormatter(logging.Formatter):
    """Formatter that appends ``extra={...}`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not extras:
            return base
        pairs = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{base} [{pairs}]"


def configure_logging(level: str | int | None = None) -> None:
    """Install a single stderr handler on the root logger.

    Calling it again replaces the previous handler and level.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_lecturenotes", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ExtraFormatter(_LOG_FORMAT))
    handler._lecturenotes = True  # type: ignore[attr-defined]
    root.addHandler(handler)

    resolved = level if level is not None else LECTURENOTES_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()
    root.setLevel(resolved)


def get_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name``."""
    return logging.getLogger(name)
