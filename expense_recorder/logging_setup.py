"""Logging for the ``expense_recorder`` package.

Every module logs through a child of the ``"expense_recorder"`` logger obtained
with :func:`get_logger`; none of them attaches handlers. The package logger
carries a ``NullHandler`` from import time, so extraction stays silent when
embedded in another application. Entry points that want output (the CLI) call
:func:`configure_logging`, which owns the one stream handler. Choosing the
level (option, environment, ``.env``) is the entry point's job;
:func:`parse_level` turns whatever it found into a ``logging`` level.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

PACKAGE_LOGGER_NAME = "expense_recorder"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
_package_logger.addHandler(logging.NullHandler())

# Handler installed by the last configure_logging() call, if any.
_stream_handler: logging.Handler | None = None


def parse_level(value: int | str | None, default: int = logging.INFO) -> int:
    """Map ``10``, ``"10"``, ``"debug"`` or ``"DEBUG"`` to a level number.

    ``None``, blank and unknown names give ``default``.
    """

    if isinstance(value, int):
        return value
    name = (value or "").strip().upper()
    if name.isdigit():
        return int(name)
    return logging.getLevelNamesMapping().get(name, default)


def configure_logging(level: int = logging.INFO, *, stream: IO[str] | None = None) -> None:
    """Send package records at ``level`` and above to ``stream`` (stderr by default).

    A repeated call replaces the handler of the previous one, so the latest
    level and stream win and records are never emitted twice.
    """

    global _stream_handler
    if _stream_handler is not None:
        _package_logger.removeHandler(_stream_handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    _package_logger.addHandler(handler)
    _package_logger.setLevel(level)
    # Records already reach the stream handler; the root logger would repeat them.
    _package_logger.propagate = False
    _stream_handler = handler


def get_logger(name: str) -> logging.Logger:
    """Return the package logger for ``name`` (usually ``__name__``).

    Names outside the package (``"__main__"`` when a module is run directly)
    are nested under it so configuration still applies.
    """

    if name != PACKAGE_LOGGER_NAME and not name.startswith(PACKAGE_LOGGER_NAME + "."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = ["PACKAGE_LOGGER_NAME", "configure_logging", "get_logger", "parse_level"]
