# topmark:header:start
#
#   project      : LineDigest
#   file         : logging.py
#   file_relpath : src/linedigest/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal logging for LineDigest.

Adds a TRACE level below DEBUG (used for per-line step tracing), a logger class
exposing ``trace()``, and a formatter that colors records by severity with
`yachalk`.

Records always go to **stderr**: stdout carries the digest records and must stay
byte-exact. The level is taken from ``LINEDIGEST_LOG_LEVEL``; without it only
CRITICAL records are shown.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from linedigest.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class LineDigestLogger(logging.Logger):
    """`logging.Logger` with an extra `trace` method."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): Message format string.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the log record.
        """
        if not self.isEnabledFor(TRACE_LEVEL):
            return
        self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(LineDigestLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] %(name)s:%(lineno)d %(funcName)s(): %(message)s"

# Lowest level first; a record takes the color of the highest threshold it reaches.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (TRACE_LEVEL, chalk.blue),
    (logging.DEBUG, chalk.gray),
    (logging.INFO, chalk.green),
    (logging.WARNING, chalk.yellow),
    (logging.ERROR, chalk.red),
    (logging.CRITICAL, chalk.red_bright),
)

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "FATAL": logging.CRITICAL,
    "CRITICAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ChalkFormatter(logging.Formatter):
    """Color each formatted record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Return the formatted record, colorized for its level."""
        text: str = super().format(record)
        color: Callable[[str], str] = chalk.dim
        for threshold, paint in _LEVEL_COLORS:
            if record.levelno >= threshold:
                color = paint
        return color(text)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``LINEDIGEST_LOG_LEVEL``.

    Accepts level names (``TRACE``, ``debug``, ``WARN``...) and numeric values.
    Unknown names and an unset or empty variable yield ``None``.
    """
    raw: str = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None) -> None:
    """(Re)configure the root logger with a single colored stderr handler.

    Args:
        level (int | None): Log level; ``None`` consults the environment
            (see `resolve_env_log_level`) and falls back to CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for old in list(root.handlers):
        root.removeHandler(old)

    # Bound to the current sys.stderr (which test runners may have replaced)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(DEBUG_LOG_FORMAT if level < logging.INFO else LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> LineDigestLogger:
    """Return the `LineDigestLogger` called ``name`` (usually ``__name__``)."""
    return cast("LineDigestLogger", logging.getLogger(name))
