# topmark:header:start
#
#   project      : LineDigest
#   file         : digest.py
#   file_relpath : src/linedigest/cli/commands/digest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default action of the ``linedigest`` command: digest every input line.

Reads lines from stdin (or ``--input``) and writes ``<hex>\\t<line>`` records to
stdout (or ``--output``). The output file is only opened once the configuration
has been resolved and the input opened, so a bad configuration or a missing
input file leaves it untouched.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack
from typing import TYPE_CHECKING, BinaryIO

import click

from linedigest.cli.cmd_common import get_console, get_effective_verbosity, resolve_config
from linedigest.cli.errors import (
    LineDigestFileNotFoundError,
    LineDigestIOError,
    LineDigestUnexpectedError,
    from_failure,
)
from linedigest.config.logging import get_logger
from linedigest.core.errors import LineDigestFailure
from linedigest.pipeline.engine import LineDigestPipeline

if TYPE_CHECKING:
    from linedigest.config.logging import LineDigestLogger
    from linedigest.config.model import Config
    from linedigest.pipeline.context import RunSummary

logger: LineDigestLogger = get_logger(__name__)


def _open_stream(path: str, mode: str, stdio: str) -> BinaryIO:
    """Open ``path`` in binary ``mode``, or return the binary stdio stream for ``-``."""
    if path == "-":
        return click.get_binary_stream(stdio)  # type: ignore[arg-type]
    try:
        return open(path, mode)  # noqa: SIM115 (closed by the caller's ExitStack)
    except OSError as exc:
        if isinstance(exc, FileNotFoundError) and "r" in mode:
            raise LineDigestFileNotFoundError(f"No such file: {path}") from exc
        raise LineDigestIOError(f"Cannot open {path}: {exc.strerror or exc}") from exc


def format_summary(summary: RunSummary) -> str:
    """Return a one-line, human-readable run summary."""
    return (
        f"{summary.records} record(s), {summary.bytes_hashed} byte(s) hashed with "
        f"{summary.algorithm.label} (buffer {summary.buffer_size} bytes, overflow "
        f"'{summary.overflow.value}', {summary.overflowed} overflowed chunk(s))"
    )


def digest_action(ctx: click.Context, *, input_path: str, output_path: str) -> None:
    """Run the digest pipeline for the current invocation.

    Raises:
        LineDigestError: A subclass matching the failure (see `from_failure`).
    """
    config: Config = resolve_config(ctx)

    with ExitStack() as stack:
        src: BinaryIO = _open_stream(input_path, "rb", "stdin")
        if input_path != "-":
            stack.callback(src.close)
        dst: BinaryIO = _open_stream(output_path, "wb", "stdout")
        if output_path != "-":
            stack.callback(dst.close)

        try:
            summary: RunSummary = LineDigestPipeline(config).run(src, dst)
        except LineDigestFailure as exc:
            raise from_failure(exc) from exc
        except Exception as exc:  # pragma: no cover
            logger.exception("Unexpected error while digesting %s", input_path)
            raise LineDigestUnexpectedError(
                f"Unexpected error: {exc} (set LINEDIGEST_LOG_LEVEL=DEBUG for a traceback)"
            ) from exc

    if get_effective_verbosity(ctx) <= logging.INFO:
        get_console(ctx).info(format_summary(summary))
