# topmark:header:start
#
#   project      : LineDigest
#   file         : errors.py
#   file_relpath : src/linedigest/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the LineDigest CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Domain failures raised by the pipeline are converted
    with `from_failure`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from linedigest.core.errors import LineDigestFailure
from linedigest.core.exit_codes import ExitCode


class LineDigestError(click.ClickException):
    """Base class for all LineDigest CLI errors."""

    exit_code = ExitCode.UNEXPECTED_ERROR

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class LineDigestBackendError(LineDigestError):
    """Error when the digest backend cannot be initialized."""

    exit_code = ExitCode.BACKEND_ERROR


class LineDigestUsageError(LineDigestError):
    """Error for command-line invocation errors (invalid flag combinations)."""

    exit_code = ExitCode.USAGE_ERROR


class LineDigestDataError(LineDigestError):
    """Error for input the overflow policy rejects (line too long)."""

    exit_code = ExitCode.DATA_ERROR


class LineDigestFileNotFoundError(LineDigestError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class LineDigestIOError(LineDigestError):
    """Error for read/write failures on the input or output streams."""

    exit_code = ExitCode.IO_ERROR


class LineDigestConfigError(LineDigestError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class LineDigestUnexpectedError(LineDigestError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


_ERRORS_BY_CODE: dict[ExitCode, type[LineDigestError]] = {
    ExitCode.BACKEND_ERROR: LineDigestBackendError,
    ExitCode.USAGE_ERROR: LineDigestUsageError,
    ExitCode.DATA_ERROR: LineDigestDataError,
    ExitCode.FILE_NOT_FOUND: LineDigestFileNotFoundError,
    ExitCode.IO_ERROR: LineDigestIOError,
    ExitCode.CONFIG_ERROR: LineDigestConfigError,
}


def from_failure(exc: LineDigestFailure) -> LineDigestError:
    """Return the CLI error matching a domain failure's exit code."""
    cls: type[LineDigestError] = _ERRORS_BY_CODE.get(exc.exit_code, LineDigestUnexpectedError)
    return cls(str(exc))
