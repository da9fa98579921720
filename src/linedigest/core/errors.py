# topmark:header:start
#
#   project      : LineDigest
#   file         : errors.py
#   file_relpath : src/linedigest/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain exceptions raised by the LineDigest pipeline and configuration layer.

These exceptions are framework-free: they never print and do not depend on Click.
Each carries the `ExitCode` the CLI maps it to, so the engine and the CLI agree on
process exit semantics without importing each other.
"""

from __future__ import annotations

from linedigest.core.exit_codes import ExitCode


class LineDigestFailure(Exception):
    """Base class for all LineDigest domain errors."""

    exit_code: ExitCode = ExitCode.UNEXPECTED_ERROR


class DigestBackendError(LineDigestFailure):
    """The digest context cannot be created for the requested algorithm."""

    exit_code = ExitCode.BACKEND_ERROR


class InputReadError(LineDigestFailure):
    """Reading from the input stream failed (distinct from end-of-stream)."""

    exit_code = ExitCode.IO_ERROR


class OutputWriteError(LineDigestFailure):
    """The output stream rejected a write or flush."""

    exit_code = ExitCode.IO_ERROR


class LineTooLongError(LineDigestFailure):
    """An input line does not fit the line buffer under the ``error`` overflow policy.

    Attributes:
        line_number (int): 1-based number of the offending input line.
        buffer_size (int): Capacity of the line buffer in bytes.
    """

    exit_code = ExitCode.DATA_ERROR

    def __init__(self, line_number: int, buffer_size: int) -> None:
        self.line_number = line_number
        self.buffer_size = buffer_size
        super().__init__(
            f"line {line_number} exceeds the line buffer of {buffer_size} bytes "
            "(use --overflow split or a larger --buffer-size)"
        )


class ConfigError(LineDigestFailure):
    """Invalid configuration value or unreadable configuration source."""

    exit_code = ExitCode.CONFIG_ERROR
