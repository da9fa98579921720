# topmark:header:start
#
#   project      : LineDigest
#   file         : test_cli_errors.py
#   file_relpath : tests/cli/test_cli_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for CLI error mapping and verbosity resolution."""

from __future__ import annotations

import logging

import pytest

from linedigest.cli.errors import (
    LineDigestBackendError,
    LineDigestConfigError,
    LineDigestDataError,
    LineDigestError,
    LineDigestIOError,
    LineDigestUnexpectedError,
    LineDigestUsageError,
    from_failure,
)
from linedigest.cli.options import resolve_verbosity
from linedigest.config.logging import TRACE_LEVEL
from linedigest.core.errors import (
    ConfigError,
    DigestBackendError,
    InputReadError,
    LineDigestFailure,
    LineTooLongError,
    OutputWriteError,
)
from linedigest.core.exit_codes import ExitCode
from tests.conftest import parametrize


@parametrize(
    "failure, cli_error, code",
    [
        (DigestBackendError("no md5"), LineDigestBackendError, ExitCode.BACKEND_ERROR),
        (InputReadError("EIO"), LineDigestIOError, ExitCode.IO_ERROR),
        (OutputWriteError("EPIPE"), LineDigestIOError, ExitCode.IO_ERROR),
        (LineTooLongError(3, 8), LineDigestDataError, ExitCode.DATA_ERROR),
        (ConfigError("bad"), LineDigestConfigError, ExitCode.CONFIG_ERROR),
        (LineDigestFailure("?"), LineDigestUnexpectedError, ExitCode.UNEXPECTED_ERROR),
    ],
)
def test_from_failure(
    failure: LineDigestFailure, cli_error: type[LineDigestError], code: ExitCode
) -> None:
    err: LineDigestError = from_failure(failure)
    assert type(err) is cli_error
    assert err.exit_code == code
    assert err.format_message() == str(failure)


@parametrize(
    "verbose, quiet, level",
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (5, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
        (0, 3, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, level: int) -> None:
    assert resolve_verbosity(verbose, quiet) == level


def test_resolve_verbosity_rejects_both() -> None:
    with pytest.raises(LineDigestUsageError):
        resolve_verbosity(1, 1)
