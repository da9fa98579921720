# topmark:header:start
#
#   project      : LineDigest
#   file         : exit_codes.py
#   file_relpath : src/linedigest/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for LineDigest.

LineDigest aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. `BACKEND_ERROR` keeps status 1, the
status an unavailable digest backend has always produced.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for LineDigest.

    Attributes:
        SUCCESS: Input was exhausted cleanly and every record was written.
        BACKEND_ERROR: The digest backend could not be initialized for the
            selected algorithm.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        DATA_ERROR: An input line does not fit the line buffer and the overflow
            policy rejects it. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: Read or write failure on the input/output streams. Mirrors
            BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    BACKEND_ERROR = 1  # historical exit status; see module docstring

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
