# topmark:header:start
#
#   project      : LineDigest
#   file         : policy.py
#   file_relpath : src/linedigest/config/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Overflow policy for lines that do not fit the line buffer.

A chunk *overflows* when it fills the whole buffer without a line terminator and
more input follows it. A final chunk of exactly ``buffer_size`` bytes with no
terminator is a complete last line, never an overflow.

TOML mapping:

    overflow = "error"   # or "split"
"""

from __future__ import annotations

from enum import Enum


class OverflowPolicy(str, Enum):
    """How the pipeline treats a line longer than the line buffer.

    Attributes:
        ERROR: Stop the run with `LineTooLongError` before emitting any record
            for the offending line.
        SPLIT: Hash and emit each buffer-full chunk as its own record; the rest
            of the line continues as the following record(s). This matches the
            historical ``fgets``-based behavior.
    """

    ERROR = "error"
    SPLIT = "split"

    @classmethod
    def parse(cls, name: str) -> OverflowPolicy:
        """Return the policy named ``name`` (case-insensitive).

        Raises:
            ValueError: If ``name`` is not a known policy.
        """
        key: str = name.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(
            f"Unsupported overflow policy {name!r}; expected one of: "
            + ", ".join(m.value for m in cls)
        )
