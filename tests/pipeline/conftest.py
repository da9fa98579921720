# topmark:header:start
#
#   project      : LineDigest
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for pipeline tests.

Key utilities:
  * `expected_record(algorithm, line)`: the reference ``<hex>\\t<line>`` record,
    computed straight from `hashlib`.
  * `digest_bytes(data, **overrides)`: run the full pipeline over in-memory input
    and return the output bytes with the run summary.
  * Stream doubles that fail or misbehave on demand (`FlakyInput`,
    `FailingOutput`, `ShortWriteOutput`, `UncountedOutput`).
"""

from __future__ import annotations

import errno
import hashlib
import io
from typing import TYPE_CHECKING, Any, BinaryIO, cast

from linedigest.pipeline.engine import LineDigestPipeline
from tests.conftest import make_config

if TYPE_CHECKING:
    from linedigest.pipeline.context import RunSummary


def expected_record(algorithm: str, line: bytes) -> bytes:
    """Return the record for ``line`` (as read, terminator included when present)."""
    content: bytes = line[:-1] if line.endswith(b"\n") else line
    return hashlib.new(algorithm, content).hexdigest().encode("ascii") + b"\t" + line


def digest_bytes(data: bytes, **overrides: Any) -> tuple[bytes, RunSummary]:
    """Digest ``data`` with a config built from ``overrides``.

    Returns:
        tuple[bytes, RunSummary]: The output bytes and the run summary.
    """
    out = io.BytesIO()
    summary: RunSummary = LineDigestPipeline(make_config(**overrides)).run(
        io.BytesIO(data), cast("BinaryIO", out)
    )
    return out.getvalue(), summary


class FlakyInput(io.BytesIO):
    """In-memory input whose ``readline`` fails once ``fail_after`` calls succeeded."""

    def __init__(self, data: bytes, *, fail_after: int) -> None:
        super().__init__(data)
        self.fail_after = fail_after
        self.calls = 0

    def readline(self, size: int | None = -1) -> bytes:
        if self.calls >= self.fail_after:
            raise OSError(errno.EIO, "Input/output error")
        self.calls += 1
        return super().readline(size)


class FailingOutput(io.BytesIO):
    """In-memory output that rejects writes after ``fail_after`` records (or on flush)."""

    def __init__(self, *, fail_after: int | None = None, fail_on_flush: bool = False) -> None:
        super().__init__()
        self.fail_after = fail_after
        self.fail_on_flush = fail_on_flush
        self.writes = 0

    def write(self, b: Any) -> int:
        if self.fail_after is not None and self.writes >= self.fail_after:
            raise OSError(errno.ENOSPC, "No space left on device")
        self.writes += 1
        return super().write(b)

    def flush(self) -> None:
        if self.fail_on_flush:
            raise OSError(errno.EPIPE, "Broken pipe")
        super().flush()


class ShortWriteOutput(io.BytesIO):
    """Output that accepts at most ``chunk`` bytes per ``write`` call (like a raw pipe)."""

    def __init__(self, *, chunk: int = 3) -> None:
        super().__init__()
        self.chunk = chunk
        self.calls = 0

    def write(self, b: Any) -> int:
        self.calls += 1
        return super().write(bytes(b)[: self.chunk])


class UncountedOutput:
    """File-like sink whose ``write`` returns ``None`` instead of a byte count."""

    def __init__(self) -> None:
        self.parts: list[bytes] = []

    def write(self, b: Any) -> None:
        self.parts.append(bytes(b))

    def flush(self) -> None:
        pass

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        return b"".join(self.parts)
