# topmark:header:start
#
#   project      : LineDigest
#   file         : context.py
#   file_relpath : src/linedigest/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-line processing context and per-run summary.

`LineContext` carries one line through the steps: the raw bytes as read, the
digest, its hex encoding and the output record. It is created for each line and
discarded once the record has been written.

The hashed span is derived from whether a terminator was read, never by
unconditionally dropping the last byte: a final line without ``\\n`` is hashed
exactly as read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, BinaryIO

from linedigest.constants import FIELD_SEPARATOR
from linedigest.pipeline.status import LineState

if TYPE_CHECKING:
    from linedigest.config.policy import OverflowPolicy
    from linedigest.pipeline.algorithms import DigestAlgorithm
    from linedigest.pipeline.reader import Line


@dataclass
class LineContext:
    """Mutable processing state for a single input line.

    Attributes:
        record_number (int): 1-based index of the output record.
        line (Line): The chunk produced by the line reader.
        algorithm (DigestAlgorithm): Digest algorithm for this run.
        sink (BinaryIO | None): Output stream; ``None`` computes digests only.
        state (LineState): Furthest processing state reached.
        digest (bytes | None): Raw digest, set by the hasher step.
        hexdigest (bytes | None): Lowercase ASCII hex digest, set by the encoder step.
        bytes_written (int): Bytes written to ``sink`` for this record.
        steps (list[str]): Names of the steps invoked, in order.
    """

    record_number: int
    line: Line
    algorithm: DigestAlgorithm
    sink: BinaryIO | None = None

    state: LineState = LineState.READ
    digest: bytes | None = None
    hexdigest: bytes | None = None
    bytes_written: int = 0
    steps: list[str] = field(default_factory=lambda: [])

    @property
    def content(self) -> bytes:
        """Bytes covered by the digest: the line minus its terminator, if one was read."""
        return self.line.content

    @property
    def record(self) -> bytes | None:
        """The output record ``<hex>\\t<line as read>``, once the digest is encoded."""
        if self.hexdigest is None:
            return None
        return self.hexdigest + FIELD_SEPARATOR + self.line.data


@dataclass
class RunSummary:
    """Counters for one pipeline run.

    Attributes:
        algorithm (DigestAlgorithm): Digest algorithm used.
        buffer_size (int): Line buffer capacity in bytes.
        overflow (OverflowPolicy): Overflow policy in effect.
        records (int): Records produced.
        bytes_hashed (int): Content bytes fed to the digest (terminators excluded).
        bytes_written (int): Bytes written to the output stream.
        overflowed (int): Chunks that filled the buffer with more of the line pending.
    """

    algorithm: DigestAlgorithm
    buffer_size: int
    overflow: OverflowPolicy
    records: int = 0
    bytes_hashed: int = 0
    bytes_written: int = 0
    overflowed: int = 0

    def add(self, ctx: LineContext) -> None:
        """Account for a processed line."""
        self.records += 1
        self.bytes_hashed += len(ctx.content)
        self.bytes_written += ctx.bytes_written
        if ctx.line.overflowed:
            self.overflowed += 1
