# topmark:header:start
#
#   project      : LineDigest
#   file         : reader.py
#   file_relpath : src/linedigest/pipeline/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bounded line reader.

`LineReader` reads at most ``buffer_size`` bytes per call (terminator included),
the way ``fgets`` fills a fixed buffer. A chunk that fills the buffer without a
terminator is ambiguous: it is either a final line of exactly ``buffer_size`` bytes
or the first part of a longer line. The reader resolves this with a one-chunk
lookahead, taken **only** in that case so interactive input is never delayed:

- lookahead at end-of-stream: the chunk is a complete last line;
- otherwise the chunk is flagged ``overflowed`` and the lookahead becomes the next
  chunk (the continuation of the same input line).

Read failures raise `InputReadError`; clean end-of-stream ends iteration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, BinaryIO

from linedigest.config.logging import get_logger
from linedigest.constants import LINE_TERMINATOR, MIN_BUFFER_SIZE
from linedigest.core.errors import InputReadError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from linedigest.config.logging import LineDigestLogger

logger: LineDigestLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Line:
    """One chunk read from the input stream.

    Attributes:
        data (bytes): Bytes exactly as read, terminator included when present.
        line_number (int): 1-based input line this chunk belongs to; continuation
            chunks of an overflowed line share the number.
        terminated (bool): Whether ``data`` ends with the line terminator.
        overflowed (bool): Whether the chunk filled the buffer and more of the same
            input line follows.
    """

    data: bytes
    line_number: int
    terminated: bool
    overflowed: bool = False

    @property
    def content(self) -> bytes:
        """The line without its terminator (the bytes to hash)."""
        if self.terminated:
            return self.data[: -len(LINE_TERMINATOR)]
        return self.data


class LineReader:
    """Iterate over bounded lines of a binary stream.

    The reader owns its lookahead slot; it is not safe to share a reader (or its
    stream) between consumers.

    Args:
        stream (BinaryIO): Readable binary stream.
        buffer_size (int): Maximum bytes per chunk, terminator included.
    """

    def __init__(self, stream: BinaryIO, buffer_size: int) -> None:
        if buffer_size < MIN_BUFFER_SIZE:
            raise ValueError(f"buffer_size must be at least {MIN_BUFFER_SIZE} (got {buffer_size})")
        self.stream = stream
        self.buffer_size = buffer_size
        # bytes: pending chunk (b"" = end-of-stream already seen); None: nothing pending
        self._pending: bytes | None = None

    def _read_chunk(self) -> bytes:
        try:
            chunk = self.stream.readline(self.buffer_size)
        except OSError as exc:
            logger.error("Read error on input stream: %s", exc)
            raise InputReadError(f"Error reading input: {exc}") from exc
        if not isinstance(chunk, bytes):
            # e.g. a text-mode stream handed to the binary pipeline
            raise TypeError(
                f"Input stream must be binary (readline returned {type(chunk).__name__})"
            )
        return chunk

    def __iter__(self) -> Iterator[Line]:
        line_number = 1
        while True:
            if self._pending is not None:
                chunk, self._pending = self._pending, None
            else:
                chunk = self._read_chunk()
            if not chunk:
                logger.debug("End of input after %d line(s)", line_number - 1)
                return

            terminated: bool = chunk.endswith(LINE_TERMINATOR)
            overflowed = False
            if not terminated and len(chunk) >= self.buffer_size:
                self._pending = self._read_chunk()
                overflowed = bool(self._pending)

            logger.trace(
                "line %d: %d byte(s), terminated=%s, overflowed=%s",
                line_number,
                len(chunk),
                terminated,
                overflowed,
            )
            yield Line(
                data=chunk,
                line_number=line_number,
                terminated=terminated,
                overflowed=overflowed,
            )
            if not overflowed:
                line_number += 1
