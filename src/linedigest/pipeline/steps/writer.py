# topmark:header:start
#
#   project      : LineDigest
#   file         : writer.py
#   file_relpath : src/linedigest/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer step for emitting the output record to the sink.

The record ``<hex>\\t<line as read>`` is assembled in full before the first write,
so a line that fails earlier in the pipeline never produces a partial record.
Short writes (raw, unbuffered sinks) are retried until the record is complete.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linedigest.config.logging import get_logger
from linedigest.core.errors import OutputWriteError
from linedigest.pipeline.status import LineState
from linedigest.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from linedigest.config.logging import LineDigestLogger
    from linedigest.pipeline.context import LineContext

logger: LineDigestLogger = get_logger(__name__)


class WriterStep(BaseStep):
    """Write ``ctx.record`` to ``ctx.sink``.

    Sets:
      - ``ctx.bytes_written``
      - ``ctx.state`` → ``WRITTEN``
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: LineContext) -> bool:
        """Proceed when a sink is attached and the digest has been encoded."""
        return ctx.sink is not None and ctx.hexdigest is not None

    def run(self, ctx: LineContext) -> None:
        """Write the record.

        Raises:
            OutputWriteError: If the sink rejects the write.
        """
        assert ctx.sink is not None
        record: bytes | None = ctx.record
        assert record is not None

        view = memoryview(record)
        try:
            while view:
                n: int | None = ctx.sink.write(view)
                if n is None:
                    # File-likes that do not report a count accept the whole buffer
                    break
                view = view[n:]
        except OSError as exc:
            logger.error("Write error on output stream (record %d): %s", ctx.record_number, exc)
            raise OutputWriteError(f"Error writing output: {exc}") from exc

        ctx.bytes_written = len(record)
        ctx.state = LineState.WRITTEN
