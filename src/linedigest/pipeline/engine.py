# topmark:header:start
#
#   project      : LineDigest
#   file         : engine.py
#   file_relpath : src/linedigest/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Execution engine: drive the read → hash → encode → write loop over a stream.

This module is CLI-free so both the public API and the CLI can share the same
engine logic.

Design goals:
  - No CLI dependencies: do not import Click or anything under
    ``linedigest.cli.*`` from here. Presentation (printing, colors, exit) is a
    responsibility of the CLI layer.
  - Fail fast: the digest backend is probed before the first read, and every
    fatal condition raises a `LineDigestFailure` subclass carrying its `ExitCode`.
  - Ordered output: one record per line, written in input order, each with a
    single logical write.

Typical usage:

    summary = run(sys.stdin.buffer, sys.stdout.buffer, DigestAlgorithm.SHA256)

or, when the caller prefers an exit code over an exception:

    summary, err = run_stream(input_stream=src, output_stream=dst, config=cfg)
    if err is not None:
        ...
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, BinaryIO

from linedigest.config.logging import get_logger
from linedigest.config.model import MutableConfig
from linedigest.config.policy import OverflowPolicy
from linedigest.constants import DEFAULT_BUFFER_SIZE
from linedigest.core.errors import LineDigestFailure, LineTooLongError, OutputWriteError
from linedigest.core.exit_codes import ExitCode
from linedigest.pipeline import runner
from linedigest.pipeline.algorithms import DEFAULT_ALGORITHM
from linedigest.pipeline.context import LineContext, RunSummary
from linedigest.pipeline.pipelines import Pipeline
from linedigest.pipeline.reader import LineReader

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from linedigest.config.logging import LineDigestLogger
    from linedigest.config.model import Config
    from linedigest.pipeline.algorithms import DigestAlgorithm
    from linedigest.pipeline.contracts import Step

logger: LineDigestLogger = get_logger(__name__)


class LineDigestPipeline:
    """Read bounded lines from a stream and digest each one.

    The algorithm, buffer size and overflow policy are fixed for the lifetime of
    the instance (taken from ``config``). Each call to `run` or `process` creates
    its own `LineReader`, so the line buffer is owned by a single run.

    Args:
        config (Config): Frozen run configuration.
        steps (Sequence[Step]): Per-line steps; defaults to ``Pipeline.DIGEST``.

    Attributes:
        summary (RunSummary | None): Counters of the current (or last) run; kept
            up to date while running so callers can report partial progress.
    """

    def __init__(self, config: Config, steps: Sequence[Step] = Pipeline.DIGEST.steps) -> None:
        self.config = config
        self.steps = tuple(steps)
        self.summary: RunSummary | None = None

    def process(
        self,
        input_stream: BinaryIO,
        output_stream: BinaryIO | None = None,
    ) -> Iterator[LineContext]:
        """Yield one processed `LineContext` per input chunk, in input order.

        Args:
            input_stream (BinaryIO): Readable binary stream.
            output_stream (BinaryIO | None): Sink handed to the writer step, if any.

        Yields:
            LineContext: The context after all steps have run.

        Raises:
            DigestBackendError: If the digest backend cannot be initialized.
            InputReadError: If reading the input fails.
            LineTooLongError: If a line overflows under the ``error`` policy.
            OutputWriteError: If the sink rejects a write.
        """
        cfg: Config = self.config
        logger.info(
            "algorithm=%s buffer_size=%d overflow=%s",
            cfg.algorithm.label,
            cfg.buffer_size,
            cfg.overflow.value,
        )

        # Probe the backend before consuming any input.
        cfg.algorithm.new()

        summary = RunSummary(
            algorithm=cfg.algorithm,
            buffer_size=cfg.buffer_size,
            overflow=cfg.overflow,
        )
        self.summary = summary

        for line in LineReader(input_stream, cfg.buffer_size):
            if line.overflowed:
                if cfg.overflow is OverflowPolicy.ERROR:
                    logger.error(
                        "Line %d exceeds the %d-byte line buffer", line.line_number, cfg.buffer_size
                    )
                    raise LineTooLongError(line.line_number, cfg.buffer_size)
                logger.warning(
                    "Line %d exceeds the %d-byte line buffer; splitting it into several records",
                    line.line_number,
                    cfg.buffer_size,
                )

            ctx = LineContext(
                record_number=summary.records + 1,
                line=line,
                algorithm=cfg.algorithm,
                sink=output_stream,
            )
            ctx = runner.run(ctx, self.steps)
            summary.add(ctx)
            yield ctx

        logger.info(
            "Processed %d record(s), %d byte(s) hashed, %d overflowed chunk(s)",
            summary.records,
            summary.bytes_hashed,
            summary.overflowed,
        )

    def run(self, input_stream: BinaryIO, output_stream: BinaryIO) -> RunSummary:
        """Digest every line of ``input_stream`` into ``output_stream``.

        The output stream is flushed at the end of the run (but not closed).

        Returns:
            RunSummary: Counters for the run.

        Raises:
            DigestBackendError: If the digest backend cannot be initialized.
            InputReadError: If reading the input fails.
            LineTooLongError: If a line overflows under the ``error`` policy.
            OutputWriteError: If writing or flushing the output fails.
        """
        for _ctx in self.process(input_stream, output_stream):
            pass

        try:
            output_stream.flush()
        except OSError as exc:
            logger.error("Error flushing output stream: %s", exc)
            raise OutputWriteError(f"Error writing output: {exc}") from exc

        assert self.summary is not None
        return self.summary


def run(
    input_stream: BinaryIO,
    output_stream: BinaryIO,
    algorithm: DigestAlgorithm = DEFAULT_ALGORITHM,
    *,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    overflow: OverflowPolicy = OverflowPolicy.ERROR,
) -> RunSummary:
    """Digest every line of ``input_stream`` and write records to ``output_stream``.

    Args:
        input_stream (BinaryIO): Readable binary stream.
        output_stream (BinaryIO): Writable binary stream.
        algorithm (DigestAlgorithm): Digest algorithm (default: MD5).
        buffer_size (int): Maximum bytes per line, terminator included.
        overflow (OverflowPolicy): Treatment of lines longer than ``buffer_size``.

    Returns:
        RunSummary: Counters for the run.
    """
    config: Config = MutableConfig(
        algorithm=algorithm,
        buffer_size=buffer_size,
        overflow=overflow,
    ).freeze()
    return LineDigestPipeline(config).run(input_stream, output_stream)


def run_stream(
    *,
    input_stream: BinaryIO,
    output_stream: BinaryIO,
    config: Config,
) -> tuple[RunSummary | None, ExitCode | None]:
    """Run the digest pipeline and return ``(summary, error_code)`` instead of raising.

    This helper **never prints**; it only logs. Records written before a failure
    stay written.

    Returns:
        tuple[RunSummary | None, ExitCode | None]: The run counters (``None`` if the
        run failed before reading any input) and ``None`` on success, otherwise the
        exit code mapped from the failure.
    """
    pipeline = LineDigestPipeline(config)
    try:
        pipeline.run(input_stream, output_stream)
    except LineDigestFailure as exc:
        logger.error("%s", exc)
        return pipeline.summary, exc.exit_code
    return pipeline.summary, None


def digest_lines(data: bytes, config: Config) -> list[LineContext]:
    """Digest the lines of an in-memory buffer without writing anything.

    Args:
        data (bytes): Input bytes.
        config (Config): Frozen run configuration.

    Returns:
        list[LineContext]: One context per record, with ``digest`` and ``hexdigest`` set.
    """
    pipeline = LineDigestPipeline(config, steps=Pipeline.HASH.steps)
    return list(pipeline.process(io.BytesIO(data)))
