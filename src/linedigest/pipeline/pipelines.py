# topmark:header:start
#
#   project      : LineDigest
#   file         : pipelines.py
#   file_relpath : src/linedigest/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named pipeline variants (immutable, typed step sequences).

- ``HASH``: hasher → encoder (digests only, nothing written)
- ``DIGEST``: HASH + writer

Reading is not a step: the engine drives the `LineReader` and runs the selected
steps once per line.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from linedigest.pipeline.contracts import Step

from .steps import encoder, hasher, writer

HASH_PIPELINE: Final[tuple[Step, ...]] = (
    hasher.HasherStep(),  # Digest the line content
    encoder.EncoderStep(),  # Lowercase hex encoding
)

DIGEST_PIPELINE: Final[tuple[Step, ...]] = HASH_PIPELINE + (
    writer.WriterStep(),  # Emit `<hex>\t<line>` to the sink
)


class Pipeline(tuple[Step, ...], Enum):
    """Available per-line pipelines, mapped to their step sequences."""

    HASH = HASH_PIPELINE
    DIGEST = DIGEST_PIPELINE

    @property
    def steps(self) -> tuple[Step, ...]:
        """Return the ordered step instances for this pipeline."""
        return self.value
