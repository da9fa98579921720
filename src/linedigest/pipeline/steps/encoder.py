# topmark:header:start
#
#   project      : LineDigest
#   file         : encoder.py
#   file_relpath : src/linedigest/pipeline/steps/encoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Encoder step: render the raw digest as lowercase ASCII hex."""

from __future__ import annotations

import binascii
from typing import TYPE_CHECKING

from linedigest.pipeline.status import LineState
from linedigest.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from linedigest.pipeline.context import LineContext


class EncoderStep(BaseStep):
    """Hex-encode ``ctx.digest`` into ``ctx.hexdigest``.

    Two lowercase hex digits per byte, high nibble first, no separators. The
    result is kept as ASCII bytes so the writer can emit it without re-encoding.

    Sets:
      - ``ctx.hexdigest``
      - ``ctx.state`` → ``ENCODED``
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: LineContext) -> bool:
        """Proceed only once the line has been hashed."""
        return ctx.digest is not None

    def run(self, ctx: LineContext) -> None:
        """Encode the digest."""
        assert ctx.digest is not None
        ctx.hexdigest = binascii.hexlify(ctx.digest)
        ctx.state = LineState.ENCODED
