# topmark:header:start
#
#   project      : LineDigest
#   file         : hasher.py
#   file_relpath : src/linedigest/pipeline/steps/hasher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hasher step: digest the line content with a fresh context per line."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linedigest.pipeline.status import LineState
from linedigest.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from linedigest.pipeline.context import LineContext


class HasherStep(BaseStep):
    """Compute ``ctx.digest`` over ``ctx.content``.

    A new digest context is created for every line and fed the whole span in a
    single update. `DigestBackendError` from the backend propagates unchanged.

    Sets:
      - ``ctx.digest``
      - ``ctx.state`` → ``HASHED``
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, ctx: LineContext) -> None:
        """Digest the line content."""
        hasher = ctx.algorithm.new()
        hasher.update(ctx.content)
        ctx.digest = hasher.digest()
        ctx.state = LineState.HASHED
