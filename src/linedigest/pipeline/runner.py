# topmark:header:start
#
#   project      : LineDigest
#   file         : runner.py
#   file_relpath : src/linedigest/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run a step sequence over a single line."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .context import LineContext
    from .contracts import Step


def run(ctx: LineContext, steps: Sequence[Step]) -> LineContext:
    """Execute the steps sequentially.

    Args:
        ctx (LineContext): Mutable processing context for one line.
        steps (Sequence[Step]): Ordered sequence of pipeline steps.

    Returns:
        LineContext: The final processing context after all steps have run.
    """
    for step in steps:
        ctx = step(ctx)
    return ctx
