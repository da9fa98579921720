# topmark:header:start
#
#   project      : LineDigest
#   file         : contracts.py
#   file_relpath : src/linedigest/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for pipeline steps (engine-facing).

Steps are instantiated objects that are *callable*; the runner invokes them as
``step(ctx)`` where ``ctx`` is a `LineContext`.

Lifecycle
---------
1) ``step.may_proceed(ctx)`` gates execution.
2) If allowed, ``step.run(ctx)`` mutates ``ctx`` in place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .context import LineContext


class Step(Protocol):
    """Protocol for a single pipeline step.

    Implementations typically subclass `linedigest.pipeline.steps.base.BaseStep`.
    """

    name: str

    def may_proceed(self, ctx: LineContext) -> bool:
        """Return whether the step should run given the current context."""
        ...

    def run(self, ctx: LineContext) -> None:
        """Execute the step, mutating the context in place."""
        ...

    def __call__(self, ctx: LineContext) -> LineContext:
        """Run the step lifecycle: gate → run (optional)."""
        ...
