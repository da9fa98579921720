# topmark:header:start
#
#   project      : LineDigest
#   file         : base.py
#   file_relpath : src/linedigest/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run?

Steps raise domain errors (`linedigest.core.errors`) for fatal conditions; the
engine decides how to surface them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from linedigest.config.logging import get_logger

if TYPE_CHECKING:
    from linedigest.config.logging import LineDigestLogger
    from linedigest.pipeline.context import LineContext

logger: LineDigestLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this to implement a concrete step by overriding ``may_proceed()``
    and ``run()``. Do not override ``__call__`` unless you need custom lifecycle
    behavior.

    Attributes:
        name (str): Stable step identifier for logs/tracing.
    """

    name: str

    def __call__(self, ctx: LineContext) -> LineContext:
        """Invoke the step lifecycle: gate → run (if allowed).

        Args:
            ctx (LineContext): The mutable processing context for the current line.

        Returns:
            LineContext: The same context instance after mutation.
        """
        ctx.steps.append(self.name)

        if self.may_proceed(ctx):
            logger.trace("record %d: %s running", ctx.record_number, self.name)
            self.run(ctx)
        else:
            logger.trace("record %d: %s skipped", ctx.record_number, self.name)

        return ctx

    def may_proceed(self, ctx: LineContext) -> bool:
        """Return whether the step should run given the current context.

        Default: ``True`` (always run).
        """
        return True

    def run(self, ctx: LineContext) -> None:
        """Perform the step's primary work, mutating ``ctx`` in place."""
        pass
