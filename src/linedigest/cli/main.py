# topmark:header:start
#
#   project      : LineDigest
#   file         : main.py
#   file_relpath : src/linedigest/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineDigest Click CLI: a default digest action plus informational subcommands.

Key ideas:
- Group-level options are initialized once and placed into ``ctx.obj``.
- Without a subcommand, the group digests its input (stdin by default).
- Subcommands (``version``, ``algorithms``, ``dump-config``) reuse the same state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linedigest.cli.commands.algorithms import algorithms_command
from linedigest.cli.commands.digest import digest_action
from linedigest.cli.commands.dump_config import dump_config_command
from linedigest.cli.commands.version import version_command
from linedigest.cli.console import ClickConsole
from linedigest.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    digest_options,
    resolve_verbosity,
)
from linedigest.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from linedigest.config.logging import LineDigestLogger
    from linedigest.config.policy import OverflowPolicy
    from linedigest.pipeline.algorithms import DigestAlgorithm

logger: LineDigestLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Console first, so that usage errors below are rendered through it
    enable_color: bool = not no_color
    if no_color:
        ctx.color = False
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    # Configure program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Configure internal logging via env:
    setup_logging(level=resolve_env_log_level())


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help=(
        "Prefix every input line with the hex digest of its content.\n\n"
        "Reads lines from stdin (or --input) and writes '<hexdigest>\\t<line>' "
        "records to stdout (or --output). The digest covers the line without its "
        "trailing newline."
    ),
)
@common_verbose_options
@common_color_options
@digest_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
    algorithm: DigestAlgorithm | None,
    buffer_size: int | None,
    overflow: OverflowPolicy | None,
    input_path: str,
    output_path: str,
    config_files: tuple[str, ...],
    no_config: bool,
) -> None:
    """Entry point for the LineDigest CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    ctx.obj["config_args"] = {
        "algorithm": algorithm,
        "buffer_size": buffer_size,
        "overflow": overflow,
        "config_files": config_files,
        "no_config": no_config,
    }

    logger.debug("verbosity=%s subcommand=%s", ctx.obj["verbosity_level"], ctx.invoked_subcommand)
    if ctx.invoked_subcommand is None:
        digest_action(ctx, input_path=input_path, output_path=output_path)


cli.add_command(version_command)

cli.add_command(algorithms_command)

cli.add_command(dump_config_command)

if __name__ == "__main__":
    cli()
