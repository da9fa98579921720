# topmark:header:start
#
#   project      : LineDigest
#   file         : dump_config.py
#   file_relpath : src/linedigest/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineDigest `dump-config` command.

Prints the effective configuration (defaults, config files, environment and the
group's CLI flags merged) as TOML, suitable for saving as ``linedigest.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linedigest.cli.cmd_common import get_console, resolve_config
from linedigest.config.io import to_toml

if TYPE_CHECKING:
    from linedigest.cli.console_api import ConsoleLike
    from linedigest.config.model import Config


@click.command(
    name="dump-config",
    help="Print the effective configuration as TOML.",
)
def dump_config_command() -> None:
    """Print the effective configuration as TOML."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    config: Config = resolve_config(ctx)

    for source in config.config_files:
        console.print(f"# source: {source}")
    console.print(to_toml(config.to_toml_dict()), nl=False)
