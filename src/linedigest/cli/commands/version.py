# topmark:header:start
#
#   project      : LineDigest
#   file         : version.py
#   file_relpath : src/linedigest/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineDigest `version` command.

Prints the current LineDigest version as installed in the active Python environment.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click

from linedigest.cli.cli_types import EnumChoiceParam, OutputFormat
from linedigest.cli.cmd_common import get_console, get_effective_verbosity
from linedigest.constants import LINEDIGEST_VERSION

if TYPE_CHECKING:
    from linedigest.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of LineDigest.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of LineDigest.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": LINEDIGEST_VERSION}))
    elif get_effective_verbosity(ctx) <= logging.INFO:
        console.print(console.styled("LineDigest version:", bold=True, underline=True))
        console.print(f"    {console.styled(LINEDIGEST_VERSION, bold=True)}")
    else:
        console.print(console.styled(LINEDIGEST_VERSION, bold=True))
