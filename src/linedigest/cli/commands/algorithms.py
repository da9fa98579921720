# topmark:header:start
#
#   project      : LineDigest
#   file         : algorithms.py
#   file_relpath : src/linedigest/cli/commands/algorithms.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineDigest `algorithms` command: list the supported digest algorithms."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from linedigest.cli.cli_types import EnumChoiceParam, OutputFormat
from linedigest.cli.cmd_common import get_console
from linedigest.pipeline.algorithms import DEFAULT_ALGORITHM, DigestAlgorithm

if TYPE_CHECKING:
    from linedigest.cli.console_api import ConsoleLike


@click.command(
    name="algorithms",
    help="List the supported digest algorithms with their digest and hex lengths.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def algorithms_command(*, output_format: OutputFormat | None = None) -> None:
    """List the supported digest algorithms."""
    console: ConsoleLike = get_console(click.get_current_context())

    if output_format == OutputFormat.JSON:
        payload = [
            {
                "name": algo.value,
                "label": algo.label,
                "digest_size": algo.digest_size,
                "hex_length": algo.hex_length,
                "default": algo is DEFAULT_ALGORITHM,
            }
            for algo in DigestAlgorithm
        ]
        console.print(json.dumps(payload, indent=2))
        return

    console.print(console.styled(f"{'NAME':<8} {'LABEL':<8} {'BYTES':>5} {'HEX':>4}", bold=True))
    for algo in DigestAlgorithm:
        marker = " (default)" if algo is DEFAULT_ALGORITHM else ""
        console.print(
            f"{algo.value:<8} {algo.label:<8} {algo.digest_size:>5} {algo.hex_length:>4}{marker}"
        )
