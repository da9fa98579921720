# topmark:header:start
#
#   project      : LineDigest
#   file         : options.py
#   file_relpath : src/linedigest/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based LineDigest CLI.

This module centralizes reusable options (verbosity, color, digest settings) and
their resolution logic, so the command group can stay thin.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from linedigest.cli.cli_types import EnumChoiceParam
from linedigest.cli.errors import LineDigestUsageError
from linedigest.config.logging import TRACE_LEVEL
from linedigest.config.policy import OverflowPolicy
from linedigest.constants import (
    DEFAULT_BUFFER_SIZE,
    ENV_ALGORITHM,
    ENV_BUFFER_SIZE,
    ENV_OVERFLOW,
    MIN_BUFFER_SIZE,
)
from linedigest.pipeline.algorithms import DigestAlgorithm

P = ParamSpec("P")
R = TypeVar("R")

# Program-output level per number of -v flags (index capped at the last entry)
_VERBOSE_LEVELS: tuple[int, ...] = (logging.WARNING, logging.INFO, logging.DEBUG, TRACE_LEVEL)

#: Click context settings shared by the command group.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity level from ``-v`` / ``-q`` counts.

    ``-v`` prints the run summary (INFO), ``-vv`` DEBUG, ``-vvv`` and more TRACE;
    any ``-q`` lowers output to errors only. The default is WARNING.

    Returns:
        int: The verbosity as a logging level.

    Raises:
        LineDigestUsageError: If both ``-v`` and ``-q`` are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise LineDigestUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if quiet_count:
        return logging.ERROR
    return _VERBOSE_LEVELS[min(verbose_count, len(_VERBOSE_LEVELS) - 1)]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet options (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (a run summary is printed to stderr).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the --no-color option."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in messages.",
    )(f)
    return f


def digest_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply the digest settings and stream options of the default action.

    Adds ``--algorithm``, ``--buffer-size`` and ``--overflow`` (each also read from
    its ``LINEDIGEST_*`` environment variable), ``--input``/``--output`` and the
    config file options ``--config`` / ``--no-config``.

    Settings left unset on the command line and in the environment fall back to
    config files, then to the runtime defaults.
    """
    # Click applies decorators bottom-up; declare in reverse help order.
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        default=False,
        help="Do not read pyproject.toml / linedigest.toml from the working directory.",
    )(f)
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False),
        help="Additional TOML config file (repeatable; later files win).",
    )(f)
    f = click.option(
        "-o",
        "--output",
        "output_path",
        default="-",
        show_default=True,
        type=click.Path(dir_okay=False, allow_dash=True),
        help="Write records to this file instead of stdout.",
    )(f)
    f = click.option(
        "-i",
        "--input",
        "input_path",
        default="-",
        show_default=True,
        type=click.Path(dir_okay=False, allow_dash=True),
        help="Read lines from this file instead of stdin.",
    )(f)
    f = click.option(
        "--overflow",
        "overflow",
        type=EnumChoiceParam(OverflowPolicy),
        envvar=ENV_OVERFLOW,
        default=None,
        help=(
            "Lines longer than the buffer: 'error' stops the run, 'split' emits one "
            "record per buffer-full chunk. [default: error]"
        ),
    )(f)
    f = click.option(
        "-b",
        "--buffer-size",
        "buffer_size",
        type=click.IntRange(min=MIN_BUFFER_SIZE),
        envvar=ENV_BUFFER_SIZE,
        default=None,
        help=f"Maximum bytes per line, newline included. [default: {DEFAULT_BUFFER_SIZE}]",
    )(f)
    f = click.option(
        "-a",
        "--algorithm",
        "algorithm",
        type=EnumChoiceParam(DigestAlgorithm),
        envvar=ENV_ALGORITHM,
        default=None,
        help=(
            f"Digest algorithm ({', '.join(a.value for a in DigestAlgorithm)}). [default: md5]"
        ),
    )(f)
    return f
