# topmark:header:start
#
#   project      : LineDigest
#   file         : cmd_common.py
#   file_relpath : src/linedigest/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the command group and its subcommands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from linedigest.cli.errors import LineDigestConfigError
from linedigest.config.logging import get_logger
from linedigest.config.model import MutableConfig
from linedigest.core.errors import ConfigError

if TYPE_CHECKING:
    import click

    from linedigest.cli.console_api import ConsoleLike
    from linedigest.config.logging import LineDigestLogger
    from linedigest.config.model import Config

logger: LineDigestLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the root context."""
    return ctx.find_root().obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (a logging level) for this invocation."""
    obj: dict[str, Any] = ctx.find_root().obj or {}
    return int(obj.get("verbosity_level", logging.WARNING))


def resolve_config(ctx: click.Context) -> Config:
    """Build the effective `Config` from files, environment and CLI flags.

    The group callback stores the raw option values under ``ctx.obj["config_args"]``;
    config files are only read when a command actually needs the configuration.

    Raises:
        LineDigestConfigError: If a config file is unreadable or holds invalid values.
    """
    args: dict[str, Any] = ctx.find_root().obj["config_args"]
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=args["config_files"],
            discover=not args["no_config"],
        )
        draft.apply_overrides(
            algorithm=args["algorithm"],
            buffer_size=args["buffer_size"],
            overflow=args["overflow"],
        )
        config: Config = draft.freeze()
    except ConfigError as exc:
        raise LineDigestConfigError(str(exc)) from exc

    logger.debug("Effective config: %s", config)
    return config
