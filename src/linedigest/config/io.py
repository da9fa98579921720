# topmark:header:start
#
#   project      : LineDigest
#   file         : io.py
#   file_relpath : src/linedigest/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

This module provides I/O helpers for reading LineDigest configuration from:
- the runtime defaults defined in code, and
- on-disk TOML files (`linedigest.toml` / `pyproject.toml`).

Parsing and rendering is done with `tomlkit`; parsed documents are returned as plain
`dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from linedigest.config.keys import Toml
from linedigest.config.logging import get_logger
from linedigest.constants import (
    DEFAULT_BUFFER_SIZE,
    LOCAL_TOML_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)
from linedigest.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from linedigest.config.logging import LineDigestLogger

TomlTable = dict[str, Any]

logger: LineDigestLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return LineDigest's **runtime defaults** as a Python dict.

    This function performs no I/O. The returned value is a new dict so callers can
    mutate it safely.
    """
    return {
        Toml.KEY_ALGORITHM: "md5",
        Toml.KEY_BUFFER_SIZE: DEFAULT_BUFFER_SIZE,
        Toml.KEY_OVERFLOW: "error",
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (``linedigest.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_linedigest_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the LineDigest table of a parsed TOML document.

    For ``pyproject.toml`` this is ``[tool.linedigest]`` (``None`` when absent); any
    other file is taken as a whole.

    Raises:
        ConfigError: If ``[tool.linedigest]`` exists but is not a table.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
    if section is None:
        logger.debug("No [tool.%s] table in %s", PYPROJECT_TOOL_SECTION, path)
        return None
    if not isinstance(section, dict):
        raise ConfigError(f"[tool.{PYPROJECT_TOOL_SECTION}] in {path} must be a table")
    return cast("TomlTable", section)


def discover_local_config_files(start: Path) -> list[Path]:
    """Return config files found in ``start``, lowest precedence first.

    ``pyproject.toml`` comes before ``linedigest.toml`` so that a dedicated config
    file overrides the ``[tool.linedigest]`` table of the same directory.
    """
    found: list[Path] = []
    for name in (PYPROJECT_TOML_NAME, LOCAL_TOML_CONFIG_NAME):
        candidate: Path = start / name
        if candidate.is_file():
            found.append(candidate)
    logger.debug("Discovered config files in %s: %s", start, found)
    return found


def to_toml(data: TomlTable) -> str:
    """Render a flat config table as TOML text."""
    doc: tomlkit.TOMLDocument = tomlkit.document()
    for key, value in data.items():
        doc.add(key, value)
    return tomlkit.dumps(doc)
