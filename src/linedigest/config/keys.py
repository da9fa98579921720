# topmark:header:start
#
#   project      : LineDigest
#   file         : keys.py
#   file_relpath : src/linedigest/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for LineDigest configuration.

Keys live in a flat table: the whole of ``linedigest.toml``, or the
``[tool.linedigest]`` table inside ``pyproject.toml``.

Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by LineDigest configuration."""

    SECTION_TOOL: Final[str] = "tool"

    KEY_ALGORITHM: Final[str] = "algorithm"
    KEY_BUFFER_SIZE: Final[str] = "buffer_size"
    KEY_OVERFLOW: Final[str] = "overflow"

    ALL_KEYS: Final[tuple[str, ...]] = (KEY_ALGORITHM, KEY_BUFFER_SIZE, KEY_OVERFLOW)
