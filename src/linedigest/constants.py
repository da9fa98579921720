# topmark:header:start
#
#   project      : LineDigest
#   file         : constants.py
#   file_relpath : src/linedigest/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineDigest Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

LINEDIGEST_VERSION: str = get_version("linedigest")

# Historical line length limit (bytes per read, terminator included).
DEFAULT_BUFFER_SIZE: Final[int] = 1024

# One content byte plus the terminator.
MIN_BUFFER_SIZE: Final[int] = 2

LINE_TERMINATOR: Final[bytes] = b"\n"
FIELD_SEPARATOR: Final[bytes] = b"\t"

# Config files discovered in the working directory:
LOCAL_TOML_CONFIG_NAME: str = "linedigest.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "linedigest"

# Environment variables:
ENV_LOG_LEVEL: str = "LINEDIGEST_LOG_LEVEL"
ENV_ALGORITHM: str = "LINEDIGEST_ALGORITHM"
ENV_BUFFER_SIZE: str = "LINEDIGEST_BUFFER_SIZE"
ENV_OVERFLOW: str = "LINEDIGEST_OVERFLOW"
