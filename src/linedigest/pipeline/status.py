# topmark:header:start
#
#   project      : LineDigest
#   file         : status.py
#   file_relpath : src/linedigest/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-line processing state.

A line moves linearly through ``READ → HASHED → ENCODED → WRITTEN``. Each step
advances the state it owns; a line processed without a sink stops at ``ENCODED``.
"""

from __future__ import annotations

from enum import Enum


class LineState(str, Enum):
    """Processing state of a single line."""

    READ = "read"
    HASHED = "hashed"
    ENCODED = "encoded"
    WRITTEN = "written"
