# topmark:header:start
#
#   project      : LineDigest
#   file         : __init__.py
#   file_relpath : src/linedigest/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineDigest package.

LineDigest reads a byte stream line by line and prefixes every line with the
lowercase hex digest (MD5, SHA-1 or SHA-256) of its content. It exposes both a
CLI and a small typed API for automation.
"""

from __future__ import annotations
