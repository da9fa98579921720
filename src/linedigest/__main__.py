# topmark:header:start
#
#   project      : LineDigest
#   file         : __main__.py
#   file_relpath : src/linedigest/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running LineDigest via ``python -m linedigest``.

This module delegates directly to :func:`linedigest.cli.main.cli`, so there is a
single CLI entry point regardless of how LineDigest is launched.

Examples:
    Hash every line of a file with SHA-256::

        python -m linedigest --algorithm sha256 < words.txt
"""

from __future__ import annotations

from linedigest.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
