# topmark:header:start
#
#   project      : LineDigest
#   file         : __init__.py
#   file_relpath : src/linedigest/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for LineDigest."""
