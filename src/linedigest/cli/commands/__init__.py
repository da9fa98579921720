# topmark:header:start
#
#   project      : LineDigest
#   file         : __init__.py
#   file_relpath : src/linedigest/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineDigest CLI subcommands."""
