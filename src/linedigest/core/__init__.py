# topmark:header:start
#
#   project      : LineDigest
#   file         : __init__.py
#   file_relpath : src/linedigest/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, framework-free building blocks shared by the pipeline and the CLI."""
