# topmark:header:start
#
#   project      : LineDigest
#   file         : __init__.py
#   file_relpath : src/linedigest/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineDigest configuration layer.

- `linedigest.config.model`: immutable `Config` and the `MutableConfig` builder.
- `linedigest.config.policy`: the `OverflowPolicy` enum.
- `linedigest.config.io`: TOML loading, discovery and rendering (tomlkit).
- `linedigest.config.logging`: TRACE-capable logger and colored formatter.

This package module stays import-free: `linedigest.config.logging` is imported by
nearly every module, including those the config model itself depends on.
"""
