# topmark:header:start
#
#   project      : PackLog
#   file         : __init__.py
#   file_relpath : src/packlog/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for PackLog.

- `packlog.config.model`: the `Config` snapshot and the `MutableConfig` builder.
- `packlog.config.io`: TOML loading, validation and rendering (``tomlkit``).
- `packlog.config.keys`: the external TOML schema.
- `packlog.config.logging`: internal logging setup (TRACE level, colored output).

Configuration is read from ``packlog.toml`` or the ``[tool.packlog]`` table of
``pyproject.toml`` in the working directory, plus any ``--config`` files.
"""

from __future__ import annotations
