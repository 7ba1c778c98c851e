# topmark:header:start
#
#   project      : PackLog
#   file         : __init__.py
#   file_relpath : src/packlog/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, frontend-agnostic building blocks for PackLog.

This package hosts the small shared vocabularies used by both the CLI and the
library layers:

- `packlog.core.formats`: output format enum.
- `packlog.core.exit_codes`: sysexits-aligned process exit codes.
- `packlog.core.diagnostics`: non-fatal diagnostics (config validation).
- `packlog.core.machine`: JSON/NDJSON envelope conventions.
"""

from __future__ import annotations
