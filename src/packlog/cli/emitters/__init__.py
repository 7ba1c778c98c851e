# topmark:header:start
#
#   project      : PackLog
#   file         : __init__.py
#   file_relpath : src/packlog/cli/emitters/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-facing renderers for the ``decode`` command.

These helpers are Click-free: they return strings and perform no I/O. Machine
formats are handled by `packlog.events.machine` and
`packlog.cli.machine_emitters`.
"""

from __future__ import annotations
