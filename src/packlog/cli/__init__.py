# topmark:header:start
#
#   project      : PackLog
#   file         : __init__.py
#   file_relpath : src/packlog/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for PackLog.

The ``packlog`` Click group lives in `packlog.cli.main`. Commands receive the
shared state (console, verbosity, color) through ``ctx.obj`` and write
user-facing output through a `ConsoleLike`, never through logging.
"""

from __future__ import annotations
