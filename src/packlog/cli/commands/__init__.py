# topmark:header:start
#
#   project      : PackLog
#   file         : __init__.py
#   file_relpath : src/packlog/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``packlog`` group."""

from __future__ import annotations
