# topmark:header:start
#
#   project      : PackLog
#   file         : __main__.py
#   file_relpath : src/packlog/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m packlog``."""

from __future__ import annotations

from packlog.cli.main import cli

if __name__ == "__main__":
    cli()
