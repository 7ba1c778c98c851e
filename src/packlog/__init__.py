# topmark:header:start
#
#   project      : PackLog
#   file         : __init__.py
#   file_relpath : src/packlog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PackLog package.

PackLog decodes the comma-separated, machine-readable log of a Packer-style
build into structured events: global UI messages, completed artifacts, and
completed builds. Lines of concurrently running builds may interleave freely;
resumable state machines reassemble each build from its fragments.

The decoding API lives in `packlog.decoder`; the command-line front end in
`packlog.cli`.
"""

from __future__ import annotations
