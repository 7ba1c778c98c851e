# topmark:header:start
#
#   project      : PackLog
#   file         : constants.py
#   file_relpath : src/packlog/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PackLog Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PACKLOG_TOOL_NAME: str = "packlog"
PACKLOG_VERSION: str = get_version("packlog")

PACKLOG_TOML_NAME: str = "packlog.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Marker used in config_files provenance for values coming from the command line.
CLI_OVERRIDE_STR: str = "<CLI overrides>"
STDIN_MARKER: str = "-"
