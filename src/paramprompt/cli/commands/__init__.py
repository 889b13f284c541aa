# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : __init__.py
#   file_relpath : src/paramprompt/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""ParamPrompt CLI subcommands."""

from __future__ import annotations
