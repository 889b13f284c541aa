# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : __init__.py
#   file_relpath : src/paramprompt/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Dependency-free constants: argument keys and exit codes."""

from __future__ import annotations
