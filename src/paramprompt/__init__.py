# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : __init__.py
#   file_relpath : src/paramprompt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""ParamPrompt package.

ParamPrompt resolves the value of named command-line parameters that may be
supplied as options, fall back to defaults, or be collected interactively. It
exposes a small typed API (`paramprompt.input`) and a Click CLI.
"""

from __future__ import annotations
