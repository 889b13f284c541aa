# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : __init__.py
#   file_relpath : src/paramprompt/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Click command-line interface for ParamPrompt.

The entry point is [`paramprompt.cli.main.cli`][]; subcommands live in
[`paramprompt.cli.commands`][].
"""

from __future__ import annotations
