# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : __init__.py
#   file_relpath : src/paramprompt/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Configuration layer for ParamPrompt.

- [`paramprompt.config.logging`][]: TRACE-aware logging setup.
- [`paramprompt.config.catalog_io`][]: build a parameter catalog from TOML.
"""

from __future__ import annotations
