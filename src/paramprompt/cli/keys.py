# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : keys.py
#   file_relpath : src/paramprompt/cli/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Canonical CLI command names and option spellings for ParamPrompt.

Destination keys live in [`paramprompt.core.keys`][paramprompt.core.keys].
Neither module should contain behavior; they are pure namespaces for constants.
"""

from __future__ import annotations

from typing import Final


class CliCmd:
    """Command names exposed by the ParamPrompt CLI."""

    ASK: Final[str] = "ask"
    PARAMS: Final[str] = "params"
    VERSION: Final[str] = "version"


class CliOpt:
    """User-facing long option spellings (including the leading ``--``)."""

    SET_VALUE: Final[str] = "--set"
    NO_INTERACTION: Final[str] = "--no-interaction"
    OUTPUT_FORMAT: Final[str] = "--output-format"

    VERBOSE: Final[str] = "--verbose"
    QUIET: Final[str] = "--quiet"
    COLOR_MODE: Final[str] = "--color"
    NO_COLOR_MODE: Final[str] = "--no-color"
