# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : keys.py
#   file_relpath : src/paramprompt/core/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Shared canonical argument keys.

This module defines the *stable destination keys* used across ParamPrompt to
represent parsed options and the shared state stored in Click's ``ctx.obj``.

Notes:
    - Values are Python identifiers (snake_case), not CLI spellings.
    - The CLI spellings (e.g. ``--no-interaction``) live in
      [`paramprompt.cli.keys`][paramprompt.cli.keys].
    - Keep this module behavior-free; it should remain a pure namespace for
      constants so it can be imported from anywhere without causing cycles.
"""

from __future__ import annotations

from typing import Final


class ArgKey:
    """Canonical argument keys used by the ParamPrompt CLI / API.

    Notes:
        - Each constant is a canonical destination key (`dest`) used by Click,
          or a key of the shared ``ctx.obj`` state.
        - Values are Python identifiers (snake_case), not CLI spellings.
    """

    # Catalog & parameters
    CATALOG_PATH: Final[str] = "catalog_path"
    PARAM_NAMES: Final[str] = "names"
    SET_VALUES: Final[str] = "set_values"
    NO_INTERACTION: Final[str] = "no_interaction"

    # Output
    OUTPUT_FORMAT: Final[str] = "output_format"

    # Logging / UX
    VERBOSE: Final[str] = "verbose"
    QUIET: Final[str] = "quiet"
    VERBOSITY_LEVEL: Final[str] = "verbosity_level"
    LOG_LEVEL: Final[str] = "log_level"
    COLOR_MODE: Final[str] = "color_mode"
    NO_COLOR_MODE: Final[str] = "no_color"
    COLOR_ENABLED: Final[str] = "color_enabled"
    CONSOLE: Final[str] = "console"
