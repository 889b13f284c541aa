# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : color.py
#   file_relpath : src/paramprompt/cli/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Color-mode resolution for the CLI.

The result decides both console styling and which question shaper the resolver
gets (see [`paramprompt.input.shaping.select_question_shaper`][]).
"""

from __future__ import annotations

import os
import sys
from enum import Enum


class ColorMode(str, Enum):
    """Value of ``--color``."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(color_mode: ColorMode, *, stdout_isatty: bool | None = None) -> bool:
    """Return True when prompts and output should be styled.

    ``always`` and ``never`` are final. ``auto`` honors ``FORCE_COLOR`` (any value
    but ``0``), then ``NO_COLOR``, then whether stdout is a terminal.

    Args:
        color_mode: Requested mode.
        stdout_isatty: Terminal check result; detected from ``sys.stdout`` when None.
    """
    if color_mode is not ColorMode.AUTO:
        return color_mode is ColorMode.ALWAYS
    if os.environ.get("FORCE_COLOR", "0") != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return stdout_isatty
