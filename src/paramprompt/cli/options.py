# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : options.py
#   file_relpath : src/paramprompt/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, output format) and
their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, TypeVar

import click

from paramprompt.cli.cli_types import EnumChoiceParam
from paramprompt.cli.color import ColorMode
from paramprompt.cli.keys import CliOpt
from paramprompt.config.logging import TRACE_LEVEL
from paramprompt.core.keys import ArgKey
from paramprompt.input.errors import ParamPromptUsageError

F = TypeVar("F", bound=Callable[..., object])


class OutputFormat(str, Enum):
    """Value of ``--output-format``: ``name = value`` lines or one JSON document."""

    TEXT = "text"
    JSON = "json"


# Verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        ParamPromptUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ParamPromptUsageError(
            f"The '{CliOpt.VERBOSE}' and '{CliOpt.QUIET}' options are mutually exclusive."
        )

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def common_verbose_options(f: F) -> F:
    """Add -v/--verbose and -q/--quiet (counted, mutually exclusive) to a command."""
    f = click.option(
        "-v",
        CliOpt.VERBOSE,
        ArgKey.VERBOSE,
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        CliOpt.QUIET,
        ArgKey.QUIET,
        count=True,
        help="Suppress output.",
    )(f)
    return f


def common_color_options(f: F) -> F:
    """Add --color (auto, always, never) and --no-color to a command."""
    f = click.option(
        CliOpt.COLOR_MODE,
        ArgKey.COLOR_MODE,
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        CliOpt.NO_COLOR_MODE,
        ArgKey.NO_COLOR_MODE,
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def output_format_option(f: F) -> F:
    """Add --output-format (text, json) to a command."""
    return click.option(
        CliOpt.OUTPUT_FORMAT,
        ArgKey.OUTPUT_FORMAT,
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
