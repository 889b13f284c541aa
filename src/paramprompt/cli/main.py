# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : main.py
#   file_relpath : src/paramprompt/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""ParamPrompt Click entry point.

Group-level options are initialized once and placed into ``ctx.obj`` (verbosity,
log level, color and the program-output console) so subcommands can share them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from paramprompt.cli.color import ColorMode, resolve_color_mode
from paramprompt.cli.commands.ask import ask_command
from paramprompt.cli.commands.params import params_command
from paramprompt.cli.commands.version import version_command
from paramprompt.cli.console import ClickConsole
from paramprompt.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from paramprompt.config.logging import get_logger, resolve_env_log_level, setup_logging
from paramprompt.core.keys import ArgKey

if TYPE_CHECKING:
    from paramprompt.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj[ArgKey.VERBOSITY_LEVEL] = level_cli

    # The environment wins over -v/-q for internal logging
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj[ArgKey.LOG_LEVEL] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(effective_color_mode)
    ctx.obj[ArgKey.COLOR_ENABLED] = enable_color
    ctx.color = enable_color

    ctx.obj[ArgKey.CONSOLE] = ClickConsole(enable_color=enable_color)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ParamPrompt CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ParamPrompt CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj[ArgKey.CONSOLE]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'paramprompt ask CATALOG' to resolve parameters.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(ask_command)
cli.add_command(params_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
