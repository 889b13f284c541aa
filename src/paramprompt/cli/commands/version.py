# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : version.py
#   file_relpath : src/paramprompt/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""ParamPrompt `version` command.

Prints the current ParamPrompt version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from paramprompt.cli.keys import CliCmd
from paramprompt.cli.options import OutputFormat, output_format_option
from paramprompt.constants import PARAMPROMPT_VERSION
from paramprompt.core.keys import ArgKey

if TYPE_CHECKING:
    from paramprompt.cli.console import ConsoleLike


@click.command(name=CliCmd.VERSION, help="Show the current version of ParamPrompt.")
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of ParamPrompt."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj[ArgKey.CONSOLE]

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt is OutputFormat.JSON:
        console.print(json.dumps({"version": PARAMPROMPT_VERSION}))
    else:
        console.print(console.styled(PARAMPROMPT_VERSION, bold=True))
