# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : params.py
#   file_relpath : src/paramprompt/cli/commands/params.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""ParamPrompt `params` command.

Lists the parameter definitions of a catalog TOML file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from paramprompt.cli.keys import CliCmd
from paramprompt.cli.options import OutputFormat, output_format_option
from paramprompt.config.catalog_io import load_catalog_file
from paramprompt.core.keys import ArgKey

if TYPE_CHECKING:
    from paramprompt.cli.console import ConsoleLike
    from paramprompt.input.params import InputParam


def describe_param(param: InputParam) -> dict[str, Any]:
    """Return the machine-readable summary of one parameter.

    The default of a hidden parameter is reported as None.
    """
    return {
        "name": param.name,
        "type": param.type_name,
        "description": param.description,
        "required": param.required,
        "array": param.array_mode,
        "hidden": param.hidden,
        "shortcut": param.shortcut,
        "default": None if param.hidden else param.default,
    }


@click.command(name=CliCmd.PARAMS, help="List the parameters declared in CATALOG.")
@click.argument(
    ArgKey.CATALOG_PATH,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@output_format_option
def params_command(*, catalog_path: Path, output_format: OutputFormat | None) -> None:
    """List catalog parameters."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj[ArgKey.CONSOLE]
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    catalog = load_catalog_file(catalog_path)
    if fmt is OutputFormat.JSON:
        console.print(json.dumps([describe_param(p) for p in catalog], default=str))
        return

    for param in catalog:
        flags: list[str] = [param.type_name]
        if param.required:
            flags.append("required")
        if param.array_mode:
            flags.append("array")
        if param.hidden:
            flags.append("hidden")
        option = f"--{param.name}"
        if param.shortcut:
            option = f"-{param.shortcut}, {option}"
        line = f"{option} ({', '.join(flags)}): {param.description}"
        # Defaults of hidden parameters are secrets too
        if param.default is not None and not param.hidden:
            line += f" [default: {param.default}]"
        console.print(line)
