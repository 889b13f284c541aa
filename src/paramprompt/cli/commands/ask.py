# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : ask.py
#   file_relpath : src/paramprompt/cli/commands/ask.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""ParamPrompt `ask` command.

Resolves parameters declared in a catalog TOML file. Values given with
``--set NAME=VALUE`` count as supplied options; anything else is taken from the
default (with ``--no-interaction``) or asked for on the terminal.

Examples:
    Resolve every parameter of a catalog interactively::

        paramprompt ask catalog.toml

    Resolve two parameters without prompting, as JSON::

        paramprompt ask catalog.toml name tags --set name=demo -n --output-format json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from paramprompt.cli.cli_types import KeyValueParam
from paramprompt.cli.keys import CliCmd, CliOpt
from paramprompt.cli.options import OutputFormat, output_format_option
from paramprompt.config.catalog_io import load_catalog_file
from paramprompt.config.logging import get_logger
from paramprompt.core.keys import ArgKey
from paramprompt.input.errors import ParamPromptUsageError
from paramprompt.input.prompter import ClickPrompter
from paramprompt.input.resolver import ParamResolver
from paramprompt.input.shaping import select_question_shaper
from paramprompt.input.store import MappingOptionStore

if TYPE_CHECKING:
    from paramprompt.cli.console import ConsoleLike
    from paramprompt.config.logging import ParamPromptLogger
    from paramprompt.input.catalog import ParamCatalog

logger: ParamPromptLogger = get_logger(__name__)


def seed_option_values(
    catalog: ParamCatalog,
    set_values: tuple[tuple[str, str], ...],
) -> dict[str, Any]:
    """Turn ``--set NAME=VALUE`` pairs into option store values.

    Repeated pairs for an array-mode parameter accumulate into a list; for a
    scalar parameter the last one wins.

    Raises:
        ParamPromptUsageError: If a name is not in the catalog.
    """
    values: dict[str, Any] = {}
    for name, value in set_values:
        param = catalog.lookup(name)
        if param is None:
            raise ParamPromptUsageError(f"{CliOpt.SET_VALUE}: unknown parameter '{name}'")
        if param.array_mode:
            values.setdefault(name, []).append(value)
        else:
            values[name] = value
    return values


@click.command(
    name=CliCmd.ASK,
    help="Resolve the parameters declared in CATALOG (all of them unless NAMES are given).",
)
@click.argument(
    ArgKey.CATALOG_PATH,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.argument(ArgKey.PARAM_NAMES, nargs=-1)
@click.option(
    CliOpt.SET_VALUE,
    ArgKey.SET_VALUES,
    type=KeyValueParam(),
    multiple=True,
    help="Supply a parameter value (repeat for array parameters).",
)
@click.option(
    "-n",
    CliOpt.NO_INTERACTION,
    ArgKey.NO_INTERACTION,
    is_flag=True,
    default=False,
    help="Never prompt; fall back to defaults.",
)
@output_format_option
def ask_command(
    *,
    catalog_path: Path,
    names: tuple[str, ...],
    set_values: tuple[tuple[str, str], ...],
    no_interaction: bool,
    output_format: OutputFormat | None,
) -> None:
    """Resolve catalog parameters and print their values."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj[ArgKey.CONSOLE]
    fmt: OutputFormat = output_format or OutputFormat.TEXT
    machine: bool = fmt is OutputFormat.JSON
    color_enabled: bool = bool(ctx.obj.get(ArgKey.COLOR_ENABLED)) and not machine

    catalog = load_catalog_file(catalog_path)
    store = MappingOptionStore(
        seed_option_values(catalog, set_values),
        interactive=not no_interaction,
    )
    resolver = ParamResolver(
        store,
        catalog,
        # Keep stdout clean for machine-readable output
        ClickPrompter(err=machine),
        select_question_shaper(color_enabled=color_enabled),
        color_enabled=color_enabled,
    )

    requested: list[str] = list(names) or catalog.names()
    logger.info("Resolving %d parameter(s) from %s", len(requested), catalog_path)
    resolved: dict[str, Any] = {name: resolver.resolve(name) for name in requested}

    if machine:
        console.print(json.dumps(resolved, default=str))
        return
    for name, value in resolved.items():
        label = console.styled(name, bold=True) if color_enabled else name
        console.print(f"{label} = {json.dumps(value, default=str)}")
