# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : console.py
#   file_relpath : src/paramprompt/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Program output for CLI commands.

Resolved values, listings and error messages go through a `ConsoleLike` stored
in ``ctx.obj``; diagnostics go through `logging`. Prompts are not console
output: the prompter writes them with Click directly.
"""

from __future__ import annotations

from typing import Any, Protocol

import click


class ConsoleLike(Protocol):
    """What commands and error display need from a console."""

    def print(self, text: str = "") -> None: ...

    def error(self, text: str) -> None: ...

    def styled(self, text: str, **style_kwargs: Any) -> str: ...


class ClickConsole(ConsoleLike):
    """Console writing through `click.echo`.

    Args:
        enable_color (bool): Keep ANSI styling; when False, `styled()` returns
            plain text and Click strips any styling left in the output.
    """

    def __init__(self, *, enable_color: bool) -> None:
        self.enable_color = enable_color

    def print(self, text: str = "") -> None:
        click.echo(text, color=self.enable_color)

    def error(self, text: str) -> None:
        click.echo(text, err=True, color=self.enable_color)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        return click.style(text, **style_kwargs) if self.enable_color else text
