# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : store.py
#   file_relpath : src/paramprompt/input/store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Option stores: where the resolver reads supplied values and caches answers.

`OptionStore` is the protocol the resolver depends on. Two implementations are
provided:

- `MappingOptionStore`: a plain dict, for programmatic use and tests.
- `ClickOptionStore`: a view over the ``params`` of a `click.Context`, so
  parameters resolved inside a Click command see the parsed option values and
  later consumers in the same run see prompted answers.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    import click


class OptionStore(Protocol):
    """Current value of every named option, plus the session's interactivity."""

    def get(self, name: str) -> Any:
        """Return the stored value for ``name``, or None."""
        ...

    def set(self, name: str, value: Any) -> None:
        """Store ``value`` under ``name``."""
        ...

    def is_interactive(self) -> bool:
        """Return True when the user can be prompted."""
        ...


class MappingOptionStore(OptionStore):
    """Dict-backed option store.

    Args:
        values (Mapping[str, Any] | None): Initial option values.
        interactive (bool): Whether prompting is allowed.
    """

    def __init__(self, values: Mapping[str, Any] | None = None, *, interactive: bool = False) -> None:
        self.values: dict[str, Any] = dict(values or {})
        self.interactive = interactive

    def get(self, name: str) -> Any:
        return self.values.get(name)

    def set(self, name: str, value: Any) -> None:
        self.values[name] = value

    def is_interactive(self) -> bool:
        return self.interactive


class ClickOptionStore(OptionStore):
    """Option store over a Click context's parsed ``params``.

    Args:
        ctx (click.Context): Context whose ``params`` hold the option values.
        interactive (bool | None): Explicit interactivity; when None, the session
            is interactive if STDIN is a TTY.
    """

    def __init__(self, ctx: click.Context, *, interactive: bool | None = None) -> None:
        self.ctx = ctx
        self.interactive = interactive

    def get(self, name: str) -> Any:
        return self.ctx.params.get(name)

    def set(self, name: str, value: Any) -> None:
        self.ctx.params[name] = value

    def is_interactive(self) -> bool:
        if self.interactive is not None:
            return self.interactive
        try:
            return sys.stdin.isatty()
        except (AttributeError, ValueError):
            # Closed or replaced STDIN
            return False
