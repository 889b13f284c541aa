# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : cli_types.py
#   file_relpath : src/paramprompt/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Custom Click parameter types for the ParamPrompt CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, Iterable, NoReturn, Protocol, TypeVar, cast

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string (case-insensitive) to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }

        key = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click."""
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix = (incomplete or "").lower()
        return [
            RuntimeCompletionItem(choice)
            for choice in self.choices
            if choice.lower().startswith(prefix)
        ]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumParam({self.enum_cls.__name__})"


class KeyValueParam(ParamTypeBase):
    """A Click parameter type parsing ``NAME=VALUE`` into a ``(name, value)`` tuple."""

    name = "name=value"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> tuple[str, str]:
        """Split ``NAME=VALUE`` on the first ``=``; the value may be empty."""
        if isinstance(value, tuple):
            return cast("tuple[str, str]", value)
        key, sep, val = str(value).partition("=")
        if not sep or not key:
            self.fail(f"Expected NAME=VALUE, got '{value}'", param, ctx)
        return key, val
