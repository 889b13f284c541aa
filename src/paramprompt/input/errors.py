# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : errors.py
#   file_relpath : src/paramprompt/input/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Exceptions raised while resolving parameters.

Usage:
    The resolver raises these exceptions synchronously to its caller; none are
    caught internally. Validators raise `ValidationRejectedError` to reject a
    value.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from paramprompt.core.exit_codes import ExitCode
from paramprompt.core.keys import ArgKey


class ParamPromptError(click.ClickException):
    """Base class for all ParamPrompt errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get(ArgKey.CONSOLE)
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class UnknownParameterError(ParamPromptError):
    """The requested parameter name is not in the catalog."""

    exit_code = ExitCode.SOFTWARE_ERROR

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid parameter name: {name}")
        self.name = name


class MissingRequiredValueError(ParamPromptError):
    """A required parameter has no value and the session is non-interactive."""

    exit_code = ExitCode.USAGE_ERROR

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing required value for --{name} parameter")
        self.name = name


class ValidationRejectedError(ParamPromptError):
    """A validator rejected a supplied, defaulted or interactively entered value."""

    exit_code = ExitCode.DATA_ERROR


class InvalidArrayValueError(ParamPromptError):
    """An array-mode parameter holds a value that is not a collection.

    This signals a misconfigured default rather than bad user input.
    """

    exit_code = ExitCode.CONFIG_ERROR

    def __init__(self, name: str, value: object) -> None:
        super().__init__(
            f'Option --{name} expects an array of values, but received "{type(value).__name__}";'
            " check to ensure the command has provided a valid default."
        )
        self.name = name


class DuplicateParameterError(ParamPromptError):
    """A catalog already holds a parameter with the same name."""

    exit_code = ExitCode.CONFIG_ERROR

    def __init__(self, name: str) -> None:
        super().__init__(f"Duplicate parameter name: {name}")
        self.name = name


class CatalogConfigError(ParamPromptError):
    """A catalog document is malformed (bad TOML, unknown keys or types)."""

    exit_code = ExitCode.CONFIG_ERROR


class ParamPromptUsageError(ParamPromptError):
    """The command line is invalid (conflicting flags, ``--set`` for an unknown name)."""

    exit_code = ExitCode.USAGE_ERROR
