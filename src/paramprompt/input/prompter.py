# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : prompter.py
#   file_relpath : src/paramprompt/input/prompter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Prompters: one blocking interactive exchange per question.

The resolver never retries. Re-asking after a rejected answer is the prompter's
job: `ClickPrompter` echoes the rejection and asks again, up to the question's
(or its own) attempt limit, then re-raises the last rejection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import click

from paramprompt.config.logging import get_logger
from paramprompt.input.errors import ValidationRejectedError
from paramprompt.input.question import QuestionKind

if TYPE_CHECKING:
    from paramprompt.config.logging import ParamPromptLogger
    from paramprompt.input.question import Question

logger: ParamPromptLogger = get_logger(__name__)


class Prompter(Protocol):
    """Asks one question and returns the processed answer."""

    def ask(self, question: Question) -> Any:
        """Perform one exchange for ``question``.

        Returns:
            The validated and normalized answer (a string, bool, other normalized
            value, or None).

        Raises:
            ValidationRejectedError: If the question's validator rejects the answer.
        """
        ...


class ClickPrompter(Prompter):
    """Prompter reading answers from the terminal through Click.

    Args:
        err (bool): Write prompts to stderr instead of stdout.
        max_attempts (int | None): Attempt limit used when a question sets none;
            None means re-ask until an answer is accepted.
    """

    def __init__(self, *, err: bool = False, max_attempts: int | None = None) -> None:
        self.err = err
        self.max_attempts = max_attempts

    def ask(self, question: Question) -> Any:
        limit = question.max_attempts if question.max_attempts is not None else self.max_attempts
        attempt = 0
        while True:
            attempt += 1
            raw = self._read(question)
            try:
                return question.process(raw)
            except ValidationRejectedError as exc:
                logger.debug("Answer rejected (attempt %d): %s", attempt, exc.message)
                if limit is not None and attempt >= limit:
                    raise
                click.echo(f"Error: {exc.message}", err=True)

    def _read(self, question: Question) -> Any:
        if question.kind == QuestionKind.CONFIRM:
            return click.confirm(question.text, default=bool(question.default), err=self.err)

        if question.kind == QuestionKind.CHOICE:
            for index, choice in enumerate(question.choices, start=1):
                click.echo(f"  [{index}] {choice}", err=self.err)

        has_default = question.default is not None
        # An empty line is a valid answer: it ends array input and skips optional values.
        return click.prompt(
            question.text,
            default=question.default if has_default else "",
            show_default=has_default and not question.hidden,
            hide_input=question.hidden,
            type=click.STRING,
            err=self.err,
        )
