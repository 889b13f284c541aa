# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : question.py
#   file_relpath : src/paramprompt/input/question.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Question model shared by parameter definitions, prompters and the resolver.

A `Question` bundles the prompt text with the caller-supplied validator and
normalizer. Questions are immutable: the resolver never edits a question in
place, it derives per-exchange copies with `Question.with_processors()`.

Validator contract:
    ``(value) -> value``; return the accepted value or raise
    [`ValidationRejectedError`][paramprompt.input.errors.ValidationRejectedError].

Normalizer contract:
    ``(value) -> value``; return the normalized value.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable

from paramprompt.input.errors import ValidationRejectedError

Validator = Callable[[Any], Any]
Normalizer = Callable[[Any], Any]

_UNSET: Any = object()


class QuestionKind(str, Enum):
    """How a prompter collects an answer.

    Attributes:
        TEXT: Free text answer.
        CONFIRM: Yes/no confirmation, answered with a bool.
        CHOICE: Free text answer among listed choices.
    """

    TEXT = "text"
    CONFIRM = "confirm"
    CHOICE = "choice"


def is_empty_answer(value: object) -> bool:
    """Return True for answers that terminate or skip input (``None`` or ``""``)."""
    return value is None or value == ""


@dataclass(frozen=True)
class Question:
    """A question asked for one parameter.

    Attributes:
        text (str): Prompt text.
        kind (QuestionKind): How the answer is collected.
        default (Any): Prompt-level default offered to the user, or None.
        choices (tuple[str, ...]): Allowed answers for `QuestionKind.CHOICE`.
        hidden (bool): Whether input is hidden while typing.
        validator (Validator | None): Accepts or rejects a raw answer.
        normalizer (Normalizer | None): Converts an accepted answer.
        max_attempts (int | None): Prompter retries on rejection; None means unlimited.
    """

    text: str
    kind: QuestionKind = QuestionKind.TEXT
    default: Any = None
    choices: tuple[str, ...] = ()
    hidden: bool = False
    validator: Validator | None = None
    normalizer: Normalizer | None = None
    max_attempts: int | None = None

    def with_processors(
        self,
        *,
        validator: Validator | None = _UNSET,
        normalizer: Normalizer | None = _UNSET,
    ) -> Question:
        """Return a copy of this question with a replaced validator and/or normalizer."""
        changes: dict[str, Any] = {}
        if validator is not _UNSET:
            changes["validator"] = validator
        if normalizer is not _UNSET:
            changes["normalizer"] = normalizer
        return replace(self, **changes)

    def validate(self, value: Any) -> Any:
        """Run the validator (if any) and return the accepted value."""
        if self.validator is None:
            return value
        return self.validator(value)

    def normalize(self, value: Any) -> Any:
        """Run the normalizer (if any) and return the normalized value."""
        if self.normalizer is None:
            return value
        return self.normalizer(value)

    def process(self, raw: Any) -> Any:
        """Validate then normalize a raw answer.

        Raises:
            ValidationRejectedError: If the validator rejects the answer.
        """
        return self.normalize(self.validate(raw))


def skip_empty(func: Callable[[Any], Any] | None) -> Callable[[Any], Any] | None:
    """Wrap a validator or normalizer so empty answers pass through untouched.

    Args:
        func: The wrapped callable; None stays None.

    Returns:
        A callable returning ``None``/``""`` unchanged and delegating anything
        else to ``func``.
    """
    if func is None:
        return None

    def _skip_empty(value: Any) -> Any:
        if is_empty_answer(value):
            return value
        return func(value)

    return _skip_empty


def require_answer(name: str, validator: Validator | None) -> Validator:
    """Wrap a validator so an empty answer is rejected.

    Args:
        name: Parameter name used in the rejection message.
        validator: The wrapped validator; may be None.

    Returns:
        A validator raising `ValidationRejectedError` on ``None``/``""`` and
        delegating anything else to ``validator``.
    """

    def _require_answer(value: Any) -> Any:
        if is_empty_answer(value):
            raise ValidationRejectedError(f"A value is required for --{name}.")
        if validator is None:
            return value
        return validator(value)

    return _require_answer


@dataclass(frozen=True)
class PromptContext:
    """What a question shaper may know about the parameter being asked.

    Attributes:
        name (str): Parameter name.
        required (bool): Whether the parameter is required.
        array_mode (bool): Whether several answers are collected.
        color_enabled (bool): Whether the terminal supports ANSI styling.
    """

    name: str
    required: bool = False
    array_mode: bool = False
    color_enabled: bool = False
