# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : resolver.py
#   file_relpath : src/paramprompt/input/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Parameter resolution.

[`ParamResolver`][paramprompt.input.resolver.ParamResolver] produces the final,
validated and normalized value of a named parameter from whichever source
applies:

1. a value already present in the option store (e.g. parsed from ``--name``),
2. the parameter's default, when the session is non-interactive,
3. the user's answer(s) to an interactive prompt.

Resolution order:
    - Unknown names raise `UnknownParameterError`.
    - A *provided* value (non-None scalar, non-empty collection in array mode) is
      validated and normalized, then returned without prompting.
    - Without a provided value, a non-interactive session substitutes the default;
      if that is still not provided, required parameters raise
      `MissingRequiredValueError` and optional ones resolve to None (or an empty
      list in array mode).
    - Otherwise the prompter is asked once (scalar) or repeatedly until an empty
      answer (array mode), and the answer is written back to the option store so
      later lookups in the same run do not prompt again.

Notes:
    - Optional parameters accept an empty answer (``None`` or ``""``) without
      running their validator or normalizer.
    - A required array parameter must receive at least one answer: its first
      exchange rejects an empty answer, later exchanges accept one to end input.
    - Validator wrappers live on per-exchange copies of the question; the
      definition's question is never modified.
    - Nothing is caught here. Validator rejections propagate unchanged; re-asking
      after a rejection is the prompter's responsibility.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from paramprompt.config.logging import get_logger
from paramprompt.input.errors import (
    InvalidArrayValueError,
    MissingRequiredValueError,
    UnknownParameterError,
)
from paramprompt.input.question import PromptContext, is_empty_answer, require_answer, skip_empty

if TYPE_CHECKING:
    from paramprompt.config.logging import ParamPromptLogger
    from paramprompt.input.catalog import ParamCatalog
    from paramprompt.input.params import InputParam
    from paramprompt.input.prompter import Prompter
    from paramprompt.input.question import Question
    from paramprompt.input.shaping import QuestionShaper
    from paramprompt.input.store import OptionStore

logger: ParamPromptLogger = get_logger(__name__)


def is_value_provided(param: InputParam, value: Any) -> bool:
    """Return True if ``value`` counts as supplied for ``param``.

    Array-mode parameters need a non-empty collection; scalars need a non-None value.
    """
    if param.array_mode:
        if value is None:
            return False
        return not (isinstance(value, (list, tuple)) and len(value) == 0)
    return value is not None


class ParamResolver:
    """Resolve parameter values from options, defaults, or prompts.

    Args:
        store (OptionStore): Source of supplied values; receives prompted answers.
        catalog (ParamCatalog): Parameter definitions by name.
        prompter (Prompter): Performs interactive exchanges.
        shaper (QuestionShaper): Adjusts question presentation before use.
        color_enabled (bool): Passed to the shaper through `PromptContext`.
    """

    def __init__(
        self,
        store: OptionStore,
        catalog: ParamCatalog,
        prompter: Prompter,
        shaper: QuestionShaper,
        *,
        color_enabled: bool = False,
    ) -> None:
        self.store = store
        self.catalog = catalog
        self.prompter = prompter
        self.shaper = shaper
        self.color_enabled = color_enabled

    def resolve(self, name: str) -> Any:
        """Return the validated, normalized value of parameter ``name``.

        Args:
            name (str): Parameter name as registered in the catalog.

        Returns:
            Any: A scalar, or a list of scalars for array-mode parameters.

        Raises:
            UnknownParameterError: When ``name`` is not in the catalog.
            MissingRequiredValueError: When a required parameter has no value and
                the session is non-interactive.
            InvalidArrayValueError: When an array-mode value is not a collection.
            ValidationRejectedError: When a validator rejects a value.
        """
        param: InputParam | None = self.catalog.lookup(name)
        if param is None:
            raise UnknownParameterError(name)

        value: Any = self.store.get(name)
        context = PromptContext(
            name=name,
            required=param.required,
            array_mode=param.array_mode,
            color_enabled=self.color_enabled,
        )
        question: Question = self.shaper(param.question(), context)
        if not param.required:
            question = question.with_processors(
                validator=skip_empty(question.validator),
                normalizer=skip_empty(question.normalizer),
            )

        interactive: bool = self.store.is_interactive()
        if not is_value_provided(param, value) and not interactive:
            logger.debug("No value for --%s; using default %r", name, param.default)
            value = param.default

        if is_value_provided(param, value):
            logger.trace("Accepting supplied value for --%s: %r", name, value)
            return self._accept(param, question, value)

        if not interactive:
            if param.required:
                raise MissingRequiredValueError(name)
            logger.debug("Optional --%s left empty (non-interactive)", name)
            return [] if param.array_mode else None

        if param.array_mode:
            value = self._ask_many(param, question)
        else:
            logger.debug("Prompting for --%s", name)
            value = self.prompter.ask(question)

        # Cache the answer so later consumers in this run do not prompt again
        self.store.set(name, value)
        return value

    def _accept(self, param: InputParam, question: Question, value: Any) -> Any:
        """Validate and normalize a supplied or defaulted value."""
        if not param.array_mode:
            return question.normalize(question.validate(value))

        if not isinstance(value, (list, tuple)):
            raise InvalidArrayValueError(param.name, value)

        accepted: list[Any] = [question.validate(item) for item in value]
        return [question.normalize(item) for item in accepted]

    def _ask_many(self, param: InputParam, question: Question) -> list[Any]:
        """Ask repeatedly until an empty answer; return the collected answers."""
        first: Question = question
        later: Question = question
        if param.required:
            first = question.with_processors(
                validator=require_answer(param.name, question.validator),
            )
            later = question.with_processors(
                validator=skip_empty(question.validator),
                normalizer=skip_empty(question.normalizer),
            )

        values: list[Any] = []
        logger.debug("Collecting values for --%s", param.name)
        answer: Any = self.prompter.ask(first)
        while not is_empty_answer(answer):
            values.append(answer)
            answer = self.prompter.ask(later)

        logger.trace("Collected %d value(s) for --%s", len(values), param.name)
        return values
