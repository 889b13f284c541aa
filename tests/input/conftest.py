# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : conftest.py
#   file_relpath : tests/input/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Helpers for resolver tests: a scripted prompter and a resolver factory.

`ScriptedPrompter` replays canned raw answers. Like a real prompter it runs each
answer through the question's validator and normalizer, but it never re-asks: a
rejection propagates straight to the test.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from paramprompt.input.catalog import ParamCatalog
from paramprompt.input.resolver import ParamResolver
from paramprompt.input.shaping import plain_question
from paramprompt.input.store import MappingOptionStore

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from paramprompt.input.params import InputParam
    from paramprompt.input.question import Question
    from paramprompt.input.shaping import QuestionShaper


class ScriptedPrompter:
    """Prompter returning pre-recorded answers, in order."""

    def __init__(self, answers: Iterable[Any] = ()) -> None:
        self.answers: list[Any] = list(answers)
        self.questions: list[Question] = []

    @property
    def calls(self) -> int:
        """Number of exchanges performed so far."""
        return len(self.questions)

    def ask(self, question: Question) -> Any:
        self.questions.append(question)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {question.text!r}")
        return question.process(self.answers.pop(0))


def make_resolver(
    *params: InputParam,
    values: Mapping[str, Any] | None = None,
    interactive: bool = True,
    answers: Iterable[Any] = (),
    shaper: QuestionShaper = plain_question,
) -> tuple[ParamResolver, MappingOptionStore, ScriptedPrompter]:
    """Build a resolver over ``params`` with a dict store and a scripted prompter.

    Returns:
        tuple[ParamResolver, MappingOptionStore, ScriptedPrompter]: The resolver and
            its collaborators, for assertions.
    """
    store = MappingOptionStore(values, interactive=interactive)
    prompter = ScriptedPrompter(answers)
    resolver = ParamResolver(store, ParamCatalog(params), prompter, shaper)
    return resolver, store, prompter
