# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : shaping.py
#   file_relpath : src/paramprompt/input/shaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Question shaping strategies.

A question shaper adjusts how a question is presented before it is asked, for
example to use richer rendering on a color-capable terminal. Shapers only touch
presentation (text); validators, normalizers and defaults are left alone so the
resolution algorithm is unaffected.

The resolver requires a shaper at construction; pick one with
`select_question_shaper()` or pass your own callable.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Callable

import click

if TYPE_CHECKING:
    from paramprompt.input.question import PromptContext, Question

QuestionShaper = Callable[["Question", "PromptContext"], "Question"]

ARRAY_HINT: str = "(empty answer to finish)"


def plain_question(question: Question, context: PromptContext) -> Question:
    """Return the question unchanged."""
    return question


def styled_question(question: Question, context: PromptContext) -> Question:
    """Return the question with the array hint appended and, when enabled, bold text.

    Args:
        question (Question): The question to present.
        context (PromptContext): What is known about the parameter and terminal.

    Returns:
        Question: A copy with presentation-only changes.
    """
    text: str = question.text
    if context.array_mode:
        text = f"{text} {ARRAY_HINT}"
    if context.color_enabled:
        text = click.style(text, bold=True)
    return replace(question, text=text)


def select_question_shaper(*, color_enabled: bool) -> QuestionShaper:
    """Pick the shaper matching the terminal's capability."""
    return styled_question if color_enabled else plain_question
