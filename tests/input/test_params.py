# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : test_params.py
#   file_relpath : tests/input/test_params.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Unit tests for the concrete parameter types in `paramprompt.input.params`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from paramprompt.input.errors import ValidationRejectedError
from paramprompt.input.params import (
    PARAM_TYPES,
    BoolParam,
    ChoiceParam,
    IntParam,
    PathParam,
    PathType,
    StringParam,
    to_bool,
)
from paramprompt.input.question import QuestionKind

if TYPE_CHECKING:
    from pathlib import Path


def test_param_types_registry() -> None:
    """Every concrete type is registered under its catalog identifier."""
    assert set(PARAM_TYPES) == {"string", "int", "bool", "choice", "path"}
    assert PARAM_TYPES["int"] is IntParam


def test_empty_name_is_rejected() -> None:
    """Definitions need a name."""
    with pytest.raises(ValueError, match="must not be empty"):
        StringParam("", "Nameless")


def test_shortcut_must_be_single_character() -> None:
    """Shortcuts are single letters."""
    assert StringParam("name", "Name", shortcut="n").shortcut == "n"
    with pytest.raises(ValueError, match="single character"):
        StringParam("name", "Name", shortcut="nm")


def test_question_carries_description_and_default() -> None:
    """Scalar questions offer the default; array questions do not."""
    scalar = StringParam("name", "Project name", default="demo").question()
    array = StringParam("tags", "Tag", default=["x"], array_mode=True).question()

    assert scalar.text == "Project name"
    assert scalar.kind == QuestionKind.TEXT
    assert scalar.default == "demo"
    assert array.default is None


def test_question_is_fresh_on_every_call() -> None:
    """Definitions build a new question object each time."""
    param = StringParam("name", "Name")

    assert param.question() is not param.question()


def test_string_without_pattern_accepts_anything() -> None:
    """No pattern, no validator."""
    question = StringParam("name", "Name").question()

    assert question.validator is None
    assert question.process("Anything goes") == "Anything goes"


def test_string_pattern() -> None:
    """Pattern matching uses ``re.search``."""
    question = StringParam("name", "Name", pattern=r"^[a-z]+$").question()

    assert question.process("demo") == "demo"
    with pytest.raises(ValidationRejectedError, match="does not match pattern"):
        question.process("Demo")
    with pytest.raises(ValidationRejectedError):
        question.process(42)


@pytest.mark.parametrize(("raw", "expected"), [("42", 42), (" -3 ", -3), ("+7", 7), (5, 5)])
def test_int_accepts_integers(raw: Any, expected: int) -> None:
    """Integers and integer strings are accepted and normalized to int."""
    assert IntParam("n", "N").question().process(raw) == expected


@pytest.mark.parametrize("raw", ["x", "4.2", "", True, None, 4.0])
def test_int_rejects_non_integers(raw: Any) -> None:
    """Anything that is not an integer is rejected."""
    with pytest.raises(ValidationRejectedError, match="integer expected"):
        IntParam("n", "N").question().process(raw)


def test_int_bounds() -> None:
    """Bounds are inclusive."""
    question = IntParam("n", "N", min=1, max=3).question()

    assert question.process("1") == 1
    assert question.process("3") == 3
    with pytest.raises(ValidationRejectedError, match="minimum value is 1"):
        question.process("0")
    with pytest.raises(ValidationRejectedError, match="maximum value is 3"):
        question.process("4")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (True, True),
        (False, False),
        ("yes", True),
        ("Y", True),
        ("on", True),
        ("no", False),
        ("0", False),
    ],
)
def test_to_bool(raw: Any, expected: bool) -> None:
    """Yes/no spellings convert to bools."""
    assert to_bool(raw) is expected


def test_bool_param() -> None:
    """Bool parameters are confirmations defaulting to False."""
    param = BoolParam("force", "Overwrite")
    question = param.question()

    assert param.default is False
    assert question.kind == QuestionKind.CONFIRM
    assert question.default is False
    assert question.process("true") is True
    with pytest.raises(ValidationRejectedError, match="yes or no expected"):
        question.process("maybe")


def test_bool_param_cannot_collect_arrays() -> None:
    """Confirmations always answer, so a bool array could never end."""
    with pytest.raises(ValueError, match="cannot collect an array"):
        BoolParam("flags", "Flag", array_mode=True)


def test_hidden_flag_reaches_the_question() -> None:
    """Hidden parameters ask hidden questions."""
    assert StringParam("token", "Token", hidden=True).question().hidden is True
    assert StringParam("name", "Name").question().hidden is False


def test_choice_param() -> None:
    """Choices are accepted by value or 1-based position."""
    question = ChoiceParam("color", "Color", choices=("red", "green")).question()

    assert question.kind == QuestionKind.CHOICE
    assert question.choices == ("red", "green")
    assert question.process("green") == "green"
    assert question.process("1") == "red"
    with pytest.raises(ValidationRejectedError, match="expected one of: red, green"):
        question.process("blue")
    with pytest.raises(ValidationRejectedError):
        question.process("3")


def test_choice_param_needs_choices() -> None:
    """A choice parameter without choices is a definition error."""
    with pytest.raises(ValueError, match="at least one choice"):
        ChoiceParam("color", "Color")


def test_path_param_without_existence_check(tmp_path: Path) -> None:
    """Paths need not exist unless requested, but must not be empty."""
    question = PathParam("out", "Output").question()

    assert question.process(str(tmp_path / "missing")) == str(tmp_path / "missing")
    with pytest.raises(ValidationRejectedError, match="path expected"):
        question.process("")


def test_path_param_must_exist_file(tmp_path: Path) -> None:
    """Existing files pass; missing paths and directories do not."""
    target = tmp_path / "a.txt"
    target.write_text("x", encoding="utf-8")
    question = PathParam("src", "Source", must_exist=True).question()

    assert question.process(str(target)) == str(target)
    with pytest.raises(ValidationRejectedError, match="does not exist"):
        question.process(str(tmp_path / "missing.txt"))
    with pytest.raises(ValidationRejectedError, match="is not a file"):
        question.process(str(tmp_path))


def test_path_param_must_exist_dir(tmp_path: Path) -> None:
    """Directory parameters reject files."""
    target = tmp_path / "a.txt"
    target.write_text("x", encoding="utf-8")
    question = PathParam("dir", "Dir", path_type=PathType.DIR, must_exist=True).question()

    assert question.process(str(tmp_path)) == str(tmp_path)
    with pytest.raises(ValidationRejectedError, match="is not a directory"):
        question.process(str(target))
