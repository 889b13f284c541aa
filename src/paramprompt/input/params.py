# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : params.py
#   file_relpath : src/paramprompt/input/params.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Parameter definitions.

An `InputParam` is the immutable, declarative description of one parameter: its
question text, default, requiredness and cardinality, plus the validator and
normalizer its question carries. Concrete types cover the common cases:

- `StringParam`: free text, optionally matched against a regular expression.
- `IntParam`: integers with optional bounds.
- `BoolParam`: yes/no confirmation.
- `ChoiceParam`: one value out of a fixed list.
- `PathParam`: a filesystem path, optionally required to exist.

Each call to `InputParam.question()` builds a fresh `Question`, so definitions
never share mutable prompt state.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, Final

from paramprompt.input.errors import ValidationRejectedError
from paramprompt.input.question import Normalizer, Question, QuestionKind, Validator

_INT_RE: Final[re.Pattern[str]] = re.compile(r"^[+-]?\d+$")

_TRUE_STRINGS: Final[frozenset[str]] = frozenset({"y", "yes", "true", "1", "on"})
_FALSE_STRINGS: Final[frozenset[str]] = frozenset({"n", "no", "false", "0", "off"})


@dataclass(frozen=True)
class InputParam:
    """Base parameter definition.

    Attributes:
        name (str): Unique parameter name; also the option name (``--name``).
        description (str): Question text shown when prompting.
        default (Any): Value used when the session is non-interactive and no value
            was supplied.
        required (bool): Whether an absent value is an error.
        array_mode (bool): Whether zero-or-more values are collected.
        shortcut (str | None): Optional single-letter option alias.
        hidden (bool): Whether typed answers are hidden (secrets).
    """

    #: Catalog ``type`` identifier of this parameter class.
    type_name: ClassVar[str] = "string"
    #: How the question collects its answer.
    question_kind: ClassVar[QuestionKind] = QuestionKind.TEXT

    name: str
    description: str
    default: Any = None
    required: bool = False
    array_mode: bool = False
    shortcut: str | None = None
    hidden: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Parameter name must not be empty")
        if self.shortcut is not None and len(self.shortcut) != 1:
            raise ValueError(f"Shortcut for --{self.name} must be a single character")

    def question(self) -> Question:
        """Build the question asked for this parameter."""
        return Question(
            text=self.description,
            kind=self.question_kind,
            # Array-mode answers end on an empty line; a prompt default would hide that.
            default=None if self.array_mode else self.default,
            hidden=self.hidden,
            validator=self.validator(),
            normalizer=self.normalizer(),
        )

    def validator(self) -> Validator | None:
        """Return the validator for this parameter, if any."""
        return None

    def normalizer(self) -> Normalizer | None:
        """Return the normalizer for this parameter, if any."""
        return None


@dataclass(frozen=True)
class StringParam(InputParam):
    """Free text parameter.

    Attributes:
        pattern (str | None): Regular expression answers must match (``re.search``).
    """

    type_name: ClassVar[str] = "string"

    pattern: str | None = None

    def validator(self) -> Validator | None:
        if self.pattern is None:
            return None
        regex = re.compile(self.pattern)

        def _validate(value: Any) -> Any:
            if not isinstance(value, str) or regex.search(value) is None:
                raise ValidationRejectedError(
                    f"Invalid value: {value!r} does not match pattern: {self.pattern}"
                )
            return value

        return _validate


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and _INT_RE.match(value.strip()) is not None


@dataclass(frozen=True)
class IntParam(InputParam):
    """Integer parameter with optional inclusive bounds.

    Attributes:
        min (int | None): Smallest accepted value.
        max (int | None): Largest accepted value.
    """

    type_name: ClassVar[str] = "int"

    min: int | None = None
    max: int | None = None

    def validator(self) -> Validator | None:
        def _validate(value: Any) -> Any:
            if not _is_integer(value):
                raise ValidationRejectedError(f"Invalid value {value!r}: integer expected")
            number = int(value)
            if self.min is not None and number < self.min:
                raise ValidationRejectedError(
                    f"Invalid value {number}; minimum value is {self.min}"
                )
            if self.max is not None and number > self.max:
                raise ValidationRejectedError(
                    f"Invalid value {number}; maximum value is {self.max}"
                )
            return value

        return _validate

    def normalizer(self) -> Normalizer | None:
        return int


def to_bool(value: Any) -> bool:
    """Convert a yes/no answer to a bool.

    Raises:
        ValidationRejectedError: If a string is not a recognized yes/no spelling.
    """
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ValidationRejectedError(f"Invalid value {value!r}: yes or no expected")


@dataclass(frozen=True)
class BoolParam(InputParam):
    """Yes/no parameter asked as a confirmation; defaults to False."""

    type_name: ClassVar[str] = "bool"
    question_kind: ClassVar[QuestionKind] = QuestionKind.CONFIRM

    default: Any = False

    def __post_init__(self) -> None:
        super().__post_init__()
        # A confirmation never yields the empty answer that ends array input
        if self.array_mode:
            raise ValueError(f"Bool parameter --{self.name} cannot collect an array of values")

    def validator(self) -> Validator | None:
        def _validate(value: Any) -> Any:
            to_bool(value)
            return value

        return _validate

    def normalizer(self) -> Normalizer | None:
        return to_bool


@dataclass(frozen=True)
class ChoiceParam(InputParam):
    """Parameter whose value is one of a fixed list.

    Answers may be a choice itself or its 1-based position in the list.

    Attributes:
        choices (tuple[str, ...]): Allowed values.
    """

    type_name: ClassVar[str] = "choice"
    question_kind: ClassVar[QuestionKind] = QuestionKind.CHOICE

    choices: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.choices:
            raise ValueError(f"Choice parameter --{self.name} needs at least one choice")

    def question(self) -> Question:
        return replace(super().question(), choices=tuple(self.choices))

    def validator(self) -> Validator | None:
        def _validate(value: Any) -> Any:
            if value in self.choices:
                return value
            text = str(value).strip()
            if text.isdigit() and 1 <= int(text) <= len(self.choices):
                return self.choices[int(text) - 1]
            raise ValidationRejectedError(
                f"Invalid value {value!r}; expected one of: {', '.join(self.choices)}"
            )

        return _validate


class PathType(str, Enum):
    """Kind of filesystem entry a `PathParam` expects.

    Attributes:
        FILE: A regular file.
        DIR: A directory.
    """

    FILE = "file"
    DIR = "dir"


@dataclass(frozen=True)
class PathParam(InputParam):
    """Filesystem path parameter.

    Attributes:
        path_type (PathType): Whether a file or a directory is expected.
        must_exist (bool): Whether the path must already exist.
    """

    type_name: ClassVar[str] = "path"

    path_type: PathType = PathType.FILE
    must_exist: bool = False

    def validator(self) -> Validator | None:
        def _validate(value: Any) -> Any:
            if not isinstance(value, (str, Path)) or str(value) == "":
                raise ValidationRejectedError(f"Invalid value {value!r}: path expected")
            if not self.must_exist:
                return value
            path = Path(value)
            if not path.exists():
                raise ValidationRejectedError(f'Path "{value}" does not exist')
            if self.path_type == PathType.DIR and not path.is_dir():
                raise ValidationRejectedError(f'Path "{value}" is not a directory')
            if self.path_type == PathType.FILE and not path.is_file():
                raise ValidationRejectedError(f'Path "{value}" is not a file')
            return value

        return _validate


#: Parameter classes by catalog ``type`` identifier.
PARAM_TYPES: Final[dict[str, type[InputParam]]] = {
    cls.type_name: cls for cls in (StringParam, IntParam, BoolParam, ChoiceParam, PathParam)
}
