# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : __init__.py
#   file_relpath : src/paramprompt/input/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Parameter resolution API.

Typical use inside a Click command:

```python
catalog = ParamCatalog([StringParam("name", "Project name", required=True)])
resolver = ParamResolver(
    ClickOptionStore(ctx),
    catalog,
    ClickPrompter(),
    select_question_shaper(color_enabled=True),
)
name = resolver.resolve("name")
```
"""

from __future__ import annotations

from paramprompt.input.catalog import ParamCatalog
from paramprompt.input.errors import (
    CatalogConfigError,
    DuplicateParameterError,
    InvalidArrayValueError,
    MissingRequiredValueError,
    ParamPromptError,
    UnknownParameterError,
    ValidationRejectedError,
)
from paramprompt.input.params import (
    BoolParam,
    ChoiceParam,
    InputParam,
    IntParam,
    PathParam,
    PathType,
    StringParam,
)
from paramprompt.input.prompter import ClickPrompter, Prompter
from paramprompt.input.question import PromptContext, Question, QuestionKind
from paramprompt.input.resolver import ParamResolver
from paramprompt.input.shaping import plain_question, select_question_shaper, styled_question
from paramprompt.input.store import ClickOptionStore, MappingOptionStore, OptionStore

__all__ = [
    "BoolParam",
    "CatalogConfigError",
    "ChoiceParam",
    "ClickOptionStore",
    "ClickPrompter",
    "DuplicateParameterError",
    "InputParam",
    "IntParam",
    "InvalidArrayValueError",
    "MappingOptionStore",
    "MissingRequiredValueError",
    "OptionStore",
    "ParamCatalog",
    "ParamPromptError",
    "ParamResolver",
    "PathParam",
    "PathType",
    "PromptContext",
    "Prompter",
    "Question",
    "QuestionKind",
    "StringParam",
    "UnknownParameterError",
    "ValidationRejectedError",
    "plain_question",
    "select_question_shaper",
    "styled_question",
]
