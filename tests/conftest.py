# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Pytest configuration for the ParamPrompt test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from paramprompt.config import logging
from paramprompt.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def silence_paramprompt_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure ParamPrompt's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """Write a small catalog TOML document and return its path.

    The catalog declares a required string (``name``), an optional bounded int
    (``count``, default 3), an optional array of tags (``tags``), a bool
    (``force``) and a choice (``color``).
    """
    path: Path = tmp_path / "catalog.toml"
    path.write_text(
        """\
[params.name]
type = "string"
description = "Project name"
required = true
pattern = "^[a-z]+$"

[params.count]
type = "int"
description = "How many"
default = 3
min = 1
max = 10

[params.tags]
description = "Tag"
array = true

[params.force]
type = "bool"
description = "Overwrite"

[params.color]
type = "choice"
description = "Color"
choices = ["red", "green", "blue"]
default = "red"
""",
        encoding="utf-8",
    )
    return path
