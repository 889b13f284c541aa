# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : test_verbosity.py
#   file_relpath : tests/cli/test_verbosity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""CLI tests: verbosity flags, the log level environment variable and color options."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from paramprompt.input.errors import ParamPromptUsageError
from paramprompt.cli.options import resolve_verbosity
from paramprompt.config.logging import TRACE_LEVEL
from paramprompt.constants import LOG_LEVEL_ENV_VAR
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli

if TYPE_CHECKING:
    from pathlib import Path


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (5, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
        (0, 3, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    """Flag counts map onto logging levels."""
    assert resolve_verbosity(verbose, quiet) == expected


def test_resolve_verbosity_exclusive() -> None:
    """-v and -q cannot be combined."""
    with pytest.raises(ParamPromptUsageError, match="mutually exclusive"):
        resolve_verbosity(1, 1)


def test_verbose_and_quiet_flags_conflict() -> None:
    """The conflict is a usage error on the command line too."""
    result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.stderr


def test_debug_logging_goes_to_stderr(catalog_file: Path) -> None:
    """Diagnostics never pollute program output."""
    result = run_cli(
        ["-vv", "--no-color", "ask", str(catalog_file), "name", "-n", "--set", "name=demo"]
    )

    assert_SUCCESS(result)
    assert "Loading catalog from" in result.stderr
    assert "Loading catalog from" not in result.stdout
    assert result.stdout.strip() == 'name = "demo"'


def test_env_log_level_overrides_flags(
    monkeypatch: pytest.MonkeyPatch, catalog_file: Path
) -> None:
    """The environment variable wins over -q."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "DEBUG")

    result = run_cli(["-q", "ask", str(catalog_file), "count", "-n"])

    assert_SUCCESS(result)
    assert "[DEBUG]" in result.stderr


def test_invalid_color_mode() -> None:
    """Unknown color modes are rejected by the option type."""
    result = run_cli(["--color", "sometimes", "version"])

    assert result.exit_code == 2, result.output
    assert "Must be one of: auto, always, never" in result.stderr
