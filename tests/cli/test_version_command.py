# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : test_version_command.py
#   file_relpath : tests/cli/test_version_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""CLI test: `version` command output and the bare group invocation."""

from __future__ import annotations

import json

from paramprompt.constants import PARAMPROMPT_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_version_outputs_version() -> None:
    """It should output the installed version string (exact match)."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == PARAMPROMPT_VERSION


def test_version_json() -> None:
    """It should output a JSON object with the version."""
    result = run_cli(["version", "--output-format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": PARAMPROMPT_VERSION}


def test_bare_group_prints_hint_and_help() -> None:
    """Without a subcommand the group explains itself."""
    result = run_cli([])

    assert_SUCCESS(result)
    assert "Hint: use 'paramprompt ask CATALOG'" in result.stdout
    assert "version" in result.stdout
