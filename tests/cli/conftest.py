# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""CLI test helpers for running ParamPrompt through Click's test runner.

`run_cli()` invokes the top-level group with an optional STDIN payload; prompts
read from that payload, so interactive sessions can be scripted. The `assert_*`
helpers check exit codes and show the combined output on failure.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Sequence

import pytest
from click.testing import CliRunner, Result

from paramprompt.cli.main import cli
from paramprompt.config.logging import TRACE_LEVEL, setup_logging
from paramprompt.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Reset logging after each CLI run.

    The CLI reconfigures the root logger against the runner's temporary streams.
    """
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--no-color", "version"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input; answers to
            prompts, one per line.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["ask", str(catalog), "name"], input_text="demo\\n")
        assert_SUCCESS(result)
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_DATA_ERROR(result: Result) -> None:
    """Assert that the command exited with DATA_ERROR (code 65)."""
    assert result.exit_code == ExitCode.DATA_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
