# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : __main__.py
#   file_relpath : src/paramprompt/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Module entry point for running ParamPrompt via ``python -m paramprompt``.

It delegates directly to :func:`paramprompt.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how ParamPrompt is launched.

Examples:
    Resolve the parameters of a catalog using the module interface::

        python -m paramprompt ask catalog.toml
"""

from __future__ import annotations

from paramprompt.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
