# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : constants.py
#   file_relpath : src/paramprompt/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""ParamPrompt Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PARAMPROMPT_VERSION: str = get_version("paramprompt")

# Environment variable consulted for the internal log level
LOG_LEVEL_ENV_VAR: str = "PARAMPROMPT_LOG_LEVEL"

# Top-level table holding parameter definitions in a catalog TOML document
CATALOG_PARAMS_TABLE: str = "params"
