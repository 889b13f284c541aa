# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : exit_codes.py
#   file_relpath : src/paramprompt/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Exit codes for ParamPrompt.

ParamPrompt aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently. Each parameter resolution error carries one of
these codes; Click uses it as the process exit status.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for ParamPrompt.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Invocation error, including a required parameter that has no
            value in a non-interactive session. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: A validator rejected a supplied, defaulted or entered value.
            Mirrors BSD ``EX_DATAERR (65)``.
        SOFTWARE_ERROR: Internal error, e.g. a command asked for a parameter that
            is not in its catalog. Mirrors BSD ``EX_SOFTWARE (70)``.
        CONFIG_ERROR: Catalog misconfiguration (malformed catalog file, duplicate
            names, invalid defaults). Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    SOFTWARE_ERROR = 70  # EX_SOFTWARE
    CONFIG_ERROR = 78  # EX_CONFIG
