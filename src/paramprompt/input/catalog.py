# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : catalog.py
#   file_relpath : src/paramprompt/input/catalog.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Parameter catalog: the name → definition lookup supplied to the resolver."""

from __future__ import annotations

from typing import TYPE_CHECKING

from paramprompt.config.logging import get_logger
from paramprompt.input.errors import DuplicateParameterError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from paramprompt.config.logging import ParamPromptLogger
    from paramprompt.input.params import InputParam

logger: ParamPromptLogger = get_logger(__name__)


class ParamCatalog:
    """Ordered mapping from parameter name to its definition.

    The catalog owns the name-uniqueness invariant: adding a second parameter
    with an existing name raises `DuplicateParameterError`.

    Args:
        params (Iterable[InputParam]): Initial definitions, in declaration order.
    """

    def __init__(self, params: Iterable[InputParam] = ()) -> None:
        self._params: dict[str, InputParam] = {}
        for param in params:
            self.add(param)

    def add(self, param: InputParam) -> None:
        """Register a parameter definition.

        Raises:
            DuplicateParameterError: If the name is already registered.
        """
        if param.name in self._params:
            raise DuplicateParameterError(param.name)
        logger.trace("Registering parameter --%s (%s)", param.name, param.type_name)
        self._params[param.name] = param

    def lookup(self, name: str) -> InputParam | None:
        """Return the definition registered under ``name``, or None."""
        return self._params.get(name)

    def names(self) -> list[str]:
        """Return the registered names in declaration order."""
        return list(self._params)

    def __contains__(self, name: object) -> bool:
        return name in self._params

    def __iter__(self) -> Iterator[InputParam]:
        return iter(self._params.values())

    def __len__(self) -> int:
        return len(self._params)
