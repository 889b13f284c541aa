# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : catalog_io.py
#   file_relpath : src/paramprompt/config/catalog_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Load parameter catalogs from TOML.

A catalog document declares one table per parameter under ``[params]``:

```toml
[params.name]
type = "string"
description = "Project name"
required = true
pattern = "^[a-z][a-z0-9-]*$"

[params.tags]
description = "Tag"
array = true
```

Parsing is done with `tomlkit` and returned as plain `dict` structures before
being turned into [`InputParam`][paramprompt.input.params.InputParam] instances.
Any structural problem raises
[`CatalogConfigError`][paramprompt.input.errors.CatalogConfigError].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import TOMLKitError

from paramprompt.config.logging import get_logger
from paramprompt.constants import CATALOG_PARAMS_TABLE
from paramprompt.input.catalog import ParamCatalog
from paramprompt.input.errors import CatalogConfigError
from paramprompt.input.params import PARAM_TYPES, PathType

if TYPE_CHECKING:
    from pathlib import Path

    from paramprompt.config.logging import ParamPromptLogger
    from paramprompt.input.params import InputParam

logger: ParamPromptLogger = get_logger(__name__)

# Catalog keys -> InputParam field names
_COMMON_KEYS: Final[dict[str, str]] = {
    "description": "description",
    "default": "default",
    "required": "required",
    "array": "array_mode",
    "shortcut": "shortcut",
    "hidden": "hidden",
}

_TYPE_KEYS: Final[dict[str, dict[str, str]]] = {
    "string": {"pattern": "pattern"},
    "int": {"min": "min", "max": "max"},
    "bool": {},
    "choice": {"choices": "choices"},
    "path": {"path_type": "path_type", "must_exist": "must_exist"},
}

_BOOL_KEYS: Final[frozenset[str]] = frozenset({"required", "array", "hidden", "must_exist"})
_STR_KEYS: Final[frozenset[str]] = frozenset({"description", "shortcut", "pattern", "path_type"})
_INT_KEYS: Final[frozenset[str]] = frozenset({"min", "max"})


def _check_value(name: str, key: str, value: Any) -> None:
    """Raise `CatalogConfigError` if ``value`` has the wrong type for ``key``."""
    where = f"params.{name}.{key}"
    if key in _BOOL_KEYS and not isinstance(value, bool):
        raise CatalogConfigError(f"{where}: expected a boolean, got {type(value).__name__}")
    if key in _STR_KEYS and not isinstance(value, str):
        raise CatalogConfigError(f"{where}: expected a string, got {type(value).__name__}")
    if key in _INT_KEYS and (isinstance(value, bool) or not isinstance(value, int)):
        raise CatalogConfigError(f"{where}: expected an integer, got {type(value).__name__}")
    if key == "choices" and (
        not isinstance(value, list) or not all(isinstance(v, str) for v in value)
    ):
        raise CatalogConfigError(f"{where}: expected a list of strings")


def param_from_dict(name: str, table: dict[str, Any]) -> InputParam:
    """Build one parameter definition from its catalog table.

    Args:
        name: Parameter name (the table key).
        table: The parameter's table (plain dict).

    Returns:
        The parameter definition.

    Raises:
        CatalogConfigError: On an unknown type, unknown or mistyped keys, or an
            invalid definition.
    """
    type_name: Any = table.get("type", "string")
    if type_name not in PARAM_TYPES:
        raise CatalogConfigError(
            f"params.{name}.type: unknown type {type_name!r}; "
            f"expected one of: {', '.join(PARAM_TYPES)}"
        )

    allowed: dict[str, str] = {**_COMMON_KEYS, **_TYPE_KEYS[type_name]}
    kwargs: dict[str, Any] = {}
    for key, value in table.items():
        if key == "type":
            continue
        if key not in allowed:
            raise CatalogConfigError(f"params.{name}: unknown key {key!r} for type {type_name!r}")
        _check_value(name, key, value)
        kwargs[allowed[key]] = value

    if "description" not in kwargs:
        raise CatalogConfigError(f"params.{name}: missing 'description'")
    if "choices" in kwargs:
        kwargs["choices"] = tuple(kwargs["choices"])
    if "path_type" in kwargs:
        try:
            kwargs["path_type"] = PathType(kwargs["path_type"])
        except ValueError as exc:
            raise CatalogConfigError(
                f"params.{name}.path_type: expected 'file' or 'dir', got {kwargs['path_type']!r}"
            ) from exc

    try:
        return PARAM_TYPES[type_name](name=name, **kwargs)
    except ValueError as exc:
        raise CatalogConfigError(f"params.{name}: {exc}") from exc


def catalog_from_dict(data: dict[str, Any]) -> ParamCatalog:
    """Build a catalog from a parsed TOML document.

    Raises:
        CatalogConfigError: If the ``[params]`` table is missing or malformed.
    """
    params_any: Any = data.get(CATALOG_PARAMS_TABLE)
    if not isinstance(params_any, dict):
        raise CatalogConfigError(f"Catalog must define a [{CATALOG_PARAMS_TABLE}] table")

    catalog = ParamCatalog()
    for name, table in cast("dict[str, Any]", params_any).items():
        if not isinstance(table, dict):
            raise CatalogConfigError(f"params.{name}: expected a table")
        catalog.add(param_from_dict(name, cast("dict[str, Any]", table)))

    logger.debug("Loaded catalog with %d parameter(s)", len(catalog))
    return catalog


def load_catalog_text(text: str) -> ParamCatalog:
    """Parse TOML text into a catalog.

    Raises:
        CatalogConfigError: On TOML syntax errors or an invalid catalog.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TOMLKitError as exc:
        raise CatalogConfigError(f"Invalid catalog TOML: {exc}") from exc
    data_any: Any = doc.unwrap()
    return catalog_from_dict(cast("dict[str, Any]", data_any))


def load_catalog_file(path: Path) -> ParamCatalog:
    """Read and parse a catalog TOML file (UTF-8).

    Raises:
        CatalogConfigError: If the file cannot be read or is not a valid catalog.
    """
    logger.debug("Loading catalog from %s", path)
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogConfigError(f"Cannot read catalog {path}: {exc}") from exc
    return load_catalog_text(text)
