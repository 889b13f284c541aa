# paramprompt:header:start
#
#   project      : ParamPrompt
#   file         : test_catalog.py
#   file_relpath : tests/input/test_catalog.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# paramprompt:header:end

"""Unit tests for `paramprompt.input.catalog.ParamCatalog`."""

from __future__ import annotations

import pytest

from paramprompt.core.exit_codes import ExitCode
from paramprompt.input.catalog import ParamCatalog
from paramprompt.input.errors import DuplicateParameterError
from paramprompt.input.params import IntParam, StringParam


def test_catalog_keeps_declaration_order() -> None:
    """Names come back in the order they were added."""
    catalog = ParamCatalog([StringParam("b", "B"), IntParam("a", "A")])
    catalog.add(StringParam("c", "C"))

    assert catalog.names() == ["b", "a", "c"]
    assert [p.name for p in catalog] == ["b", "a", "c"]
    assert len(catalog) == 3


def test_lookup_and_membership() -> None:
    """Lookup returns the definition or None."""
    param = StringParam("name", "Name")
    catalog = ParamCatalog([param])

    assert catalog.lookup("name") is param
    assert catalog.lookup("other") is None
    assert "name" in catalog
    assert "other" not in catalog


def test_duplicate_names_are_rejected() -> None:
    """A name can only be registered once."""
    catalog = ParamCatalog([StringParam("name", "Name")])

    with pytest.raises(DuplicateParameterError, match="Duplicate parameter name: name") as excinfo:
        catalog.add(IntParam("name", "Other"))

    assert excinfo.value.exit_code == ExitCode.CONFIG_ERROR
    assert catalog.lookup("name").description == "Name"  # type: ignore[union-attr]
