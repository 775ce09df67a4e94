"""
Tests for loading and validating the knowledge document.
"""

from __future__ import annotations

import copy
import json
import os
import tempfile
from decimal import Decimal
from fractions import Fraction

import pytest

from fotobox_advisor.application.exceptions import CatalogError
from fotobox_advisor.domain.entities.price_table import PackageKey
from fotobox_advisor.domain.entities.selection import Selection
from fotobox_advisor.domain.entities.step_definition import StepKind
from fotobox_advisor.infrastructure.knowledge.catalog_data import DEFAULT_CATALOG
from fotobox_advisor.infrastructure.knowledge.catalog_store import CatalogStore, build_catalog


def test_bundled_catalog_loads():
    """Test the default document: step order, prices and conversion factors."""
    catalog = CatalogStore().load()

    assert [s.id for s in catalog.steps] == [
        "privacy",
        "welcome",
        "mode",
        "event",
        "guests",
        "format",
        "printpkgs",
        "accessories",
        "summary",
    ]
    table = catalog.price_table
    assert table.base.amount == Decimal("350")
    assert table.packages[PackageKey(size=200)].amount == Decimal("100")
    assert table.package_options["802"] == PackageKey(size=800, variant="dual_printer")
    assert table.format_factors["strip"] == (Fraction(1, 2),)
    assert table.format_factors["dual"] == (Fraction(1), Fraction(1, 2))
    assert table.bundle_eligible == ("props", "backdrop", "layout")
    assert catalog.step("guests").kind == StepKind.guests
    assert catalog.step("missing") is None


def test_string_options_use_label_as_value():
    """Test that plain string options are expanded."""
    catalog = build_catalog(DEFAULT_CATALOG)
    event = catalog.step("event")

    assert event.option_values()[0] == "Hochzeit"
    assert event.option("Hochzeit").label == "Hochzeit"


def test_preconditions_gate_print_steps():
    """Test the print-only precondition on the guests step."""
    guests = build_catalog(DEFAULT_CATALOG).step("guests")

    assert guests.is_available(Selection(mode="digital_and_print")) is True
    assert guests.is_available(Selection(mode="digital")) is False
    assert guests.is_available(Selection()) is False


def test_catalog_from_json_file():
    """Test loading a document from disk."""
    document = copy.deepcopy(DEFAULT_CATALOG)
    document["pricing"]["base"]["amount"] = "399"

    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "catalog.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(document, f, ensure_ascii=False)

        catalog = CatalogStore(path=path).load()

    assert catalog.price_table.base.amount == Decimal("399")


def test_unreadable_file_raises_catalog_error():
    """Test missing and malformed files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(CatalogError):
            CatalogStore(path=os.path.join(tmpdir, "missing.json")).load()

        path = os.path.join(tmpdir, "broken.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write("{not json")
        with pytest.raises(CatalogError):
            CatalogStore(path=path).load()


def test_invalid_documents_are_rejected():
    """Test duplicate step ids, unknown step kinds and bad conversion factors."""
    duplicate = copy.deepcopy(DEFAULT_CATALOG)
    duplicate["steps"].append(copy.deepcopy(duplicate["steps"][0]))
    with pytest.raises(CatalogError):
        build_catalog(duplicate)

    bad_kind = copy.deepcopy(DEFAULT_CATALOG)
    bad_kind["steps"][0]["kind"] = "survey"
    with pytest.raises(CatalogError):
        build_catalog(bad_kind)

    bad_factor = copy.deepcopy(DEFAULT_CATALOG)
    bad_factor["pricing"]["format_factors"]["strip"] = ["0"]
    with pytest.raises(CatalogError):
        build_catalog(bad_factor)

    no_steps = copy.deepcopy(DEFAULT_CATALOG)
    no_steps["steps"] = []
    with pytest.raises(CatalogError):
        build_catalog(no_steps)


if __name__ == "__main__":
    test_bundled_catalog_loads()
    test_string_options_use_label_as_value()
    test_preconditions_gate_print_steps()
    test_catalog_from_json_file()
    test_unreadable_file_raises_catalog_error()
    test_invalid_documents_are_rejected()
    print("All tests passed!")
