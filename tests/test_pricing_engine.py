"""
Tests for quote building: print conversion, bundle rule, disclosures and gaps
in the price table.
"""

from __future__ import annotations

import copy
from decimal import Decimal

import pytest

from fotobox_advisor.application.exceptions import InvalidSelection, MissingPriceEntry
from fotobox_advisor.application.use_cases.pricing import PricingEngine, resolve_print_package
from fotobox_advisor.domain.entities.price_table import PackageKey
from fotobox_advisor.domain.entities.quote import LineKind
from fotobox_advisor.domain.entities.selection import Selection
from fotobox_advisor.infrastructure.knowledge.catalog_data import DEFAULT_CATALOG
from fotobox_advisor.infrastructure.knowledge.catalog_store import build_catalog

CATALOG = build_catalog(DEFAULT_CATALOG)
ENGINE = PricingEngine()


def _print_selection(print_format: str, package: str, **kwargs) -> Selection:
    return Selection(
        mode="digital_and_print",
        guest_bracket="50–120",
        print_format=print_format,
        print_package_size=package,
        **kwargs,
    )


def test_empty_selection_is_base_only():
    """Test that a fresh session already quotes the base package."""
    quote = ENGINE.price(Selection(), CATALOG)

    assert [line.kind for line in quote.lines] == [LineKind.base]
    assert quote.total == Decimal("350")
    assert quote.currency == "EUR"


def test_digital_with_two_bundle_accessories():
    """Test that the first bundle-eligible accessory is free and the second is charged."""
    selection = Selection(mode="digital", event_type="Hochzeit", accessories=("props", "backdrop"))

    quote = ENGINE.price(selection, CATALOG)

    accessory_lines = quote.lines_of(LineKind.accessory)
    assert accessory_lines[0].included is True
    assert accessory_lines[0].amount == Decimal("0")
    assert accessory_lines[0].label == "Requisiten (inklusive)"
    assert accessory_lines[1].label == "Hintergrund"
    assert accessory_lines[1].amount == Decimal("30")
    assert quote.total == Decimal("380")


def test_strip_minimum_order_upgrade():
    """Test strip format: 100 strips need 50 prints, but the strip minimum is package 200."""
    quote = ENGINE.price(_print_selection("strip", "100"), CATALOG)

    package_line = quote.lines_of(LineKind.print_package)[0]
    assert package_line.amount == Decimal("100")
    assert package_line.label == "Printpaket 200 (100 Fotostreifen)"
    notes = quote.lines_of(LineKind.note)
    assert len(notes) == 1
    assert "Printpaket 200 statt 100" in notes[0].label
    assert quote.total == Decimal("450")


def test_strip_halves_the_print_requirement():
    """Test that 800 strips are priced as a 400 print package."""
    resolution = resolve_print_package(PackageKey(size=800), "strip", CATALOG.price_table)

    assert resolution.needed_units == 400
    assert resolution.package == PackageKey(size=400)
    assert resolution.upgraded_to_minimum is False


def test_postcard_is_one_to_one():
    """Test the postcard baseline."""
    quote = ENGINE.price(_print_selection("postcard", "400"), CATALOG)

    assert quote.lines_of(LineKind.print_package)[0].amount == Decimal("150")
    assert quote.total == Decimal("500")


def test_large_format_doubles_the_requirement():
    """Test that 200 large prints need the 400 package."""
    resolution = resolve_print_package(PackageKey(size=200), "large", CATALOG.price_table)

    assert resolution.package == PackageKey(size=400)


def test_dual_format_takes_larger_requirement_and_surcharge():
    """Test postcard & strip: max over both factors plus the second layout."""
    quote = ENGINE.price(_print_selection("dual", "100"), CATALOG)

    assert quote.lines_of(LineKind.print_package)[0].amount == Decimal("70")
    surcharge = quote.lines_of(LineKind.surcharge)
    assert len(surcharge) == 1
    assert surcharge[0].amount == Decimal("20")
    assert quote.total == Decimal("440")


def test_dual_printer_package_is_its_own_variant():
    """Test that "802" maps to the dual-printer price, not the 800 tier."""
    quote = ENGINE.price(_print_selection("postcard", "802"), CATALOG)

    line = quote.lines_of(LineKind.print_package)[0]
    assert line.amount == Decimal("280")
    assert quote.total == Decimal("630")


def test_conversion_never_under_provisions():
    """Test that the priced tier always covers the requested quantity in every format."""
    table = CATALOG.price_table
    for size in range(1, 801, 37):
        for print_format in ("postcard", "strip", "dual"):
            resolution = resolve_print_package(PackageKey(size=size), print_format, table)
            for factor in table.format_factors[print_format]:
                assert resolution.package.size >= size * factor


def test_no_covering_tier_becomes_warning_line():
    """Test 800 large prints: no tier covers 1600, the quote shows a warning instead of failing."""
    with pytest.raises(MissingPriceEntry):
        resolve_print_package(PackageKey(size=800), "large", CATALOG.price_table)

    quote = ENGINE.price(_print_selection("large", "800"), CATALOG)

    assert quote.lines_of(LineKind.print_package) == []
    warnings = quote.lines_of(LineKind.warning)
    assert len(warnings) == 1
    assert "Preis auf Anfrage" in warnings[0].label
    assert quote.total == Decimal("350")


def test_missing_accessory_price_is_warning():
    """Test that an accessory without a price entry is flagged and excluded from the total."""
    document = copy.deepcopy(DEFAULT_CATALOG)
    del document["pricing"]["accessories"]["gala"]
    catalog = build_catalog(document)

    quote = ENGINE.price(Selection(mode="digital", accessories=("gala",)), catalog)

    warnings = quote.lines_of(LineKind.warning)
    assert [w.label for w in warnings] == ["gala: Preis auf Anfrage"]
    assert quote.total == Decimal("350")


def test_digital_mode_ignores_stale_print_fields():
    """Test that print answers never produce lines outside print mode."""
    selection = Selection(mode="digital", guest_bracket="50–120", print_format="dual", print_package_size="400")

    quote = ENGINE.price(selection, CATALOG)

    assert quote.lines_of(LineKind.print_package) == []
    assert quote.lines_of(LineKind.surcharge) == []
    assert quote.total == Decimal("350")


def test_included_accessory_follows_insertion_order():
    """Test that exactly one eligible accessory is free, the earliest inserted one."""
    quote = ENGINE.price(Selection(mode="digital", accessories=("gala", "backdrop", "props")), CATALOG)
    included = [line for line in quote.lines if line.included]
    assert [line.label for line in included] == ["Hintergrund (inklusive)"]
    assert quote.total == Decimal("350") + Decimal("80") + Decimal("30")

    quote = ENGINE.price(Selection(mode="digital", accessories=("gala", "props", "backdrop")), CATALOG)
    included = [line for line in quote.lines if line.included]
    assert [line.label for line in included] == ["Requisiten (inklusive)"]


def test_non_eligible_accessories_are_always_charged():
    """Test that gala and audio guestbook never consume the bundle."""
    quote = ENGINE.price(Selection(mode="digital", accessories=("gala", "audio_guestbook")), CATALOG)

    assert not any(line.included for line in quote.lines)
    assert quote.total == Decimal("520")


def test_client_event_disclosure_only_in_print_mode():
    """Test the consumption billing note for trade fairs and client events."""
    quote = ENGINE.price(_print_selection("postcard", "100", event_type="Messe"), CATALOG)
    disclosures = quote.lines_of(LineKind.disclosure)
    assert len(disclosures) == 1
    assert "nach Verbrauch" in disclosures[0].label
    assert quote.total == Decimal("420")

    quote = ENGINE.price(Selection(mode="digital", event_type="Messe"), CATALOG)
    assert quote.lines_of(LineKind.disclosure) == []


def test_package_before_format_is_priced_as_postcard():
    """Test a print package chosen while the format is still open."""
    selection = Selection(mode="digital_and_print", print_package_size="200")

    quote = ENGINE.price(selection, CATALOG)

    assert quote.lines_of(LineKind.print_package)[0].amount == Decimal("100")


def test_unknown_values_raise():
    """Test that values the catalog cannot represent are rejected."""
    with pytest.raises(InvalidSelection):
        ENGINE.price(_print_selection("sepia", "100"), CATALOG)
    with pytest.raises(InvalidSelection):
        ENGINE.price(_print_selection("postcard", "300"), CATALOG)
    with pytest.raises(InvalidSelection):
        ENGINE.price(Selection(mode="analog"), CATALOG)


def test_pricing_is_deterministic():
    """Test that pricing the same selection twice yields the same quote."""
    selection = _print_selection("dual", "400", event_type="Kundenevent", accessories=("layout", "gala"))

    first = ENGINE.price(selection, CATALOG)
    second = ENGINE.price(selection, CATALOG)

    assert first == second
    assert first.to_dict() == second.to_dict()
    assert first.total == sum((line.amount for line in first.lines if line.is_priced), Decimal("0"))


def test_quote_serializes_amounts_as_strings():
    """Test the wire form of a quote."""
    data = ENGINE.price(Selection(mode="digital", accessories=("props",)), CATALOG).to_dict()

    assert data["total"] == "350"
    assert data["currency"] == "EUR"
    assert data["lines"][1]["included"] is True
    assert data["lines"][1]["kind"] == "accessory"


if __name__ == "__main__":
    test_empty_selection_is_base_only()
    test_digital_with_two_bundle_accessories()
    test_strip_minimum_order_upgrade()
    test_strip_halves_the_print_requirement()
    test_postcard_is_one_to_one()
    test_large_format_doubles_the_requirement()
    test_dual_format_takes_larger_requirement_and_surcharge()
    test_dual_printer_package_is_its_own_variant()
    test_conversion_never_under_provisions()
    test_no_covering_tier_becomes_warning_line()
    test_missing_accessory_price_is_warning()
    test_digital_mode_ignores_stale_print_fields()
    test_included_accessory_follows_insertion_order()
    test_non_eligible_accessories_are_always_charged()
    test_client_event_disclosure_only_in_print_mode()
    test_package_before_format_is_priced_as_postcard()
    test_unknown_values_raise()
    test_pricing_is_deterministic()
    test_quote_serializes_amounts_as_strings()
    print("All tests passed!")
