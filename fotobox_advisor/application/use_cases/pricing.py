from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal

from fotobox_advisor.application.exceptions import InvalidSelection, MissingPriceEntry
from fotobox_advisor.application.utils.event_keys import normalize_event_key
from fotobox_advisor.domain.entities.catalog import Catalog
from fotobox_advisor.domain.entities.price_table import PackageKey, PriceTable
from fotobox_advisor.domain.entities.quote import LineKind, Quote, QuoteLine
from fotobox_advisor.domain.entities.selection import (
    FORMAT_DUAL,
    MODE_DIGITAL,
    MODE_DIGITAL_AND_PRINT,
    Selection,
)

ZERO = Decimal("0")
SECOND_LAYOUT = "second_layout"


@dataclass(frozen=True)
class PackageResolution:
    """Outcome of converting a requested package into a priced postcard-equivalent tier."""

    requested: PackageKey
    needed_units: int  # postcard-equivalent prints before rounding to a tier
    package: PackageKey
    upgraded_to_minimum: bool = False


def resolve_print_package(requested: PackageKey, print_format: str, table: PriceTable) -> PackageResolution:
    """
    Convert a desired quantity in the chosen format into the package key the
    price table is indexed by. Rounds up to the next defined tier of the same
    variant and never under-provisions. Multi-factor formats (postcard + strip)
    take the larger requirement.

    Raises InvalidSelection for a format the table does not know, MissingPriceEntry
    when no defined tier covers the requirement.
    """
    factors = table.format_factors.get(print_format)
    if not factors:
        raise InvalidSelection(f"Unknown print format: {print_format!r}")

    needed = max(math.ceil(requested.size * factor) for factor in factors)
    package = table.smallest_tier_covering(requested.variant, needed)
    if package is None:
        raise MissingPriceEntry(requested, f"no {requested.variant} package covers {needed} prints")

    minimum = table.format_minimums.get(print_format)
    if minimum and package.size < minimum:
        floor = table.smallest_tier_covering(requested.variant, minimum)
        if floor is None:
            raise MissingPriceEntry(requested, f"minimum package {minimum} is not defined")
        return PackageResolution(requested=requested, needed_units=needed, package=floor, upgraded_to_minimum=True)

    return PackageResolution(requested=requested, needed_units=needed, package=package)


def pick_included_accessory(accessories: tuple[str, ...], bundle_eligible: tuple[str, ...]) -> str | None:
    """The earliest-inserted accessory from the bundle-eligible set, if any."""
    eligible = set(bundle_eligible)
    for key in accessories:
        if key in eligible:
            return key
    return None


class PricingEngine:
    """Build an itemized quote from a Selection and the catalog's price table.

    Stateless and free of I/O: safe to call on every selection change.
    Price table gaps degrade to zero-priced warning lines; only selection values
    the catalog cannot represent at all raise.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def price(self, selection: Selection, catalog: Catalog) -> Quote:
        table = catalog.price_table
        if selection.mode not in (None, MODE_DIGITAL, MODE_DIGITAL_AND_PRINT):
            raise InvalidSelection(f"Unknown mode: {selection.mode!r}")

        lines: list[QuoteLine] = [QuoteLine(label=table.base.label, amount=table.base.amount, kind=LineKind.base)]

        if selection.wants_print:
            lines.extend(self._print_lines(selection, table))

        lines.extend(self._accessory_lines(selection, table))
        lines.extend(self._disclosure_lines(selection, catalog))

        total = sum((line.amount for line in lines if line.is_priced), ZERO)
        return Quote(lines=tuple(lines), total=total, currency=table.currency)

    def _print_lines(self, selection: Selection, table: PriceTable) -> list[QuoteLine]:
        lines: list[QuoteLine] = []

        if selection.print_package_size:
            requested = table.package_options.get(selection.print_package_size)
            if requested is None:
                raise InvalidSelection(f"Unknown print package: {selection.print_package_size!r}")
            print_format = selection.print_format or _default_format(table)
            try:
                resolution = resolve_print_package(requested, print_format, table)
                entry = table.packages.get(resolution.package)
                if entry is None:
                    raise MissingPriceEntry(resolution.package)
            except MissingPriceEntry as e:
                self._logger.warning(
                    "Print package price missing",
                    extra={"package": selection.print_package_size, "reason": str(e)},
                )
                lines.append(
                    QuoteLine(
                        label=f"Druckpaket {selection.print_package_size}: Preis auf Anfrage",
                        amount=ZERO,
                        kind=LineKind.warning,
                    )
                )
            else:
                unit = table.format_units.get(print_format, "")
                label = f"{entry.label} ({requested.size} {unit})" if unit else entry.label
                lines.append(QuoteLine(label=label, amount=entry.amount, kind=LineKind.print_package))
                if resolution.upgraded_to_minimum:
                    lines.append(
                        QuoteLine(
                            label=(
                                f"Mindestabnahme im gewählten Format: Printpaket {resolution.package.size} "
                                f"statt {requested.size}"
                            ),
                            amount=ZERO,
                            kind=LineKind.note,
                        )
                    )

        if selection.print_format == FORMAT_DUAL:
            surcharge = table.surcharges.get(SECOND_LAYOUT)
            if surcharge is None:
                self._logger.warning("Surcharge price missing", extra={"package": SECOND_LAYOUT})
                lines.append(QuoteLine(label="Zweites Layout: Preis auf Anfrage", amount=ZERO, kind=LineKind.warning))
            else:
                lines.append(QuoteLine(label=surcharge.label, amount=surcharge.amount, kind=LineKind.surcharge))

        return lines

    def _accessory_lines(self, selection: Selection, table: PriceTable) -> list[QuoteLine]:
        included = pick_included_accessory(selection.accessories, table.bundle_eligible)
        lines: list[QuoteLine] = []
        for key in selection.accessories:
            entry = table.accessories.get(key)
            if key == included:
                label = entry.label if entry else key
                lines.append(QuoteLine(label=f"{label} (inklusive)", amount=ZERO, kind=LineKind.accessory, included=True))
                continue
            if entry is None:
                self._logger.warning("Accessory price missing", extra={"package": key})
                lines.append(QuoteLine(label=f"{key}: Preis auf Anfrage", amount=ZERO, kind=LineKind.warning))
                continue
            lines.append(QuoteLine(label=entry.label, amount=entry.amount, kind=LineKind.accessory))
        return lines

    def _disclosure_lines(self, selection: Selection, catalog: Catalog) -> list[QuoteLine]:
        if not selection.event_type:
            return []
        event_key = normalize_event_key(selection.event_type, catalog.event_keys)
        return [
            QuoteLine(label=disclosure.text, amount=ZERO, kind=LineKind.disclosure)
            for disclosure in catalog.price_table.disclosures
            if disclosure.event_key == event_key and (selection.wants_print or not disclosure.requires_print)
        ]


def _default_format(table: PriceTable) -> str:
    # A package chosen before the format step is priced as postcards
    if "postcard" in table.format_factors:
        return "postcard"
    return next(iter(table.format_factors), "postcard")
