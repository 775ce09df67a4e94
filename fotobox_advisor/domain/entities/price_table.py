from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from fractions import Fraction
from typing import Mapping

VARIANT_STANDARD = "standard"
VARIANT_DUAL_PRINTER = "dual_printer"


@dataclass(frozen=True, order=True)
class PackageKey:
    size: int  # postcard-equivalent prints
    variant: str = VARIANT_STANDARD


@dataclass(frozen=True)
class PriceEntry:
    label: str
    amount: Decimal


@dataclass(frozen=True)
class EventDisclosure:
    event_key: str
    text: str
    requires_print: bool = True


@dataclass(frozen=True)
class PriceTable:
    base: PriceEntry
    packages: Mapping[PackageKey, PriceEntry] = field(default_factory=dict)
    package_options: Mapping[str, PackageKey] = field(default_factory=dict)
    format_factors: Mapping[str, tuple[Fraction, ...]] = field(default_factory=dict)
    format_minimums: Mapping[str, int] = field(default_factory=dict)
    format_units: Mapping[str, str] = field(default_factory=dict)
    surcharges: Mapping[str, PriceEntry] = field(default_factory=dict)
    accessories: Mapping[str, PriceEntry] = field(default_factory=dict)
    bundle_eligible: tuple[str, ...] = ()
    disclosures: tuple[EventDisclosure, ...] = ()
    currency: str = "EUR"

    def tiers(self, variant: str) -> list[PackageKey]:
        """Defined package keys of one variant, smallest first."""
        return sorted(key for key in self.packages if key.variant == variant)

    def smallest_tier_covering(self, variant: str, units: int) -> PackageKey | None:
        for key in self.tiers(variant):
            if key.size >= units:
                return key
        return None
