from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any


class LineKind(str, Enum):
    base = "base"
    print_package = "print_package"
    surcharge = "surcharge"
    accessory = "accessory"
    note = "note"
    warning = "warning"
    disclosure = "disclosure"


PRICED_KINDS = frozenset({LineKind.base, LineKind.print_package, LineKind.surcharge, LineKind.accessory})


@dataclass(frozen=True)
class QuoteLine:
    label: str
    amount: Decimal
    kind: LineKind
    included: bool = False  # bundled free of charge

    @property
    def is_priced(self) -> bool:
        return self.kind in PRICED_KINDS


@dataclass(frozen=True)
class Quote:
    lines: tuple[QuoteLine, ...]
    total: Decimal
    currency: str = "EUR"

    def lines_of(self, kind: LineKind) -> list[QuoteLine]:
        return [line for line in self.lines if line.kind == kind]

    def to_dict(self) -> dict[str, Any]:
        return {
            "lines": [
                {
                    "label": line.label,
                    "amount": str(line.amount),
                    "kind": line.kind.value,
                    "included": line.included,
                }
                for line in self.lines
            ],
            "total": str(self.total),
            "currency": self.currency,
        }
