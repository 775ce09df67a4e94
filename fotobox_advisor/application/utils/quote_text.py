from __future__ import annotations

from decimal import Decimal

from fotobox_advisor.domain.entities.catalog import Catalog
from fotobox_advisor.domain.entities.quote import LineKind, Quote
from fotobox_advisor.domain.entities.selection import Selection
from fotobox_advisor.domain.entities.step_definition import StepKind

CURRENCY_SYMBOLS = {"EUR": "€"}


def format_amount(amount: Decimal, currency: str = "EUR") -> str:
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    return f"{amount.quantize(Decimal('0.01'))} {symbol}"


def _option_label(catalog: Catalog, kind: StepKind, value: str | None) -> str | None:
    if value is None:
        return None
    for step in catalog.steps:
        if step.kind == kind:
            option = step.option(value)
            return option.label if option else value
    return value


def render_selection_summary(selection: Selection, catalog: Catalog) -> str:
    """Bullet list of the answers given so far, labels as the user saw them."""
    parts: list[str] = []
    mode = _option_label(catalog, StepKind.mode, selection.mode)
    if mode:
        parts.append(f"Modus: {mode}")
    if selection.event_type:
        parts.append(f"Event: {selection.event_type}")
    if selection.wants_print:
        if selection.guest_bracket:
            parts.append(f"Gäste: {selection.guest_bracket}")
        fmt = _option_label(catalog, StepKind.format, selection.print_format)
        if fmt:
            parts.append(f"Druckformat: {fmt}")
        package = _option_label(catalog, StepKind.print_package, selection.print_package_size)
        if package:
            parts.append(f"Druckpaket: {package}")
    if selection.accessories:
        accessories = catalog.price_table.accessories
        names = [accessories[key].label if key in accessories else key for key in selection.accessories]
        parts.append(f"Zubehör: {', '.join(names)}")
    if selection.print_recommendation_text:
        parts.append(f"Empfehlung: {selection.print_recommendation_text}")
    if not parts:
        return ""
    return "• " + "\n• ".join(parts)


def render_quote_text(quote: Quote) -> str:
    lines: list[str] = []
    for line in quote.lines:
        if line.included:
            lines.append(f"• {line.label}: inkl.")
        elif line.is_priced:
            lines.append(f"• {line.label}: {format_amount(line.amount, quote.currency)}")
        elif line.kind == LineKind.warning:
            lines.append(f"• Achtung: {line.label}")
        else:
            lines.append(f"• {line.label}")
    lines.append("")
    lines.append(f"Gesamtsumme: {format_amount(quote.total, quote.currency)}")
    return "\n".join(lines)
