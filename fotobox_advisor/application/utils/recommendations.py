from __future__ import annotations

from fotobox_advisor.application.utils.event_keys import normalize_event_key
from fotobox_advisor.domain.entities.catalog import Catalog
from fotobox_advisor.domain.entities.selection import Selection
from fotobox_advisor.domain.entities.step_definition import StepKind


def resolve_print_recommendation(selection: Selection, catalog: Catalog) -> str:
    """Event-specific override first, then the guest-bracket default, then empty."""
    bracket = selection.guest_bracket
    if not bracket:
        return ""
    event_key = normalize_event_key(selection.event_type, catalog.event_keys)
    for step in catalog.steps:
        if step.kind != StepKind.guests:
            continue
        special = step.context_recommendations.get((event_key, bracket))
        if special:
            return special
        return step.recommendations.get(bracket, "")
    return ""
