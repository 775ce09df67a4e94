from __future__ import annotations

from dataclasses import dataclass

from fotobox_advisor.domain.entities.price_table import PriceTable
from fotobox_advisor.domain.entities.step_definition import StepDefinition


@dataclass(frozen=True)
class EventKeyRule:
    key: str  # canonical event key, e.g. "client_event"
    patterns: tuple[str, ...] = ()  # lowercase substrings
    prefixes: tuple[str, ...] = ()


@dataclass(frozen=True)
class Catalog:
    steps: tuple[StepDefinition, ...]
    price_table: PriceTable
    event_keys: tuple[EventKeyRule, ...] = ()
    brand: str = ""
    assistant_name: str = ""

    def index_of(self, step_id: str) -> int | None:
        for index, step in enumerate(self.steps):
            if step.id == step_id:
                return index
        return None

    def step(self, step_id: str) -> StepDefinition | None:
        index = self.index_of(step_id)
        return self.steps[index] if index is not None else None
