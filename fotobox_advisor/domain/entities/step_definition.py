from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from fotobox_advisor.domain.entities.selection import Selection


class StepKind(str, Enum):
    mode = "mode"
    event = "event"
    guests = "guests"
    format = "format"
    print_package = "print_package"
    accessories = "accessories"
    summary = "summary"
    info = "info"
    consent = "consent"


# Selection field written by single-select steps of each kind
KIND_FIELDS: dict[StepKind, str] = {
    StepKind.mode: "mode",
    StepKind.event: "event_type",
    StepKind.guests: "guest_bracket",
    StepKind.format: "print_format",
    StepKind.print_package: "print_package_size",
}

YES = "yes"
NO = "no"


@dataclass(frozen=True)
class Precondition:
    """Predicate over one Selection field, declared as data."""

    field: str
    equals: str | None = None
    one_of: tuple[str, ...] = ()
    is_set: bool | None = None

    def __call__(self, selection: Selection) -> bool:
        value = getattr(selection, self.field, None)
        if self.equals is not None and value != self.equals:
            return False
        if self.one_of and value not in self.one_of:
            return False
        if self.is_set is not None and bool(value) != self.is_set:
            return False
        return True


@dataclass(frozen=True)
class OptionDefinition:
    label: str
    value: str
    help: str = ""


@dataclass(frozen=True)
class SubStepDefinition:
    key: str  # accessory key toggled by this yes/no prompt
    prompt: str
    confirm_yes: str = ""
    confirm_no: str = ""
    yes_label: str = "Ja"
    no_label: str = "Nein"


@dataclass(frozen=True)
class InfoSection:
    title: str
    items: tuple[str, ...] = ()


@dataclass(frozen=True)
class StepDefinition:
    id: str
    kind: StepKind
    title: str = ""
    description: str = ""
    options: tuple[OptionDefinition, ...] = ()
    multi: bool = False
    required: bool = False
    precondition: Precondition | None = None
    recommendations: Mapping[str, str] = field(default_factory=dict)
    # keyed by (normalized event key, guest bracket)
    context_recommendations: Mapping[tuple[str, str], str] = field(default_factory=dict)
    substeps: tuple[SubStepDefinition, ...] = ()
    after_reply: str = ""
    sections: tuple[InfoSection, ...] = ()

    def is_available(self, selection: Selection) -> bool:
        if self.precondition is None:
            return True
        return self.precondition(selection)

    def option_values(self) -> tuple[str, ...]:
        return tuple(option.value for option in self.options)

    def option(self, value: str) -> OptionDefinition | None:
        for option in self.options:
            if option.value == value:
                return option
        return None

    @property
    def is_terminal(self) -> bool:
        return self.kind == StepKind.summary

    @property
    def has_substeps(self) -> bool:
        return bool(self.substeps)
