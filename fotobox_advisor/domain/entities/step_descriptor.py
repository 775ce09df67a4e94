from __future__ import annotations

from dataclasses import dataclass

from fotobox_advisor.domain.entities.step_definition import InfoSection, StepKind


@dataclass(frozen=True)
class OptionDescriptor:
    label: str
    value: str
    selected: bool = False


@dataclass(frozen=True)
class SubStepDescriptor:
    key: str
    prompt: str
    index: int
    total: int


@dataclass(frozen=True)
class StepDescriptor:
    """What the presentation layer needs to render the active step."""

    id: str
    kind: StepKind
    title: str
    description: str
    options: tuple[OptionDescriptor, ...]
    multi: bool
    position: int  # 1-based among visible steps, 0 for consent
    total: int
    substep: SubStepDescriptor | None = None
    sections: tuple[InfoSection, ...] = ()
    reply: str = ""  # confirmation/recommendation for the previous choice
    needs_choice: bool = False
    can_go_back: bool = False
    is_complete: bool = False
