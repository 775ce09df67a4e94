from __future__ import annotations

import logging

from fotobox_advisor.application.exceptions import ChoiceRequired, InvalidChoice, StepNotReachable, UnknownStep
from fotobox_advisor.application.use_cases.selection import SelectionStore
from fotobox_advisor.application.utils.recommendations import resolve_print_recommendation
from fotobox_advisor.domain.entities.catalog import Catalog
from fotobox_advisor.domain.entities.selection import Selection
from fotobox_advisor.domain.entities.step_definition import (
    KIND_FIELDS,
    NO,
    YES,
    StepDefinition,
    StepKind,
)
from fotobox_advisor.domain.entities.step_descriptor import OptionDescriptor, StepDescriptor, SubStepDescriptor

FORWARD = 1
BACKWARD = -1


class FlowController:
    """
    Step-by-step state machine over the catalog's StepDefinitions.

    The next step is computed from the current Selection: steps whose
    precondition fails are skipped in the direction of movement and never
    presented. Steps with sub-steps (yes/no accessory prompts) move their
    sub-index before the step pointer moves.
    """

    def __init__(self, catalog: Catalog, store: SelectionStore | None = None) -> None:
        if not catalog.steps:
            raise ValueError("Catalog has no steps")
        self._catalog = catalog
        self._store = store or SelectionStore()
        self._logger = logging.getLogger(__name__)
        self._index = 0
        self._sub_index = 0
        self._furthest = 0
        self._reply = ""
        self._complete = False
        self._index = self._find_available(0, FORWARD, fallback=0)
        self._furthest = self._index

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def store(self) -> SelectionStore:
        return self._store

    @property
    def selection(self) -> Selection:
        return self._store.selection

    def current_step(self) -> StepDescriptor:
        return self._describe(self._catalog.steps[self._index])

    def choose(self, step_id: str, value: str) -> StepDescriptor:
        step = self._catalog.steps[self._index]
        if step_id != step.id:
            raise InvalidChoice(f"Step {step_id!r} is not active (active: {step.id!r})")

        if step.has_substeps:
            if value not in (YES, NO):
                raise InvalidChoice(f"{value!r} is not a yes/no answer for step {step.id!r}")
            substep = step.substeps[self._sub_index]
            wanted = value == YES
            self._store.set_accessory(substep.key, wanted)
            self._reply = _join(substep.confirm_yes if wanted else substep.confirm_no)
            self._log_choice(step, value)
            return self.advance()

        if value not in step.option_values():
            raise InvalidChoice(f"{value!r} is not an option of step {step.id!r}")

        self._apply(step, value)
        self._reply = self._reply_for(step, value)
        self._log_choice(step, value)

        if step.multi:
            # Multi-select toggles stay on the step until the UI advances
            return self.current_step()
        return self.advance()

    def advance(self) -> StepDescriptor:
        step = self._catalog.steps[self._index]
        if step.is_terminal:
            self._complete = True
            return self.current_step()

        if step.required and not self._has_answer(step):
            raise ChoiceRequired(f"Step {step.id!r} needs a choice before moving on")

        if step.has_substeps and self._sub_index < len(step.substeps) - 1:
            self._sub_index += 1
            return self.current_step()

        next_index = self._find_available(self._index + 1, FORWARD, fallback=self._index)
        self._move_to(next_index, FORWARD)
        return self.current_step()

    def back(self) -> StepDescriptor:
        step = self._catalog.steps[self._index]
        self._complete = False
        self._reply = ""
        if step.has_substeps and self._sub_index > 0:
            self._sub_index -= 1
            return self.current_step()

        previous = self._find_available(self._index - 1, BACKWARD, fallback=self._index)
        self._move_to(previous, BACKWARD)
        return self.current_step()

    def enter(self, step_id: str) -> StepDescriptor:
        target = self._catalog.index_of(step_id)
        if target is None:
            raise UnknownStep(f"Unknown step {step_id!r}")
        if target > self._furthest:
            raise StepNotReachable(f"Step {step_id!r} has not been reached yet")
        # A mode change can reveal required steps below the furthest index
        blocking = self._first_open_required()
        if blocking is not None and target > blocking:
            raise StepNotReachable(
                f"Step {step_id!r} lies behind unanswered step {self._catalog.steps[blocking].id!r}"
            )

        direction = FORWARD if target >= self._index else BACKWARD
        resolved = self._find_available(target, direction, fallback=None)
        if resolved is None:
            resolved = self._find_available(target, -direction, fallback=self._index)
            direction = -direction
        self._complete = False
        self._reply = ""
        self._move_to(resolved, direction)
        return self.current_step()

    def reset(self) -> StepDescriptor:
        self._store.reset()
        self._reply = ""
        self._complete = False
        self._sub_index = 0
        self._index = self._find_available(0, FORWARD, fallback=0)
        self._furthest = self._index
        self._logger.info("Flow restarted", extra={"step_id": self._catalog.steps[self._index].id})
        return self.current_step()

    def _apply(self, step: StepDefinition, value: str) -> None:
        if step.kind == StepKind.accessories:
            self._store.toggle_accessory(value)
            return
        if step.kind == StepKind.consent:
            self._store.give_consent()
            return
        field_name = KIND_FIELDS.get(step.kind)
        if field_name is None:
            return  # info / summary steps carry no answer
        self._store.set_field(field_name, value)
        if step.kind in (StepKind.event, StepKind.guests):
            self._store.set_recommendation(resolve_print_recommendation(self.selection, self._catalog))

    def _reply_for(self, step: StepDefinition, value: str) -> str:
        option = step.option(value)
        parts: list[str] = []
        if step.kind == StepKind.guests:
            parts.append(self.selection.print_recommendation_text)
        else:
            parts.append(step.recommendations.get(value, ""))
        if option is not None:
            parts.append(option.help)
        parts.append(step.after_reply)
        return _join(*parts)

    def _has_answer(self, step: StepDefinition) -> bool:
        selection = self.selection
        if step.kind == StepKind.consent:
            return selection.consent_given
        if step.kind == StepKind.accessories:
            return bool(selection.accessories)
        field_name = KIND_FIELDS.get(step.kind)
        if field_name is None:
            return True
        return bool(getattr(selection, field_name))

    def _first_open_required(self) -> int | None:
        selection = self.selection
        for index, step in enumerate(self._catalog.steps):
            if step.required and step.is_available(selection) and not self._has_answer(step):
                return index
        return None

    def _find_available(self, start: int, direction: int, fallback: int | None) -> int | None:
        selection = self.selection
        index = start
        while 0 <= index < len(self._catalog.steps):
            step = self._catalog.steps[index]
            if step.is_available(selection):
                return index
            self._logger.debug("Step skipped, precondition not met", extra={"step_id": step.id})
            index += direction
        return fallback

    def _move_to(self, index: int, direction: int) -> None:
        step = self._catalog.steps[index]
        if index != self._index:
            self._index = index
            self._sub_index = len(step.substeps) - 1 if (direction == BACKWARD and step.has_substeps) else 0
        self._furthest = max(self._furthest, self._index)

    def _visible_steps(self) -> list[StepDefinition]:
        selection = self.selection
        return [s for s in self._catalog.steps if s.kind != StepKind.consent and s.is_available(selection)]

    def _describe(self, step: StepDefinition) -> StepDescriptor:
        selection = self.selection
        visible = self._visible_steps()
        position = 0
        for number, candidate in enumerate(visible, start=1):
            if candidate.id == step.id:
                position = number
                break

        substep = None
        if step.has_substeps:
            current = step.substeps[self._sub_index]
            substep = SubStepDescriptor(
                key=current.key,
                prompt=current.prompt,
                index=self._sub_index,
                total=len(step.substeps),
            )
            options = (
                OptionDescriptor(label=current.yes_label, value=YES, selected=current.key in selection.accessories),
                OptionDescriptor(label=current.no_label, value=NO, selected=False),
            )
        else:
            options = tuple(
                OptionDescriptor(
                    label=self._option_label(step, option.value, option.label),
                    value=option.value,
                    selected=self._is_selected(step, option.value),
                )
                for option in step.options
            )

        first_visible = self._find_available(0, FORWARD, fallback=self._index)
        return StepDescriptor(
            id=step.id,
            kind=step.kind,
            title=step.title,
            description=step.description,
            options=options,
            multi=step.multi,
            position=position,
            total=len(visible),
            substep=substep,
            sections=step.sections,
            reply=self._reply,
            needs_choice=step.required and not self._has_answer(step),
            can_go_back=self._index > first_visible or self._sub_index > 0,
            is_complete=self._complete,
        )

    def _is_selected(self, step: StepDefinition, value: str) -> bool:
        selection = self.selection
        if step.kind == StepKind.accessories:
            return value in selection.accessories
        if step.kind == StepKind.consent:
            return selection.consent_given
        field_name = KIND_FIELDS.get(step.kind)
        return field_name is not None and getattr(selection, field_name) == value

    def _option_label(self, step: StepDefinition, value: str, label: str) -> str:
        if step.kind != StepKind.print_package:
            return label
        table = self._catalog.price_table
        unit = table.format_units.get(self.selection.print_format or "")
        requested = table.package_options.get(value)
        if not unit or requested is None:
            return label
        return f"{requested.size} {unit} ({label})"

    def _log_choice(self, step: StepDefinition, value: str) -> None:
        self._logger.info(
            "Choice applied",
            extra={"step_id": step.id, "value": value, "version": self._store.version},
        )


def _join(*parts: str) -> str:
    return "\n\n".join(p for p in parts if p)
