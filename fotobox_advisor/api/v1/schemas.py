from pydantic import BaseModel, Field

from fotobox_advisor.domain.entities.quote import Quote
from fotobox_advisor.domain.entities.step_descriptor import StepDescriptor


class ChooseRequestSchema(BaseModel):
    step_id: str
    value: str


class EnterRequestSchema(BaseModel):
    step_id: str


class OptionSchema(BaseModel):
    label: str
    value: str
    selected: bool = False


class SubStepSchema(BaseModel):
    key: str
    prompt: str
    index: int
    total: int


class SectionSchema(BaseModel):
    title: str
    items: list[str] = Field(default_factory=list)


class StepSchema(BaseModel):
    id: str
    kind: str
    title: str
    description: str
    options: list[OptionSchema] = Field(default_factory=list)
    multi: bool = False
    position: int
    total: int
    substep: SubStepSchema | None = None
    sections: list[SectionSchema] = Field(default_factory=list)
    reply: str = ""
    needs_choice: bool = False
    can_go_back: bool = False
    is_complete: bool = False

    @classmethod
    def from_descriptor(cls, step: StepDescriptor) -> "StepSchema":
        return cls(
            id=step.id,
            kind=step.kind.value,
            title=step.title,
            description=step.description,
            options=[OptionSchema(label=o.label, value=o.value, selected=o.selected) for o in step.options],
            multi=step.multi,
            position=step.position,
            total=step.total,
            substep=(
                SubStepSchema(key=step.substep.key, prompt=step.substep.prompt, index=step.substep.index, total=step.substep.total)
                if step.substep
                else None
            ),
            sections=[SectionSchema(title=s.title, items=list(s.items)) for s in step.sections],
            reply=step.reply,
            needs_choice=step.needs_choice,
            can_go_back=step.can_go_back,
            is_complete=step.is_complete,
        )


class SessionResponseSchema(BaseModel):
    session_id: str
    step: StepSchema


class QuoteLineSchema(BaseModel):
    label: str
    amount: str
    kind: str
    included: bool = False


class QuoteResponseSchema(BaseModel):
    lines: list[QuoteLineSchema]
    total: str
    currency: str

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteResponseSchema":
        return cls.model_validate(quote.to_dict())


class SummaryResponseSchema(BaseModel):
    selection: str
    prices: str
