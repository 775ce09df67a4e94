from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

from pydantic import BaseModel, Field, field_validator

from fotobox_advisor.domain.entities.catalog import Catalog, EventKeyRule
from fotobox_advisor.domain.entities.price_table import EventDisclosure, PackageKey, PriceEntry, PriceTable
from fotobox_advisor.domain.entities.step_definition import (
    InfoSection,
    OptionDefinition,
    Precondition,
    StepDefinition,
    StepKind,
    SubStepDefinition,
)


class OptionDTO(BaseModel):
    label: str
    value: str | None = None
    help: str = ""


class PreconditionDTO(BaseModel):
    field: str
    equals: str | None = None
    one_of: list[str] = Field(default_factory=list)
    is_set: bool | None = None


class SubStepDTO(BaseModel):
    key: str
    prompt: str
    confirm_yes: str = ""
    confirm_no: str = ""
    yes_label: str = "Ja"
    no_label: str = "Nein"


class ContextRecommendationDTO(BaseModel):
    event: str
    guests: str
    text: str


class SectionDTO(BaseModel):
    title: str
    items: list[str] = Field(default_factory=list)


class StepDTO(BaseModel):
    id: str
    kind: StepKind
    title: str = ""
    description: str = ""
    options: list[OptionDTO | str] = Field(default_factory=list)
    multi: bool = False
    required: bool = False
    precondition: PreconditionDTO | None = None
    recommendations: dict[str, str] = Field(default_factory=dict)
    context_recommendations: list[ContextRecommendationDTO] = Field(default_factory=list)
    substeps: list[SubStepDTO] = Field(default_factory=list)
    after_reply: str = ""
    sections: list[SectionDTO] = Field(default_factory=list)


class PriceEntryDTO(BaseModel):
    label: str
    amount: Decimal


class PackageDTO(PriceEntryDTO):
    size: int = Field(gt=0)
    variant: str = "standard"


class PackageOptionDTO(BaseModel):
    size: int = Field(gt=0)
    variant: str = "standard"


class DisclosureDTO(BaseModel):
    event_key: str
    text: str
    requires_print: bool = True


class PricingDTO(BaseModel):
    currency: str = "EUR"
    base: PriceEntryDTO
    packages: list[PackageDTO] = Field(default_factory=list)
    package_options: dict[str, PackageOptionDTO] = Field(default_factory=dict)
    format_factors: dict[str, list[str]] = Field(default_factory=dict)
    format_minimums: dict[str, int] = Field(default_factory=dict)
    format_units: dict[str, str] = Field(default_factory=dict)
    surcharges: dict[str, PriceEntryDTO] = Field(default_factory=dict)
    accessories: dict[str, PriceEntryDTO] = Field(default_factory=dict)
    bundle_eligible: list[str] = Field(default_factory=list)
    disclosures: list[DisclosureDTO] = Field(default_factory=list)

    @field_validator("format_factors")
    @classmethod
    def _factors_are_fractions(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        for fmt, factors in value.items():
            if not factors:
                raise ValueError(f"format {fmt!r} has no conversion factor")
            for factor in factors:
                if Fraction(factor) <= 0:
                    raise ValueError(f"format {fmt!r} has a non-positive factor {factor!r}")
        return value


class EventKeyDTO(BaseModel):
    key: str
    patterns: list[str] = Field(default_factory=list)
    prefixes: list[str] = Field(default_factory=list)


class CatalogDocumentDTO(BaseModel):
    """Knowledge document as supplied by the knowledge/price source."""

    brand: str = ""
    assistant_name: str = ""
    steps: list[StepDTO] = Field(min_length=1)
    event_keys: list[EventKeyDTO] = Field(default_factory=list)
    pricing: PricingDTO

    @field_validator("steps")
    @classmethod
    def _unique_step_ids(cls, value: list[StepDTO]) -> list[StepDTO]:
        seen: set[str] = set()
        for step in value:
            if step.id in seen:
                raise ValueError(f"duplicate step id {step.id!r}")
            seen.add(step.id)
        return value

    def to_catalog(self) -> Catalog:
        return Catalog(
            steps=tuple(_to_step(step) for step in self.steps),
            price_table=_to_price_table(self.pricing),
            event_keys=tuple(
                EventKeyRule(
                    key=rule.key,
                    patterns=tuple(p.casefold() for p in rule.patterns),
                    prefixes=tuple(p.casefold() for p in rule.prefixes),
                )
                for rule in self.event_keys
            ),
            brand=self.brand,
            assistant_name=self.assistant_name,
        )


def _to_step(step: StepDTO) -> StepDefinition:
    options: list[OptionDefinition] = []
    for option in step.options:
        if isinstance(option, str):
            options.append(OptionDefinition(label=option, value=option))
        else:
            options.append(OptionDefinition(label=option.label, value=option.value or option.label, help=option.help))

    precondition = None
    if step.precondition is not None:
        precondition = Precondition(
            field=step.precondition.field,
            equals=step.precondition.equals,
            one_of=tuple(step.precondition.one_of),
            is_set=step.precondition.is_set,
        )

    return StepDefinition(
        id=step.id,
        kind=step.kind,
        title=step.title,
        description=step.description,
        options=tuple(options),
        multi=step.multi,
        required=step.required,
        precondition=precondition,
        recommendations=dict(step.recommendations),
        context_recommendations={(c.event, c.guests): c.text for c in step.context_recommendations},
        substeps=tuple(
            SubStepDefinition(
                key=s.key,
                prompt=s.prompt,
                confirm_yes=s.confirm_yes,
                confirm_no=s.confirm_no,
                yes_label=s.yes_label,
                no_label=s.no_label,
            )
            for s in step.substeps
        ),
        after_reply=step.after_reply,
        sections=tuple(InfoSection(title=s.title, items=tuple(s.items)) for s in step.sections),
    )


def _to_price_table(pricing: PricingDTO) -> PriceTable:
    return PriceTable(
        base=PriceEntry(label=pricing.base.label, amount=pricing.base.amount),
        packages={
            PackageKey(size=p.size, variant=p.variant): PriceEntry(label=p.label, amount=p.amount)
            for p in pricing.packages
        },
        package_options={
            value: PackageKey(size=o.size, variant=o.variant) for value, o in pricing.package_options.items()
        },
        format_factors={fmt: tuple(Fraction(f) for f in factors) for fmt, factors in pricing.format_factors.items()},
        format_minimums=dict(pricing.format_minimums),
        format_units=dict(pricing.format_units),
        surcharges={k: PriceEntry(label=v.label, amount=v.amount) for k, v in pricing.surcharges.items()},
        accessories={k: PriceEntry(label=v.label, amount=v.amount) for k, v in pricing.accessories.items()},
        bundle_eligible=tuple(pricing.bundle_eligible),
        disclosures=tuple(
            EventDisclosure(event_key=d.event_key, text=d.text, requires_print=d.requires_print)
            for d in pricing.disclosures
        ),
        currency=pricing.currency,
    )
