from __future__ import annotations

from dataclasses import dataclass

MODE_DIGITAL = "digital"
MODE_DIGITAL_AND_PRINT = "digital_and_print"

FORMAT_POSTCARD = "postcard"
FORMAT_STRIP = "strip"
FORMAT_DUAL = "dual"  # postcard and strip, chosen per guest at the event
FORMAT_LARGE = "large"


@dataclass(frozen=True)
class Selection:
    mode: str | None = None  # "digital" | "digital_and_print"
    event_type: str | None = None  # option value as offered, not normalized
    guest_bracket: str | None = None
    print_format: str | None = None
    print_package_size: str | None = None  # print package option value, e.g. "200", "802"
    accessories: tuple[str, ...] = ()  # insertion ordered
    consent_given: bool = False
    # Derived from event_type + guest_bracket, cached when either changes
    print_recommendation_text: str = ""

    @property
    def wants_print(self) -> bool:
        return self.mode == MODE_DIGITAL_AND_PRINT
