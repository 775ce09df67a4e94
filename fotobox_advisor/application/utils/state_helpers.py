from __future__ import annotations

from dataclasses import replace

from fotobox_advisor.domain.entities.selection import MODE_DIGITAL_AND_PRINT, Selection


def reset_print_state(selection: Selection) -> Selection:
    """Clear the fields that only mean something in print mode. Accessories survive."""
    return replace(
        selection,
        guest_bracket=None,
        print_format=None,
        print_package_size=None,
        print_recommendation_text="",
    )


def with_mode(selection: Selection, mode: str) -> Selection:
    if mode != MODE_DIGITAL_AND_PRINT:
        selection = reset_print_state(selection)
    return replace(selection, mode=mode)


def with_accessory(selection: Selection, key: str, wanted: bool) -> Selection:
    """
    Add or remove one accessory key.
    Adding appends (keeps earlier items first), adding an already present key is a no-op.
    """
    present = key in selection.accessories
    if wanted and not present:
        return replace(selection, accessories=selection.accessories + (key,))
    if not wanted and present:
        return replace(selection, accessories=tuple(a for a in selection.accessories if a != key))
    return selection


def toggle_accessory(selection: Selection, key: str) -> Selection:
    return with_accessory(selection, key, key not in selection.accessories)
