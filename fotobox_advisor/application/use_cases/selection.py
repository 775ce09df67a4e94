from __future__ import annotations

import logging
from dataclasses import replace

from fotobox_advisor.application.utils.state_helpers import toggle_accessory, with_accessory, with_mode
from fotobox_advisor.domain.entities.selection import Selection


class SelectionStore:
    """Mutable, versioned holder of one session's answers.

    The Selection itself is a frozen value; every effective change swaps it and
    bumps ``version`` so callers can tell whether a cached quote is stale.
    """

    def __init__(self, selection: Selection | None = None) -> None:
        self._selection = selection or Selection()
        self._version = 0
        self._logger = logging.getLogger(__name__)

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def version(self) -> int:
        return self._version

    def set_field(self, name: str, value: str | None) -> Selection:
        if name == "mode":
            return self.set_mode(value or "")
        return self._commit(replace(self._selection, **{name: value}))

    def set_mode(self, mode: str) -> Selection:
        previous = self._selection
        updated = self._commit(with_mode(previous, mode))
        if previous.print_format and updated.print_format is None:
            self._logger.info("Print selections cleared by mode change", extra={"value": mode})
        return updated

    def toggle_accessory(self, key: str) -> Selection:
        return self._commit(toggle_accessory(self._selection, key))

    def set_accessory(self, key: str, wanted: bool) -> Selection:
        return self._commit(with_accessory(self._selection, key, wanted))

    def give_consent(self) -> Selection:
        return self._commit(replace(self._selection, consent_given=True))

    def set_recommendation(self, text: str) -> Selection:
        return self._commit(replace(self._selection, print_recommendation_text=text))

    def reset(self) -> Selection:
        self._selection = Selection()
        self._version += 1
        return self._selection

    def _commit(self, updated: Selection) -> Selection:
        if updated != self._selection:
            self._selection = updated
            self._version += 1
        return self._selection
