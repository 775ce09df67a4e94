from __future__ import annotations

import re
from typing import Iterable

from fotobox_advisor.domain.entities.catalog import EventKeyRule

_EXAMPLE_SUFFIX = re.compile(r"\s*\(z\.\s*B\..*?\)\s*$", re.IGNORECASE)
# Emoji, pictographs, dingbats, variation selectors and joiners
_PICTOGRAPHS = re.compile(
    "[\U0001F000-\U0001FAFF\u2600-\u27BF\u2B00-\u2BFF\uFE0F\u200D\u20E3]+"
)


def strip_decoration(label: str) -> str:
    """Remove emoji and a trailing "(z. B. ...)" example clause."""
    text = _EXAMPLE_SUFFIX.sub("", label or "")
    text = _PICTOGRAPHS.sub(" ", text)
    return " ".join(text.split())


def normalize_event_key(label: str | None, rules: Iterable[EventKeyRule]) -> str:
    """
    Map a free-form event label to a canonical event key.
    First matching rule wins. Unmatched labels are returned verbatim (trimmed)
    so they never fall into a wrong bucket.
    """
    if not label or not label.strip():
        return ""
    normalized = strip_decoration(label).casefold()
    for rule in rules:
        if any(normalized.startswith(prefix) for prefix in rule.prefixes):
            return rule.key
        if any(pattern in normalized for pattern in rule.patterns):
            return rule.key
    return label.strip()
