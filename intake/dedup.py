"""
Duplicate index: normalized (area, description) -> most recent open complaint ID.

The index backs a "possible duplicate" advisory at intake time. It is not a
correctness-critical structure; a missed duplicate is acceptable.
"""

from typing import Dict, Optional

KEY_SEPARATOR = "|"
_ESCAPE = "\\"


def _normalize(value: Optional[str]) -> str:
    text = (value or "").strip().casefold()
    # Escape the escape char first, then the separator, so joined keys stay unambiguous.
    return text.replace(_ESCAPE, _ESCAPE * 2).replace(KEY_SEPARATOR, _ESCAPE + KEY_SEPARATOR)


def duplicate_key(area: Optional[str], description: Optional[str]) -> str:
    return _normalize(area) + KEY_SEPARATOR + _normalize(description)


class DuplicateIndex:
    def __init__(self):
        self._ids: Dict[str, int] = {}

    def lookup(self, key: str) -> Optional[int]:
        return self._ids.get(key)

    def put(self, key: str, complaint_id: int) -> None:
        self._ids[key] = complaint_id

    def remove(self, key: str) -> None:
        self._ids.pop(key, None)

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, key: str) -> bool:
        return key in self._ids
