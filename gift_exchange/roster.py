from __future__ import annotations

import logging
from typing import Iterable

from .errors import DuplicateName, EmptyName, UnknownParticipant


log = logging.getLogger(__name__)


def clean_name(name: str | None) -> str:
    """Trim a submitted name; blank names are rejected."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise EmptyName()
    return cleaned


class Roster:
    """
    Ordered, duplicate-free list of participant names.
    Names compare by exact string match, so "Ana" and "ana" are different people.
    """

    def __init__(self, names: Iterable[str] = ()):
        self._names: list[str] = []
        for name in names:
            self.add(name)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    @property
    def names(self) -> list[str]:
        return list(self._names)

    def add(self, name: str) -> str:
        cleaned = clean_name(name)
        if cleaned in self:
            raise DuplicateName()
        self._names.append(cleaned)
        log.debug("Participant added (%d total)", len(self._names))
        return cleaned

    def rename(self, old_name: str, new_name: str) -> str:
        cleaned = clean_name(new_name)
        try:
            position = self._names.index(old_name)
        except ValueError:
            raise UnknownParticipant() from None
        if cleaned != old_name and cleaned in self:
            raise DuplicateName()
        self._names[position] = cleaned
        return cleaned

    def remove(self, name: str) -> None:
        # Removing someone who is not there is fine.
        if name in self:
            self._names.remove(name)

    def clear(self) -> None:
        self._names.clear()
