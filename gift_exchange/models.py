from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar, Optional, Union


class Phase(Enum):
    SETUP = "setup"
    REVEAL = "reveal"


@dataclass(frozen=True)
class Assignment:
    """One giver -> receiver pair of a draw. Only `revealed` ever changes."""
    giver: str
    receiver: str
    revealed: bool = False

    def __post_init__(self):
        if self.giver == self.receiver:
            raise ValueError(f"{self.giver!r} cannot be assigned to themselves")

    def as_revealed(self) -> "Assignment":
        return replace(self, revealed=True)


@dataclass(frozen=True)
class SetupPhase:
    """Names are being collected; no assignments exist."""
    phase: ClassVar[Phase] = Phase.SETUP


@dataclass
class RevealPhase:
    """
    A committed draw.

    `assignments` follows roster order at draw time.
    `pending` is the giver whose card is open awaiting confirm/cancel.
    """
    assignments: list[Assignment]
    pending: Optional[str] = None
    phase: ClassVar[Phase] = Phase.REVEAL
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self._index = {a.giver: i for i, a in enumerate(self.assignments)}

    def get(self, giver: str) -> Optional[Assignment]:
        i = self._index.get(giver)
        return None if i is None else self.assignments[i]

    def mark_revealed(self, giver: str) -> Assignment:
        i = self._index[giver]
        self.assignments[i] = self.assignments[i].as_revealed()
        return self.assignments[i]

    @property
    def all_revealed(self) -> bool:
        return bool(self.assignments) and all(a.revealed for a in self.assignments)


PhaseState = Union[SetupPhase, RevealPhase]
