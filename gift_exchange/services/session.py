from __future__ import annotations

import logging
import random
from typing import Optional

from ..errors import InsufficientParticipants, InvalidPhase, UnknownParticipant
from ..models import Assignment, Phase, PhaseState, RevealPhase, SetupPhase
from ..roster import Roster
from .draw import draw_assignments


log = logging.getLogger(__name__)


class ExchangeSession:
    """
    One gift exchange: a roster being edited (setup) or a committed draw whose
    cards are revealed one at a time (reveal).

    Assignments only exist inside `RevealPhase`, so there is nothing to go
    stale while the roster changes.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.roster = Roster()
        self.state: PhaseState = SetupPhase()

    # --------- Queries ----------

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def participants(self) -> list[str]:
        return self.roster.names

    @property
    def assignments(self) -> list[Assignment]:
        if isinstance(self.state, RevealPhase):
            return list(self.state.assignments)
        return []

    @property
    def pending(self) -> Optional[Assignment]:
        if isinstance(self.state, RevealPhase) and self.state.pending is not None:
            return self.state.get(self.state.pending)
        return None

    @property
    def all_revealed(self) -> bool:
        return isinstance(self.state, RevealPhase) and self.state.all_revealed

    # --------- Setup commands ----------

    def _require_setup(self) -> None:
        if not isinstance(self.state, SetupPhase):
            raise InvalidPhase("Go back to setup to change the participants.")

    def _require_reveal(self) -> RevealPhase:
        if not isinstance(self.state, RevealPhase):
            raise InvalidPhase("The draw has not been made yet.")
        return self.state

    def add_participant(self, name: str) -> str:
        self._require_setup()
        return self.roster.add(name)

    def rename_participant(self, old_name: str, new_name: str) -> str:
        self._require_setup()
        return self.roster.rename(old_name, new_name)

    def remove_participant(self, name: str) -> None:
        self._require_setup()
        self.roster.remove(name)

    def check_can_draw(self) -> None:
        """Raise what `draw()` would raise, without drawing."""
        self._require_setup()
        if len(self.roster) < 2:
            raise InsufficientParticipants()

    def draw(self) -> list[Assignment]:
        self.check_can_draw()
        assignments = draw_assignments(self.roster.names, self.rng)
        self.state = RevealPhase(assignments=assignments)
        log.info("Draw committed for %d participants", len(assignments))
        return list(assignments)

    # --------- Reveal commands ----------

    def select_for_reveal(self, giver: str) -> Optional[Assignment]:
        """
        Open `giver`'s card. Returns the pending assignment, or None when that
        card was already revealed (nothing changes in that case).
        """
        state = self._require_reveal()
        assignment = state.get(giver)
        if assignment is None:
            raise UnknownParticipant(f"{giver} is not part of this draw.")
        if assignment.revealed:
            return None
        state.pending = giver
        return assignment

    def confirm_reveal(self) -> Assignment:
        state = self._require_reveal()
        if state.pending is None:
            raise InvalidPhase("There is no card waiting to be revealed.")
        assignment = state.mark_revealed(state.pending)
        state.pending = None
        log.info(
            "Card revealed (%d/%d)",
            sum(a.revealed for a in state.assignments), len(state.assignments),
        )
        return assignment

    def cancel_reveal(self) -> None:
        if isinstance(self.state, RevealPhase):
            self.state.pending = None

    # --------- Leaving the reveal ----------

    def go_back_to_setup(self) -> None:
        if isinstance(self.state, RevealPhase):
            log.info("Draw discarded; back to setup")
        self.state = SetupPhase()

    def reset(self) -> None:
        self.roster.clear()
        self.state = SetupPhase()
        log.info("Exchange reset")
