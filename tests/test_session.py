import pytest

from gift_exchange.errors import (
    DuplicateName,
    InsufficientParticipants,
    InvalidPhase,
    UnknownParticipant,
)
from gift_exchange.models import Phase


def test_initial_state(session):
    assert session.phase is Phase.SETUP
    assert session.participants == []
    assert session.assignments == []
    assert session.pending is None
    assert not session.all_revealed


def test_two_participants_draw(session):
    session.add_participant("Ana")
    session.add_participant("Luis")
    session.draw()
    assert session.phase is Phase.REVEAL
    assert [(a.giver, a.receiver, a.revealed) for a in session.assignments] == [
        ("Ana", "Luis", False),
        ("Luis", "Ana", False),
    ]


def test_draw_with_one_participant_is_refused(session):
    session.add_participant("A")
    with pytest.raises(InsufficientParticipants):
        session.draw()
    assert session.phase is Phase.SETUP
    assert session.participants == ["A"]


def test_duplicate_add_reports_error(session):
    session.add_participant("Ana")
    with pytest.raises(DuplicateName):
        session.add_participant("Ana")
    assert session.participants == ["Ana"]


def test_roster_is_frozen_during_reveal(drawn_session):
    with pytest.raises(InvalidPhase):
        drawn_session.add_participant("D")
    with pytest.raises(InvalidPhase):
        drawn_session.rename_participant("A", "Z")
    with pytest.raises(InvalidPhase):
        drawn_session.remove_participant("A")
    with pytest.raises(InvalidPhase):
        drawn_session.draw()
    assert drawn_session.participants == ["A", "B", "C"]


def test_select_cancel_then_confirm(drawn_session):
    opened = drawn_session.select_for_reveal("A")
    assert opened.giver == "A"
    assert opened.receiver in {"B", "C"}
    assert drawn_session.pending == opened

    drawn_session.cancel_reveal()
    assert drawn_session.pending is None
    assert not drawn_session.assignments[0].revealed

    drawn_session.select_for_reveal("A")
    revealed = drawn_session.confirm_reveal()
    assert revealed.revealed
    assert revealed.receiver == opened.receiver
    assert drawn_session.pending is None
    assert drawn_session.assignments[0].revealed


def test_revealed_card_stays_revealed(drawn_session):
    drawn_session.select_for_reveal("A")
    drawn_session.confirm_reveal()

    assert drawn_session.select_for_reveal("A") is None
    assert drawn_session.pending is None
    drawn_session.cancel_reveal()
    assert drawn_session.select_for_reveal("A") is None
    assert drawn_session.assignments[0].revealed


def test_only_one_pending_at_a_time(drawn_session):
    drawn_session.select_for_reveal("A")
    drawn_session.select_for_reveal("B")
    assert drawn_session.pending.giver == "B"
    drawn_session.confirm_reveal()
    revealed = [a.giver for a in drawn_session.assignments if a.revealed]
    assert revealed == ["B"]


def test_confirm_without_pending_is_refused(drawn_session):
    with pytest.raises(InvalidPhase):
        drawn_session.confirm_reveal()


def test_select_unknown_giver(drawn_session):
    with pytest.raises(UnknownParticipant):
        drawn_session.select_for_reveal("Z")


def test_reveal_commands_need_a_draw(session):
    session.add_participant("A")
    with pytest.raises(InvalidPhase):
        session.select_for_reveal("A")
    with pytest.raises(InvalidPhase):
        session.confirm_reveal()
    session.cancel_reveal()
    assert session.phase is Phase.SETUP


def test_all_revealed_flips_on_last_confirm(drawn_session):
    for giver in ("A", "B", "C"):
        assert not drawn_session.all_revealed
        drawn_session.select_for_reveal(giver)
        assert not drawn_session.all_revealed
        drawn_session.confirm_reveal()
    assert drawn_session.all_revealed


def test_go_back_keeps_roster_and_drops_draw(drawn_session):
    drawn_session.select_for_reveal("A")
    drawn_session.confirm_reveal()
    drawn_session.select_for_reveal("B")

    drawn_session.go_back_to_setup()
    assert drawn_session.phase is Phase.SETUP
    assert drawn_session.participants == ["A", "B", "C"]
    assert drawn_session.assignments == []
    assert drawn_session.pending is None
    assert not drawn_session.all_revealed

    drawn_session.draw()
    assert not any(a.revealed for a in drawn_session.assignments)


def test_go_back_in_setup_is_noop(session):
    session.add_participant("A")
    session.go_back_to_setup()
    assert session.phase is Phase.SETUP
    assert session.participants == ["A"]


def test_reset_clears_everything(drawn_session):
    drawn_session.reset()
    assert drawn_session.phase is Phase.SETUP
    assert drawn_session.participants == []
    assert drawn_session.assignments == []


def test_reset_in_setup_clears_roster(session):
    session.add_participant("A")
    session.reset()
    assert session.participants == []
