from __future__ import annotations


class ExchangeError(RuntimeError):
    """
    Base for every recoverable failure of a roster or session command.
    The state that was there before the command is left untouched.
    """
    kind = "exchange_error"
    message = "The gift exchange could not complete that action."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class EmptyName(ExchangeError):
    kind = "empty_name"
    message = "Please enter a valid name."


class DuplicateName(ExchangeError):
    kind = "duplicate_name"
    message = "This participant is already on the list."


class InsufficientParticipants(ExchangeError):
    kind = "insufficient_participants"
    message = "You need at least 2 participants for the draw."


class UnknownParticipant(ExchangeError):
    kind = "unknown_participant"
    message = "No such participant."


class InvalidPhase(ExchangeError):
    kind = "invalid_phase"
    message = "That action is not available right now."
