from __future__ import annotations

from flask import Blueprint, current_app
from flask.views import MethodView

from ..errors import InsufficientParticipants
from ..extensions import exchange
from ..policies import RevealOnlyMixin, SetupOnlyMixin
from .public import state_response, submitted


exchange_bp = Blueprint("exchange", __name__, url_prefix="/api")


class DrawView(SetupOnlyMixin):
    def post(self):
        try:
            assignments = exchange.draw()
        except InsufficientParticipants:
            current_app.logger.info("Draw refused: not enough participants")
            raise
        current_app.logger.info("Draw complete for %d participants", len(assignments))
        return state_response("The draw is complete. Everyone has a gift to give.")


class RevealView(RevealOnlyMixin):
    def post(self):
        with exchange.command() as session:
            opened = session.select_for_reveal(submitted("giver"))
        if opened is None:
            return state_response("That card has already been revealed.")
        return state_response()


class ConfirmRevealView(RevealOnlyMixin):
    def post(self):
        with exchange.command() as session:
            revealed = session.confirm_reveal()
            done = session.all_revealed
        message = f"{revealed.giver}'s card is revealed."
        if done:
            message = "Every card is revealed. Happy gift exchange!"
        return state_response(message)


class CancelRevealView(MethodView):
    def post(self):
        with exchange.command() as session:
            session.cancel_reveal()
        return state_response()


class BackToSetupView(MethodView):
    def post(self):
        with exchange.command() as session:
            session.go_back_to_setup()
        return state_response()


class ResetView(MethodView):
    def post(self):
        with exchange.command() as session:
            session.reset()
        current_app.logger.info("Exchange reset by client")
        return state_response()


exchange_bp.add_url_rule("/draw", view_func=DrawView.as_view("draw"), methods=["POST"])
exchange_bp.add_url_rule("/reveal", view_func=RevealView.as_view("reveal"), methods=["POST"])
exchange_bp.add_url_rule("/reveal/confirm", view_func=ConfirmRevealView.as_view("confirm_reveal"), methods=["POST"])
exchange_bp.add_url_rule("/reveal/cancel", view_func=CancelRevealView.as_view("cancel_reveal"), methods=["POST"])
exchange_bp.add_url_rule("/setup", view_func=BackToSetupView.as_view("back_to_setup"), methods=["POST"])
exchange_bp.add_url_rule("/reset", view_func=ResetView.as_view("reset"), methods=["POST"])
