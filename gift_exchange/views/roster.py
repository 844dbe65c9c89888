from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from ..extensions import exchange
from ..policies import SetupOnlyMixin
from .public import state_response, submitted


roster_bp = Blueprint("roster", __name__, url_prefix="/api/participants")


class ParticipantsView(SetupOnlyMixin):
    def get(self):
        return jsonify({"participants": exchange.session.participants})

    def post(self):
        with exchange.command() as session:
            name = session.add_participant(submitted("name"))
            current_app.logger.info("Participant added; roster size %d", len(session.participants))
        return state_response(f"{name} has joined the game.", status=201)


class ParticipantView(SetupOnlyMixin):
    def put(self, name: str):
        with exchange.command() as session:
            new_name = session.rename_participant(name, submitted("name"))
        return state_response(f"{name} is now {new_name}." if new_name != name else None)

    def delete(self, name: str):
        with exchange.command() as session:
            session.remove_participant(name)
        return state_response()


roster_bp.add_url_rule("", view_func=ParticipantsView.as_view("participants"), methods=["GET", "POST"])
roster_bp.add_url_rule(
    "/<path:name>",
    view_func=ParticipantView.as_view("participant"),
    methods=["PUT", "DELETE"],
)
