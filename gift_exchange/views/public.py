from __future__ import annotations

from flask import Blueprint, jsonify, request
from flask.views import MethodView
from flask_wtf.csrf import generate_csrf

from ..extensions import exchange
from ..services.session import ExchangeSession


public_bp = Blueprint("public", __name__, url_prefix="/api")


def submitted(key: str) -> str:
    """Read a field from a JSON body, falling back to form data."""
    payload = request.get_json(silent=True) or {}
    value = payload.get(key) if isinstance(payload, dict) else None
    if value is None:
        value = request.form.get(key)
    return value if isinstance(value, str) else ""


def serialize_state(session: ExchangeSession, drawing: bool = False) -> dict:
    """
    Public view of the exchange. Receivers stay hidden until their card is
    opened (pending) or confirmed (revealed).
    """
    pending = session.pending
    return {
        "phase": session.phase.value,
        "participants": session.participants,
        "assignments": [
            {
                "giver": a.giver,
                "receiver": a.receiver if a.revealed else None,
                "revealed": a.revealed,
            }
            for a in session.assignments
        ],
        "pending": {"giver": pending.giver, "receiver": pending.receiver} if pending else None,
        "all_revealed": session.all_revealed,
        "drawing": drawing,
    }


def state_response(message: str | None = None, status: int = 200):
    body = {"state": serialize_state(exchange.session, exchange.drawing)}
    if message:
        body["message"] = message
    return jsonify(body), status


class StateView(MethodView):
    def get(self):
        return state_response()


class CsrfTokenView(MethodView):
    def get(self):
        return jsonify({"csrf_token": generate_csrf()})


public_bp.add_url_rule("/state", view_func=StateView.as_view("state"))
public_bp.add_url_rule("/csrf-token", view_func=CsrfTokenView.as_view("csrf_token"))
