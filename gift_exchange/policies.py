from __future__ import annotations

from flask import jsonify, request
from flask.views import MethodView

from .extensions import exchange
from .models import Phase


def in_setup() -> bool:
    return exchange.session.phase is Phase.SETUP


def phase_conflict(message: str):
    return jsonify({"error": "invalid_phase", "message": message}), 409


# --------- Class-based view Mixins ----------

class SetupOnlyMixin(MethodView):
    """
    Allows GET always.
    Blocks POST/PUT/PATCH/DELETE once a draw has been made.
    """
    def dispatch_request(self, *args, **kwargs):
        if request.method in {"POST", "PUT", "PATCH", "DELETE"} and not in_setup():
            return phase_conflict("Go back to setup to change the participants.")
        return super().dispatch_request(*args, **kwargs)


class RevealOnlyMixin(MethodView):
    """Reveal commands need a committed draw."""
    def dispatch_request(self, *args, **kwargs):
        if in_setup():
            return phase_conflict("The draw has not been made yet.")
        return super().dispatch_request(*args, **kwargs)
