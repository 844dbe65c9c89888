from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional

from flask import Flask, jsonify
from flask_wtf.csrf import CSRFError

from .errors import ExchangeError, InvalidPhase, UnknownParticipant
from .extensions import csrf, exchange
from .views.exchange import exchange_bp
from .views.public import public_bp
from .views.roster import roster_bp


ERROR_STATUS = {
    InvalidPhase: 409,
    UnknownParticipant: 404,
}


def _optional_int(value: Optional[str]) -> Optional[int]:
    value = (value or "").strip()
    return int(value) if value else None


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)

    app.config["SECRET_KEY"] = os.environ.get("SECRET_KEY", "dev-secret-change-me")

    # Cosmetic pause before a draw commits; the engine itself never waits.
    app.config["GIFT_EXCHANGE_DRAW_DELAY"] = float(os.environ.get("GIFT_EXCHANGE_DRAW_DELAY", "1.5"))
    app.config["GIFT_EXCHANGE_SEED"] = _optional_int(os.environ.get("GIFT_EXCHANGE_SEED"))
    app.config["GIFT_EXCHANGE_LOG_LEVEL"] = os.environ.get("GIFT_EXCHANGE_LOG_LEVEL", "INFO").upper()

    if config:
        app.config.update(config)

    level = app.config["GIFT_EXCHANGE_LOG_LEVEL"]
    app.logger.setLevel(level)
    logging.getLogger("gift_exchange").setLevel(level)

    csrf.init_app(app)
    exchange.init_app(app)

    # Blueprints
    app.register_blueprint(public_bp)
    app.register_blueprint(roster_bp)
    app.register_blueprint(exchange_bp)

    @app.errorhandler(ExchangeError)
    def handle_exchange_error(e: ExchangeError):
        status = ERROR_STATUS.get(type(e), 400)
        return jsonify({"error": e.kind, "message": e.message}), status

    @app.errorhandler(CSRFError)
    def handle_csrf_error(e: CSRFError):
        return jsonify({"error": "csrf", "message": e.description}), 400

    return app
