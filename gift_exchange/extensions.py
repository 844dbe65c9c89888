from __future__ import annotations

import random
import threading
import time
from contextlib import contextmanager

from flask import Flask, current_app
from flask_wtf.csrf import CSRFProtect

from .models import Assignment
from .services.session import ExchangeSession


class ExchangeStore:
    """
    Holds the single in-memory exchange of an app and runs commands on it
    one at a time, so a delayed draw commits before anything else happens.
    """

    def __init__(self, app: Flask | None = None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        seed = app.config.get("GIFT_EXCHANGE_SEED")
        rng = random.Random(seed) if seed is not None else random.Random()
        app.extensions["gift_exchange"] = _AppExchange(
            session=ExchangeSession(rng=rng),
            draw_delay=float(app.config.get("GIFT_EXCHANGE_DRAW_DELAY", 0) or 0),
        )

    @property
    def _current(self) -> "_AppExchange":
        return current_app.extensions["gift_exchange"]

    @property
    def session(self) -> ExchangeSession:
        return self._current.session

    @property
    def drawing(self) -> bool:
        return self._current.drawing

    @contextmanager
    def command(self):
        """Exclusive access to the session for one command."""
        current = self._current
        with current.lock:
            yield current.session

    def draw(self) -> list[Assignment]:
        current = self._current
        with current.lock:
            # Too few participants is reported right away, without the delay.
            current.session.check_can_draw()
            current.drawing = True
            try:
                if current.draw_delay > 0:
                    time.sleep(current.draw_delay)
                return current.session.draw()
            finally:
                current.drawing = False


class _AppExchange:
    def __init__(self, session: ExchangeSession, draw_delay: float):
        self.session = session
        self.draw_delay = draw_delay
        self.drawing = False
        self.lock = threading.Lock()


exchange = ExchangeStore()
csrf = CSRFProtect()
