import random

import pytest

from gift_exchange import create_app
from gift_exchange.services.session import ExchangeSession


@pytest.fixture
def app():
    return create_app({
        "TESTING": True,
        "WTF_CSRF_ENABLED": False,
        "GIFT_EXCHANGE_DRAW_DELAY": 0,
        "GIFT_EXCHANGE_SEED": 2024,
    })


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session():
    return ExchangeSession(rng=random.Random(7))


@pytest.fixture
def drawn_session(session):
    for name in ("A", "B", "C"):
        session.add_participant(name)
    session.draw()
    return session
