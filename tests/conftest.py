import pytest

from tests.fakes import FakeTimer

from core.db import make_engine, make_session_factory
from core.kv_store import KeyValueStore
from core.menu_cache import MenuCache


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'little_lemon.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def kv_store(engine, session_factory):
    store = KeyValueStore(engine, session_factory)
    store.ensure_schema()
    return store


@pytest.fixture
def menu_cache(engine, session_factory, kv_store):
    cache = MenuCache(engine, session_factory, meta_store=kv_store)
    cache.ensure_schema()
    return cache


@pytest.fixture
def sample_menu():
    return [
        {"name": "Greek Salad", "price": 12.99, "description": "Crispy lettuce and feta.", "image": "greekSalad.jpg", "category": "starters"},
        {"name": "Bruschetta", "price": 7.99, "description": "Grilled bread with garlic.", "image": "bruschetta.jpg", "category": "starters"},
        {"name": "Grilled Fish", "price": 20.0, "description": "Fish with vegetables.", "image": "grilledFish.jpg", "category": "mains"},
        {"name": "Lemon Dessert", "price": 4.99, "description": "Grandma's recipe.", "image": "lemonDessert.jpg", "category": "desserts"},
    ]


@pytest.fixture
def fake_timer():
    FakeTimer.created = []
    return FakeTimer
