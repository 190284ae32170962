# tests/conftest.py
import os

# Must be set before app.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-key-with-at-least-32-bytes!!")

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.models.sql_models import MenuItem, Shop
from main import create_app


def make_settings(**overrides) -> Settings:
    s = Settings()
    s.DATABASE_URL = "sqlite://"
    s.JWT_SECRET = "test-secret-key-with-at-least-32-bytes!!"
    s.AUTO_CREATE_TABLES = True
    s.BCRYPT_ROUNDS = 4
    s.LOG_LEVEL = "WARNING"
    for key, value in overrides.items():
        setattr(s, key, value)
    return s


@pytest.fixture
def application():
    instance = create_app(make_settings())
    yield instance
    instance.state.engine.dispose()


@pytest.fixture
def db(application):
    session = application.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def menu(db):
    """Two shops; menu 1 costs 50, menu 2 costs 120."""
    db.add_all([
        Shop(shop_id=1, shop_name="Krua Thai", shop_address="12 Sukhumvit Rd"),
        Shop(shop_id=2, shop_name="Noodle Corner", shop_address="8 Silom Rd"),
    ])
    db.add_all([
        MenuItem(menu_id=1, menu_name="Pad Thai", menu_description="Rice noodles", price=50, shop_id=1),
        MenuItem(menu_id=2, menu_name="Tom Yum", menu_description="Spicy soup", price=120, shop_id=1),
        MenuItem(menu_id=3, menu_name="Boat Noodles", menu_description=None, price=40, shop_id=2),
    ])
    db.commit()
    return {1: 50, 2: 120, 3: 40}


@pytest.fixture
def client(application):
    with TestClient(application) as c:
        yield c


CUSTOMER = {
    "prefix": "Ms",
    "firstname": "Somchai",
    "lastname": "Jaidee",
    "username": "somchai",
    "password": "s3cret!",
    "address": "99 Rama IV",
    "email": "somchai@example.com",
    "phone_number": "0812345678",
}


@pytest.fixture
def customer_data():
    return dict(CUSTOMER)


@pytest.fixture
def customer(client, customer_data):
    res = client.post("/register", json=customer_data)
    assert res.status_code == 200
    return res.json()["id"]


@pytest.fixture
def token(client, customer):
    res = client.post("/login", json={"username": CUSTOMER["username"], "password": CUSTOMER["password"]})
    assert res.status_code == 200
    return res.json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
