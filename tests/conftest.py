"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from auth import PasswordHasher, TokenService
from config import Settings
from main import create_app
from orders import OrderService, OrderStore
from users import AccountService, UserStore

TEST_SECRET = "test-secret"
ADMIN_EMAIL = "admin@shop.com"


class FixedClock:
    """Settable clock returning a datetime."""

    def __init__(self, now=None):
        self.now = now or datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now


@pytest.fixture
def settings():
    return Settings(
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=10,
        admin_emails_raw=ADMIN_EMAIL,
        db_name="shop_test",
        store_timeout_seconds=5,
        max_body_bytes=64 * 1024,
    )


@pytest.fixture
def mongo_client():
    return AsyncMongoMockClient()


@pytest.fixture
def database(mongo_client):
    return mongo_client["shop_test"]


@pytest.fixture
def tokens():
    return TokenService(TEST_SECRET)


@pytest.fixture
def user_store(database):
    return UserStore(database)


@pytest.fixture
def accounts(user_store, tokens):
    return AccountService(user_store, tokens, PasswordHasher(10), [ADMIN_EMAIL])


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def order_service(database, user_store, clock):
    return OrderService(OrderStore(database), user_store, clock=clock)


@pytest.fixture
def client(settings, mongo_client):
    app = create_app(settings, client=mongo_client)
    with TestClient(app) as c:
        yield c


def register(client, email="a@x.com", password="secret1", **profile):
    response = client.post("/api/register", json={"email": email, "password": password, **profile})
    assert response.status_code == 201, response.text
    return response.json()


def bearer(token):
    return {"Authorization": f"Bearer {token}"}
