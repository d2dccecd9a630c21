"""
Pytest configuration and fixtures.
"""
from types import SimpleNamespace

import mongomock
import pytest
from fastapi.testclient import TestClient

from nursery_api.main import app
from nursery_api.database.connection import get_database
from nursery_api.routes.payments import get_payment_provider
from nursery_api.services.payment_provider import PaymentProvider


@pytest.fixture
def db():
    """In-memory MongoDB database."""
    mongo_client = mongomock.MongoClient()
    yield mongo_client["fatihas-floral-fantasy-test"]
    mongo_client.close()


@pytest.fixture
def provider() -> PaymentProvider:
    return PaymentProvider(api_key="sk_test_fake_key_for_testing")


@pytest.fixture
def client(db, provider):
    """HTTP client wired to the in-memory database."""
    app.dependency_overrides[get_database] = lambda: db
    app.dependency_overrides[get_payment_provider] = lambda: provider
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def stripe_intents(monkeypatch):
    """Capture PaymentIntent.create calls instead of reaching Stripe."""
    calls = []

    def fake_create(**kwargs):
        calls.append(kwargs)
        return SimpleNamespace(id="pi_test_123", client_secret="pi_test_123_secret_abc")

    monkeypatch.setattr("stripe.PaymentIntent.create", fake_create)
    return calls


@pytest.fixture
def make_products(db):
    """Insert (title, category, price, addedToCart) tuples, returning their ids."""

    def _make(rows):
        docs = [
            {
                "title": title,
                "name": title,
                "category": category,
                "price": price,
                "description": f"A lovely {title.lower()}",
                "addedToCart": added,
            }
            for title, category, price, added in rows
        ]
        result = db["products"].insert_many(docs)
        return [str(i) for i in result.inserted_ids]

    return _make
