import hashlib
import hmac
import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from fastapi.testclient import TestClient

from paybroker.core.config import Settings
from paybroker.core.exceptions import ProviderError
from paybroker.main import create_app

KEY_SECRET = "test_key_secret"
WEBHOOK_SECRET = "test_webhook_secret"


def compute_signature(secret, message):
    """Sign the way Razorpay does: hex HMAC-SHA256."""
    if isinstance(message, str):
        message = message.encode("utf-8")
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


def payment_signature(order_id, payment_id, secret):
    return compute_signature(secret, f"{order_id}|{payment_id}")


class FakeProvider:
    """In-memory stand-in for Razorpay."""

    def __init__(self):
        self.orders = []
        self.payments = {}
        self.fetched = []
        self.fail = False

    def create_order(self, options):
        if self.fail:
            raise ProviderError("gateway down")
        order = {
            "id": f"order_{len(self.orders) + 1}",
            "entity": "order",
            "amount": options["amount"],
            "currency": options["currency"],
            "receipt": options["receipt"],
            "status": "created",
        }
        self.orders.append(order)
        return order

    def fetch_payment(self, payment_id):
        self.fetched.append(payment_id)
        if self.fail:
            raise ProviderError("gateway down")
        if payment_id not in self.payments:
            raise ProviderError(f"no payment {payment_id}")
        return self.payments[payment_id]


def make_settings(**overrides) -> Settings:
    values = dict(
        ENVIRONMENT="test",
        RAZORPAY_KEY_ID="rzp_test_key",
        RAZORPAY_KEY_SECRET=KEY_SECRET,
        RAZORPAY_WEBHOOK_SECRET=WEBHOOK_SECRET,
        BACKEND_CORS_ORIGINS="http://localhost:3000,https://shop.example.com",
        LOG_TO_FILE=False,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def client(settings, provider):
    app = create_app(settings=settings, provider=provider)
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
