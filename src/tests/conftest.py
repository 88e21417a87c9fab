"""Global test configuration and fixtures."""
import json
import pytest
from typing import Any, List, Optional, Tuple

from paystack import PaystackClient
from paystack.core.exceptions import TransportError

TEST_KEY = "sk_test_0000000000000000000000000000000000000000"

class RecordingHttpClient:
    """In-memory HttpClient that records calls and replays queued bodies"""

    def __init__(self):
        self.calls: List[Tuple[str, str, str, Any]] = []
        self._responses: List[Any] = []

    def queue(self, response: Any) -> None:
        """Queue a body (dict, raw string) or an exception for the next call"""
        self._responses.append(response)

    def _next(self) -> str:
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, str):
            return response
        return json.dumps(response)

    async def get(self, url: str, api_key: str, query: Optional[list] = None) -> str:
        self.calls.append(("GET", url, api_key, query))
        return self._next()

    async def post(self, url: str, api_key: str, body: Any) -> str:
        self.calls.append(("POST", url, api_key, body))
        return self._next()

@pytest.fixture
def http():
    """Recording HTTP client shared by the endpoint groups"""
    return RecordingHttpClient()

@pytest.fixture
def client(http):
    """Client wired to the recording HTTP client"""
    return PaystackClient(TEST_KEY, http)

@pytest.fixture
def not_found():
    """Transport failure as raised for a 404 from the API"""
    body = json.dumps({"status": False, "message": "Refund not found"})
    return TransportError(
        f"Request failed with status code: 404 - {body}",
        status=404,
        body=body
    )

@pytest.fixture
def refund_payload():
    """Refund as returned by the list and fetch endpoints"""
    return {
        "integration": 463433,
        "transaction": 1641,
        "dispute": None,
        "settlement": None,
        "domain": "test",
        "amount": 500000,
        "deducted_amount": 500000,
        "fully_deducted": True,
        "currency": "NGN",
        "channel": "migs",
        "status": "processed",
        "refunded_by": "customer@example.com",
        "refunded_at": "2024-09-21T15:18:52.000Z",
        "expected_at": "2024-09-28T15:18:52.000Z",
        "customer_note": "Refund for transaction T685312322670591",
        "merchant_note": "Refund for transaction T685312322670591 by customer@example.com",
        "id": 1,
        "created_at": "2024-09-21T15:18:52.000Z",
        "updated_at": "2024-09-21T15:19:10.000Z"
    }

@pytest.fixture
def subscription_payload():
    """Subscription as returned by the create endpoint"""
    return {
        "customer": 1173,
        "plan": 28,
        "integration": 100032,
        "domain": "test",
        "start": 1459296064,
        "status": "active",
        "quantity": 1,
        "amount": 50000,
        "authorization": {
            "authorization_code": "AUTH_6tmt288t0o",
            "bin": "408408",
            "last4": "4081",
            "exp_month": "12",
            "exp_year": "2030",
            "channel": "card",
            "card_type": "visa visa",
            "bank": "TEST BANK",
            "country_code": "NG",
            "brand": "visa",
            "reusable": True,
            "signature": "SIG_uSYN4fv1adlAuoij8QXh",
            "account_name": "BoJack Horseman"
        },
        "subscription_code": "SUB_vsyqdmlzble3uii",
        "email_token": "d7gofp6yppn3qz7",
        "easy_cron_id": None,
        "cron_expression": "0 0 28 * *",
        "next_payment_date": "2016-04-28T07:00:00.000Z",
        "open_invoice": None,
        "id": 9,
        "createdAt": "2016-03-30T00:01:04.687Z",
        "updatedAt": "2016-03-30T00:01:04.687Z"
    }

@pytest.fixture
def api_key():
    """Secret key the test client was built with"""
    return TEST_KEY
