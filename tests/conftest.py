
# tests/conftest.py

from decimal import Decimal
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from app.providers.base import PayoutRequest
from app.providers.factory import ProcessorSelector
from main import create_app
from settings import settings


# ---------------------------
# Settings
# ---------------------------

@pytest.fixture(autouse=True)
def _no_simulated_latency(monkeypatch):
    # Processors sleep for up to 1.5s otherwise.
    monkeypatch.setattr(settings, "PAYOUT_SIMULATE_LATENCY", False, raising=False)


# ---------------------------
# Selector + Client
# ---------------------------

@pytest.fixture()
def selector() -> ProcessorSelector:
    return ProcessorSelector()


@pytest.fixture()
def client(selector: ProcessorSelector) -> TestClient:
    # Needed so tests can assert 500s instead of pytest re-raising server exceptions
    return TestClient(create_app(selector=selector), raise_server_exceptions=False)


# ---------------------------
# Request Helpers
# ---------------------------

def make_request(**overrides: Any) -> PayoutRequest:
    fields: Dict[str, Any] = {
        "payout_method": "mobile_wallet",
        "destination_country": "philippines",
        "amount": Decimal("1000"),
        "currency": "PHP",
        "recipient_name": "Juan Dela Cruz",
        "recipient_phone": "+639123456789",
    }
    fields.update(overrides)
    return PayoutRequest(**fields)


def gcash_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "payoutMethod": "mobile_wallet",
        "destinationCountry": "philippines",
        "amount": 1000,
        "currency": "PHP",
        "recipientName": "Test User",
        "recipientPhone": "+639123456789",
    }
    payload.update(overrides)
    return payload


def bank_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "payoutMethod": "bank_transfer",
        "destinationCountry": "bangladesh",
        "amount": 2500,
        "currency": "BDT",
        "recipientName": "Test User",
        "bankAccount": "1234567890",
        "bankCode": "BRAKBDDH",
    }
    payload.update(overrides)
    return payload
