from __future__ import annotations

from decimal import Decimal

import pytest

from app.providers.bank.bank_transfer import BankTransferProcessor
from app.providers.base import PayoutStatus
from tests.conftest import make_request


def _bank_request(**overrides):
    fields = {
        "payout_method": "bank_transfer",
        "destination_country": "nepal",
        "currency": "NPR",
        "recipient_phone": None,
        "bank_account": "0011223344",
        "bank_code": "NARBNPKA",
    }
    fields.update(overrides)
    return make_request(**fields)


@pytest.fixture()
def bank() -> BankTransferProcessor:
    return BankTransferProcessor()


@pytest.mark.parametrize("amount", ["10", "250.50", "500000"])
def test_bank_amount_within_range_succeeds(bank, amount):
    resp = bank.process(_bank_request(amount=Decimal(amount)))
    assert resp.status == PayoutStatus.SUCCESS, resp
    assert resp.transaction_id.startswith("BT")
    assert resp.message == "Bank transfer initiated successfully. Processing time: 1-3 business days"


@pytest.mark.parametrize("amount", ["9.99", "500001"])
def test_bank_amount_out_of_range_fails(bank, amount):
    resp = bank.process(_bank_request(amount=Decimal(amount)))
    assert resp.status == PayoutStatus.FAILED
    assert resp.error_code == "BANK_VALIDATION_ERROR"
    assert resp.message == "Invalid bank transfer request parameters"


@pytest.mark.parametrize("amount", ["10", "1000", "500000"])
@pytest.mark.parametrize(
    "missing",
    [{"bank_account": None}, {"bank_code": None}, {"bank_account": "  "}, {"bank_code": ""}],
)
def test_bank_requires_account_and_code(bank, amount, missing):
    resp = bank.process(_bank_request(amount=Decimal(amount), **missing))
    assert resp.status == PayoutStatus.FAILED
    assert resp.error_code == "BANK_VALIDATION_ERROR"


def test_bank_supports_full_names_and_codes(bank):
    for country in ("india", "philippines", "bangladesh", "nepal", "sri lanka", "in", "ph", "bd", "np", "lk"):
        assert bank.supports(country, "bank_transfer")
        assert bank.supports(country.upper(), " wire_transfer ")
    assert not bank.supports("pakistan", "bank_transfer")
    assert not bank.supports("india", "mobile_wallet")


def test_bank_minimum_comes_from_settings(bank, monkeypatch):
    from settings import settings

    monkeypatch.setattr(settings, "BANK_TRANSFER_MINIMUM_AMOUNT", Decimal("100"), raising=False)
    resp = bank.process(_bank_request(amount=Decimal("50")))
    assert resp.status == PayoutStatus.FAILED
    assert resp.error_details == "Minimum amount for bank transfer is 100"
