from __future__ import annotations

from decimal import Decimal

import pytest

from settings import enabled_provider_names, settings, validate_env_settings


def test_validate_env_allows_dev_defaults(monkeypatch):
    monkeypatch.setattr(settings, "ENV", "dev", raising=False)
    validate_env_settings()


def test_validate_env_rejects_unknown_provider(monkeypatch):
    monkeypatch.setattr(settings, "PAYOUT_ENABLED_PROVIDERS", "GCASH,WESTERN_UNION", raising=False)

    with pytest.raises(RuntimeError) as exc:
        validate_env_settings()
    assert "WESTERN_UNION" in str(exc.value)


def test_validate_env_prod_checks_limits(monkeypatch):
    monkeypatch.setattr(settings, "ENV", "prod", raising=False)
    monkeypatch.setattr(settings, "PAYTM_DAILY_LIMIT", Decimal("0"), raising=False)
    monkeypatch.setattr(settings, "BANK_TRANSFER_MINIMUM_AMOUNT", Decimal("600000"), raising=False)

    with pytest.raises(RuntimeError) as exc:
        validate_env_settings()

    message = str(exc.value)
    assert "PAYTM_DAILY_LIMIT" in message
    assert "BANK_TRANSFER_MINIMUM_AMOUNT" in message


def test_validate_env_dev_skips_limit_checks(monkeypatch):
    monkeypatch.setattr(settings, "ENV", "dev", raising=False)
    monkeypatch.setattr(settings, "PAYTM_DAILY_LIMIT", Decimal("0"), raising=False)
    validate_env_settings()


def test_enabled_provider_names_normalizes(monkeypatch):
    monkeypatch.setattr(settings, "PAYOUT_ENABLED_PROVIDERS", " gcash , bank-transfer,", raising=False)
    assert enabled_provider_names() == {"GCASH", "BANK_TRANSFER"}
