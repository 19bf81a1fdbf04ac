from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from settings import enabled_provider_names, settings


def latency_enabled() -> bool:
    return bool(settings.PAYOUT_SIMULATE_LATENCY)


def _normalize_provider(value: str) -> str:
    return (value or "").strip().upper().replace("-", "_").replace(" ", "_")


def provider_enabled(provider: str) -> bool:
    normalized = _normalize_provider(provider)
    if normalized not in enabled_provider_names():
        return False
    if normalized == "GCASH":
        return bool(settings.GCASH_ENABLED)
    if normalized == "PAYTM":
        return bool(settings.PAYTM_ENABLED)
    if normalized == "BANK_TRANSFER":
        return bool(settings.BANK_TRANSFER_ENABLED)
    return False


@dataclass(frozen=True)
class ProviderConfig:
    enabled: bool
    max_amount: Decimal
    latency_ms: int
    currency: Optional[str] = None
    min_amount: Optional[Decimal] = None

    @property
    def latency_s(self) -> float:
        return max(int(self.latency_ms), 0) / 1000.0


def gcash_config() -> ProviderConfig:
    return ProviderConfig(
        enabled=provider_enabled("GCASH"),
        max_amount=Decimal(settings.GCASH_DAILY_LIMIT),
        latency_ms=int(settings.GCASH_LATENCY_MS),
        currency=(settings.GCASH_CURRENCY or "").strip().upper() or None,
    )


def paytm_config() -> ProviderConfig:
    return ProviderConfig(
        enabled=provider_enabled("PAYTM"),
        max_amount=Decimal(settings.PAYTM_DAILY_LIMIT),
        latency_ms=int(settings.PAYTM_LATENCY_MS),
        currency=(settings.PAYTM_CURRENCY or "").strip().upper() or None,
    )


def bank_transfer_config() -> ProviderConfig:
    return ProviderConfig(
        enabled=provider_enabled("BANK_TRANSFER"),
        max_amount=Decimal(settings.BANK_TRANSFER_DAILY_LIMIT),
        latency_ms=int(settings.BANK_TRANSFER_LATENCY_MS),
        min_amount=Decimal(settings.BANK_TRANSFER_MINIMUM_AMOUNT),
    )
