# settings.py
from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


KNOWN_PROVIDERS = ("GCASH", "PAYTM", "BANK_TRANSFER")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # -----------------------
    # App
    # -----------------------
    ENV: Literal["dev", "staging", "prod"] = "dev"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # -----------------------
    # Payout processors
    # -----------------------
    PAYOUT_SIMULATE_LATENCY: bool = True
    PAYOUT_ENABLED_PROVIDERS: str = "GCASH,PAYTM,BANK_TRANSFER"

    # GCash (Philippines mobile wallet)
    GCASH_ENABLED: bool = True
    GCASH_DAILY_LIMIT: Decimal = Field(default=Decimal("50000"))
    GCASH_LATENCY_MS: int = 1000
    GCASH_CURRENCY: str = "PHP"

    # Paytm (India mobile/digital wallet)
    PAYTM_ENABLED: bool = True
    PAYTM_DAILY_LIMIT: Decimal = Field(default=Decimal("100000"))
    PAYTM_LATENCY_MS: int = 800
    PAYTM_CURRENCY: str = "INR"

    # International bank / wire transfer
    BANK_TRANSFER_ENABLED: bool = True
    BANK_TRANSFER_DAILY_LIMIT: Decimal = Field(default=Decimal("500000"))
    BANK_TRANSFER_MINIMUM_AMOUNT: Decimal = Field(default=Decimal("10"))
    BANK_TRANSFER_LATENCY_MS: int = 1500


settings = Settings()


def _normalize_provider(value: str) -> str:
    return (value or "").strip().upper().replace("-", "_").replace(" ", "_")


def enabled_provider_names() -> set[str]:
    raw = settings.PAYOUT_ENABLED_PROVIDERS or ""
    return {_normalize_provider(p) for p in raw.split(",") if p.strip()}


def validate_env_settings() -> None:
    env = (settings.ENV or "dev").strip().lower()
    problems: list[str] = []

    unknown = sorted(enabled_provider_names() - set(KNOWN_PROVIDERS))
    if unknown:
        problems.append(
            "PAYOUT_ENABLED_PROVIDERS has unknown providers: "
            + ", ".join(unknown)
            + ". Allowed: "
            + ", ".join(KNOWN_PROVIDERS)
        )

    if env in ("staging", "prod"):
        for name in ("GCASH_DAILY_LIMIT", "PAYTM_DAILY_LIMIT", "BANK_TRANSFER_DAILY_LIMIT"):
            if getattr(settings, name) <= 0:
                problems.append(f"{name} must be > 0")
        for name in ("GCASH_LATENCY_MS", "PAYTM_LATENCY_MS", "BANK_TRANSFER_LATENCY_MS"):
            if int(getattr(settings, name)) < 0:
                problems.append(f"{name} must be >= 0")
        if settings.BANK_TRANSFER_MINIMUM_AMOUNT > settings.BANK_TRANSFER_DAILY_LIMIT:
            problems.append("BANK_TRANSFER_MINIMUM_AMOUNT exceeds BANK_TRANSFER_DAILY_LIMIT")

    if problems:
        raise RuntimeError(
            f"Settings validation failed (ENV={env}): " + "; ".join(problems)
        )
