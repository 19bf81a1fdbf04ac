from __future__ import annotations

import logging
import time
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Callable, ClassVar, Optional

from app.providers.config import ProviderConfig, latency_enabled
from services.metrics import increment_payout_attempt
from services.redaction import redact_text

logger = logging.getLogger("payoutrouter")


class PayoutStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    # Reserved: no processor produces these yet.
    PENDING = "PENDING"
    CANCELLED = "CANCELLED"


class PayoutMethod(str, Enum):
    MOBILE_WALLET = "mobile_wallet"
    BANK_TRANSFER = "bank_transfer"
    CASH_PICKUP = "cash_pickup"
    DIGITAL_WALLET = "digital_wallet"
    WIRE_TRANSFER = "wire_transfer"

    @classmethod
    def from_string(cls, value: Optional[str]) -> "PayoutMethod":
        normalized = (value or "").strip().lower()
        for method in cls:
            if method.value == normalized:
                return method
        raise ValueError(f"Unknown payout method: {value!r}")


class ProviderName(str, Enum):
    GCASH = "GCASH"
    PAYTM = "PAYTM"
    BANK_TRANSFER = "BANK_TRANSFER"


@dataclass(frozen=True)
class PayoutRequest:
    payout_method: str
    destination_country: str
    amount: Optional[Decimal]
    currency: str
    recipient_name: str
    recipient_phone: Optional[str] = None
    recipient_email: Optional[str] = None
    bank_account: Optional[str] = None
    bank_code: Optional[str] = None
    purpose: Optional[str] = None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class PayoutResponse:
    status: PayoutStatus
    message: str
    provider_name: str
    transaction_id: Optional[str] = None
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    recipient_name: Optional[str] = None
    processed_at: datetime = field(default_factory=_utcnow)
    error_code: Optional[str] = None
    error_details: Optional[str] = None

    @classmethod
    def success(
        cls,
        transaction_id: str,
        provider_name: str,
        request: PayoutRequest,
        message: str = "Transfer completed successfully",
    ) -> "PayoutResponse":
        return cls(
            status=PayoutStatus.SUCCESS,
            transaction_id=transaction_id,
            message=message,
            provider_name=provider_name,
            amount=request.amount,
            currency=request.currency,
            recipient_name=request.recipient_name,
        )

    @classmethod
    def failed(
        cls,
        message: str,
        provider_name: str,
        error_code: str,
        *,
        error_details: Optional[str] = None,
        request: Optional[PayoutRequest] = None,
    ) -> "PayoutResponse":
        return cls(
            status=PayoutStatus.FAILED,
            message=message,
            provider_name=provider_name,
            amount=request.amount if request is not None else None,
            currency=request.currency if request is not None else None,
            recipient_name=request.recipient_name if request is not None else None,
            error_code=error_code,
            error_details=error_details,
        )


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class PayoutProcessor:
    """
    One provider family. Subclasses only declare their tables and implement
    config() and validate_request(); process() drives the shared flow:

        RECEIVED -> VALIDATING -> SUCCESS | FAILED

    Processors keep no per-request state, so one instance serves concurrent calls.
    """

    PROVIDER: ClassVar[ProviderName]
    PROVIDER_NAME: ClassVar[str]
    SUPPORTED_COUNTRIES: ClassVar[tuple[str, ...]] = ()
    SUPPORTED_METHODS: ClassVar[tuple[str, ...]] = ()
    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = ()

    TXN_PREFIX: ClassVar[str]
    TXN_SUFFIX_LEN: ClassVar[int] = 8
    ERROR_PREFIX: ClassVar[str]

    VALIDATION_MESSAGE: ClassVar[str]
    API_ERROR_MESSAGE: ClassVar[str]
    SUCCESS_MESSAGE: ClassVar[str] = "Transfer completed successfully"

    def __init__(self, sleep: Optional[Callable[[float], None]] = None):
        self._sleep = sleep

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.PROVIDER.value}>"

    @property
    def name(self) -> str:
        return self.PROVIDER_NAME

    def supported_countries(self) -> tuple[str, ...]:
        return tuple(self.SUPPORTED_COUNTRIES)

    def supported_methods(self) -> tuple[str, ...]:
        return tuple(self.SUPPORTED_METHODS)

    def supports(self, country: Optional[str], method: Optional[str]) -> bool:
        if country is None or method is None:
            return False
        return (
            country.strip().lower() in self.SUPPORTED_COUNTRIES
            and method.strip().lower() in self.SUPPORTED_METHODS
        )

    def config(self) -> ProviderConfig:
        raise NotImplementedError

    def is_valid(self, request: Optional[PayoutRequest]) -> bool:
        return request is not None and request.amount is not None and request.amount > 0

    def validate_request(self, request: PayoutRequest, cfg: ProviderConfig) -> Optional[str]:
        """Return a rejection reason, or None when the provider accepts the request."""
        raise NotImplementedError

    def generate_transaction_id(self) -> str:
        suffix = secrets.token_hex(self.TXN_SUFFIX_LEN)[: self.TXN_SUFFIX_LEN].upper()
        return f"{self.TXN_PREFIX}{time.time_ns()}{suffix}"

    def process(self, request: Optional[PayoutRequest]) -> PayoutResponse:
        provider = self.PROVIDER.value
        try:
            cfg = self.config()

            if not self.is_valid(request):
                reason = "Amount must be greater than zero"
            else:
                reason = self.validate_request(request, cfg)

            if reason:
                logger.warning("payout rejected: provider=%s reason=%s", provider, redact_text(reason))
                increment_payout_attempt(provider, "rejected")
                return PayoutResponse.failed(
                    self.VALIDATION_MESSAGE,
                    self.PROVIDER_NAME,
                    f"{self.ERROR_PREFIX}_VALIDATION_ERROR",
                    error_details=reason,
                    request=request,
                )

            transaction_id = self.generate_transaction_id()
            self._simulate_latency(cfg)

            logger.info(
                "payout sent: provider=%s transaction_id=%s amount=%s currency=%s",
                provider,
                transaction_id,
                request.amount,
                request.currency,
            )
            increment_payout_attempt(provider, "success")
            return PayoutResponse.success(
                transaction_id, self.PROVIDER_NAME, request, message=self.SUCCESS_MESSAGE
            )

        except Exception as e:
            logger.exception("payout failed: provider=%s", provider)
            increment_payout_attempt(provider, "error")
            return PayoutResponse.failed(
                f"{self.API_ERROR_MESSAGE}: {e}",
                self.PROVIDER_NAME,
                f"{self.ERROR_PREFIX}_API_ERROR",
                error_details=type(e).__name__,
                request=request,
            )

    def _simulate_latency(self, cfg: ProviderConfig) -> None:
        if not latency_enabled() or cfg.latency_s <= 0:
            return
        sleep = self._sleep or time.sleep
        sleep(cfg.latency_s)
