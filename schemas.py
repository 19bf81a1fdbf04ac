# schemas.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.providers.base import PayoutRequest, PayoutResponse, PayoutStatus


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# -------- TRANSFER --------
class TransferRequest(_CamelModel):
    payout_method: str = Field(min_length=1)
    destination_country: str = Field(min_length=1)
    amount: Decimal = Field(ge=Decimal("0.01"))
    currency: str = Field(min_length=1)
    recipient_name: str = Field(min_length=1)
    recipient_phone: Optional[str] = None
    recipient_email: Optional[str] = None
    bank_account: Optional[str] = None
    bank_code: Optional[str] = None
    purpose: Optional[str] = None

    @field_validator("payout_method", "destination_country", "currency", "recipient_name")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    def to_payout_request(self) -> PayoutRequest:
        return PayoutRequest(
            payout_method=self.payout_method,
            destination_country=self.destination_country,
            amount=self.amount,
            currency=self.currency,
            recipient_name=self.recipient_name,
            recipient_phone=self.recipient_phone,
            recipient_email=self.recipient_email,
            bank_account=self.bank_account,
            bank_code=self.bank_code,
            purpose=self.purpose,
        )


class TransferResponse(_CamelModel):
    status: PayoutStatus
    transaction_id: Optional[str] = None
    message: str
    provider_name: str
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    recipient_name: Optional[str] = None
    processed_at: datetime
    error_code: Optional[str] = None
    error_details: Optional[str] = None

    @classmethod
    def from_payout(cls, resp: PayoutResponse) -> "TransferResponse":
        return cls(
            status=resp.status,
            transaction_id=resp.transaction_id,
            message=resp.message,
            provider_name=resp.provider_name,
            amount=resp.amount,
            currency=resp.currency,
            recipient_name=resp.recipient_name,
            processed_at=resp.processed_at,
            error_code=resp.error_code,
            error_details=resp.error_details,
        )


class ValidateCombinationResponse(_CamelModel):
    method: str
    country: str
    supported: bool
    message: str


class FactoryStatsResponse(_CamelModel):
    cache_size: int
    cached_keys: List[str]


class ClearCacheResponse(_CamelModel):
    ok: bool = True
    message: str


# -------- CATALOG --------
class ProviderCatalogItem(_CamelModel):
    provider: str
    name: str
    methods: List[str]
    countries: List[str]
    currency: Optional[str] = None
    min_amount: Optional[Decimal] = None
    max_amount: Decimal
    fields_required: List[str]
    enabled: bool


class ProviderCatalogResponse(_CamelModel):
    providers: List[ProviderCatalogItem]


class MethodCatalogItem(_CamelModel):
    method: str
    providers: List[str]
    available: bool


class MethodCatalogResponse(_CamelModel):
    methods: List[MethodCatalogItem]
