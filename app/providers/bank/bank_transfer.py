from __future__ import annotations

from typing import Optional

from app.providers.base import PayoutProcessor, PayoutRequest, ProviderName, is_blank
from app.providers.config import ProviderConfig, bank_transfer_config


class BankTransferProcessor(PayoutProcessor):
    """Bank and wire transfers for the South/Southeast Asia corridors."""

    PROVIDER = ProviderName.BANK_TRANSFER
    PROVIDER_NAME = "International Bank Transfer"
    SUPPORTED_COUNTRIES = (
        "india",
        "philippines",
        "bangladesh",
        "nepal",
        "sri lanka",
        "in",
        "ph",
        "bd",
        "np",
        "lk",
    )
    SUPPORTED_METHODS = ("bank_transfer", "wire_transfer")
    REQUIRED_FIELDS = ("bankAccount", "bankCode")

    TXN_PREFIX = "BT"
    TXN_SUFFIX_LEN = 10
    ERROR_PREFIX = "BANK"

    VALIDATION_MESSAGE = "Invalid bank transfer request parameters"
    API_ERROR_MESSAGE = "Bank transfer processing failed"
    SUCCESS_MESSAGE = "Bank transfer initiated successfully. Processing time: 1-3 business days"

    def config(self) -> ProviderConfig:
        return bank_transfer_config()

    def validate_request(self, request: PayoutRequest, cfg: ProviderConfig) -> Optional[str]:
        if is_blank(request.bank_account):
            return "Bank transfer requires recipient bank account"
        if is_blank(request.bank_code):
            return "Bank transfer requires bank code/SWIFT code"
        if cfg.min_amount is not None and request.amount < cfg.min_amount:
            return f"Minimum amount for bank transfer is {cfg.min_amount}"
        if request.amount > cfg.max_amount:
            return "Amount exceeds bank transfer daily limit"
        return None
