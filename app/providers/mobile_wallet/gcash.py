from __future__ import annotations

import re
from typing import Optional

from app.providers.base import PayoutProcessor, PayoutRequest, ProviderName, is_blank
from app.providers.config import ProviderConfig, gcash_config

# 09XXXXXXXXX, 639XXXXXXXXX or +639XXXXXXXXX
PH_MOBILE_RE = re.compile(r"^(\+63|63|0)?9\d{9}$")


class GCashProcessor(PayoutProcessor):
    PROVIDER = ProviderName.GCASH
    PROVIDER_NAME = "GCash Philippines"
    SUPPORTED_COUNTRIES = ("philippines", "ph")
    SUPPORTED_METHODS = ("mobile_wallet",)
    REQUIRED_FIELDS = ("recipientPhone",)

    TXN_PREFIX = "GC"
    TXN_SUFFIX_LEN = 8
    ERROR_PREFIX = "GCASH"

    VALIDATION_MESSAGE = "Invalid GCash request parameters"
    API_ERROR_MESSAGE = "GCash processing failed"

    def config(self) -> ProviderConfig:
        return gcash_config()

    def validate_request(self, request: PayoutRequest, cfg: ProviderConfig) -> Optional[str]:
        phone = request.recipient_phone
        if is_blank(phone):
            return "GCash requires recipient phone number"
        if not PH_MOBILE_RE.fullmatch(phone):
            return f"Invalid Philippines phone number format: {phone}"
        if request.amount > cfg.max_amount:
            return "Amount exceeds GCash daily limit"
        return None
