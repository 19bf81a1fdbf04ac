from __future__ import annotations

import re
from typing import Optional

from app.providers.base import PayoutProcessor, PayoutRequest, ProviderName, is_blank
from app.providers.config import ProviderConfig, paytm_config

INDIA_MOBILE_RE = re.compile(r"^(\+91|91|0)?[6-9]\d{9}$")


class PaytmProcessor(PayoutProcessor):
    PROVIDER = ProviderName.PAYTM
    PROVIDER_NAME = "Paytm India"
    SUPPORTED_COUNTRIES = ("india", "in")
    SUPPORTED_METHODS = ("mobile_wallet", "digital_wallet")
    # either one is enough
    REQUIRED_FIELDS = ("recipientPhone|recipientEmail",)

    TXN_PREFIX = "PTM"
    TXN_SUFFIX_LEN = 6
    ERROR_PREFIX = "PAYTM"

    VALIDATION_MESSAGE = "Invalid Paytm request parameters"
    API_ERROR_MESSAGE = "Paytm processing failed"

    def config(self) -> ProviderConfig:
        return paytm_config()

    def validate_request(self, request: PayoutRequest, cfg: ProviderConfig) -> Optional[str]:
        phone = request.recipient_phone
        if is_blank(phone) and is_blank(request.recipient_email):
            return "Paytm requires recipient phone or email"
        if not is_blank(phone) and not INDIA_MOBILE_RE.fullmatch(phone):
            return f"Invalid India phone number format: {phone}"
        if request.amount > cfg.max_amount:
            return "Amount exceeds Paytm daily limit"
        return None
