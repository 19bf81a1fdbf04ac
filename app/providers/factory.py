from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, Optional

from app.providers.bank.bank_transfer import BankTransferProcessor
from app.providers.base import PayoutProcessor, ProviderName
from app.providers.config import provider_enabled
from app.providers.errors import ProviderDisabledError, UnsupportedCombinationError
from app.providers.mobile_wallet.gcash import GCashProcessor
from app.providers.mobile_wallet.paytm import PaytmProcessor
from services.metrics import increment_processor_cache

logger = logging.getLogger("payoutrouter")

PROCESSOR_CLASSES: dict[ProviderName, type[PayoutProcessor]] = {
    ProviderName.GCASH: GCashProcessor,
    ProviderName.PAYTM: PaytmProcessor,
    ProviderName.BANK_TRANSFER: BankTransferProcessor,
}

# "<method>_<country>" -> provider. Two-letter country codes are separate keys.
ROUTING_TABLE: dict[str, ProviderName] = {
    "mobile_wallet_philippines": ProviderName.GCASH,
    "mobile_wallet_ph": ProviderName.GCASH,
    "mobile_wallet_india": ProviderName.PAYTM,
    "mobile_wallet_in": ProviderName.PAYTM,
    "digital_wallet_india": ProviderName.PAYTM,
    "digital_wallet_in": ProviderName.PAYTM,
    "bank_transfer_india": ProviderName.BANK_TRANSFER,
    "bank_transfer_in": ProviderName.BANK_TRANSFER,
    "bank_transfer_philippines": ProviderName.BANK_TRANSFER,
    "bank_transfer_ph": ProviderName.BANK_TRANSFER,
    "bank_transfer_bangladesh": ProviderName.BANK_TRANSFER,
    "bank_transfer_bd": ProviderName.BANK_TRANSFER,
    "bank_transfer_nepal": ProviderName.BANK_TRANSFER,
    "bank_transfer_np": ProviderName.BANK_TRANSFER,
    "bank_transfer_sri lanka": ProviderName.BANK_TRANSFER,
    "bank_transfer_lk": ProviderName.BANK_TRANSFER,
    "wire_transfer_india": ProviderName.BANK_TRANSFER,
    "wire_transfer_in": ProviderName.BANK_TRANSFER,
    "wire_transfer_philippines": ProviderName.BANK_TRANSFER,
    "wire_transfer_ph": ProviderName.BANK_TRANSFER,
}


def _normalize(value: Optional[str]) -> str:
    return (value or "").strip().lower()


class ProcessorCache:
    """
    Resolved processors keyed by combination key.

    Concurrent writers for the same key always store the same instance, so the
    lock only protects the dict itself.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._entries: Dict[str, PayoutProcessor] = {}

    def get(self, key: str) -> Optional[PayoutProcessor]:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, processor: PayoutProcessor) -> None:
        with self._lock:
            self._entries[key] = processor

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def keys(self) -> list[str]:
        with self._lock:
            return sorted(self._entries.keys())


class ProcessorSelector:
    def __init__(
        self,
        processors: Optional[dict[ProviderName, PayoutProcessor]] = None,
        cache: Optional[ProcessorCache] = None,
    ):
        if processors is None:
            processors = {name: cls() for name, cls in PROCESSOR_CLASSES.items()}
        missing = set(ProviderName) - set(processors)
        if missing:
            raise ValueError(
                "Missing processors for: " + ", ".join(sorted(p.value for p in missing))
            )
        self._processors = dict(processors)
        self._cache = cache if cache is not None else ProcessorCache()

    def resolve(self, method: Optional[str], country: Optional[str]) -> PayoutProcessor:
        normalized_method = _normalize(method)
        normalized_country = _normalize(country)
        key = f"{normalized_method}_{normalized_country}"

        cached = self._cache.get(key)
        if cached is not None:
            self._ensure_enabled(cached.PROVIDER, normalized_method, normalized_country)
            logger.debug("processor cache hit: key=%s provider=%s", key, cached.PROVIDER.value)
            increment_processor_cache("hit")
            return cached

        provider = ROUTING_TABLE.get(key)
        if provider is None:
            logger.info(
                "unsupported combination: method=%s country=%s",
                normalized_method,
                normalized_country,
            )
            raise UnsupportedCombinationError(normalized_method, normalized_country)

        self._ensure_enabled(provider, normalized_method, normalized_country)

        processor = self._processors[provider]
        self._cache.put(key, processor)
        increment_processor_cache("miss")
        logger.info("processor resolved: key=%s provider=%s", key, processor.PROVIDER.value)
        return processor

    @staticmethod
    def _ensure_enabled(provider: ProviderName, method: str, country: str) -> None:
        # Enablement is read from settings on every call, cache hits included.
        if not provider_enabled(provider.value):
            logger.info("provider disabled: provider=%s method=%s country=%s", provider.value, method, country)
            raise ProviderDisabledError(method, country, provider.value)

    def is_supported(self, method: Optional[str], country: Optional[str]) -> bool:
        try:
            self.resolve(method, country)
        except UnsupportedCombinationError:
            return False
        return True

    def list_supported_combinations(self) -> dict[str, str]:
        return {
            key: self._processors[provider].name for key, provider in ROUTING_TABLE.items()
        }

    def providers(self) -> dict[ProviderName, PayoutProcessor]:
        return dict(self._processors)

    def clear_cache(self) -> None:
        self._cache.clear()
        logger.info("processor cache cleared")

    def cache_stats(self) -> dict:
        keys = self._cache.keys()
        return {"size": len(keys), "keys": keys}
