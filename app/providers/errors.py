from __future__ import annotations


class PayoutRoutingError(Exception):
    """Base class for failures raised while picking a processor."""


class UnsupportedCombinationError(PayoutRoutingError):
    def __init__(self, method: str, country: str):
        self.method = method
        self.country = country
        super().__init__(
            f"Unsupported combination: {method} in {country}. "
            "Supported: mobile_wallet(ph,in), bank_transfer(multiple countries)"
        )


class ProviderDisabledError(UnsupportedCombinationError):
    def __init__(self, method: str, country: str, provider: str):
        super().__init__(method, country)
        self.provider = provider
        self.args = (f"Provider {provider} is disabled for {method} in {country}",)
