from __future__ import annotations

from app.providers.base import PayoutMethod
from app.providers.factory import ROUTING_TABLE, ProcessorSelector


def _methods_by_provider() -> dict[str, set[str]]:
    out: dict[str, set[str]] = {}
    for key, provider in ROUTING_TABLE.items():
        method = next(m.value for m in PayoutMethod if key.startswith(m.value + "_"))
        out.setdefault(provider.value, set()).add(method)
    return out


def provider_catalog(selector: ProcessorSelector) -> dict:
    providers = []
    for name, processor in sorted(selector.providers().items(), key=lambda kv: kv[0].value):
        cfg = processor.config()
        providers.append(
            {
                "provider": name.value,
                "name": processor.name,
                "methods": list(processor.supported_methods()),
                "countries": list(processor.supported_countries()),
                "currency": cfg.currency,
                "min_amount": cfg.min_amount,
                "max_amount": cfg.max_amount,
                "fields_required": list(processor.REQUIRED_FIELDS),
                "enabled": cfg.enabled,
            }
        )
    return {"providers": providers}


def method_catalog(selector: ProcessorSelector) -> dict:
    served = _methods_by_provider()
    enabled = {
        name.value: processor.config().enabled
        for name, processor in selector.providers().items()
    }
    methods = []
    for method in PayoutMethod:
        providers = sorted(p for p, ms in served.items() if method.value in ms)
        methods.append(
            {
                "method": method.value,
                "providers": providers,
                "available": any(enabled.get(p, False) for p in providers),
            }
        )
    return {"methods": methods}
