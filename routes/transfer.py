from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.providers.base import PayoutResponse, PayoutStatus
from app.providers.errors import UnsupportedCombinationError
from app.providers.factory import ProcessorSelector
from deps.selector import get_selector
from schemas import (
    ClearCacheResponse,
    FactoryStatsResponse,
    TransferRequest,
    TransferResponse,
    ValidateCombinationResponse,
)
from services.redaction import redact_dict

logger = logging.getLogger("payoutrouter")
router = APIRouter(prefix="/api/transfer", tags=["transfer"])

SYSTEM_PROVIDER = "System"
UNSUPPORTED_COMBINATION = "UNSUPPORTED_COMBINATION"
INTERNAL_ERROR = "INTERNAL_ERROR"


def _json(resp: PayoutResponse, status_code: int) -> JSONResponse:
    body = TransferResponse.from_payout(resp).model_dump(mode="json", by_alias=True)
    return JSONResponse(status_code=status_code, content=body)


@router.post("/send", response_model=TransferResponse)
def send_money(
    payload: TransferRequest,
    selector: ProcessorSelector = Depends(get_selector),
):
    logger.info("transfer request: %s", redact_dict(payload.model_dump(mode="json")))
    request = payload.to_payout_request()

    try:
        processor = selector.resolve(request.payout_method, request.destination_country)
        response = processor.process(request)
    except UnsupportedCombinationError as e:
        logger.warning("unsupported combination: %s", e)
        return _json(
            PayoutResponse.failed(
                f"Unsupported payment method or country: {e}",
                SYSTEM_PROVIDER,
                UNSUPPORTED_COMBINATION,
                request=request,
            ),
            400,
        )
    except Exception:
        logger.exception("transfer failed unexpectedly")
        return _json(
            PayoutResponse.failed(
                "Internal server error occurred",
                SYSTEM_PROVIDER,
                INTERNAL_ERROR,
            ),
            500,
        )

    status_code = 200 if response.status == PayoutStatus.SUCCESS else 400
    return _json(response, status_code)


@router.get("/supported-methods", response_model=dict[str, str])
def supported_methods(selector: ProcessorSelector = Depends(get_selector)):
    return selector.list_supported_combinations()


@router.get("/validate", response_model=ValidateCombinationResponse)
def validate_combination(
    method: str = Query(...),
    country: str = Query(...),
    selector: ProcessorSelector = Depends(get_selector),
):
    supported = selector.is_supported(method, country)
    return ValidateCombinationResponse(
        method=method,
        country=country,
        supported=supported,
        message="Combination is supported" if supported else "Combination is not supported",
    )


@router.get("/factory-stats", response_model=FactoryStatsResponse)
def factory_stats(selector: ProcessorSelector = Depends(get_selector)):
    stats = selector.cache_stats()
    return FactoryStatsResponse(cache_size=stats["size"], cached_keys=stats["keys"])


@router.post("/clear-cache", response_model=ClearCacheResponse)
def clear_cache(selector: ProcessorSelector = Depends(get_selector)):
    selector.clear_cache()
    return ClearCacheResponse(message="Factory cache cleared successfully")
