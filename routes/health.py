from __future__ import annotations

import os

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.providers.config import latency_enabled
from app.providers.factory import ProcessorSelector
from deps.selector import get_selector
from services.metrics import render_prometheus
from settings import settings

router = APIRouter(tags=["health"])


def _resolve_git_sha() -> str | None:
    return (
        (os.getenv("GIT_SHA") or "").strip()
        or (os.getenv("FLY_IMAGE_REF") or "").strip()
        or None
    )


@router.get("/health")
def health(selector: ProcessorSelector = Depends(get_selector)):
    return {
        "ok": True,
        "env": settings.ENV,
        "version": settings.APP_VERSION,
        "providers": len(selector.providers()),
        "git_sha": _resolve_git_sha(),
    }


@router.get("/healthz")
def healthz(selector: ProcessorSelector = Depends(get_selector)):
    return {
        "ok": True,
        "version": settings.APP_VERSION,
        "git_sha": _resolve_git_sha(),
        "simulated_latency": latency_enabled(),
        "cache_size": selector.cache_stats()["size"],
    }


@router.get("/metrics", include_in_schema=False)
def metrics():
    return Response(content=render_prometheus(), media_type="text/plain; version=0.0.4")
