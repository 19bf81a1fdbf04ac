from __future__ import annotations

from fastapi import Request

from app.providers.factory import ProcessorSelector


def get_selector(request: Request) -> ProcessorSelector:
    return request.app.state.selector
