from __future__ import annotations

import logging
from contextvars import ContextVar

from settings import settings


_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)

LOG_FORMAT = "%(asctime)s [%(threadName)s] %(levelname)s %(name)s rid=%(request_id)s - %(message)s"


def set_request_id(value: str | None) -> None:
    _request_id.set(value)


def get_request_id() -> str | None:
    return _request_id.get()


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True


def configure_logging() -> None:
    level = getattr(logging, (settings.LOG_LEVEL or "INFO").strip().upper(), logging.INFO)
    logger = logging.getLogger("payoutrouter")
    logger.setLevel(level)
    if any(getattr(h, "_payoutrouter", False) for h in logger.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    handler._payoutrouter = True
    logger.addHandler(handler)
