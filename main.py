#main.py
import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.providers.factory import ProcessorSelector
from middleware import RequestContextMiddleware
from routes.catalog import router as catalog_router
from routes.health import router as health_router
from routes.transfer import router as transfer_router
from services.observability import configure_logging
from settings import settings, validate_env_settings

logger = logging.getLogger("payoutrouter")


def create_app(selector: ProcessorSelector | None = None) -> FastAPI:
    configure_logging()
    validate_env_settings()

    app = FastAPI(title="Payout Router API", version=settings.APP_VERSION)
    app.state.selector = selector or ProcessorSelector()

    app.add_middleware(RequestContextMiddleware)

    # -----------------------------
    # ROUTERS
    # -----------------------------

    app.include_router(transfer_router)
    app.include_router(catalog_router)
    app.include_router(health_router)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        problems = [
            f"{'.'.join(str(p) for p in err.get('loc', ())[1:])}: {err.get('msg')}"
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content={
                "status": "FAILED",
                "message": "Invalid request",
                "providerName": "System",
                "errorCode": "INVALID_REQUEST",
                "errorDetails": "; ".join(problems),
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("unhandled error: path=%s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    logger.info("payout router started: env=%s providers=%s", settings.ENV, settings.PAYOUT_ENABLED_PROVIDERS)
    return app


app = create_app()


def _resolve_port() -> int:
    return int((os.getenv("PORT") or "8080").strip())


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=_resolve_port())
