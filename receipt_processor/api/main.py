"""Entry point for the FastAPI application.

``create_app`` builds the application, wires the receipt store into
``app.state`` and registers routers, middleware and exception handlers.
The module-level ``app`` is what uvicorn serves; tests build their own
app with a fresh store.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request

from receipt_processor.api.error_handlers import register_exception_handlers
from receipt_processor.api.routes.receipts import router as receipts_router
from receipt_processor.core.config import Settings, settings as default_settings
from receipt_processor.core.logging_config import configure_logging
from receipt_processor.core.observability import init_sentry
from receipt_processor.models.schemas import HealthResponse
from receipt_processor.services.receipt_store import ReceiptStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ReceiptStore] = None,
) -> FastAPI:
    """Build a FastAPI application.

    :param settings: Configuration to use; defaults to the process-wide
        ``settings``.
    :param store: Receipt store to serve from; a new empty store is
        created when omitted.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifecycle."""
        configure_logging(settings)
        logger.info("Starting Receipt Processor application environment=%s", settings.ENVIRONMENT)
        if init_sentry("api", settings):
            logger.info("Sentry SDK initialized (api)")
        yield
        logger.info("Shutting down...")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.receipt_store = store if store is not None else ReceiptStore()

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        client = request.client.host if request.client else None
        logger.info(
            "Request received method=%s path=%s remote=%s",
            request.method,
            request.url.path,
            client,
        )
        response = await call_next(request)
        logger.info(
            "Request completed method=%s path=%s status=%s",
            request.method,
            request.url.path,
            response.status_code,
        )
        return response

    register_exception_handlers(app)
    app.include_router(receipts_router)

    @app.api_route("/health", methods=["GET", "HEAD"], response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint (supports GET & HEAD)."""
        return HealthResponse(
            status="healthy",
            environment=settings.ENVIRONMENT,
            version=settings.VERSION,
        )

    return app


app = create_app()


def run() -> None:
    """Serve ``app`` with uvicorn on the configured host and port."""
    configure_logging(default_settings)
    logger.info("Server starting port=%s", default_settings.PORT)
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
