"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.container import ServiceContainer, build_container
from src.st_account.api.router import router as account_router
from src.st_catalog.api.router import router as stock_router
from src.st_common.errors import AppError, InternalError
from src.st_common.response import error_response
from src.st_gateway.api.router import router as auth_router
from src.st_gateway.middleware.request_log import RequestLogMiddleware
from src.st_trading.api.router import router as trade_router

logger = logging.getLogger("st.app")


def create_app(container: ServiceContainer | None = None) -> FastAPI:
    """Build the app. Tests pass a ready container; otherwise one is built at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logging.basicConfig(
            level=settings.LOG_LEVEL,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )
        if getattr(app.state, "container", None) is None:
            app.state.container = build_container()
        logger.info(
            "%s started: %d stocks, %d users",
            settings.APP_NAME,
            len(app.state.container.catalog),
            len(app.state.container.directory),
        )
        yield

    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(RequestLogMiddleware)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        return _render_error(request, exc)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _render_error(request, InternalError())

    app.include_router(auth_router, prefix="/api/v1")
    app.include_router(account_router, prefix="/api/v1")
    app.include_router(stock_router, prefix="/api/v1")
    app.include_router(trade_router, prefix="/api/v1")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": "0.1.0"}

    return app


def _render_error(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


app = create_app()
