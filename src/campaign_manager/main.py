"""
FastAPI application entry point.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from campaign_manager import __version__
from campaign_manager.auth.router import router as users_router
from campaign_manager.campaigns.router import router as campaigns_router
from campaign_manager.config import get_settings
from campaign_manager.context import ServiceContext, create_context
from campaign_manager.finance.router import router as finance_router
from campaign_manager.messaging.router import router as messages_router
from campaign_manager.notifications.router import router as notifications_router
from campaign_manager.outreach.router import router as outreach_router
from campaign_manager.shared.correlation import CorrelationIdMiddleware
from campaign_manager.shared.exceptions import AppError, ErrorCode
from campaign_manager.shared.logging import get_logger, setup_logging

logger = get_logger(__name__)

ERROR_STATUS: dict[ErrorCode, int] = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_PAYLOAD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorCode.VALIDATION_ERROR: status.HTTP_409_CONFLICT,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    setup_logging()
    settings = get_settings()

    logger.info(
        "Application starting",
        extra={"env": settings.app_env, "storage_backend": settings.storage_backend},
    )

    owns_context = getattr(app.state, "context", None) is None
    if owns_context:
        app.state.context = create_context(settings)

    yield

    logger.info("Shutting down application")
    if owns_context:
        app.state.context.close()
    logger.info("Application shutdown complete")


def create_app(context: ServiceContext | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        context: Pre-built service context. When omitted, one is created from
            settings at startup and closed at shutdown.
    """
    settings = get_settings()

    app = FastAPI(
        title="Campaign Manager API",
        description="Campaign, finance and voter outreach record keeping",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    if context is not None:
        app.state.context = context

    # Map domain exceptions to HTTP responses
    @app.exception_handler(AppError)
    async def _app_error(_: Request, exc: AppError) -> JSONResponse:
        return JSONResponse(status_code=ERROR_STATUS[exc.code], content={"detail": exc.to_dict()})

    # Request validation (FastAPI/Pydantic) -> same error shape, InvalidPayload tag
    @app.exception_handler(RequestValidationError)
    async def _request_validation(_: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {
                "field": ".".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "detail": {
                    "code": ErrorCode.INVALID_PAYLOAD.value,
                    "message": "Request validation failed",
                    "errors": errors,
                }
            },
        )

    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users_router)
    app.include_router(campaigns_router)
    app.include_router(finance_router)
    app.include_router(outreach_router)
    app.include_router(messages_router)
    app.include_router(notifications_router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
