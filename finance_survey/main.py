"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from finance_survey.core.config import settings
from finance_survey.core.exceptions import AppException, ValidationError
from finance_survey.core.logging import configure_logging
from finance_survey.db.mongodb import close_mongodb, connect_mongodb
from finance_survey.db.postgres import close_postgres
from finance_survey.db.redis import close_redis, connect_redis
from finance_survey.domains.auth.router import router as auth_router
from finance_survey.domains.dashboard.router import router as dashboard_router
from finance_survey.domains.survey.models import verify_answer_fields
from finance_survey.domains.survey.router import router as survey_router
from finance_survey.middlewares.security import RateLimitMiddleware, SecurityHeadersMiddleware

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan events."""
    logger.info("Starting Finance Survey in %s mode...", settings.environment)

    await connect_mongodb()
    await connect_redis()

    yield

    logger.info("Shutting down Finance Survey...")
    await close_mongodb()
    await close_redis()
    await close_postgres()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging()
    verify_answer_fields()

    app = FastAPI(
        title="Finance Survey",
        description="Patient satisfaction survey for the hospital finance counter",
        version=APP_VERSION,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    # First added = last executed
    app.add_middleware(SecurityHeadersMiddleware)

    if settings.is_production:
        app.add_middleware(RateLimitMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
        expose_headers=["Content-Disposition", "X-RateLimit-Limit", "X-RateLimit-Remaining"],
    )

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        if exc.status_code >= 500:
            logger.error("%s on %s: %s", exc.error_code, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "code": exc.error_code,
                    "message": exc.message,
                    "details": exc.details,
                }
            },
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"field": ".".join(str(part) for part in err["loc"][1:]), "message": err["msg"]}
            for err in exc.errors()
        ]
        return await app_exception_handler(
            request,
            ValidationError("Request validation failed", details={"errors": errors}),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        if settings.is_development:
            return JSONResponse(
                status_code=500,
                content={
                    "error": {
                        "code": "INTERNAL_ERROR",
                        "message": str(exc),
                        "details": {"type": type(exc).__name__},
                    }
                },
            )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "environment": settings.environment}

    @app.get("/")
    async def root():
        return {
            "name": "Finance Survey API",
            "version": APP_VERSION,
            "docs": "/docs" if settings.is_development else None,
        }

    _register_routers(app)

    return app


def _register_routers(app: FastAPI) -> None:
    """Register all API routers."""
    api_prefix = settings.api_prefix

    app.include_router(survey_router, prefix=api_prefix, tags=["Survey"])
    app.include_router(auth_router, prefix=f"{api_prefix}/auth", tags=["Auth"])
    app.include_router(dashboard_router, prefix=api_prefix, tags=["Dashboard"])
