"""
FastAPI application entry point - folder access API
"""

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from fastapi_async_sqlalchemy import SQLAlchemyMiddleware

from app.api.middlewares.auto_commit import AutoCommitMiddleware
from app.api.routes import api_router
from app.api.utils.errors import create_error_response, error_response_from
from app.exceptions import BaseError, ErrorType
from settings import settings

logger = logging.getLogger(__name__)


def _setup_error_handlers(app: FastAPI) -> None:
    """Setup FastAPI exception handlers."""

    @app.exception_handler(HTTPException)
    async def handle_http_error(request: Request, exc: HTTPException) -> JSONResponse:
        """Handle FastAPI HTTPException errors."""
        return create_error_response(
            error_type=ErrorType.INVALID_DATA.value, message=str(exc.detail), status_code=exc.status_code or 400
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle request validation errors (bad path parameters, out of range ids)."""
        message = "; ".join(f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors())
        return create_error_response(error_type=ErrorType.INVALID_DATA.value, message=message, status_code=422)

    @app.exception_handler(BaseError)
    async def handle_app_error(request: Request, exc: BaseError) -> JSONResponse:
        """Handle custom BaseError exceptions."""
        if 400 <= exc.status_code < 500:
            logger.warning(f"A user-related (HTTP 4xx) error occurred; {exc}", extra=exc.extra)
        else:
            # The cause is logged here and never sent to the client.
            logger.exception(f"An app exception occurred; {exc}", exc_info=exc, extra=exc.extra)

        return error_response_from(exc)

    @app.exception_handler(Exception)
    async def handle_generic_error(request: Request, exc: Exception) -> JSONResponse:
        """Handle any unhandled exceptions."""
        logger.exception(f"An unhandled exception occurred; error: {exc}", exc_info=exc)

        return create_error_response(
            error_type=ErrorType.UNHANDLED_EXCEPTION.value, message="Internal server error", status_code=500
        )


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(title="Folder API", description="Authorized access to dashboard folders", version="1.0.0")

    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "BearerAuth": {
                "type": "http",
                "scheme": "bearer",
                "description": "Enter your API key (without 'Bearer ' prefix)",
            }
        }

        # Every endpoint except the health check is authenticated
        for path, methods in openapi_schema["paths"].items():
            if path == "/health":
                continue
            for method, operation in methods.items():
                if method in ["get", "post", "put", "delete", "patch"]:
                    operation["security"] = [{"BearerAuth": []}]

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    setattr(app, "openapi", custom_openapi)

    _setup_error_handlers(app)

    # Added first so it runs last, after SQLAlchemyMiddleware has opened the session
    app.add_middleware(AutoCommitMiddleware)

    app.add_middleware(
        SQLAlchemyMiddleware,
        db_url=settings.database.url,
        engine_args={
            "pool_size": settings.database.min_pool_size,
            "max_overflow": settings.database.max_pool_size - settings.database.min_pool_size,
            "pool_pre_ping": True,
            "pool_recycle": 300,
        },
    )

    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return app
