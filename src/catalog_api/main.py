"""
Module: main.py
Description: FastAPI application entry point for the Catalog API.

Builds the application with its routes, registries and error handlers,
and exposes a Lambda handler through Mangum.

Key Components:
- create_app(): Application factory (settings and stores injectable)
- app: Module-level application for uvicorn
- handler: AWS Lambda entry point

Dependencies: FastAPI, Starlette, Mangum
Author: Catalog API Team
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from mangum import Mangum
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api.config.settings import Settings, settings as default_settings
from catalog_api.errors import CatalogError
from catalog_api.handlers.info import router as info_router
from catalog_api.handlers.products import router as products_router
from catalog_api.handlers.users import router as users_router
from catalog_api.storage import build_stores
from catalog_api.storage.base import ProductStore, UserStore
from catalog_api.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if location:
        return f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
    return f"Invalid request: {first.get('msg', 'invalid value')}"


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Render domain errors as {"message": ...} with their fixed status."""
    logger.warning(
        "Request rejected",
        status_code=exc.status_code,
        detail=exc.message,
        path=request.url.path,
        method=request.method
    )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors (unknown route, bad method) the same way."""
    logger.warning(
        "HTTP exception occurred",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
        method=request.method
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Map request validation failures to 400."""
    message = _validation_message(exc)
    logger.warning(
        "Request validation failed",
        detail=message,
        path=request.url.path,
        method=request.method
    )
    return JSONResponse(status_code=400, content={"message": message})


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected exceptions and return a generic 500."""
    logger.error(
        "Unhandled exception occurred",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        method=request.method
    )
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(
    settings: Optional[Settings] = None,
    user_store: Optional[UserStore] = None,
    product_store: Optional[ProductStore] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use; defaults to the environment-loaded ones
        user_store: User registry; built from settings when omitted
        product_store: Product registry; built from settings when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)

    if user_store is None or product_store is None:
        built_users, built_products = build_stores(settings)
        user_store = user_store or built_users
        product_store = product_store or built_products

    app = FastAPI(
        title=settings.app_name,
        description="Product catalog with API-key authentication",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.settings = settings
    app.state.user_store = user_store
    app.state.product_store = product_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(info_router)
    app.include_router(users_router)
    app.include_router(products_router)

    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info(
        "Catalog API configured",
        version=settings.app_version,
        stage=settings.stage,
        storage=settings.storage_backend
    )
    return app


app = create_app()

# Lambda handler
handler = Mangum(app, lifespan="off")
