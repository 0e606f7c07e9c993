"""
FastAPI Application
===================

Main FastAPI app setup with all routes, middleware and error handlers.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.v1 import (
    cart_router,
    dashboard_router,
    driver_router,
    order_router,
    review_router,
    wholesale_router,
    wishlist_router,
)
from app.core.config import get_settings
from app.core.exceptions import AppError
from app.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and release the MongoDB client on shutdown."""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name}")

    yield

    from app.infrastructure.db.mongo_connection import get_mongo_client
    get_mongo_client().close()
    logger.info("MongoDB client closed")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - Error handlers rendering {"success": false, "message": ...}
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    configure_logging()
    settings = get_settings()

    application = FastAPI(
        title=settings.app_name,
        description="Marketplace backend: driver onboarding, carts, orders, reviews and analytics",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """Render typed service errors with their status code."""
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": exc.message},
        )

    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": exc.detail},
        )

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch unhandled exceptions so stack traces never reach clients."""
        logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "message": str(exc) if settings.debug else "Internal Server Error",
            },
        )

    # Register API routers
    application.include_router(driver_router, prefix="/api/v1/drivers")
    application.include_router(review_router, prefix="/api/v1/reviews")
    application.include_router(cart_router, prefix="/api/v1/cart")
    application.include_router(wishlist_router, prefix="/api/v1/wishlist")
    application.include_router(order_router, prefix="/api/v1/orders")
    application.include_router(wholesale_router, prefix="/api/v1/wholesale")
    application.include_router(dashboard_router, prefix="/api/v1/dashboard")

    @application.get("/")
    def root():
        """Root endpoint - health check."""
        return {
            "status": "running",
            "service": settings.app_name,
            "version": "1.0.0",
            "docs": "/docs",
        }

    @application.get("/health")
    def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()
