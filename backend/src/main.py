"""Checkout Core - FastAPI application

Exposes the catalog use cases over HTTP and maps domain errors to JSON
responses:
- NotificationError -> 400 with the aggregated validation message
- ProductNotFoundError -> 404
- DomainError -> 400
- SQLAlchemyError -> 500
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from config import get_settings
from database import init_db
from domain.shared.models import DomainError, NotificationError, ProductNotFoundError
from observability.logging_config import configure_logging
from catalog.router import router as products_router


settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler.

    - Startup: configure logging, create tables
    - Shutdown: log only
    """
    configure_logging(level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)
    logger.info("Checkout API starting up...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    init_db()

    yield

    logger.info("Checkout API shutting down...")


_docs_enabled = settings.ENVIRONMENT != "production"

app = FastAPI(
    title="Checkout Core API",
    description="Self-validating checkout, customer and product entities",
    version="0.1.0",
    debug=settings.DEBUG,
    docs_url="/docs" if _docs_enabled else None,
    redoc_url="/redoc" if _docs_enabled else None,
    openapi_url="/openapi.json" if _docs_enabled else None,
    lifespan=lifespan,
)


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

@app.exception_handler(NotificationError)
async def notification_exception_handler(
    request: Request,
    exc: NotificationError
) -> JSONResponse:
    """Return the flat validation message of a rejected entity."""
    logger.info(f"Validation failed on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "validation_error", "detail": exc.message},
    )


@app.exception_handler(ProductNotFoundError)
async def not_found_exception_handler(
    request: Request,
    exc: ProductNotFoundError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "not_found", "detail": str(exc)},
    )


@app.exception_handler(DomainError)
async def domain_exception_handler(
    request: Request,
    exc: DomainError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "domain_error", "detail": str(exc)},
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(
    request: Request,
    exc: SQLAlchemyError
) -> JSONResponse:
    """Handle database errors.

    Logs the full error but returns a generic message to prevent
    information leakage.
    """
    logger.error(
        f"Database error on {request.method} {request.url.path}",
        exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "database_error",
            "message": "A database error occurred. Please try again later.",
        },
    )


# =============================================================================
# ROUTERS
# =============================================================================

app.include_router(products_router)


@app.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
    )
