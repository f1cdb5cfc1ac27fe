"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tradedesk.app_context import get_app_context
from tradedesk.config.settings import get_settings
from tradedesk.config.logging_config import setup_logging
from tradedesk.api.routers import (
    journal_router,
    portfolio_router,
    prices_router,
    trades_router,
)
from tradedesk.core.exceptions import AppError, NotFoundError, StorageError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    context = get_app_context()
    context.initialize()
    yield
    # Shutdown
    context.close()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Trading journal, portfolio tracker, and trade log",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(journal_router)
app.include_router(portfolio_router)
app.include_router(prices_router)
app.include_router(trades_router)


def _status_for(exc: AppError) -> int:
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, StorageError):
        return 503
    return 400


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=_status_for(exc),
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    context = get_app_context()
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "storage": context.backend,
        "docs": "/docs",
    }
