"""
FastAPI application entry point for the Target CPA Calculator API.

Configures logging, CORS, error handlers and the calculations router, and
manages the database pool through the application lifespan.

Run locally with:
    python -m cpa_calculator.main
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cpa_calculator import __version__
from cpa_calculator.api import calculations_router, register_exception_handlers
from cpa_calculator.core.config import get_settings
from cpa_calculator.core.database import init_db, close_db

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the database pool on startup and close it on shutdown.

    A database that is unreachable at startup is logged, not fatal: the
    health endpoint keeps answering and the pool is retried lazily on the
    first request that needs it.
    """
    logger.info("Target CPA Calculator API starting")
    try:
        await init_db()
        logger.info("Database connection pool initialized")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")

    yield

    logger.info("Target CPA Calculator API shutting down")
    try:
        await close_db()
        logger.info("Database connection pool closed")
    except Exception as e:
        logger.error(f"Error closing database pool: {e}")


def _cors_origins() -> list:
    try:
        return get_settings().cors_origins
    except Exception as e:
        # Settings need DATABASE_URL; CORS should not block the app from importing
        logger.warning(f"Using default CORS origins, settings unavailable: {e}")
        return ["http://localhost:3000", "http://127.0.0.1:3000"]


# Create FastAPI application
app = FastAPI(
    title="Target CPA Calculator API",
    version=__version__,
    description=(
        "Backend for the Target CPA Calculator. "
        "Stores and lists saved calculation snapshots."
    ),
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Router paths are absolute (/api/calculations), taken from the API contract
app.include_router(calculations_router, tags=["calculations"])


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring and load balancer probes."""
    return {"status": "healthy"}


@app.get("/")
async def root():
    """
    Root endpoint providing API information.

    Returns:
        Dict with API name and version
    """
    return {
        "name": "Target CPA Calculator API",
        "version": __version__,
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


# Run with uvicorn when executed directly
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "cpa_calculator.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
