"""SellScope — FastAPI Application Entry Point.

Creator-commerce analytics: catalogue browsing, AI creator insights and
creator ↔ product matching with a deterministic fallback.
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.scheduler.jobs import start_scheduler, stop_scheduler
from app.api.analysis_routes import router as analysis_router
from app.api.catalog_routes import router as catalog_router
from app.api.handlers import register_exception_handlers
from app.api.responses import success_response
from app.ai.client import select_provider
from app.core.logging import get_logger

logger = get_logger("main")

APP_VERSION = "1.0.0"

IS_SERVERLESS = bool(
    os.environ.get("VERCEL") or os.environ.get("AWS_LAMBDA_FUNCTION_NAME")
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle."""
    logger.info("SellScope starting up...")
    logger.info(f"Environment: {'SERVERLESS' if IS_SERVERLESS else 'LOCAL'}, data backend: {settings.data_backend}")
    if settings.data_backend == "database":
        from app.database import init_db, test_connection

        if test_connection():
            try:
                init_db()
            except Exception as e:
                logger.error(f"Table creation failed: {e}")
        else:
            logger.error("Database NOT connected — catalogue endpoints will fail")
    if not IS_SERVERLESS:
        start_scheduler()
    yield
    if not IS_SERVERLESS:
        stop_scheduler()
    logger.info("SellScope shut down")


app = FastAPI(
    title="SellScope",
    description="Creator-commerce analytics — browse creators and products, get AI sales insights and creator ↔ product matches.",
    version=APP_VERSION,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Routers
app.include_router(analysis_router)
app.include_router(catalog_router)


@app.get("/health", tags=["System"])
async def health_check():
    """Health check endpoint."""
    provider = select_provider()
    return success_response(
        {
            "status": "healthy",
            "service": "sellscope",
            "version": APP_VERSION,
            "dataBackend": settings.data_backend,
            "aiProvider": provider.name if provider else None,
        }
    )
