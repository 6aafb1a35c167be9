"""Curator FastAPI application.

Run with ``curator-api`` (or ``uvicorn curator.api.main:app``).
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from curator import __version__
from curator.api.auth import request_logging_middleware
from curator.config import get_config
from curator.pipeline import get_pipeline, reset_pipeline
from curator.utils import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared pipeline on startup; close its HTTP client on shutdown."""
    config = get_config()
    setup_logging(config.log_level, config.log_file)

    if not config.demo_mode and not config.api_key:
        logger.critical("CURATOR_API_KEY is not set and CURATOR_DEMO_MODE is off; refusing to start.")
        sys.exit(1)

    app.state.pipeline = get_pipeline()
    logger.info(
        "Curator API %s up: cache_ttl=%ss batch_width=%d probe_timeout=%ss always_probe=%s",
        __version__, config.cache_ttl_seconds, config.batch_width,
        config.probe_timeout_seconds, config.always_probe,
    )
    try:
        yield
    finally:
        await app.state.pipeline.aclose()
        reset_pipeline()
        logger.info("Curator API stopped; verification cache dropped")


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    app = FastAPI(
        title="Resource Curator API",
        description="Learning-resource selection with link verification and fallback links",
        version=__version__,
        lifespan=lifespan,
    )

    config = get_config()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID", "Retry-After"],
    )
    app.add_middleware(BaseHTTPMiddleware, dispatch=request_logging_middleware)

    from curator.api.routes.health import router as health_router
    from curator.api.routes.resources import router as resources_router

    app.include_router(health_router)
    app.include_router(resources_router)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    config = get_config()
    uvicorn.run(
        "curator.api.main:app",
        host=config.api_host,
        port=config.api_port,
        log_level=config.log_level.lower(),
    )
