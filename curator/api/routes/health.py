"""Health check endpoint."""

import logging

from fastapi import APIRouter

from curator import __version__
from curator.api.models import HealthResponse
from curator.catalog.data import CATALOG
from curator.config import get_config
from curator.pipeline import get_pipeline
from curator.verification.platforms import get_platform_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health():
    """Report cache statistics, catalog size and effective verification settings."""
    status = "healthy"
    cache_stats: dict = {}

    try:
        cache_stats = get_pipeline().cache.stats()
    except Exception:
        logger.warning("Verification cache stats unavailable", exc_info=True)
        status = "degraded"

    cfg = get_config()
    return HealthResponse(
        status=status,
        version=__version__,
        cache=cache_stats,
        catalog_size=sum(len(entries) for topics in CATALOG.values() for entries in topics.values()),
        registry_platforms=len(get_platform_registry()),
        config={
            "cache_ttl_seconds": cfg.cache_ttl_seconds,
            "batch_width": cfg.batch_width,
            "batch_delay_seconds": cfg.batch_delay_seconds,
            "probe_timeout_seconds": cfg.probe_timeout_seconds,
            "always_probe": cfg.always_probe,
        },
    )
