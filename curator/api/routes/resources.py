"""Resource curation, ad-hoc link verification, and catalog browsing."""

import logging

from fastapi import APIRouter, Depends

from curator.api.auth import rate_limit_curate, rate_limit_default, validate_category_name
from curator.api.models import (
    CategoryResponse,
    CurateRequest,
    CurateResponse,
    VerifyRequest,
    VerifyResponse,
)
from curator.pipeline import get_pipeline

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/resources", tags=["resources"])


@router.post("/curate", response_model=CurateResponse, dependencies=[Depends(rate_limit_curate)])
async def curate(request: CurateRequest):
    """Select, verify and annotate learning resources for a role."""
    pipeline = get_pipeline()
    result = await pipeline.curate_result(request.role_title, request.description, request.requirements)
    return CurateResponse(
        resources=[r.to_record() for r in result.resources],
        count=len(result.resources),
        category=result.category,
        degraded=result.degraded,
    )


@router.post("/verify", response_model=VerifyResponse, dependencies=[Depends(rate_limit_curate)])
async def verify(request: VerifyRequest):
    """Verify arbitrary URLs through the shared cache."""
    outcomes = await get_pipeline().batch_verifier.verify_all(request.urls)
    reachable = sum(1 for o in outcomes if o.is_reachable)
    return VerifyResponse(
        outcomes=[o.to_dict() for o in outcomes],
        reachable=reachable,
        unreachable=len(outcomes) - reachable,
    )


@router.get("/categories", dependencies=[Depends(rate_limit_default)])
def list_categories() -> dict[str, list[str]]:
    """Names of the catalog categories."""
    return {"categories": get_pipeline().selector.categories()}


@router.get("/categories/{name}", response_model=CategoryResponse, dependencies=[Depends(rate_limit_default)])
def category_resources(name: str):
    """Every catalog entry for a category (aliases accepted)."""
    validate_category_name(name)
    resources = get_pipeline().selector.resources_by_category(name)
    return CategoryResponse(
        category=name,
        resources=[r.model_dump(mode="json", by_alias=True) for r in resources],
    )
