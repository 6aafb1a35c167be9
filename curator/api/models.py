"""Pydantic request/response models for the curator API."""

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# Curation
# ---------------------------------------------------------------------------

class CurateRequest(BaseModel):
    role_title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)
    requirements: list[str] = Field(default_factory=list, max_length=50)

    @field_validator("requirements")
    @classmethod
    def strip_requirements(cls, v: list[str]) -> list[str]:
        return [item.strip() for item in v if item and item.strip()]


class CurateResponse(BaseModel):
    resources: list[dict]
    count: int = 0
    category: str = ""
    degraded: bool = False


# ---------------------------------------------------------------------------
# Verification
# ---------------------------------------------------------------------------

class VerifyRequest(BaseModel):
    urls: list[str] = Field(..., min_length=1, max_length=50)


class VerifyResponse(BaseModel):
    outcomes: list[dict]
    reachable: int = 0
    unreachable: int = 0


# ---------------------------------------------------------------------------
# Catalog / health
# ---------------------------------------------------------------------------

class CategoryResponse(BaseModel):
    category: str
    resources: list[dict] = []


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str = ""
    cache: dict = {}
    catalog_size: int = 0
    registry_platforms: int = 0
    config: dict = {}
