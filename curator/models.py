"""Data model for resource verification and curation.

Catalog entries and curated output are pydantic v2 models; verification
results and cache entries are frozen dataclasses, superseded rather than
mutated.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResourceType(str, Enum):
    course = "Course"
    tutorial = "Tutorial"
    documentation = "Documentation"
    practice = "Practice"
    certification = "Certification"
    project = "Project"


class CostTier(str, Enum):
    free = "free"
    freemium = "freemium"
    paid = "paid"


class Difficulty(str, Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


class FailureReason(str, Enum):
    """Why a URL could not be confirmed reachable.

    cors_blocked covers responses that refuse to say anything useful
    (401/403/429 from bot protection); http_error is a definite 404/410/5xx.
    """
    malformed_url = "malformed-url"
    network_error = "network-error"
    cors_blocked = "cors-blocked"
    timeout = "timeout"
    http_error = "http-error"


# Reasons that leave the question open; trusted domains get the benefit of the doubt.
INCONCLUSIVE_REASONS = frozenset({
    FailureReason.network_error,
    FailureReason.cors_blocked,
    FailureReason.timeout,
})


class VerificationMethod(str, Enum):
    """Which verification step produced an outcome."""
    syntax = "syntax"
    registry = "registry"
    probe = "probe"
    trusted_domain = "trusted-domain"


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class CandidateResource(BaseModel):
    """A static catalog entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: ResourceType
    title: str
    description: str = ""
    url: str
    provider: str = ""
    cost_tier: CostTier = Field(default=CostTier.free, alias="price")
    rating: float | None = Field(default=None, ge=0, le=5)
    difficulty: Difficulty = Difficulty.beginner
    duration: str | None = None


# ---------------------------------------------------------------------------
# Verification
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class VerificationOutcome:
    """Result of checking one URL."""

    url: str
    is_reachable: bool
    checked_at: datetime
    method: VerificationMethod
    http_status: int | None = None
    latency_ms: int | None = None
    failure_reason: FailureReason | None = None
    redirect_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["checked_at"] = self.checked_at.isoformat()
        data["method"] = self.method.value
        data["failure_reason"] = self.failure_reason.value if self.failure_reason else None
        return data


@dataclass(frozen=True)
class CacheEntry:
    key: str
    value: VerificationOutcome
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


# ---------------------------------------------------------------------------
# Curated output
# ---------------------------------------------------------------------------

class CuratedResource(CandidateResource):
    """A catalog entry annotated with its verification status.

    ``fallback_url`` is set exactly when ``verified`` is False.
    """

    verified: bool
    last_verified_at: datetime
    fallback_url: str | None = None

    @classmethod
    def from_candidate(
        cls,
        candidate: CandidateResource,
        *,
        verified: bool,
        last_verified_at: datetime,
        fallback_url: str | None = None,
        **overrides: Any,
    ) -> CuratedResource:
        fields = candidate.model_dump()
        fields.update(overrides)
        return cls(
            **fields,
            verified=verified,
            last_verified_at=last_verified_at,
            fallback_url=fallback_url,
        )

    def to_record(self) -> dict[str, Any]:
        """Serialize to the JSON shape the persistence layer stores."""
        record: dict[str, Any] = {
            "type": self.type.value,
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "verified": self.verified,
            "lastVerifiedAt": self.last_verified_at.isoformat(),
            "price": self.cost_tier.value,
            "provider": self.provider,
            "difficulty": self.difficulty.value,
        }
        if self.fallback_url:
            record["fallbackUrl"] = self.fallback_url
        if self.rating is not None:
            record["rating"] = self.rating
        if self.duration:
            record["duration"] = self.duration
        return record

    def to_learning_plan_item(self) -> dict[str, Any]:
        """Record shape plus the progress flag a learning plan tracks."""
        item = self.to_record()
        item["completed"] = False
        return item
