"""End-to-end resource curation.

Coordinates the flow:
  1. Select candidates for the role from the static catalog
  2. Verify their URLs in bounded batches (cache first, probe on miss)
  3. Annotate each candidate with verification status and platform metadata
  4. Attach a synthesized fallback URL to anything not confirmed reachable

Curation never fails outward: if selection or verification blows up, a small
hard-coded list of generic resources is returned instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Sequence

from curator.catalog.selector import ResourceSelector, dedupe_resources
from curator.config import get_config
from curator.models import (
    CandidateResource,
    CostTier,
    CuratedResource,
    Difficulty,
    ResourceType,
    VerificationOutcome,
)
from curator.utils import CatalogEmptyError, CuratorError, utc_now
from curator.verification.batch import BatchVerifier
from curator.verification.cache import InMemoryVerificationCache, VerificationCache
from curator.verification.fallback import FallbackSynthesizer
from curator.verification.platforms import PlatformRegistry, get_platform_registry
from curator.verification.verifier import LinkVerifier

logger = logging.getLogger(__name__)

DEFAULT_RESOURCES: tuple[CandidateResource, ...] = (
    CandidateResource(
        type=ResourceType.course,
        title="freeCodeCamp Curriculum",
        description="Free, self-paced certifications in web development, data analysis and more.",
        url="https://www.freecodecamp.org/learn/",
        provider="freeCodeCamp",
        cost_tier=CostTier.free,
        rating=4.8,
        difficulty=Difficulty.beginner,
        duration="Self-paced",
    ),
    CandidateResource(
        type=ResourceType.course,
        title="Khan Academy Computing",
        description="Foundational computer programming and computer science lessons.",
        url="https://www.khanacademy.org/computing",
        provider="Khan Academy",
        cost_tier=CostTier.free,
        rating=4.7,
        difficulty=Difficulty.beginner,
        duration="Self-paced",
    ),
)


# Category reported when the default list is served instead of a selection.
DEFAULT_LIST_CATEGORY = "default"


@dataclass(frozen=True)
class CurationResult:
    """Resources for one curation call and where they came from."""

    category: str
    resources: list[CuratedResource] = field(default_factory=list)
    degraded: bool = False


def _as_requirement_list(requirements: Sequence[str] | str | None) -> list[str]:
    """A bare string is one requirement, not a sequence of characters."""
    if not requirements:
        return []
    if isinstance(requirements, str):
        return [requirements]
    return list(requirements)


class CurationPipeline:
    """Compose selection, batch verification and fallback synthesis."""

    def __init__(
        self,
        selector: ResourceSelector | None = None,
        batch_verifier: BatchVerifier | None = None,
        synthesizer: FallbackSynthesizer | None = None,
        registry: PlatformRegistry | None = None,
        *,
        cache: VerificationCache | None = None,
        now: Callable[[], datetime] = utc_now,
    ) -> None:
        cfg = get_config()
        self._registry = registry or get_platform_registry()
        self._selector = selector or ResourceSelector()
        self._synthesizer = synthesizer or FallbackSynthesizer()
        self._now = now

        self._owned_verifier: LinkVerifier | None = None
        if batch_verifier is None:
            self._owned_verifier = LinkVerifier(registry=self._registry)
            batch_verifier = BatchVerifier(
                self._owned_verifier,
                cache if cache is not None else InMemoryVerificationCache(cfg.cache_ttl_seconds),
            )
        self._batch = batch_verifier

    @property
    def selector(self) -> ResourceSelector:
        return self._selector

    @property
    def batch_verifier(self) -> BatchVerifier:
        return self._batch

    @property
    def cache(self) -> VerificationCache:
        return self._batch.cache

    async def curate(
        self,
        role_title: str,
        description: str = "",
        requirements: Sequence[str] | str = (),
    ) -> list[CuratedResource]:
        """Return annotated resources for a role. Never raises."""
        return (await self.curate_result(role_title, description, requirements)).resources

    async def curate_result(
        self,
        role_title: str,
        description: str = "",
        requirements: Sequence[str] | str = (),
    ) -> CurationResult:
        """Like :meth:`curate`, also reporting the category served and whether
        the default list stood in for it."""
        requirements = _as_requirement_list(requirements)
        try:
            category = self._selector.match_category(role_title, description, requirements)
            candidates = self._selector.select(role_title, description, requirements)
            if not candidates:
                raise CatalogEmptyError(f"No candidates for '{role_title}'")

            outcomes = await self._batch.verify_all([c.url for c in candidates])
            curated = [self._annotate(c, o) for c, o in zip(candidates, outcomes)]
            curated = dedupe_resources(curated)
        except CuratorError as exc:
            logger.warning("Curation for %r degraded to defaults: %s", role_title, exc)
            return CurationResult(DEFAULT_LIST_CATEGORY, self.default_resources(), degraded=True)
        except Exception:
            logger.exception("Curation for %r failed; serving default resources", role_title)
            return CurationResult(DEFAULT_LIST_CATEGORY, self.default_resources(), degraded=True)

        unverified = sum(1 for r in curated if not r.verified)
        logger.info(
            "Curated %d %s resources for %r (%d with fallback links)",
            len(curated), category, role_title, unverified,
        )
        return CurationResult(category, curated)

    async def generate_learning_plan(
        self,
        role_title: str,
        description: str = "",
        requirements: Sequence[str] | str = (),
    ) -> list[dict[str, Any]]:
        """Learning-plan items ready for the persistence collaborator."""
        resources = await self.curate(role_title, description, requirements)
        return [r.to_learning_plan_item() for r in resources]

    def default_resources(self) -> list[CuratedResource]:
        """Hard-coded safety net; verified by registry shape only, no network."""
        checked_at = self._now()
        resources = []
        for candidate in DEFAULT_RESOURCES:
            verified = self._registry.match(candidate.url) is not None
            resources.append(CuratedResource.from_candidate(
                candidate,
                verified=verified,
                last_verified_at=checked_at,
                fallback_url=None if verified else self._fallback_for(candidate),
            ))
        return resources

    def _annotate(self, candidate: CandidateResource, outcome: VerificationOutcome) -> CuratedResource:
        overrides: dict[str, Any] = {}
        platform = self._registry.lookup(candidate.url)
        if platform is not None:
            if not candidate.provider:
                overrides["provider"] = platform.display_name
            if candidate.rating is None:
                overrides["rating"] = platform.base_rating
        elif not candidate.provider:
            overrides["provider"] = "Unknown"

        return CuratedResource.from_candidate(
            candidate,
            verified=outcome.is_reachable,
            last_verified_at=outcome.checked_at,
            fallback_url=None if outcome.is_reachable else self._fallback_for(candidate),
            **overrides,
        )

    def _fallback_for(self, candidate: CandidateResource) -> str:
        return self._synthesizer.synthesize(candidate.url, candidate.type, candidate.title)

    async def aclose(self) -> None:
        if self._owned_verifier is not None:
            await self._owned_verifier.aclose()


# Process-wide pipeline; its cache is shared by every caller.
_pipeline: CurationPipeline | None = None


def get_pipeline() -> CurationPipeline:
    """Get or create the global curation pipeline"""
    global _pipeline
    if _pipeline is None:
        _pipeline = CurationPipeline()
    return _pipeline


def reset_pipeline() -> None:
    """Drop the global pipeline (tests, config reloads)"""
    global _pipeline
    _pipeline = None
