"""Bounded, paced verification of many URLs.

URLs are processed in fixed-width batches. Inside a batch the cache is
consulted first and the misses are probed concurrently; a short pause
separates batches so outbound requests never arrive in one burst.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Protocol, Sequence

from curator.config import get_config
from curator.models import FailureReason, VerificationMethod, VerificationOutcome
from curator.utils import chunk_list, normalize_url, utc_now
from curator.verification.cache import InMemoryVerificationCache, VerificationCache

logger = logging.getLogger(__name__)


class SupportsVerify(Protocol):
    async def verify(self, url: str) -> VerificationOutcome: ...


class BatchVerifier:
    """Order-preserving batch verification backed by a shared cache."""

    def __init__(
        self,
        verifier: SupportsVerify,
        cache: VerificationCache | None = None,
        *,
        batch_width: int | None = None,
        batch_delay_seconds: float | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        cfg = get_config()
        self._verifier = verifier
        self._cache = cache if cache is not None else InMemoryVerificationCache(cfg.cache_ttl_seconds)
        self._width = int(batch_width if batch_width is not None else cfg.batch_width)
        self._delay = float(batch_delay_seconds if batch_delay_seconds is not None else cfg.batch_delay_seconds)
        self._sleep = sleep
        if self._width < 1:
            raise ValueError("batch_width must be at least 1")
        if self._delay < 0:
            raise ValueError("batch_delay_seconds must be non-negative")

    @property
    def cache(self) -> VerificationCache:
        return self._cache

    @property
    def batch_width(self) -> int:
        return self._width

    async def verify_all(self, urls: Sequence[str]) -> list[VerificationOutcome]:
        """Verify *urls*; result ``i`` always belongs to ``urls[i]``."""
        urls = list(urls)
        results: list[VerificationOutcome] = []
        batches = chunk_list(urls, self._width) if urls else []
        probed = 0

        for index, batch in enumerate(batches):
            if index > 0 and self._delay > 0:
                await self._sleep(self._delay)
            outcomes, misses = await self._verify_batch(batch)
            results.extend(outcomes)
            probed += misses

        logger.info(
            "Verified %d URLs in %d batches (%d probed, %d from cache)",
            len(urls), len(batches), probed, len(urls) - probed,
        )
        return results

    async def verify_one(self, url: str) -> VerificationOutcome:
        outcomes = await self.verify_all([url])
        return outcomes[0]

    async def _verify_batch(self, batch: list[str]) -> tuple[list[VerificationOutcome], int]:
        slots: list[VerificationOutcome | None] = [None] * len(batch)
        pending: dict[str, list[int]] = {}

        for position, url in enumerate(batch):
            cached = self._cache.get(url)
            if cached is not None:
                slots[position] = cached
            else:
                # Duplicates inside one batch share a single check.
                pending.setdefault(normalize_url(url), []).append(position)

        keys = list(pending)
        fresh = await asyncio.gather(*(self._isolated(batch[pending[key][0]]) for key in keys))

        for key, outcome in zip(keys, fresh):
            first = pending[key][0]
            self._cache.put(batch[first], outcome)
            for position in pending[key]:
                slots[position] = outcome

        return [slot for slot in slots if slot is not None], len(keys)

    async def _isolated(self, url: str) -> VerificationOutcome:
        """Run one check so that its failure cannot leak into siblings."""
        try:
            return await self._verifier.verify(url)
        except Exception:
            logger.warning("Verifier raised for %s; recording network error", url, exc_info=True)
            return VerificationOutcome(
                url=url if isinstance(url, str) else "",
                is_reachable=False,
                checked_at=utc_now(),
                method=VerificationMethod.probe,
                failure_reason=FailureReason.network_error,
            )
