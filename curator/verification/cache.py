"""Time-bounded cache of URL verification outcomes.

Expired entries are evicted lazily when read; there is no background sweep.
The store is unbounded, which is fine while keys come from the static
catalog. A bounded LRU+TTL store can replace ``InMemoryVerificationCache``
by implementing the same ``VerificationCache`` contract.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable

from curator.models import CacheEntry, VerificationOutcome
from curator.utils import normalize_url

logger = logging.getLogger(__name__)


class VerificationCache(ABC):
    """Contract shared by verification cache backends.

    ``get`` must treat an expired entry exactly like a missing one.
    """

    @abstractmethod
    def get(self, url: str) -> VerificationOutcome | None: ...

    @abstractmethod
    def put(self, url: str, outcome: VerificationOutcome) -> None: ...

    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def clear(self) -> None: ...

    def stats(self) -> dict[str, int]:
        return {"size": self.size(), "reachable": 0, "unreachable": 0}


class InMemoryVerificationCache(VerificationCache):
    """Dict-backed TTL cache keyed by normalized URL.

    No lock: concurrent writers for the same key resolve last-write-wins.
    """

    def __init__(
        self,
        ttl_seconds: float = 24 * 60 * 60,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must be non-negative")
        self._ttl = float(ttl_seconds)
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def get(self, url: str) -> VerificationOutcome | None:
        key = normalize_url(url)
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            del self._entries[key]
            logger.debug("Evicted expired verification for %s", key)
            return None
        return entry.value

    def put(self, url: str, outcome: VerificationOutcome) -> None:
        key = normalize_url(url)
        self._entries[key] = CacheEntry(
            key=key,
            value=outcome,
            expires_at=self._clock() + self._ttl,
        )

    def size(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def stats(self) -> dict[str, int]:
        """Counts over live entries; expired ones are evicted on the way."""
        now = self._clock()
        for key in [k for k, e in self._entries.items() if e.is_expired(now)]:
            del self._entries[key]

        reachable = sum(1 for e in self._entries.values() if e.value.is_reachable)
        return {
            "size": len(self._entries),
            "reachable": reachable,
            "unreachable": len(self._entries) - reachable,
        }
