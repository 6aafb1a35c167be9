"""Reachability checks for learning-resource URLs.

Checks run cheapest first and the first conclusive step wins:
1) syntax validation,
2) platform registry match (no network),
3) a bounded HEAD probe (GET when HEAD is refused),
4) optimistic pass for inconclusive probes against trusted institutions.

``LinkVerifier.verify`` never raises; every failure is captured in the
returned outcome's ``failure_reason``.
"""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime
from typing import Callable
from urllib.parse import urlsplit

import httpx

from curator.config import get_config
from curator.models import (
    INCONCLUSIVE_REASONS,
    FailureReason,
    VerificationMethod,
    VerificationOutcome,
)
from curator.utils import host_matches, utc_now
from curator.verification.platforms import PlatformRegistry, get_platform_registry

logger = logging.getLogger(__name__)

# Institutions whose pages we assume exist when a probe is inconclusive.
TRUSTED_DOMAINS: tuple[str, ...] = (
    "mit.edu",
    "stanford.edu",
    "harvard.edu",
    "berkeley.edu",
    "microsoft.com",
    "google.com",
    "amazon.com",
    "ibm.com",
    "oracle.com",
    "adobe.com",
    "figma.com",
    "sketch.com",
)

# Statuses meaning "go away" rather than "gone": bot walls, auth, throttling.
_BLOCKED_STATUSES = frozenset({401, 403, 429})
# Servers that refuse HEAD outright.
_HEAD_REJECTED_STATUSES = frozenset({405, 501})


def is_well_formed(url: object) -> bool:
    """True for absolute http(s) URLs with a host and no whitespace."""
    if not isinstance(url, str) or not url.strip():
        return False
    value = url.strip()
    if any(ch.isspace() for ch in value):
        return False
    try:
        parts = urlsplit(value)
        host = parts.hostname
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(host)


class LinkVerifier:
    """Verify a single URL.

    The httpx client is created lazily and owned by the verifier unless one
    is passed in, in which case the caller closes it.
    """

    def __init__(
        self,
        *,
        registry: PlatformRegistry | None = None,
        timeout_seconds: float | None = None,
        always_probe: bool | None = None,
        trusted_domains: tuple[str, ...] = TRUSTED_DOMAINS,
        client: httpx.AsyncClient | None = None,
        user_agent: str | None = None,
        now: Callable[[], datetime] = utc_now,
    ) -> None:
        cfg = get_config()
        self._registry = registry or get_platform_registry()
        self._timeout = float(timeout_seconds if timeout_seconds is not None else cfg.probe_timeout_seconds)
        self._always_probe = cfg.always_probe if always_probe is None else always_probe
        self._trusted = tuple(d.lower() for d in trusted_domains)
        self._user_agent = user_agent or cfg.user_agent
        self._now = now
        self._client = client
        self._owns_client = client is None

    @property
    def timeout_seconds(self) -> float:
        return self._timeout

    def is_trusted(self, host: str) -> bool:
        return any(host_matches(host, domain) for domain in self._trusted)

    async def verify(self, url: str) -> VerificationOutcome:
        """Check *url* and return a structured outcome. Never raises."""
        if not is_well_formed(url):
            return self._outcome(
                url if isinstance(url, str) else "",
                False,
                VerificationMethod.syntax,
                failure_reason=FailureReason.malformed_url,
            )

        url = url.strip()
        start = time.monotonic()

        if not self._always_probe and self._registry.match(url) is not None:
            return self._outcome(url, True, VerificationMethod.registry, latency_ms=_elapsed_ms(start))

        try:
            status, failure, redirect_url = await self._probe(url)
        except Exception:
            logger.warning("Unexpected error probing %s", url, exc_info=True)
            status, failure, redirect_url = None, FailureReason.network_error, None

        latency = _elapsed_ms(start)
        if failure is None:
            return self._outcome(
                url, True, VerificationMethod.probe,
                http_status=status, latency_ms=latency, redirect_url=redirect_url,
            )

        host = (urlsplit(url).hostname or "").lower()
        if failure in INCONCLUSIVE_REASONS and self.is_trusted(host):
            logger.debug("Probe of %s inconclusive (%s); trusting %s", url, failure.value, host)
            return self._outcome(
                url, True, VerificationMethod.trusted_domain,
                http_status=status, latency_ms=latency, failure_reason=failure,
            )

        logger.debug("Probe of %s failed: %s (status=%s)", url, failure.value, status)
        return self._outcome(
            url, False, VerificationMethod.probe,
            http_status=status, latency_ms=latency, failure_reason=failure,
        )

    async def _probe(self, url: str) -> tuple[int | None, FailureReason | None, str | None]:
        """Issue the existence check. Returns (status, failure_reason, redirect_url).

        The timeout bounds the whole exchange: every redirect hop and the
        GET retry share one deadline.
        """
        try:
            response = await asyncio.wait_for(self._exchange(url), self._timeout)
        except (httpx.TimeoutException, asyncio.TimeoutError):
            return None, FailureReason.timeout, None
        except (httpx.InvalidURL, httpx.UnsupportedProtocol, ValueError):
            return None, FailureReason.malformed_url, None
        except httpx.HTTPError:
            return None, FailureReason.network_error, None

        status = response.status_code
        redirect_url = str(response.url) if response.history else None
        if status < 400:
            return status, None, redirect_url
        if status in _BLOCKED_STATUSES:
            return status, FailureReason.cors_blocked, redirect_url
        return status, FailureReason.http_error, redirect_url

    async def _exchange(self, url: str) -> httpx.Response:
        client = self._get_client()
        response = await client.head(url, timeout=self._timeout)
        if response.status_code in _HEAD_REJECTED_STATUSES:
            async with client.stream("GET", url, timeout=self._timeout) as streamed:
                response = streamed
        return response

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                headers={"User-Agent": self._user_agent},
            )
        return self._client

    def _outcome(
        self,
        url: str,
        reachable: bool,
        method: VerificationMethod,
        **fields,
    ) -> VerificationOutcome:
        return VerificationOutcome(
            url=url,
            is_reachable=reachable,
            checked_at=self._now(),
            method=method,
            **fields,
        )

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> LinkVerifier:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)
