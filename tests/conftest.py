"""Shared test fixtures for the curator test suite."""

import asyncio
import os
from datetime import datetime, timezone

import httpx
import pytest

# Ensure test environment variables are set before any config import
os.environ.setdefault("CURATOR_API_KEY", "test-api-key")
os.environ.setdefault("CURATOR_DEMO_MODE", "true")
os.environ.setdefault("CURATOR_BATCH_DELAY_SECONDS", "0")

from curator.models import FailureReason, VerificationMethod, VerificationOutcome  # noqa: E402

FIXED_NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Monotonic clock stand-in that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubVerifier:
    """Async verifier driven by a per-URL table; records every call.

    ``delays`` lets individual URLs finish later than others, ``errors``
    makes individual URLs raise.
    """

    def __init__(self, unreachable=(), delays=None, errors=()) -> None:
        self.unreachable = set(unreachable)
        self.delays = dict(delays or {})
        self.errors = set(errors)
        self.calls: list[str] = []
        self.completed: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def verify(self, url: str) -> VerificationOutcome:
        self.calls.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(url, 0))
            if url in self.errors:
                raise RuntimeError(f"boom: {url}")
            reachable = url not in self.unreachable
            return make_outcome(url, reachable)
        finally:
            self.in_flight -= 1
            self.completed.append(url)


def make_outcome(url: str, reachable: bool = True, **fields) -> VerificationOutcome:
    fields.setdefault("checked_at", FIXED_NOW)
    fields.setdefault("method", VerificationMethod.probe)
    if not reachable:
        fields.setdefault("failure_reason", FailureReason.network_error)
    return VerificationOutcome(url=url, is_reachable=reachable, **fields)


def mock_client(handler) -> httpx.AsyncClient:
    """AsyncClient whose requests are answered by *handler*."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True)


class RecordingHandler:
    """MockTransport handler that answers 200 unless a rule says otherwise."""

    def __init__(self, responses=None, raises=None) -> None:
        self.responses = dict(responses or {})
        self.raises = dict(raises or {})
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if url in self.raises:
            raise self.raises[url]
        return httpx.Response(self.responses.get(url, 200))

    @property
    def urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def stub_verifier_factory():
    """Build a StubVerifier: ``stub_verifier_factory(unreachable=..., delays=..., errors=...)``."""
    return StubVerifier


@pytest.fixture
def handler_factory():
    """Build a RecordingHandler for httpx.MockTransport."""
    return RecordingHandler


@pytest.fixture
def link_verifier_factory():
    """LinkVerifier wired to a mock transport with a frozen clock."""
    from curator.verification.verifier import LinkVerifier

    def _factory(handler, **kwargs):
        kwargs.setdefault("now", lambda: FIXED_NOW)
        return LinkVerifier(client=mock_client(handler), **kwargs)

    return _factory


@pytest.fixture
def pipeline_factory(link_verifier_factory):
    """CurationPipeline over a mock transport, a fake clock and no batch pause."""
    from curator.catalog.data import CATALOG
    from curator.catalog.selector import ResourceSelector
    from curator.pipeline import CurationPipeline
    from curator.verification.batch import BatchVerifier
    from curator.verification.cache import InMemoryVerificationCache

    def _factory(handler, catalog=CATALOG, clock=None, ttl_seconds=24 * 60 * 60, **selector_kwargs):
        verifier = link_verifier_factory(handler)
        cache = InMemoryVerificationCache(ttl_seconds, clock=clock or FakeClock())
        batch = BatchVerifier(verifier, cache, batch_width=5, batch_delay_seconds=0)
        selector = ResourceSelector(catalog, **selector_kwargs)
        return CurationPipeline(selector, batch, now=lambda: FIXED_NOW)

    return _factory


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Isolate config and pipeline singletons between tests."""
    import curator.config
    import curator.pipeline

    curator.config._config = None
    curator.pipeline._pipeline = None
    yield
    curator.config._config = None
    curator.pipeline._pipeline = None


@pytest.fixture
def outcome_factory():
    """Build a VerificationOutcome: ``outcome_factory(url, reachable=True, **fields)``."""
    return make_outcome


@pytest.fixture
def fixed_now():
    return FIXED_NOW
