"""Tests for the data model and shared utilities."""

import pytest
from pydantic import ValidationError

from curator.models import (
    CacheEntry,
    CandidateResource,
    CostTier,
    CuratedResource,
    FailureReason,
    ResourceType,
    VerificationMethod,
    VerificationOutcome,
)
from curator.utils import chunk_list, host_matches, host_of, normalize_url


def _candidate(**overrides):
    fields = {"type": "Tutorial", "title": "Flexbox", "url": "https://example.com/flex"}
    fields.update(overrides)
    return CandidateResource(**fields)


class TestCandidateResource:
    def test_price_alias(self):
        assert _candidate(price="freemium").cost_tier == CostTier.freemium
        assert _candidate(cost_tier="paid").cost_tier == CostTier.paid

    def test_rating_bounds(self):
        with pytest.raises(ValidationError):
            _candidate(rating=5.5)

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            _candidate(type="Podcast")

    def test_frozen(self):
        with pytest.raises(ValidationError):
            _candidate().title = "changed"


class TestCuratedResource:
    def test_from_candidate_with_overrides(self, fixed_now):
        curated = CuratedResource.from_candidate(
            _candidate(), verified=False, last_verified_at=fixed_now,
            fallback_url="https://www.google.com/search?q=Flexbox", provider="Unknown",
        )
        assert curated.provider == "Unknown"
        assert curated.type == ResourceType.tutorial

        record = curated.to_record()
        assert record["fallbackUrl"] == "https://www.google.com/search?q=Flexbox"
        assert "rating" not in record
        assert "duration" not in record

    def test_learning_plan_item(self, fixed_now):
        curated = CuratedResource.from_candidate(_candidate(), verified=True, last_verified_at=fixed_now)
        item = curated.to_learning_plan_item()
        assert item["completed"] is False
        assert item["lastVerifiedAt"] == fixed_now.isoformat()


class TestVerificationOutcome:
    def test_to_dict(self, fixed_now):
        outcome = VerificationOutcome(
            url="https://x.example", is_reachable=False, checked_at=fixed_now,
            method=VerificationMethod.probe, http_status=404, failure_reason=FailureReason.http_error,
        )
        data = outcome.to_dict()
        assert data["failure_reason"] == "http-error"
        assert data["method"] == "probe"
        assert data["checked_at"] == fixed_now.isoformat()

    def test_cache_entry_expiry_boundary(self, outcome_factory):
        entry = CacheEntry("k", outcome_factory("https://x.example"), expires_at=10.0)
        assert not entry.is_expired(9.99)
        assert entry.is_expired(10.0)


class TestUrlHelpers:
    @pytest.mark.parametrize("raw, expected", [
        ("HTTPS://Example.COM/Path/", "https://example.com/Path"),
        ("https://example.com/a?b=1#frag", "https://example.com/a?b=1"),
        ("  https://example.com  ", "https://example.com"),
        ("not a url", "not a url"),
        ("", ""),
    ])
    def test_normalize_url(self, raw, expected):
        assert normalize_url(raw) == expected

    def test_host_helpers(self):
        assert host_of("https://WWW.Udemy.com/course/x") == "www.udemy.com"
        assert host_of("http://[::1") == ""
        assert host_matches("www.udemy.com", "udemy.com")
        assert not host_matches("notudemy.com", "udemy.com")

    def test_chunk_list(self):
        assert chunk_list([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
        with pytest.raises(ValueError):
            chunk_list([1], 0)
