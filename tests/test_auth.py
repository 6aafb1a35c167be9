"""Tests for API authentication and rate limiting."""

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from curator.api.auth import (
    SlidingWindowLimiter,
    _check_rate_limit,
    _hash_ip,
    _limiter,
    reset_rate_limits,
    validate_category_name,
)


@pytest.fixture(autouse=True)
def _enforce_auth(monkeypatch):
    """Run every test here with demo mode off and a known key."""
    import curator.config

    monkeypatch.setenv("CURATOR_DEMO_MODE", "false")
    monkeypatch.setenv("CURATOR_API_KEY", "test-api-key")
    curator.config._config = None
    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture
def client():
    from curator.api.main import create_app
    return TestClient(create_app())


@pytest.fixture
def auth_headers():
    return {"Authorization": "Bearer test-api-key"}


class TestApiKey:
    def test_missing_key_rejected(self, client):
        response = client.get("/api/resources/categories")
        assert response.status_code == 401

    def test_wrong_key_rejected(self, client):
        response = client.get("/api/resources/categories", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401

    def test_valid_key_accepted(self, client, auth_headers):
        response = client.get("/api/resources/categories", headers=auth_headers)
        assert response.status_code == 200

    def test_health_is_open(self, client):
        assert client.get("/api/health").status_code == 200

    def test_unconfigured_key_is_server_error(self, monkeypatch, client):
        import curator.config

        monkeypatch.setenv("CURATOR_API_KEY", "")
        curator.config._config = None
        response = client.get("/api/resources/categories", headers={"Authorization": "Bearer x"})
        assert response.status_code == 500

    def test_demo_mode_skips_auth(self, monkeypatch, client):
        import curator.config

        monkeypatch.setenv("CURATOR_DEMO_MODE", "true")
        curator.config._config = None
        assert client.get("/api/resources/categories").status_code == 200


class TestRateLimiting:
    def test_allows_up_to_limit(self):
        for _ in range(3):
            _check_rate_limit("test:key", max_requests=3)
        assert len(_limiter.buckets["test:key"]) == 3

    def test_rejects_over_limit(self):
        for _ in range(3):
            _check_rate_limit("test:key", max_requests=3)
        with pytest.raises(HTTPException) as exc_info:
            _check_rate_limit("test:key", max_requests=3)
        assert exc_info.value.status_code == 429

    def test_window_expiry(self):
        _check_rate_limit("test:key", max_requests=1, window_seconds=0)
        _check_rate_limit("test:key", max_requests=1, window_seconds=0)

    def test_keys_are_independent(self):
        _check_rate_limit("a", max_requests=1)
        _check_rate_limit("b", max_requests=1)

    def test_catalog_endpoint_limited(self, client, auth_headers):
        statuses = [
            client.get("/api/resources/categories", headers=auth_headers).status_code
            for _ in range(61)
        ]
        assert statuses[:60] == [200] * 60
        assert statuses[60] == 429


class TestIpHashing:
    def test_hash_is_stable_and_short(self):
        assert _hash_ip("10.0.0.1") == _hash_ip("10.0.0.1")
        assert len(_hash_ip("10.0.0.1")) == 12
        assert _hash_ip("10.0.0.1") != "10.0.0.1"

    def test_missing_ip(self):
        assert _hash_ip(None) == "unknown"


class TestLimiter:
    def test_retry_after_header(self):
        now = [100.0]
        limiter = SlidingWindowLimiter(clock=lambda: now[0])
        limiter.hit("k", max_requests=1, window_seconds=60)
        now[0] += 20
        with pytest.raises(HTTPException) as exc_info:
            limiter.hit("k", max_requests=1, window_seconds=60)
        assert exc_info.value.headers["Retry-After"] == "41"

    def test_old_hits_slide_out(self):
        now = [0.0]
        limiter = SlidingWindowLimiter(clock=lambda: now[0])
        limiter.hit("k", max_requests=1, window_seconds=60)
        now[0] = 60.0
        limiter.hit("k", max_requests=1, window_seconds=60)
        assert len(limiter.buckets["k"]) == 1

    def test_limit_read_from_config(self, monkeypatch, client, auth_headers):
        import curator.config

        monkeypatch.setenv("CURATOR_BROWSE_RATE_LIMIT", "2")
        curator.config._config = None
        statuses = [
            client.get("/api/resources/categories", headers=auth_headers).status_code
            for _ in range(3)
        ]
        assert statuses == [200, 200, 429]


class TestCategoryNameValidation:
    @pytest.mark.parametrize("name", ["data_science", "Data Science", "ui-ux"])
    def test_accepted(self, name):
        assert validate_category_name(name) == name

    @pytest.mark.parametrize("name", ["", "x" * 61, "data;drop", "<script>"])
    def test_rejected(self, name):
        with pytest.raises(HTTPException) as exc_info:
            validate_category_name(name)
        assert exc_info.value.status_code == 400

    def test_route_rejects_bad_name(self, client, auth_headers):
        response = client.get("/api/resources/categories/bad%3Bname", headers=auth_headers)
        assert response.status_code == 400


class TestRequestId:
    def test_incoming_id_echoed(self, client):
        response = client.get("/api/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

    def test_id_minted_when_absent(self, client):
        assert len(client.get("/api/health").headers["X-Request-ID"]) == 32
