"""API key checks, request throttling and request tracing for the curator API.

Curation and ad-hoc verification can fan out into dozens of outbound probes,
so they get a tighter budget than catalog browsing. Budgets are counted per
API key, or per hashed client address when demo mode turns auth off.
"""

import hashlib
import logging
import re
import secrets
import threading
import time
import uuid
from collections import defaultdict, deque

from fastapi import Depends, HTTPException, Request, Response
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from curator.config import get_config

logger = logging.getLogger(__name__)

_bearer_scheme = HTTPBearer(auto_error=False)

DEMO_PRINCIPAL = "demo"


# ---------------------------------------------------------------------------
# Path parameter validation
# ---------------------------------------------------------------------------

_CATEGORY_NAME_RE = re.compile(r"^[A-Za-z0-9 _\-]{1,60}$")


def validate_category_name(name: str) -> str:
    """Category names and aliases: letters, digits, spaces, underscores, hyphens."""
    if not _CATEGORY_NAME_RE.match(name):
        raise HTTPException(
            status_code=400,
            detail="Invalid category name. Use up to 60 letters, digits, spaces, underscores or hyphens.",
        )
    return name


# ---------------------------------------------------------------------------
# API key
# ---------------------------------------------------------------------------

def require_api_key(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> str:
    """Return the caller's principal: the API key, or ``"demo"`` in demo mode."""
    cfg = get_config()
    if cfg.demo_mode:
        return DEMO_PRINCIPAL

    if not cfg.api_key:
        logger.error("Rejecting request: CURATOR_API_KEY is empty and demo mode is off")
        raise HTTPException(status_code=500, detail="Server misconfiguration: CURATOR_API_KEY is not set.")

    supplied = credentials.credentials if credentials else ""
    if not secrets.compare_digest(supplied.encode(), cfg.api_key.encode()):
        raise HTTPException(
            status_code=401,
            detail="Invalid or missing API key. Send 'Authorization: Bearer <key>'.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return supplied


# ---------------------------------------------------------------------------
# Throttling
# ---------------------------------------------------------------------------

class SlidingWindowLimiter:
    """Counts hits per key over a rolling window. Thread-safe, process-local."""

    def __init__(self, clock=time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self.buckets: dict[str, deque[float]] = defaultdict(deque)

    def hit(self, key: str, max_requests: int, window_seconds: float = 60) -> None:
        with self._lock:
            now = self._clock()
            bucket = self.buckets[key]
            while bucket and now - bucket[0] >= window_seconds:
                bucket.popleft()
            if len(bucket) >= max_requests:
                retry_after = max(1, int(window_seconds - (now - bucket[0])) + 1)
                raise HTTPException(
                    status_code=429,
                    detail=f"Rate limit exceeded: {max_requests} requests per {int(window_seconds)}s.",
                    headers={"Retry-After": str(retry_after)},
                )
            bucket.append(now)

    def reset(self) -> None:
        with self._lock:
            self.buckets.clear()


_limiter = SlidingWindowLimiter()


def _check_rate_limit(key: str, max_requests: int, window_seconds: float = 60) -> None:
    _limiter.hit(key, max_requests, window_seconds)


def reset_rate_limits() -> None:
    _limiter.reset()


def _principal_key(request: Request, principal: str) -> str:
    if principal == DEMO_PRINCIPAL:
        return f"ip:{_hash_ip(request.client.host if request.client else None)}"
    return f"key:{hashlib.sha256(principal.encode()).hexdigest()[:12]}"


def rate_limit_curate(request: Request, principal: str = Depends(require_api_key)) -> None:
    """Budget for routes that may probe remote hosts (curate, verify)."""
    _check_rate_limit(f"curate:{_principal_key(request, principal)}", get_config().curate_rate_limit)


def rate_limit_default(request: Request, principal: str = Depends(require_api_key)) -> None:
    """Budget for catalog browsing."""
    _check_rate_limit(f"browse:{_principal_key(request, principal)}", get_config().browse_rate_limit)


# ---------------------------------------------------------------------------
# Request tracing
# ---------------------------------------------------------------------------

def _hash_ip(ip: str | None) -> str:
    """One-way, truncated digest of a client address for logs."""
    if not ip:
        return "unknown"
    return hashlib.sha256(ip.encode()).hexdigest()[:12]


async def request_logging_middleware(request: Request, call_next):
    """Propagate or mint ``X-Request-ID`` and log one line per request."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    start = time.monotonic()

    response: Response = await call_next(request)

    elapsed_ms = int((time.monotonic() - start) * 1000)
    response.headers["X-Request-ID"] = request_id
    logger.info(
        "%s %s -> %d in %dms (request_id=%s client=%s)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
        request_id,
        _hash_ip(request.client.host if request.client else None),
    )
    return response
