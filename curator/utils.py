"""
Utility functions for the resource curator

Provides logging setup, URL normalization, batching, and the exception hierarchy
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, TypeVar
from urllib.parse import urlsplit, urlunsplit

T = TypeVar("T")


# ═══════════════════════════════════════════════════════════════════
# LOGGING
# ═══════════════════════════════════════════════════════════════════

def setup_logging(log_level: str = "INFO", log_file: Optional[str | Path] = None) -> None:
    """Configure logging for the curator"""
    level = getattr(logging, log_level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def get_logger(name: str) -> logging.Logger:
    """Get logger instance for module"""
    return logging.getLogger(name)


# ═══════════════════════════════════════════════════════════════════
# URL NORMALIZATION
# ═══════════════════════════════════════════════════════════════════

def normalize_url(url: str) -> str:
    """Normalize a URL into a stable cache key.

    Lower-cases scheme and host, drops the fragment and any trailing slash on
    the path. Strings that cannot be split come back stripped but otherwise
    untouched so malformed input still gets a deterministic key.
    """
    if not url:
        return ""
    value = str(url).strip()
    try:
        parts = urlsplit(value)
    except ValueError:
        return value
    if not parts.scheme or not parts.netloc:
        return value

    path = parts.path.rstrip("/")
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), path, parts.query, ""))


def host_of(url: str) -> str:
    """Return the lower-cased hostname of *url*, or "" if there is none."""
    try:
        return (urlsplit(str(url).strip()).hostname or "").lower()
    except ValueError:
        return ""


def host_matches(host: str, domain: str) -> bool:
    """True when *host* is *domain* or one of its subdomains."""
    return host == domain or host.endswith("." + domain)


# ═══════════════════════════════════════════════════════════════════
# TIME
# ═══════════════════════════════════════════════════════════════════

def utc_now() -> datetime:
    """Timezone-aware current UTC time"""
    return datetime.now(timezone.utc)


# ═══════════════════════════════════════════════════════════════════
# BATCH PROCESSING
# ═══════════════════════════════════════════════════════════════════

def chunk_list(items: list[T], chunk_size: int) -> list[list[T]]:
    """Split list into chunks"""
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")
    return [items[i:i + chunk_size] for i in range(0, len(items), chunk_size)]


# ═══════════════════════════════════════════════════════════════════
# EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════

class CuratorError(Exception):
    """Base exception for the curator"""
    pass


class CatalogEmptyError(CuratorError):
    """The catalog produced no candidates for a query"""
    pass


class SelectionError(CuratorError):
    """Candidate selection failed"""
    pass
