"""Static registry of pre-vetted educational platforms.

Each entry carries display metadata plus a URL shape pattern. A URL counts as
a registry match only when its host belongs to the platform AND the URL has
the expected shape, so a bare domain root does not pass for a course page.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from curator.models import CostTier
from curator.utils import host_matches, host_of


@dataclass(frozen=True)
class PlatformInfo:
    domain: str
    display_name: str
    cost_tier: CostTier
    base_rating: float
    url_shape: re.Pattern[str]

    def matches_shape(self, url: str) -> bool:
        return bool(self.url_shape.match(url))


def _platform(domain: str, name: str, tier: CostTier, rating: float, shape: str) -> PlatformInfo:
    return PlatformInfo(domain, name, tier, rating, re.compile(shape, re.IGNORECASE))


_PLATFORMS: tuple[PlatformInfo, ...] = (
    # Free
    _platform("freecodecamp.org", "freeCodeCamp", CostTier.free, 4.8,
              r"^https://(www\.)?freecodecamp\.org/(learn|news)"),
    _platform("youtube.com", "YouTube", CostTier.free, 4.5,
              r"^https://(www\.|m\.)?youtube\.com/(watch|playlist)"),
    _platform("youtu.be", "YouTube", CostTier.free, 4.5,
              r"^https://youtu\.be/[\w-]+"),
    _platform("khanacademy.org", "Khan Academy", CostTier.free, 4.7,
              r"^https://(www\.)?khanacademy\.org/\w"),
    _platform("kaggle.com", "Kaggle Learn", CostTier.free, 4.6,
              r"^https://(www\.)?kaggle\.com/learn"),
    _platform("github.com", "GitHub", CostTier.free, 4.7,
              r"^https://(www\.)?github\.com/[\w.-]+"),
    _platform("developer.mozilla.org", "MDN Web Docs", CostTier.free, 4.9,
              r"^https://developer\.mozilla\.org/[\w-]+/docs/"),
    _platform("theodinproject.com", "The Odin Project", CostTier.free, 4.8,
              r"^https://(www\.)?theodinproject\.com/(paths|lessons)"),
    # Freemium
    _platform("codecademy.com", "Codecademy", CostTier.freemium, 4.4,
              r"^https://(www\.)?codecademy\.com/(learn|courses)"),
    _platform("edx.org", "edX", CostTier.freemium, 4.6,
              r"^https://(www\.)?edx\.org/(course|learn|professional-certificate)"),
    _platform("coursera.org", "Coursera", CostTier.freemium, 4.5,
              r"^https://(www\.)?coursera\.org/(learn|specializations|professional-certificates)/"),
    _platform("datacamp.com", "DataCamp", CostTier.freemium, 4.4,
              r"^https://(www\.)?datacamp\.com/(courses|tracks)"),
    _platform("w3schools.com", "W3Schools", CostTier.freemium, 4.2,
              r"^https://(www\.)?w3schools\.com/\w"),
    _platform("scrimba.com", "Scrimba", CostTier.freemium, 4.5,
              r"^https://(www\.)?scrimba\.com/\w"),
    # Paid
    _platform("udemy.com", "Udemy", CostTier.paid, 4.3,
              r"^https://(www\.)?udemy\.com/course/"),
    _platform("pluralsight.com", "Pluralsight", CostTier.paid, 4.4,
              r"^https://(www\.)?pluralsight\.com/(courses|paths)"),
    _platform("linkedin.com", "LinkedIn Learning", CostTier.paid, 4.3,
              r"^https://(www\.)?linkedin\.com/learning/"),
    _platform("skillshare.com", "Skillshare", CostTier.paid, 4.2,
              r"^https://(www\.)?skillshare\.com/(en/)?classes"),
)


class PlatformRegistry:
    """Lookup over the static platform table. Holds no mutable state."""

    def __init__(self, platforms: tuple[PlatformInfo, ...] | list[PlatformInfo] = _PLATFORMS) -> None:
        # Longest domain first so subdomain-specific entries win.
        self._platforms = sorted(platforms, key=lambda p: len(p.domain), reverse=True)

    def lookup(self, url: str) -> PlatformInfo | None:
        """Return the platform owning the host of *url*, ignoring URL shape."""
        host = host_of(url)
        if not host:
            return None
        for platform in self._platforms:
            if host_matches(host, platform.domain):
                return platform
        return None

    def match(self, url: str) -> PlatformInfo | None:
        """Return the platform only when host AND URL shape both match."""
        platform = self.lookup(url)
        if platform is not None and platform.matches_shape(url.strip()):
            return platform
        return None

    def domains(self) -> list[str]:
        return sorted(p.domain for p in self._platforms)

    def __len__(self) -> int:
        return len(self._platforms)


_default_registry: PlatformRegistry | None = None


def get_platform_registry() -> PlatformRegistry:
    """Return module-level registry singleton."""
    global _default_registry
    if _default_registry is None:
        _default_registry = PlatformRegistry()
    return _default_registry


def platform_info(url: str) -> PlatformInfo | None:
    """Shortcut for metadata lookup by URL host."""
    return get_platform_registry().lookup(url)
