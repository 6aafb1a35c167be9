"""Same-intent replacement links for resources that failed verification.

Resolution order: the original URL's aggregator, then a default aggregator
for the resource type, then a generic web search. Every branch yields an
absolute https URL with a percent-encoded query, and nothing here raises.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from curator.models import ResourceType
from curator.utils import host_matches, host_of

logger = logging.getLogger(__name__)

# (domain, search URL template); {q} receives the encoded title.
_AGGREGATOR_SEARCH: list[tuple[str, str]] = [
    ("udemy.com", "https://www.udemy.com/courses/search/?q={q}"),
    ("coursera.org", "https://www.coursera.org/search?query={q}"),
    ("youtube.com", "https://www.youtube.com/results?search_query={q}"),
    ("youtu.be", "https://www.youtube.com/results?search_query={q}"),
    ("freecodecamp.org", "https://www.freecodecamp.org/news/search/?query={q}"),
    ("codecademy.com", "https://www.codecademy.com/catalog?search={q}"),
    ("edx.org", "https://www.edx.org/search?q={q}"),
    ("khanacademy.org", "https://www.khanacademy.org/search?page_search_query={q}"),
    ("pluralsight.com", "https://www.pluralsight.com/search?q={q}"),
    ("datacamp.com", "https://www.datacamp.com/search?q={q}"),
    ("linkedin.com", "https://www.linkedin.com/learning/search?keywords={q}"),
    ("skillshare.com", "https://www.skillshare.com/en/search?query={q}"),
    ("developer.mozilla.org", "https://developer.mozilla.org/en-US/search?q={q}"),
    ("w3schools.com", "https://www.w3schools.com/search/search_result.php?q={q}"),
    ("github.com", "https://github.com/search?q={q}&type=repositories"),
]

_TYPE_SEARCH: dict[str, str] = {
    ResourceType.course.value.lower(): "https://www.coursera.org/search?query={q}",
    ResourceType.tutorial.value.lower(): "https://www.youtube.com/results?search_query={q}",
    ResourceType.documentation.value.lower(): "https://developer.mozilla.org/en-US/search?q={q}",
    ResourceType.certification.value.lower(): "https://www.coursera.org/search?query={q}",
    ResourceType.practice.value.lower(): "https://www.freecodecamp.org/news/search/?query={q}",
    ResourceType.project.value.lower(): "https://github.com/search?q={q}&type=repositories",
    "book": "https://www.google.com/search?tbm=bks&q={q}",
}

_WEB_SEARCH = "https://www.google.com/search?q={q}"
_LAST_RESORT = "https://www.google.com/search?q=learning+resources"


def _encode(text: str) -> str:
    return quote(" ".join(text.split()), safe="")


def _type_key(resource_type: object) -> str:
    if isinstance(resource_type, ResourceType):
        return resource_type.value.lower()
    return str(resource_type or "").strip().lower()


class FallbackSynthesizer:
    """Deterministic fallback URL builder."""

    def synthesize(self, original_url: object, resource_type: object, title: object) -> str:
        try:
            return self._synthesize(original_url, resource_type, title)
        except Exception:
            logger.warning("Fallback synthesis failed for %r", original_url, exc_info=True)
            return _LAST_RESORT

    def _synthesize(self, original_url: object, resource_type: object, title: object) -> str:
        title_text = str(title or "").strip()
        type_key = _type_key(resource_type)
        query = title_text or type_key

        if not query:
            return _LAST_RESORT

        host = host_of(original_url) if isinstance(original_url, str) else ""
        if host and title_text:
            for domain, template in _AGGREGATOR_SEARCH:
                if host_matches(host, domain):
                    return template.format(q=_encode(title_text))

        template = _TYPE_SEARCH.get(type_key)
        if template is not None:
            return template.format(q=_encode(query))

        combined = " ".join(part for part in (title_text, type_key) if part)
        return _WEB_SEARCH.format(q=_encode(combined))


_default_synthesizer = FallbackSynthesizer()


def synthesize_fallback_url(original_url: object, resource_type: object, title: object) -> str:
    """Module-level shortcut around the default synthesizer."""
    return _default_synthesizer.synthesize(original_url, resource_type, title)
