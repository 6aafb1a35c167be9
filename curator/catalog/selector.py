"""Keyword-driven selection of candidate resources for a role.

Category matching is an ordered list of ``CategoryRule`` predicates; the
first rule whose keyword set intersects the query tokens wins. Specific
categories are listed before the generic software bucket so that titles such
as "Data Engineer" or "UX Engineer" land in their specialist category. The
role title is matched on its own first; description and requirements are
only consulted when the title says nothing.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from curator.catalog.data import CATALOG
from curator.config import get_config
from curator.models import CandidateResource
from curator.utils import CatalogEmptyError, SelectionError

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "software_development"

_TOKEN_RE = re.compile(r"[a-z0-9+#.]+")


@dataclass(frozen=True)
class CategoryRule:
    name: str
    keywords: frozenset[str]

    def matches(self, tokens: set[str]) -> bool:
        return not self.keywords.isdisjoint(tokens)


def _rule(name: str, *keywords: str) -> CategoryRule:
    return CategoryRule(name, frozenset(keywords))


CATEGORY_RULES: tuple[CategoryRule, ...] = (
    _rule("data_science",
          "data", "analytics", "analyst", "scientist", "sql", "statistics", "statistician",
          "machine", "ml", "ai", "tableau", "pandas", "bi", "etl"),
    _rule("design",
          "design", "designer", "ux", "ui", "figma", "sketch", "prototyping",
          "wireframe", "wireframing", "usability"),
    _rule("marketing",
          "marketing", "marketer", "seo", "sem", "social", "brand", "branding",
          "growth", "campaign", "campaigns", "advertising", "copywriter"),
    _rule("software_development",
          "software", "developer", "engineer", "engineering", "programmer", "programming",
          "coding", "web", "frontend", "backend", "fullstack", "javascript", "js",
          "typescript", "node", "node.js", "nodejs", "react", "python", "java",
          "api", "apis", "devops", "html", "css"),
)

# Sub-topic keywords per category; matching topics are pulled first.
TOPIC_KEYWORDS: dict[str, dict[str, frozenset[str]]] = {
    "software_development": {
        "javascript": frozenset({"javascript", "js", "typescript", "frontend", "web", "html", "css"}),
        "nodejs": frozenset({"node", "node.js", "nodejs", "express", "backend", "api", "apis", "server"}),
        "react": frozenset({"react", "redux", "next.js", "frontend"}),
        "python": frozenset({"python", "django", "flask", "fastapi"}),
    },
    "data_science": {
        "python_data": frozenset({"python", "pandas", "numpy", "analysis", "analyst", "analytics", "excel"}),
        "machine_learning": frozenset({"machine", "learning", "ml", "ai", "scikit-learn", "tensorflow", "pytorch"}),
        "sql": frozenset({"sql", "database", "databases", "postgresql", "mysql", "etl"}),
    },
    "design": {
        "ui_ux": frozenset({"ux", "ui", "research", "usability", "wireframe", "wireframing"}),
        "figma": frozenset({"figma", "sketch", "prototype", "prototyping"}),
    },
    "marketing": {
        "digital_marketing": frozenset({"digital", "seo", "sem", "content", "social", "analytics"}),
    },
}

CATEGORY_ALIASES: dict[str, str] = {
    "software": "software_development",
    "programming": "software_development",
    "development": "software_development",
    "data": "data_science",
    "analytics": "data_science",
    "ux": "design",
    "digital_marketing": "marketing",
}


def tokenize(*texts: str | Iterable[str] | None) -> set[str]:
    """Lower-case and split free text (or iterables of text) into tokens."""
    tokens: set[str] = set()
    for text in texts:
        if text is None:
            continue
        parts = [text] if isinstance(text, str) else list(text)
        for part in parts:
            for raw in _TOKEN_RE.findall(str(part).lower()):
                token = raw.strip(".")
                if token:
                    tokens.add(token)
    return tokens


def dedupe_resources(resources: Iterable[CandidateResource]) -> list[CandidateResource]:
    """Drop repeats by exact URL or case-insensitive title; first seen wins."""
    seen_urls: set[str] = set()
    seen_titles: set[str] = set()
    unique: list[CandidateResource] = []
    for resource in resources:
        title_key = resource.title.strip().lower()
        if resource.url in seen_urls or title_key in seen_titles:
            continue
        seen_urls.add(resource.url)
        seen_titles.add(title_key)
        unique.append(resource)
    return unique


class ResourceSelector:
    """Pick a short-list of catalog entries for a role."""

    def __init__(
        self,
        catalog: Mapping[str, Mapping[str, Sequence[CandidateResource]]] = CATALOG,
        rules: Sequence[CategoryRule] = CATEGORY_RULES,
        *,
        per_topic_limit: int | None = None,
        min_results: int | None = None,
        max_results: int | None = None,
        default_category: str = DEFAULT_CATEGORY,
    ) -> None:
        cfg = get_config()
        self._catalog = catalog
        self._rules = tuple(rules)
        self._per_topic = per_topic_limit if per_topic_limit is not None else cfg.per_topic_limit
        self._min = min_results if min_results is not None else cfg.min_results
        self._max = max_results if max_results is not None else cfg.max_results
        self._default = default_category

    def categories(self) -> list[str]:
        return list(self._catalog)

    def match_category(
        self,
        role_title: str,
        description: str = "",
        requirements: Sequence[str] = (),
    ) -> str:
        """Return the winning category name for a query."""
        for tokens in (tokenize(role_title), tokenize(role_title, description, requirements)):
            for rule in self._rules:
                if rule.matches(tokens):
                    return rule.name
        return self._default

    def select(
        self,
        role_title: str,
        description: str = "",
        requirements: Sequence[str] = (),
    ) -> list[CandidateResource]:
        """Return between ``min_results`` and ``max_results`` unique candidates."""
        tokens = tokenize(role_title, description, requirements)
        category = self.match_category(role_title, description, requirements)
        topics = self._topics(category)

        picked: list[CandidateResource] = []
        for topic in self._rank_topics(category, topics, tokens):
            picked.extend(topics[topic][: self._per_topic])
        selected = dedupe_resources(picked)

        if len(selected) < self._min and category != self._default:
            padding = [r for entries in self._topics(self._default).values() for r in entries]
            for resource in padding:
                if len(selected) >= self._min:
                    break
                selected = dedupe_resources([*selected, resource])

        selected = selected[: self._max]
        if not selected:
            raise CatalogEmptyError(f"No catalog entries for category '{category}'")

        logger.debug("Selected %d resources from '%s' for %r", len(selected), category, role_title)
        return selected

    def resources_by_category(self, name: str) -> list[CandidateResource]:
        """Every entry of a category, by name or alias.

        Unknown names fall back to the default category's first sub-topic.
        """
        key = (name or "").strip().lower().replace(" ", "_")
        key = CATEGORY_ALIASES.get(key, key)
        if key in self._catalog:
            return [r for entries in self._catalog[key].values() for r in entries]
        default_topics = self._topics(self._default)
        first = next(iter(default_topics.values()), ())
        return list(first)

    # ------------------------------------------------------------------

    def _topics(self, category: str) -> Mapping[str, Sequence[CandidateResource]]:
        try:
            return self._catalog[category]
        except KeyError as exc:
            raise SelectionError(f"Category '{category}' missing from catalog") from exc

    @staticmethod
    def _rank_topics(
        category: str,
        topics: Mapping[str, Sequence[CandidateResource]],
        tokens: set[str],
    ) -> list[str]:
        keywords = TOPIC_KEYWORDS.get(category, {})
        names = list(topics)
        # Stable: matching topics first, catalog order otherwise.
        return sorted(names, key=lambda t: keywords.get(t, frozenset()).isdisjoint(tokens))
