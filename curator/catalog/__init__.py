"""Static learning-resource catalog and keyword-based selection."""

from curator.catalog.data import CATALOG
from curator.catalog.selector import (
    CATEGORY_RULES,
    DEFAULT_CATEGORY,
    CategoryRule,
    ResourceSelector,
    dedupe_resources,
    tokenize,
)

__all__ = [
    "CATALOG",
    "CATEGORY_RULES",
    "DEFAULT_CATEGORY",
    "CategoryRule",
    "ResourceSelector",
    "dedupe_resources",
    "tokenize",
]
