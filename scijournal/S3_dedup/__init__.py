"""Step 3: Link-based deduplication and incremental merge."""

from .merge import DEFAULT_CAP, HeldArticles, dedupe_by_link, merge_articles, merge_groups

__all__ = [
    "DEFAULT_CAP",
    "HeldArticles",
    "dedupe_by_link",
    "merge_articles",
    "merge_groups",
]
