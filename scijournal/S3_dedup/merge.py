"""Incremental merge of freshly fetched articles into a held set."""

from typing import Iterable, Optional

from ..core import sort_by_date
from ..models import Article, ArticleGroup

DEFAULT_CAP = 6


def dedupe_by_link(articles: Iterable[Article]) -> list[Article]:
    """Keep the first occurrence of each link."""
    seen: set[str] = set()
    unique = []
    for article in articles:
        if article.link in seen:
            continue
        seen.add(article.link)
        unique.append(article)
    return unique


def merge_articles(
    held: list[Article],
    fresh: list[Article],
    cap: int = DEFAULT_CAP,
) -> list[Article]:
    """
    Merge one journal's fresh articles into the held list.

    Articles whose link is not held yet are prepended, duplicates are
    dropped (first occurrence wins), the result is re-sorted newest first
    and truncated to `cap`.
    """
    held_links = {a.link for a in held}
    new_items = [a for a in fresh if a.link not in held_links]
    combined = dedupe_by_link(new_items + list(held))
    return sort_by_date(combined)[:cap]


def merge_groups(
    held: dict[str, list[Article]],
    groups: list[ArticleGroup],
    cap: int = DEFAULT_CAP,
) -> dict[str, list[Article]]:
    """Apply merge_articles per journal; journals absent from `groups` are kept."""
    merged = dict(held)
    for group in groups:
        merged[group.journal_name] = merge_articles(
            held.get(group.journal_name, []), group.articles, cap
        )
    return merged


class HeldArticles:
    """
    Articles retained across polling cycles.

    Usage:
        held = HeldArticles(cap=6)
        held.update(aggregator.get_groups())
        held.get("Technovation")
    """

    def __init__(self, cap: int = DEFAULT_CAP):
        self.cap = cap
        self._articles: dict[str, list[Article]] = {}

    def update(self, groups: list[ArticleGroup]) -> dict[str, list[Article]]:
        self._articles = merge_groups(self._articles, groups, self.cap)
        return self._articles

    def get(self, journal_name: str) -> list[Article]:
        return list(self._articles.get(journal_name, []))

    def as_groups(self, order: Optional[list[str]] = None) -> list[ArticleGroup]:
        """Held articles as groups, in `order` if given (unknown names skipped)."""
        names = order if order is not None else list(self._articles)
        return [
            ArticleGroup(journal_name=name, articles=list(self._articles[name]))
            for name in names
            if name in self._articles
        ]
