"""Search and pagination over a journal's articles."""

import math

from .models import Article, ArticleGroup, ArticlePage

DEFAULT_PAGE_SIZE = 6


def search_articles(articles: list[Article], query: str = "") -> list[Article]:
    """Case-insensitive substring match on title and description."""
    query = (query or "").strip().lower()
    if not query:
        return list(articles)
    return [
        a for a in articles
        if query in a.title.lower() or query in a.description.lower()
    ]


def paginate(
    group: ArticleGroup,
    page: int = 1,
    per_page: int = DEFAULT_PAGE_SIZE,
    query: str = "",
) -> ArticlePage:
    """
    One page of a group after search filtering.

    Pages are 1-based; a page past the end is returned empty with the
    real total, so the UI can still render "Page x of y".
    """
    per_page = max(1, per_page)
    page = max(1, page)
    matches = search_articles(group.articles, query)
    start = (page - 1) * per_page
    return ArticlePage(
        journal_name=group.journal_name,
        page=page,
        per_page=per_page,
        total=len(matches),
        total_pages=max(1, math.ceil(len(matches) / per_page)),
        articles=matches[start:start + per_page],
    )


def find_group(groups: list[ArticleGroup], journal_name: str) -> ArticleGroup | None:
    """Group by journal name, case-insensitive."""
    wanted = journal_name.lower()
    for group in groups:
        if group.journal_name.lower() == wanted:
            return group
    return None
