"""Single-feed check for the admin "test feed" action.

Lenient field defaults instead of the per-type parsers, so an operator can
check a URL before adding it to the registry.
"""

import logging
from typing import Optional

from ..config import Settings
from ..core import now_iso
from ..models import Article, FeedTestResult
from ..S2_clean import strip_html
from .errors import FeedParseError
from .feed import Body, FeedShape, detect_items, parse_document
from .fetcher import fetch_feed
from .rss import FetchFn

logger = logging.getLogger(__name__)

SAMPLE_SIZE = 3


def parse_simple(body: Body, url: str = "") -> list[Article]:
    """
    Parse any feed feedparser understands.

    Raises:
        FeedParseError: broken body, or a well-formed document that is not a feed
    """
    shape, entries = detect_items(parse_document(body, url))
    if shape is FeedShape.UNKNOWN:
        raise FeedParseError(url, "Failed to parse RSS feed: not an RSS, Atom or RDF document")

    articles = []
    for entry in entries:
        description = entry.get("summary") or entry.get("description") or ""
        articles.append(Article(
            title=entry.get("title") or "No Title",
            link=entry.get("link", ""),
            description=strip_html(description) or "No Description",
            publication_date=entry.get("published") or entry.get("updated") or now_iso(),
        ))
    return articles


def check_feed(
    url: str,
    settings: Optional[Settings] = None,
    fetch_fn: Optional[FetchFn] = None,
) -> FeedTestResult:
    """
    Fetch and parse one URL, report count and sample titles.

    Raises:
        FeedError: fetch or parse failure
    """
    body = fetch_fn(url) if fetch_fn else fetch_feed(url, settings=settings)
    articles = parse_simple(body, url)
    logger.info(f"Feed test {url}: {len(articles)} articles")
    return FeedTestResult(
        success=True,
        article_count=len(articles),
        message=f"Successfully parsed RSS feed with {len(articles)} articles",
        sample_titles=[a.title for a in articles[:SAMPLE_SIZE]],
    )
