"""Single-source fetch + normalize."""

import logging
from typing import Callable, Optional

from ..config import Settings
from ..models import Article, ArticleGroup, FeedSource
from .feed import Body, FeedShape, parse_feed_items
from .fetcher import fetch_feed
from .parsers import get_parser

logger = logging.getLogger(__name__)

FetchFn = Callable[[str], Body]


def parse(body: Body, source: FeedSource) -> list[Article]:
    """
    Normalize a feed document into Articles.

    Args:
        body: Raw feed body (bytes keep the declared encoding)
        source: The feed it came from (selects the parser)

    Returns:
        Articles in feed order; [] for unrecognized shapes

    Raises:
        FeedParseError: empty body, or broken XML with no entries
    """
    shape, items = parse_feed_items(body, source.url)
    if shape is FeedShape.UNKNOWN:
        logger.warning(f"[{source.journal_name}] Unrecognized feed format: {source.url}")
        return []
    logger.debug(f"[{source.journal_name}] shape={shape.value} items={len(items)}")

    parser_cls = get_parser(source.type)
    parser = parser_cls(source.journal_name, source.url)
    return parser.parse_feed(items)


def fetch(
    source: FeedSource,
    settings: Optional[Settings] = None,
    fetch_fn: Optional[FetchFn] = None,
) -> ArticleGroup:
    """
    Fetch and parse one source. Errors propagate to the caller.

    Args:
        source: Journal descriptor
        settings: Fetcher settings
        fetch_fn: url -> body; defaults to fetch_feed

    Returns:
        Unsorted, untruncated ArticleGroup
    """
    if fetch_fn is None:
        body = fetch_feed(source.url, settings=settings)
    else:
        body = fetch_fn(source.url)
    articles = parse(body, source)
    return ArticleGroup(journal_name=source.journal_name, articles=articles)
