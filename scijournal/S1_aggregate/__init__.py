"""Step 1: Fetch, normalize and aggregate journal feeds."""

from .aggregator import Aggregator, finalize_group, select_groups
from .cache import AggregationCache
from .errors import FeedError, FeedFetchError, FeedParseError
from .fetcher import build_client, fetch_feed
from .feedcheck import check_feed
from .rss import fetch, parse

__all__ = [
    "Aggregator",
    "AggregationCache",
    "FeedError",
    "FeedFetchError",
    "FeedParseError",
    "build_client",
    "fetch",
    "fetch_feed",
    "finalize_group",
    "parse",
    "check_feed",
    "select_groups",
]
