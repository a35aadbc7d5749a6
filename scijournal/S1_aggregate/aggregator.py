"""Aggregate all journal feeds into per-journal article groups."""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

from ..config import Settings
from ..core import sort_by_date
from ..models import ArticleGroup, FeedSource
from . import rss
from .cache import AggregationCache

logger = logging.getLogger(__name__)


def finalize_group(group: ArticleGroup, max_articles: int) -> ArticleGroup:
    """Newest first (stable for unparseable dates), then truncate."""
    articles = sort_by_date(group.articles)[:max_articles]
    return ArticleGroup(journal_name=group.journal_name, articles=articles)


def select_groups(groups: list[ArticleGroup], drop_empty: bool = True) -> list[ArticleGroup]:
    """
    Drop empty groups, unless every group is empty.

    When nothing could be fetched the UI still needs the journal headers,
    so the unfiltered list is returned.
    """
    if not drop_empty:
        return groups
    non_empty = [g for g in groups if g.articles]
    return non_empty if non_empty else groups


class Aggregator:
    """
    Owns the cache slot and the fetch loop.

    Sources are fetched one at a time with `settings.request_delay` seconds
    between requests. `settings.max_workers > 1` switches to a bounded thread
    pool (result order is kept). A failing source becomes an empty group.
    """

    def __init__(
        self,
        load_sources: Callable[[], list[FeedSource]],
        cache: Optional[AggregationCache] = None,
        settings: Optional[Settings] = None,
        fetch_fn: Optional[rss.FetchFn] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.settings = settings or Settings()
        self.cache = cache or AggregationCache(ttl=self.settings.cache_ttl)
        self._load_sources = load_sources
        self._fetch_fn = fetch_fn
        self._sleep = sleep
        self._refresh_lock = threading.Lock()

    def get_groups(self) -> list[ArticleGroup]:
        """Cached result, or a fresh aggregation on a miss.

        Concurrent misses share one refresh: late callers wait on the lock and
        then find the cache already filled.
        """
        cached = self.cache.get()
        if cached is not None:
            return cached

        with self._refresh_lock:
            cached = self.cache.get()
            if cached is not None:
                return cached
            logger.info("Cache miss or expired, fetching fresh RSS data")
            return self.refresh()

    def refresh(self) -> list[ArticleGroup]:
        """Run a full pass over all sources and store the result."""
        sources = self._load_sources()
        groups = self._collect(sources)
        groups = [finalize_group(g, self.settings.max_articles) for g in groups]
        result = select_groups(groups, self.settings.drop_empty_groups)
        self.cache.set(result)
        return result

    def fetch_source(self, source: FeedSource) -> ArticleGroup:
        """Fetch + normalize one source. Errors propagate."""
        return rss.fetch(source, settings=self.settings, fetch_fn=self._fetch_fn)

    def _collect(self, sources: list[FeedSource]) -> list[ArticleGroup]:
        if not sources:
            return []

        workers = min(max(1, self.settings.max_workers), len(sources))
        if workers == 1:
            groups = []
            for idx, source in enumerate(sources):
                if idx > 0 and self.settings.request_delay > 0:
                    self._sleep(self.settings.request_delay)
                groups.append(self._fetch_isolated(source))
            return groups

        def _task(source: FeedSource) -> ArticleGroup:
            group = self._fetch_isolated(source)
            if self.settings.request_delay > 0:
                self._sleep(self.settings.request_delay)
            return group

        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(_task, sources))

    def _fetch_isolated(self, source: FeedSource) -> ArticleGroup:
        logger.info(f"Fetching feed: {source.journal_name}")
        try:
            group = self.fetch_source(source)
        except Exception as e:
            logger.error(f"Failed to fetch articles from {source.journal_name}: {e}")
            return ArticleGroup(journal_name=source.journal_name, articles=[])
        logger.info(
            f"Successfully fetched {len(group.articles)} articles from {source.journal_name}"
        )
        return group
