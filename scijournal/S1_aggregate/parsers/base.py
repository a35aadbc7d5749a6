"""Base parser class."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ...core import now_iso
from ...models import Article
from ...S2_clean import strip_html

logger = logging.getLogger(__name__)

NO_TITLE = "No Title"


def text_of(entry: dict, key: str) -> str:
    """Stripped string value of `key`, "" when absent or not a string."""
    # 用 `in` 判断: FeedParserDict 取 "updated" 缺失时会回退到 "published"
    if key not in entry:
        return ""
    value = entry[key]
    return value.strip() if isinstance(value, str) else ""


class BaseParser(ABC):
    """Base class for feed entry parsers.

    Entries are feedparser entries (FeedParserDict). Subclasses only decide
    how the publication date is found.
    """

    # 按顺序探测, 第一个非空值胜出
    date_fields: tuple[str, ...] = ()

    def __init__(self, source_name: str, source_url: str = ""):
        self.source_name = source_name
        self.source_url = source_url

    @abstractmethod
    def extract_published_at(self, entry: dict, raw_description: str) -> Optional[str]:
        """Return the publication date text, or None if the entry has none."""

    def parse_feed(self, entries: list) -> list[Article]:
        """Parse all entries from feed."""
        articles = []
        for entry in entries:
            if self.should_skip_entry(entry):
                continue
            try:
                articles.append(self.parse_entry(entry))
            except (AttributeError, TypeError, ValueError) as e:
                logger.warning(f"[{self.source_name}] Parse error: {e}")
        return articles

    def should_skip_entry(self, entry: dict) -> bool:
        """Skip empty <item/> elements: nothing to show, nothing to link."""
        return not any(entry.get(key) for key in ("title", "link", "links", "id", "summary", "content"))

    def parse_entry(self, entry: dict) -> Article:
        """Parse a single feed entry into an Article."""
        title = self.extract_title(entry)
        raw_description = self.extract_raw_description(entry)

        published = self.extract_published_at(entry, raw_description)
        if not published:
            logger.info(
                f"[{self.source_name}] No date found for article: {title}, "
                "defaulting to current date"
            )
            published = now_iso()

        return Article(
            title=title,
            link=self.extract_link(entry),
            description=strip_html(raw_description),
            publication_date=published,
        )

    def extract_title(self, entry: dict) -> str:
        return text_of(entry, "title") or NO_TITLE

    def extract_link(self, entry: dict) -> str:
        """
        Link priority: entry.link > links (rel="alternate" first) > id.

        feedparser maps RSS <guid> to `id`, and only sets `link` from an
        alternate link, so Atom entries with just rel="related" fall through.
        """
        link = text_of(entry, "link")
        if link:
            return link

        links = [l for l in entry.get("links") or [] if l.get("href")]
        for candidate in links:
            if candidate.get("rel", "alternate") == "alternate":
                return candidate["href"].strip()
        if links:
            return links[0]["href"].strip()

        return text_of(entry, "id")

    def extract_raw_description(self, entry: dict) -> str:
        """
        Raw (HTML) description.

        优先级: summary (RSS description / Atom summary) > content[0].value
        """
        summary = text_of(entry, "summary")
        if summary:
            return summary
        for content in entry.get("content") or []:
            value = (content.get("value") or "").strip()
            if value:
                return value
        return ""

    def first_value(self, entry: dict, keys: tuple[str, ...]) -> Optional[str]:
        """First non-empty string value among keys."""
        for key in keys:
            value = text_of(entry, key)
            if value:
                return value
        return None
