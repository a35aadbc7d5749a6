"""Feed document -> entries, with shape detection.

feedparser does the XML work (encoding detection, namespaces, Atom content
types, HTML entities). Its `version` tells us which layout the document had.
"""

from __future__ import annotations

import io
from enum import Enum
from typing import Union

import feedparser

from .errors import FeedParseError

Body = Union[bytes, str]


class FeedShape(str, Enum):
    """Top-level feed layout."""
    RSS2 = "rss2"        # rss > channel > item (0.91 / 0.92 / 2.0)
    ATOM = "atom"        # feed > entry
    RDF = "rdf"          # rdf:RDF > item (RSS 0.90 / 1.0)
    UNKNOWN = "unknown"


# feedparser version -> shape (前缀匹配见 detect_shape)
RDF_VERSIONS = ("rss090", "rss10")


def detect_shape(version: str) -> FeedShape:
    """Map feedparser's `feed.version` to a FeedShape."""
    if not version:
        return FeedShape.UNKNOWN
    if version.startswith("atom"):
        return FeedShape.ATOM
    if version in RDF_VERSIONS:
        return FeedShape.RDF
    if version.startswith("rss"):
        return FeedShape.RSS2
    return FeedShape.UNKNOWN


def parse_document(body: Body, url: str = "") -> feedparser.FeedParserDict:
    """
    Run feedparser over a raw body.

    Bytes are preferred: feedparser then honours the encoding declared in
    the XML prolog.

    Raises:
        FeedParseError: empty body, or a broken document without entries
    """
    if not body or not body.strip():
        raise FeedParseError(url, "Empty feed body")
    if isinstance(body, str):
        body = body.encode("utf-8")

    # 包成流: 直接传字符串时 feedparser 会先把它当作 URL / 文件名尝试打开
    feed = feedparser.parse(io.BytesIO(body))
    if feed.bozo and not feed.entries:
        raise FeedParseError(url, f"Invalid XML: {feed.get('bozo_exception')}")
    return feed


def detect_items(feed: feedparser.FeedParserDict) -> tuple[FeedShape, list]:
    """Shape of a parsed document plus its entries; UNKNOWN yields []."""
    shape = detect_shape(feed.get("version", ""))
    if shape is FeedShape.UNKNOWN:
        return shape, []
    return shape, list(feed.entries)


def parse_feed_items(body: Body, url: str = "") -> tuple[FeedShape, list]:
    """Parse a feed body and return (shape, entries)."""
    return detect_items(parse_document(body, url))
