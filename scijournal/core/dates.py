"""Publication date utilities."""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from functools import cmp_to_key
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

# "March 2025", "1 March 2025", "March 1, 2025" ...
_TEXT_FORMATS = (
    "%Y-%m-%d",
    "%B %Y",
    "%b %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
)


def now_iso() -> str:
    """
    Current instant as ISO-8601 UTC string.

    Returns:
        e.g. "2025-03-01T08:00:00.000Z"
    """
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def parse_publication_date(text: Optional[str]) -> Optional[datetime]:
    """
    Best-effort parse of a feed date string.

    Tries RFC 822 (RSS pubDate), ISO-8601 (Atom/dc:date) and a few
    human-readable forms used by journal feeds. Naive results are taken as UTC.

    Args:
        text: Raw date string

    Returns:
        Timezone-aware datetime, or None if unparseable
    """
    if not text or not isinstance(text, str):
        return None
    text = text.strip()
    if not text:
        return None

    parsed = _parse_rfc822(text) or _parse_iso(text) or _parse_text(text)
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_rfc822(text: str) -> Optional[datetime]:
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None


def _parse_iso(text: str) -> Optional[datetime]:
    candidate = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(candidate)
    except ValueError:
        return None


def _parse_text(text: str) -> Optional[datetime]:
    for fmt in _TEXT_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def compare_dates(a: Optional[datetime], b: Optional[datetime]) -> int:
    """Newest first; 0 when either side is unknown."""
    if a is None or b is None:
        return 0
    return (b > a) - (b < a)


def sort_by_date(items: Sequence[T], get_date=lambda item: item.publication_date) -> list[T]:
    """
    Sort items by descending publication date.

    The sort is stable and an unparseable date compares equal to anything,
    so such items keep their relative input order.
    """
    decorated = [(parse_publication_date(get_date(item)), item) for item in items]
    decorated.sort(key=cmp_to_key(lambda x, y: compare_dates(x[0], y[0])))
    return [item for _, item in decorated]
