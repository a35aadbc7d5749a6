"""Feed item parsers - one per feed type."""

from .base import BaseParser
from .sciencedirect import ScienceDirectParser
from .standard import StandardParser
from ...models import FeedType

# 源类型 -> 解析器映射
PARSERS = {
    FeedType.STANDARD.value: StandardParser,
    FeedType.SCIENCEDIRECT.value: ScienceDirectParser,
}


def get_parser(feed_type) -> type[BaseParser]:
    """Get parser class for a feed type; unknown types parse as standard."""
    key = feed_type.value if isinstance(feed_type, FeedType) else feed_type
    return PARSERS.get(key, StandardParser)


__all__ = ["BaseParser", "StandardParser", "ScienceDirectParser", "PARSERS", "get_parser"]
