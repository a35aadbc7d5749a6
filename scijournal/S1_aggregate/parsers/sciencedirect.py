"""ScienceDirect parser."""

import logging
from typing import Optional

from .base import BaseParser
from ...S2_clean import extract_date_from_html

logger = logging.getLogger(__name__)


class ScienceDirectParser(BaseParser):
    """Parser for rss.sciencedirect.com feeds.

    The issue period ("March 2025") is written into the description body as
    <p>Publication date: ...</p>; the structured date fields are often
    missing or wrong, so they are only a fallback.
    """

    # prism:coverDate -> prism_coverdate; dc:date 被 feedparser 归入 updated
    date_fields = ("prism_coverdate", "dc_date", "updated", "prism_publicationdate")

    def extract_published_at(self, entry: dict, raw_description: str) -> Optional[str]:
        from_html = extract_date_from_html(raw_description)
        if from_html:
            logger.debug(f"[{self.source_name}] Found date in HTML content: {from_html}")
            return from_html
        return self.first_value(entry, self.date_fields)
