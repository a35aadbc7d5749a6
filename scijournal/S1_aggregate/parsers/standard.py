"""Standard RSS 2.0 / Atom / RDF parser."""

from typing import Optional

from .base import BaseParser


class StandardParser(BaseParser):
    """Parser for feeds that publish their dates in structured fields."""

    # feedparser: pubDate / Atom published -> published, dc:date / Atom updated -> updated
    date_fields = ("published", "updated")

    def extract_published_at(self, entry: dict, raw_description: str) -> Optional[str]:
        return self.first_value(entry, self.date_fields)
