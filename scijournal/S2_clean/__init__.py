"""Step 2: HTML cleaning."""

from .html import clean_whitespace, extract_date_from_html, strip_html

__all__ = ["clean_whitespace", "extract_date_from_html", "strip_html"]
