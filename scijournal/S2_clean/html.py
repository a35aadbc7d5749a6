"""HTML and text cleaning utilities."""

import html
import re
from typing import Optional

_TAG_RE = re.compile(r"<[^>]*>")
_BLOCK_TAG_RE = re.compile(r"<\s*(br|/p|/div|/li|/h[1-6])\b[^>]*>", re.IGNORECASE)
_SCRIPT_RE = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)

# <p>Publication date: March 2025</p> - 标签不区分大小写, 标签文字区分
_PUB_DATE_RE = re.compile(r"<[pP]>Publication date: ([^<]+)</[pP]>")


def clean_whitespace(text: str) -> str:
    """Normalize whitespace."""
    if not text:
        return ""
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def strip_html(text: Optional[str]) -> str:
    """
    Remove HTML tags and decode entities into readable plain text.

    Tags are removed before entities are decoded, so an escaped "&lt;b&gt;"
    survives as literal "<b>" text.
    """
    if not text:
        return ""
    text = _COMMENT_RE.sub("", text)
    text = _SCRIPT_RE.sub("", text)
    text = _BLOCK_TAG_RE.sub(" ", text)
    text = _TAG_RE.sub("", text)
    text = html.unescape(text)
    return clean_whitespace(text.replace("\xa0", " "))


def extract_date_from_html(html_content: Optional[str]) -> Optional[str]:
    """
    Extract the issue period ScienceDirect embeds in item descriptions.

    Args:
        html_content: Raw (unstripped) description HTML

    Returns:
        The trimmed date text, e.g. "March 2025", or None
    """
    if not html_content:
        return None
    match = _PUB_DATE_RE.search(html_content)
    if match:
        value = match.group(1).strip()
        return value or None
    return None
