"""Runtime settings - loaded from environment variables.

Every value has a default so the service runs without any configuration:
- SCIJOURNAL_SOURCES_FILE: YAML list of journals (default config/sources.yaml)
- SCIJOURNAL_CACHE_TTL: seconds an aggregation result stays fresh
- SCIJOURNAL_REQUEST_DELAY: pause between feed requests (politeness)
- AGGREGATE_MAX_WORKERS: 1 = sequential, >1 = bounded thread pool

A local .env file is honoured (python-dotenv), real env vars take precedence.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"
DEFAULT_SOURCES_FILE = CONFIG_DIR / "sources.yaml"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
DEFAULT_ACCEPT = "application/xml, application/rss+xml, text/xml, */*"


@dataclass
class Settings:
    """Aggregation and API settings."""
    sources_file: Path = DEFAULT_SOURCES_FILE
    cache_ttl: float = 3600.0          # 1 小时
    request_delay: float = 0.5         # 每个源之间的间隔 (秒)
    request_timeout: float = 15.0
    max_redirects: int = 5
    max_articles: int = 12             # 每个期刊保留的文章数
    page_size: int = 6
    max_workers: int = 1
    drop_empty_groups: bool = True
    log_dir: Path = Path("logs")
    headers: dict = field(default_factory=lambda: {
        "User-Agent": DEFAULT_USER_AGENT,
        "Accept": DEFAULT_ACCEPT,
    })


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Invalid {name}={value!r}, using {default}")
        return default


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return max(minimum, int(value))
    except ValueError:
        logger.warning(f"Invalid {name}={value!r}, using {default}")
        return default


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if not value:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    """Build Settings from the environment (.env is loaded first if present)."""
    load_dotenv()
    sources_file = os.environ.get("SCIJOURNAL_SOURCES_FILE")
    return Settings(
        sources_file=Path(sources_file) if sources_file else DEFAULT_SOURCES_FILE,
        cache_ttl=_env_float("SCIJOURNAL_CACHE_TTL", 3600.0),
        request_delay=_env_float("SCIJOURNAL_REQUEST_DELAY", 0.5),
        request_timeout=_env_float("SCIJOURNAL_REQUEST_TIMEOUT", 15.0),
        max_redirects=_env_int("SCIJOURNAL_MAX_REDIRECTS", 5),
        max_articles=_env_int("SCIJOURNAL_MAX_ARTICLES", 12, minimum=1),
        page_size=_env_int("SCIJOURNAL_PAGE_SIZE", 6, minimum=1),
        max_workers=_env_int("AGGREGATE_MAX_WORKERS", 1, minimum=1),
        drop_empty_groups=_env_bool("SCIJOURNAL_DROP_EMPTY_GROUPS", True),
        log_dir=Path(os.environ.get("SCIJOURNAL_LOG_DIR", "logs")),
    )
