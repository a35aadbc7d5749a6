"""Journal registry CRUD - feed sources persisted as YAML."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .core import load_yaml, save_yaml
from .models import FeedSource, FeedType

logger = logging.getLogger(__name__)

_FEED_TYPES = {t.value for t in FeedType}


class RegistryError(Exception):
    """Base class for registry failures surfaced to the admin API."""


class JournalValidationError(RegistryError):
    """Required field missing."""


class JournalExistsError(RegistryError):
    """A journal with the same name (case-insensitive) is registered."""


class JournalNotFoundError(RegistryError):
    """No journal with that name."""


def _to_source(entry: dict) -> FeedSource | None:
    """Build a FeedSource from a YAML entry; unknown types become standard."""
    if not isinstance(entry, dict):
        return None
    entry = dict(entry)
    if entry.get("type") not in _FEED_TYPES:
        entry["type"] = FeedType.STANDARD.value
    try:
        return FeedSource(**entry)
    except ValidationError as e:
        logger.warning(f"Skipping invalid source entry {entry}: {e}")
        return None


def _validate(source: FeedSource) -> None:
    if not source.journal_name.strip() or not source.url.strip():
        raise JournalValidationError("Journal name and URL are required")


class SourceRegistry:
    """
    Ordered list of journals backed by a YAML file.

    Usage:
        registry = SourceRegistry("config/sources.yaml")
        registry.add(FeedSource(journal_name="Technovation", url="..."))
        sources = registry.list()
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()

    def load_sources(self) -> list[FeedSource]:
        """Read the file; missing or empty file -> []."""
        entries = load_yaml(self.path, default=[])
        if not isinstance(entries, list):
            logger.warning(f"{self.path} does not contain a list, ignoring")
            return []
        return [s for s in (_to_source(e) for e in entries) if s is not None]

    def save_sources(self, sources: list[FeedSource]) -> None:
        save_yaml([s.model_dump(mode="json", by_alias=True) for s in sources], self.path)

    def list(self) -> list[FeedSource]:
        with self._lock:
            return self.load_sources()

    def add(self, source: FeedSource) -> FeedSource:
        """
        Append a journal.

        Raises:
            JournalValidationError: name or url missing
            JournalExistsError: name already registered (case-insensitive)
        """
        _validate(source)
        with self._lock:
            sources = self.load_sources()
            wanted = source.journal_name.lower()
            if any(s.journal_name.lower() == wanted for s in sources):
                raise JournalExistsError("Journal with this name already exists")
            sources.append(source)
            self.save_sources(sources)
        logger.info(f"Added journal: {source.journal_name}")
        return source

    def update(self, source: FeedSource) -> FeedSource:
        """
        Replace the journal with the same (exact) name.

        Raises:
            JournalValidationError: name or url missing
            JournalNotFoundError: no such journal
        """
        _validate(source)
        with self._lock:
            sources = self.load_sources()
            for idx, existing in enumerate(sources):
                if existing.journal_name == source.journal_name:
                    sources[idx] = source
                    break
            else:
                raise JournalNotFoundError("Journal not found")
            self.save_sources(sources)
        logger.info(f"Updated journal: {source.journal_name}")
        return source

    def delete(self, journal_name: str) -> None:
        """
        Remove a journal by exact name.

        Raises:
            JournalValidationError: name missing
            JournalNotFoundError: no such journal
        """
        if not journal_name or not journal_name.strip():
            raise JournalValidationError("Journal name is required")
        with self._lock:
            sources = self.load_sources()
            remaining = [s for s in sources if s.journal_name != journal_name]
            if len(remaining) == len(sources):
                raise JournalNotFoundError("Journal not found")
            self.save_sources(remaining)
        logger.info(f"Deleted journal: {journal_name}")
