"""Feed pipeline exceptions."""


class FeedError(Exception):
    """Base class for per-feed failures (fetch or parse)."""

    def __init__(self, url: str, message: str):
        super().__init__(message)
        self.url = url
        self.message = message


class FeedFetchError(FeedError):
    """Network error, timeout, too many redirects or non-2xx status."""


class FeedParseError(FeedError):
    """Response body is not a parseable RSS / Atom / RDF document."""
