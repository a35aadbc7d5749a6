"""HTTP fetcher for feed documents."""

import logging
from typing import Optional

import httpx

from ..config import Settings
from .errors import FeedFetchError

logger = logging.getLogger(__name__)


def build_client(
    settings: Settings,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """HTTP client with browser-like headers (some publishers block bots)."""
    return httpx.Client(
        transport=transport,
        headers=settings.headers,
        timeout=settings.request_timeout,
        follow_redirects=True,
        max_redirects=settings.max_redirects,
    )


def fetch_feed(
    url: str,
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> bytes:
    """
    GET a feed and return its raw body. No retries.

    Bytes, not text: the parser reads the encoding from the XML prolog,
    which Content-Type often omits.

    Args:
        url: Feed URL
        settings: Timeout / redirect / header settings
        client: Optional shared client (injected in tests)

    Returns:
        Response body (undecoded)

    Raises:
        FeedFetchError: timeout, transport error, too many redirects or non-2xx
    """
    settings = settings or Settings()
    own_client = client is None
    if own_client:
        client = build_client(settings)

    try:
        resp = client.get(url)
        resp.raise_for_status()
        return resp.content
    except httpx.TimeoutException as e:
        raise FeedFetchError(url, f"Timeout after {settings.request_timeout}s") from e
    except httpx.TooManyRedirects as e:
        raise FeedFetchError(url, f"More than {settings.max_redirects} redirects") from e
    except httpx.HTTPStatusError as e:
        raise FeedFetchError(url, f"HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise FeedFetchError(url, f"Fetch error: {e}") from e
    finally:
        if own_client:
            client.close()
