from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

import httpx

from .exceptions import FeedFetchError, FeedPayloadError
from .fetcher import DEFAULT_PROXY_URL, candidate_urls, fetch_feed_items
from .models import FALLBACK_POST, Post
from .normalizer import to_post
from .parser import parse_item

logger = logging.getLogger(__name__)

DEFAULT_AUTHOR = "Achraf Chehboun"
DEFAULT_LIMIT = 10


@dataclass
class IngestOptions:
    proxy_url: str = DEFAULT_PROXY_URL
    default_author: str = DEFAULT_AUTHOR
    timeout: Optional[float] = None


class FeedIngestor:
    """
    High-level API: fetch a Medium author's feed and return a list of normalized Post.

    Pipeline: candidates → proxy fetch → first non-empty success → parse → normalize.
    Falls back to `FALLBACK_POST` when every candidate fails, so `fetch` never raises.
    """

    def __init__(
        self,
        *,
        proxy_url: str = DEFAULT_PROXY_URL,
        default_author: str = DEFAULT_AUTHOR,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.options = IngestOptions(
            proxy_url=proxy_url,
            default_author=default_author,
            timeout=timeout,
        )
        # Injected clients are reused and left open; otherwise one per fetch.
        self._client = client

    @classmethod
    def from_settings(cls, settings: Any, *, client: Optional[httpx.Client] = None) -> "FeedIngestor":
        return cls(
            proxy_url=settings.proxy_url,
            default_author=settings.default_author,
            timeout=settings.timeout_s,
            client=client,
        )

    def fetch(self, owner_id: str, limit: int = DEFAULT_LIMIT) -> List[Post]:
        if limit < 1:
            logger.warning("limit=%s is below 1, using 1", limit)
            limit = 1

        if self._client is not None:
            return self._fetch_with(self._client, owner_id, limit)
        with httpx.Client(timeout=self.options.timeout) as client:
            return self._fetch_with(client, owner_id, limit)

    def _fetch_with(self, client: httpx.Client, owner_id: str, limit: int) -> List[Post]:
        for feed_url in candidate_urls(owner_id):
            logger.info("Trying feed URL: %s", feed_url)
            try:
                items = fetch_feed_items(feed_url, client=client, proxy_url=self.options.proxy_url)
            except (FeedFetchError, FeedPayloadError) as e:
                logger.warning("%s", e)
                continue

            posts = [
                to_post(parse_item(raw), i, default_author=self.options.default_author)
                for i, raw in enumerate(items[:limit])
            ]
            logger.info("Loaded %d post(s) from %s", len(posts), feed_url)
            return posts

        logger.warning("All feed URLs failed for %r, returning fallback post", owner_id)
        return [FALLBACK_POST]


def fetch_medium_posts(owner_id: str, limit: int = DEFAULT_LIMIT, **kwargs: Any) -> List[Post]:
    """Shortcut for `FeedIngestor(**kwargs).fetch(owner_id, limit)`."""
    return FeedIngestor(**kwargs).fetch(owner_id, limit)
