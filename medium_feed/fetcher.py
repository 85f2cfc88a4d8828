from __future__ import annotations

import logging
from typing import Any, Dict, List

import httpx

from .exceptions import FeedFetchError, FeedPayloadError

logger = logging.getLogger(__name__)

DEFAULT_PROXY_URL = "https://api.rss2json.com/v1/api.json"

_HEADERS = {"Accept": "application/json"}


def candidate_urls(owner_id: str) -> List[str]:
    """
    The three feed URL shapes Medium serves for one author, in priority order.
    """
    handle = (owner_id or "").strip().lstrip("@")
    return [
        f"https://medium.com/feed/@{handle}",
        f"https://medium.com/@{handle}/feed",
        f"https://{handle}.medium.com/feed",
    ]


def proxied_url(feed_url: str, proxy_url: str = DEFAULT_PROXY_URL) -> httpx.URL:
    """
    Add the feed URL as the `rss_url` query parameter of the proxy endpoint,
    keeping any query the proxy URL already carries (an API key, say).

    Raises httpx.InvalidURL when the result is not a valid URL.
    """
    return httpx.URL(proxy_url).copy_merge_params({"rss_url": feed_url})


def _get_json(feed_url: str, *, client: httpx.Client, proxy_url: str) -> Any:
    try:
        url = proxied_url(feed_url, proxy_url)
        logger.debug("GET %s", url)
        resp = client.get(url, headers=_HEADERS, follow_redirects=True)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FeedFetchError(f"Failed to fetch feed: {feed_url} ({e})") from e

    if not resp.is_success:
        raise FeedFetchError(f"HTTP {resp.status_code} for feed: {feed_url}")

    try:
        return resp.json()
    except ValueError as e:
        raise FeedPayloadError(f"Proxy returned non-JSON for feed: {feed_url}") from e


def fetch_feed_items(
    feed_url: str,
    *,
    client: httpx.Client,
    proxy_url: str = DEFAULT_PROXY_URL,
) -> List[Any]:
    """
    Fetch one feed URL through the proxy and return its raw items.

    Raises FeedFetchError on network errors or non-2xx answers, and
    FeedPayloadError when the proxy status is not "ok" or there are no items.
    """
    data = _get_json(feed_url, client=client, proxy_url=proxy_url)
    if not isinstance(data, dict):
        raise FeedPayloadError(f"Unexpected payload type {type(data).__name__} for feed: {feed_url}")

    status = data.get("status")
    items = data.get("items")
    logger.debug(
        "Proxy status=%s items=%d for %s",
        status, len(items) if isinstance(items, list) else 0, feed_url,
    )

    if status != "ok":
        msg = f"Feed parsing failed for {feed_url}: status={status!r}"
        if data.get("message"):
            msg += f" ({data['message']})"
        raise FeedPayloadError(msg)
    if not isinstance(items, list) or not items:
        raise FeedPayloadError(f"No items found in feed: {feed_url}")
    return items


def probe_feed(
    feed_url: str,
    *,
    client: httpx.Client,
    proxy_url: str = DEFAULT_PROXY_URL,
) -> Dict[str, Any]:
    """
    Debug helper: return the raw proxy payload for one feed URL.

    Never raises; failures come back as {"success": False, "error": ...}.
    """
    try:
        data = _get_json(feed_url, client=client, proxy_url=proxy_url)
    except (FeedFetchError, FeedPayloadError) as e:
        logger.error("Probe failed for %s: %s", feed_url, e)
        return {"success": False, "error": str(e)}

    items = data.get("items") if isinstance(data, dict) else None
    return {
        "success": True,
        "data": data,
        "itemsCount": len(items) if isinstance(items, list) else 0,
    }
