from typing import Any, Callable, Dict, List

import httpx
import pytest


def make_item(n: int, **overrides: Any) -> Dict[str, Any]:
    item = {
        "title": f"Post number {n}",
        "pubDate": f"2025-09-{10 + n:02d} 12:00:00",
        "link": f"https://medium.com/@someone/post-{n}",
        "author": "someone",
        "thumbnail": "",
        "description": f"<p>Body of <b>post</b> {n} &amp; more.</p>",
        "categories": ["python", "web"],
    }
    item.update(overrides)
    return item


def ok_payload(items: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"status": "ok", "feed": {"url": "https://medium.com/feed/@someone"}, "items": items}


class Recorder:
    """MockTransport handler that records requests and answers from a route function."""

    def __init__(self, route: Callable[[httpx.Request], httpx.Response]) -> None:
        self.route = route
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.route(request)

    @property
    def feed_urls(self) -> List[str]:
        return [r.url.params["rss_url"] for r in self.requests]

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


@pytest.fixture
def recorder_factory():
    clients = []

    def _make(route):
        rec = Recorder(route)
        client = rec.client()
        clients.append(client)
        return rec, client

    yield _make
    for c in clients:
        c.close()
