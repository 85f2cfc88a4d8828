import json

import httpx
import pytest

from conftest import make_item, ok_payload
from medium_feed.__main__ import main


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    for var in ("MEDIUM_USERNAME", "FEED_PROXY_URL", "POSTS_PER_PAGE", "LISTING_POST_LIMIT"):
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    monkeypatch.setenv("MEDIUM_USERNAME", "someone")


def test_posts_json_second_page(recorder_factory, capsys):
    rec, client = recorder_factory(
        lambda req: httpx.Response(200, json=ok_payload([make_item(i) for i in range(8)]))
    )

    assert main(["posts", "--limit", "8", "--page", "2", "--json"], client=client) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["page"] == 2
    assert out["totalPages"] == 2
    assert out["totalPosts"] == 8
    assert [p["title"] for p in out["posts"]] == ["Post number 1", "Post number 0"]
    assert rec.feed_urls == ["https://medium.com/feed/@someone"]


def test_posts_text_output(recorder_factory, capsys):
    rec, client = recorder_factory(
        lambda req: httpx.Response(200, json=ok_payload([make_item(i) for i in range(8)]))
    )

    main(["posts", "--limit", "8"], client=client)

    out = capsys.readouterr().out
    assert "Showing 6 of 8 posts" in out
    assert "Pages: [1] 2" in out
    assert "Categories: Backend Development" in out


def test_posts_filtered_by_tag(recorder_factory, capsys):
    items = [make_item(1, categories=["docker"]), make_item(2, categories=["react"])]
    rec, client = recorder_factory(lambda req: httpx.Response(200, json=ok_payload(items)))

    main(["posts", "--tag", "docker", "--json"], client=client)

    out = json.loads(capsys.readouterr().out)
    assert [p["category"] for p in out["posts"]] == ["DevOps"]


def test_probe(recorder_factory, capsys):
    payload = ok_payload([make_item(1)])
    rec, client = recorder_factory(lambda req: httpx.Response(200, json=payload))

    assert main(["probe", "--owner", "other"], client=client) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["success"] is True
    assert out["itemsCount"] == 1
    assert rec.feed_urls == ["https://medium.com/feed/@other"]
