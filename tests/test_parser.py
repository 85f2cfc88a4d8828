from datetime import datetime, timezone

import pytest

from medium_feed.parser import parse_item, parse_published


def test_parse_item_prefers_description_then_content():
    assert parse_item({"description": "d", "content": "c"})["description"] == "d"
    assert parse_item({"content:encoded": "e", "content": "c"})["description"] == "e"
    assert parse_item({"content": "c"})["description"] == "c"


def test_parse_item_author_falls_back_to_creator():
    assert parse_item({"dc:creator": "creator"})["author"] == "creator"
    assert parse_item({"author": "a", "dc:creator": "creator"})["author"] == "a"


def test_parse_item_tolerates_garbage():
    parsed = parse_item({"title": None, "categories": "python", "thumbnail": ""})
    assert parsed == {
        "title": "",
        "description": "",
        "date": "",
        "link": "",
        "categories": [],
        "author": "",
        "thumbnail": None,
    }
    assert parse_item(42)["title"] == ""


def test_parse_item_stringifies_categories():
    assert parse_item({"categories": ["a", 1, None]})["categories"] == ["a", "1"]


@pytest.mark.parametrize("value", [
    "2025-09-14 14:26:36",
    "2025-09-14T14:26:36.000Z",
    "Sun, 14 Sep 2025 14:26:36 GMT",
])
def test_parse_published_formats(value):
    assert parse_published(value) == datetime(2025, 9, 14, 14, 26, 36, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", [None, "", "   ", "not a date", 12345])
def test_parse_published_invalid(value):
    assert parse_published(value) is None
