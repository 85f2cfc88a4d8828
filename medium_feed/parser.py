from __future__ import annotations

import calendar
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from feedparser.datetimes import _parse_date


def parse_published(value: Any) -> Optional[datetime]:
    """
    Convert a feed date string to a timezone-aware UTC datetime.

    rss2json emits "2025-09-14 14:26:36", which ISO parsing handles directly;
    anything else (RFC 822, W3DTF with "Z") goes through feedparser's date
    handlers. Naive values are taken as UTC. Returns None when nothing parses.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    s = value.strip()
    try:
        dt = datetime.fromisoformat(s)
    except ValueError:
        dt = None
    if dt is not None:
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)

    parsed = _parse_date(s)
    if isinstance(parsed, time.struct_time):
        try:
            return datetime.fromtimestamp(calendar.timegm(parsed), tz=timezone.utc)
        except (OverflowError, ValueError, OSError):
            return None
    return None


def _text(entry: Mapping[str, Any], *keys: str) -> str:
    # First non-empty string among keys
    for key in keys:
        val = entry.get(key)
        if isinstance(val, str) and val:
            return val
    return ""


def _categories(entry: Mapping[str, Any]) -> List[str]:
    cats = entry.get("categories")
    if not isinstance(cats, (list, tuple)):
        return []
    return [str(c) for c in cats if c is not None]


def parse_item(entry: Any) -> Dict[str, Any]:
    """
    Map a raw rss2json item to a dict with common fields.

    Nothing is validated: absent or malformed fields come back as empty
    values so one bad item never aborts a batch.
    Fields: title, description, date, link, categories, author, thumbnail
    """
    if not isinstance(entry, Mapping):
        entry = {}

    thumbnail = _text(entry, "thumbnail") or None

    return {
        "title": _text(entry, "title"),
        "description": _text(entry, "description", "content:encoded", "content"),
        "date": _text(entry, "pubDate"),
        "link": _text(entry, "link"),
        "categories": _categories(entry),
        "author": _text(entry, "author", "dc:creator"),
        "thumbnail": thumbnail,
    }
