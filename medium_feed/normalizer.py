from __future__ import annotations

import math
import re
from typing import Any, Dict

from .classifier import determine_category
from .models import Post

EXCERPT_LENGTH = 200
WORDS_PER_MINUTE = 200
MAX_TAGS = 5
FEATURED_COUNT = 2

_TAG_RE = re.compile(r"<[^>]*>")
_ENTITY_RE = re.compile(r"&[^;]+;")
_SPACE_RE = re.compile(r"\s+")
_SLUG_STRIP_RE = re.compile(r"[^a-z0-9\s-]")
_HYPHENS_RE = re.compile(r"-+")


def strip_tags(html: str) -> str:
    return _TAG_RE.sub("", html or "")


def make_excerpt(html: str) -> str:
    """Plain-text excerpt of at most 200 characters, always followed by "..."."""
    text = _ENTITY_RE.sub(" ", strip_tags(html))
    text = _SPACE_RE.sub(" ", text).strip()
    return text[:EXCERPT_LENGTH] + "..."


def estimate_read_time(html: str) -> int:
    """Minutes to read at 200 words per minute, never less than 1."""
    words = len(strip_tags(html).split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


def slugify(title: str) -> str:
    """
    "10 Lessons I Learned!" -> "10-lessons-i-learned"

    Lossy and not unique: titles differing only in case or punctuation collide.
    """
    slug = _SLUG_STRIP_RE.sub("", (title or "").lower())
    slug = _SPACE_RE.sub("-", slug)
    slug = _HYPHENS_RE.sub("-", slug)
    return slug.strip("-")


def to_post(entry: Dict[str, Any], index: int, *, default_author: str) -> Post:
    """
    Convert a parsed item dict (see `parser.parse_item`) at 0-based `index` into a Post.
    """
    title = entry.get("title") or ""
    description = entry.get("description") or ""
    tags = list(entry.get("categories") or [])
    link = entry.get("link") or ""

    return Post(
        id=index + 1,
        title=title,
        excerpt=make_excerpt(description),
        date=entry.get("date") or "",
        read_time=f"{estimate_read_time(description)} min read",
        category=determine_category(tags, title),
        tags=tuple(tags[:MAX_TAGS]),
        featured=index < FEATURED_COUNT,
        slug=slugify(title),
        url=link,
        medium_url=link,
        author=entry.get("author") or default_author,
        thumbnail=entry.get("thumbnail") or None,
    )
