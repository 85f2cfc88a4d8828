"""
Blog index helpers: filter, sort and paginate already-ingested posts.

Everything here is pure and works on any sequence of `Post`.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Iterable, List, Optional, Sequence, Tuple

from .models import Post
from .parser import parse_published

ALL = "all"
POSTS_PER_PAGE = 6
MAX_VISIBLE_PAGES = 5
FEATURED_TEASER_COUNT = 3


def available_categories(posts: Iterable[Post]) -> List[str]:
    return sorted({p.category for p in posts})


def available_tags(posts: Iterable[Post]) -> List[str]:
    return sorted({t for p in posts for t in p.tags})


def sort_newest_first(posts: Iterable[Post]) -> List[Post]:
    """Order by publish date, newest first; undated posts keep their order at the end."""
    dated: List[Tuple[datetime, Post]] = []
    undated: List[Post] = []
    for p in posts:
        dt = parse_published(p.date)
        if dt is None:
            undated.append(p)
        else:
            dated.append((dt, p))
    dated.sort(key=lambda pair: pair[0], reverse=True)
    return [p for _, p in dated] + undated


@dataclass(frozen=True)
class BlogQuery:
    """Category/tag filter state of the blog index."""
    category: str = ALL
    tags: Tuple[str, ...] = ()

    @property
    def has_active_filters(self) -> bool:
        return self.category != ALL or bool(self.tags)

    def with_category(self, category: str) -> "BlogQuery":
        return replace(self, category=category)

    def toggle_tag(self, tag: str) -> "BlogQuery":
        if tag in self.tags:
            return replace(self, tags=tuple(t for t in self.tags if t != tag))
        return replace(self, tags=self.tags + (tag,))

    def cleared(self) -> "BlogQuery":
        return BlogQuery()

    def matches(self, post: Post) -> bool:
        if self.category != ALL and post.category != self.category:
            return False
        if self.tags and not any(t in post.tags for t in self.tags):
            return False
        return True

    def apply(self, posts: Iterable[Post]) -> List[Post]:
        return sort_newest_first(p for p in posts if self.matches(p))


@dataclass(frozen=True)
class PostPage:
    posts: Tuple[Post, ...]
    page: int
    total_pages: int
    total_posts: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def paginate(posts: Sequence[Post], page: int = 1, per_page: int = POSTS_PER_PAGE) -> PostPage:
    """Slice one page out of `posts`. Out-of-range pages are clamped."""
    if per_page < 1:
        raise ValueError("per_page must be >= 1")
    total_pages = math.ceil(len(posts) / per_page)
    page = min(max(1, page), max(1, total_pages))
    start = (page - 1) * per_page
    return PostPage(
        posts=tuple(posts[start:start + per_page]),
        page=page,
        total_pages=total_pages,
        total_posts=len(posts),
    )


def page_numbers(current: int, total: int, max_visible: int = MAX_VISIBLE_PAGES) -> List[int]:
    """
    Page numbers to show in the pagination bar.

    With more pages than `max_visible`, the window starts two pages before
    `current` and is cut at `total` (so it may show fewer than `max_visible`).
    """
    if total <= max_visible:
        return list(range(1, total + 1))
    start = max(1, current - 2)
    end = min(total, start + max_visible - 1)
    return list(range(start, end + 1))


def results_summary(page: PostPage, query: BlogQuery) -> str:
    text = f"Showing {len(page.posts)} of {page.total_posts} posts"
    if query.category != ALL:
        text += f' in "{query.category}"'
    if query.tags:
        text += f' tagged with "{", ".join(query.tags)}"'
    return text


def featured_posts(posts: Iterable[Post], n: int = FEATURED_TEASER_COUNT) -> List[Post]:
    """Homepage teaser: the first `n` featured posts, in feed order."""
    return [p for p in posts if p.featured][:n]


def post_path_slug(post: Post) -> str:
    """URL slug of a post; titles that slugify to nothing fall back to "article-<id>"."""
    return post.slug or f"article-{post.id}"


def find_by_slug(posts: Iterable[Post], slug: str) -> Optional[Post]:
    for p in posts:
        if post_path_slug(p) == slug:
            return p
    return None
