"""
medium_feed

A small library that pulls a Medium author's RSS feed through the rss2json proxy
and returns normalized blog posts for a portfolio site.

Core ideas:
- Input: a Medium username and a result limit
- Process: try 3 feed URL shapes in order → first non-empty answer wins → parse → normalize
- Output: List[Post] (a single pinned fallback post if every URL fails; never raises)

Example
-------
from medium_feed import FeedIngestor, BlogQuery, paginate

posts = FeedIngestor().fetch("ashrafchehboun", limit=20)

query = BlogQuery().with_category("Backend Development").toggle_tag("laravel")
page = paginate(query.apply(posts), page=1)

for post in page.posts:
    print(post.date, post.read_time, post.title)
"""
from .models import FALLBACK_POST, Post
from .core import FeedIngestor, fetch_medium_posts
from .config import Settings, load_settings
from .listing import BlogQuery, PostPage, featured_posts, find_by_slug, page_numbers, paginate

__all__ = [
    "Post",
    "FALLBACK_POST",
    "FeedIngestor",
    "fetch_medium_posts",
    "Settings",
    "load_settings",
    "BlogQuery",
    "PostPage",
    "paginate",
    "page_numbers",
    "featured_posts",
    "find_by_slug",
]
