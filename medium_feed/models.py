from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Post:
    """
    Stable public model representing a normalized blog post.

    WARNING: Do not change fields lightly. Site templates consume `to_dict()`.
    """
    id: int
    title: str
    excerpt: str
    date: str
    read_time: str
    category: str
    tags: Tuple[str, ...] = ()
    featured: bool = False
    slug: str = ""
    url: str = ""
    medium_url: str = ""
    author: str = ""
    thumbnail: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase shape used by the site templates."""
        return {
            "id": self.id,
            "title": self.title,
            "excerpt": self.excerpt,
            "date": self.date,
            "readTime": self.read_time,
            "category": self.category,
            "tags": list(self.tags),
            "featured": self.featured,
            "slug": self.slug,
            "url": self.url,
            "mediumUrl": self.medium_url,
            "author": self.author,
            "thumbnail": self.thumbnail,
        }


# Last resort when no candidate feed URL yields items.
FALLBACK_POST = Post(
    id=1,
    title="10 Lessons I Learned from My First Laravel Project",
    excerpt=(
        "When I started my very first Laravel project, I had no idea what I was "
        "getting myself into. I thought it would be just another PHP framework, "
        "but it turned out to be much more. From excitement to frustration, I went "
        "through every emotion while trying to build something that actually worked."
    ),
    date="2025-09-14T14:26:36.000Z",
    read_time="3 min read",
    category="Backend Development",
    tags=("laravel-framework", "laravel", "coding"),
    featured=True,
    slug="10-lessons-i-learned-from-my-first-laravel-project",
    url="/blog/10-lessons-i-learned-from-my-first-laravel-project",
    medium_url=(
        "https://medium.com/@ashrafchehboun/"
        "10-lessons-i-learned-from-my-first-laravel-project-729a35e143b4"
    ),
    author="sha9orono",
)
