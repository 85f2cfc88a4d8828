from __future__ import annotations

from typing import FrozenSet, Iterable, Sequence, Tuple

DEFAULT_CATEGORY = "Web Development"

# (category, tag keywords, title substrings), tested in this order.
_BUCKETS: Tuple[Tuple[str, FrozenSet[str], Tuple[str, ...]], ...] = (
    (
        "Backend Development",
        frozenset({
            "backend", "api", "server", "laravel", "php",
            "python", "django", "flask", "nodejs", "express",
        }),
        ("api", "backend", "server"),
    ),
    (
        "Frontend Development",
        frozenset({
            "frontend", "react", "vue", "angular", "javascript",
            "css", "html", "ui", "ux",
        }),
        ("frontend", "react", "vue"),
    ),
    (
        "Database",
        frozenset({"database", "mysql", "postgresql", "mongodb", "sql", "nosql"}),
        ("database", "sql"),
    ),
    (
        "DevOps",
        frozenset({
            "devops", "docker", "kubernetes", "ci/cd",
            "deployment", "aws", "azure", "git",
        }),
        ("devops", "docker", "deployment"),
    ),
    (
        "Security",
        frozenset({
            "security", "authentication", "authorization",
            "encryption", "cybersecurity",
        }),
        ("security", "auth"),
    ),
)

CATEGORIES: Tuple[str, ...] = tuple(name for name, _, _ in _BUCKETS) + (DEFAULT_CATEGORY,)


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    t = text.lower()
    return any(k in t for k in keywords)


def determine_category(tags: Sequence[str], title: str) -> str:
    """
    Classify a post into one of `CATEGORIES` from its tags and title.

    Buckets are checked in a fixed order and the first match wins, so a post
    tagged both "react" and "docker" lands in Frontend Development.
    """
    tags_lower = {str(t).lower() for t in tags}
    for name, tag_keywords, title_keywords in _BUCKETS:
        if tags_lower & tag_keywords or _contains_any(title or "", title_keywords):
            return name
    return DEFAULT_CATEGORY
