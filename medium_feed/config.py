"""Runtime settings for the feed ingestor and its consumers.

Every field can be overridden via environment variables (or a `.env` file
through `load_settings`). Variables are read when `Settings` is instantiated,
not at import time.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from .core import DEFAULT_AUTHOR
from .fetcher import DEFAULT_PROXY_URL

DEFAULT_MEDIUM_USERNAME = "ashrafchehboun"


def _env_int(key: str, default: int) -> int:
    """Read an env var as int, returning *default* on parse failure."""
    try:
        return int(os.getenv(key, str(default)))
    except (ValueError, TypeError):
        return default


def _env_optional_float(key: str) -> Optional[float]:
    """Read an env var as float; unset, empty or malformed gives None."""
    raw = os.getenv(key)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


@dataclass(frozen=True)
class Settings:
    medium_username: str = field(default_factory=lambda: os.getenv("MEDIUM_USERNAME", DEFAULT_MEDIUM_USERNAME))
    proxy_url: str = field(default_factory=lambda: os.getenv("FEED_PROXY_URL", DEFAULT_PROXY_URL))
    default_author: str = field(default_factory=lambda: os.getenv("FEED_DEFAULT_AUTHOR", DEFAULT_AUTHOR))
    # None means the ingestor waits on each candidate without a deadline.
    timeout_s: Optional[float] = field(default_factory=lambda: _env_optional_float("FEED_TIMEOUT_S"))

    homepage_limit: int = field(default_factory=lambda: _env_int("HOMEPAGE_POST_LIMIT", 6))
    listing_limit: int = field(default_factory=lambda: _env_int("LISTING_POST_LIMIT", 20))
    posts_per_page: int = field(default_factory=lambda: _env_int("POSTS_PER_PAGE", 6))

    discord_token: str = field(default_factory=lambda: os.getenv("DISCORD_BOT_TOKEN", ""), repr=False)


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Load `.env` (without overriding the real environment) and build Settings."""
    load_dotenv(env_file)
    return Settings()
