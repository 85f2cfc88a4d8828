"""Entry point: ``python -m medium_feed``

    python -m medium_feed posts --limit 20 --category "Backend Development" --page 2
    python -m medium_feed probe --owner someone

Defaults (username, limits, proxy) come from the environment / `.env`,
see `medium_feed.config`.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

import httpx

from .config import Settings, load_settings
from .core import FeedIngestor
from .fetcher import candidate_urls, probe_feed
from .listing import (
    BlogQuery,
    available_categories,
    page_numbers,
    paginate,
    results_summary,
)


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="medium_feed", description="Fetch Medium posts via rss2json.")
    sub = parser.add_subparsers(dest="command", required=True)

    posts = sub.add_parser("posts", help="Fetch, filter and paginate posts")
    posts.add_argument("--owner", default=settings.medium_username)
    posts.add_argument("--limit", type=int, default=settings.listing_limit)
    posts.add_argument("--category", default="all")
    posts.add_argument("--tag", action="append", default=[], dest="tags")
    posts.add_argument("--page", type=int, default=1)
    posts.add_argument("--json", action="store_true", dest="as_json")

    probe = sub.add_parser("probe", help="Dump the raw proxy payload for the first feed URL")
    probe.add_argument("--owner", default=settings.medium_username)
    return parser


def _run_posts(args: argparse.Namespace, settings: Settings, client: Optional[httpx.Client]) -> int:
    posts = FeedIngestor.from_settings(settings, client=client).fetch(args.owner, args.limit)

    query = BlogQuery(category=args.category, tags=tuple(args.tags))
    page = paginate(query.apply(posts), args.page, settings.posts_per_page)

    if args.as_json:
        out = {
            "page": page.page,
            "totalPages": page.total_pages,
            "totalPosts": page.total_posts,
            "posts": [p.to_dict() for p in page.posts],
        }
        print(json.dumps(out, ensure_ascii=False, indent=2))
        return 0

    print(results_summary(page, query))
    print()
    for p in page.posts:
        star = "*" if p.featured else " "
        print(f"{star} {p.date}  {p.read_time:>11}  [{p.category}] {p.title}")
        print(f"    {p.medium_url or p.url}")
    if page.total_pages > 1:
        nums = " ".join(
            f"[{n}]" if n == page.page else str(n)
            for n in page_numbers(page.page, page.total_pages)
        )
        print()
        print(f"Pages: {nums}")
    print()
    print("Categories: " + ", ".join(available_categories(posts)))
    return 0


def _run_probe(args: argparse.Namespace, settings: Settings, client: Optional[httpx.Client]) -> int:
    feed_url = candidate_urls(args.owner)[0]
    if client is not None:
        result = probe_feed(feed_url, client=client, proxy_url=settings.proxy_url)
    else:
        with httpx.Client(timeout=settings.timeout_s) as c:
            result = probe_feed(feed_url, client=c, proxy_url=settings.proxy_url)
    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


def main(argv: Optional[List[str]] = None, *, client: Optional[httpx.Client] = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    settings = load_settings()
    args = _build_parser(settings).parse_args(argv)

    if args.command == "posts":
        return _run_posts(args, settings, client)
    return _run_probe(args, settings, client)


if __name__ == "__main__":
    sys.exit(main())
