import asyncio
import logging
import sys
from typing import Sequence

import discord

from medium_feed import FeedIngestor, Post, Settings, load_settings

logger = logging.getLogger("discord_bot")

MAX_MESSAGE_LENGTH = 2000
MAX_POSTS = 10


def format_posts_message(posts: Sequence[Post]) -> str:
    """Build the `!posts` reply. Discord rejects messages over 2000 characters."""
    if not posts:
        return "No posts found."

    response = f"📝 Latest {len(posts)} post(s)\n\n"
    for post in posts:
        response += f"**{post.title}**\n"
        response += f"*{post.category} - {post.read_time}*\n"
        response += f"<{post.medium_url or post.url}>\n\n"

    if len(response) > MAX_MESSAGE_LENGTH:
        response = response[:MAX_MESSAGE_LENGTH - 3] + "..."
    return response


def parse_count(content: str, default: int) -> int:
    """`!posts 3` -> 3; missing or invalid counts give `default`, capped at MAX_POSTS."""
    parts = content.split()
    if len(parts) < 2:
        return default
    try:
        n = int(parts[1])
    except ValueError:
        return default
    return min(max(1, n), MAX_POSTS)


def create_client(settings: Settings) -> discord.Client:
    intents = discord.Intents.default()
    intents.message_content = True  # needed to read commands

    client = discord.Client(intents=intents)
    ingestor = FeedIngestor.from_settings(settings)

    @client.event
    async def on_ready():
        logger.info("Logged in as %s", client.user)

    @client.event
    async def on_message(message):
        if message.author == client.user:
            return
        if not message.content.startswith("!posts"):
            return

        count = parse_count(message.content, settings.homepage_limit)
        await message.channel.send("Fetching the latest posts...")
        # fetch() blocks on HTTP; keep the event loop free
        posts = await asyncio.to_thread(ingestor.fetch, settings.medium_username, count)
        await message.channel.send(format_posts_message(posts))

    return client


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    settings = load_settings()
    if not settings.discord_token:
        raise ValueError("DISCORD_BOT_TOKEN is not set. Check your .env file.")
    create_client(settings).run(settings.discord_token, log_handler=None)


if __name__ == "__main__":
    main()
