"""Feed reader for the announcement analyzer.

Downloads an RSS/Atom feed with aiohttp and maps its entries to Article
objects with feedparser.
"""

from typing import Any, List

import aiohttp
import feedparser
from pydantic import BaseModel

from announcement_analyzer.feeds.errors import FeedFetchError
from announcement_analyzer.utils.logging_utils import get_logger

logger = get_logger("feeds.reader")


class Article(BaseModel):
    """One feed entry."""

    title: str
    link: str
    pub_date: str = ""
    content: str = ""


def _entry_content(entry: Any) -> str:
    """Return the entry's full content, falling back to its summary."""
    for block in entry.get("content") or []:
        value = block.get("value")
        if value:
            return value
    return entry.get("summary") or entry.get("description") or ""


def parse_articles(body: bytes, limit: int = 10) -> List[Article]:
    """Parse a feed document into articles.

    Args:
        body: The raw feed document.
        limit: Maximum number of articles to return.

    Returns:
        Up to ``limit`` articles, in feed order.

    Raises:
        FeedFetchError: If the document is not a feed with entries.
    """
    feed = feedparser.parse(body)

    entries = getattr(feed, "entries", None) or []
    if not entries:
        message = "Feed has no entries"
        if getattr(feed, "bozo", 0):
            message = f"Invalid RSS/Atom feed ({feed.get('bozo_exception')})"
        raise FeedFetchError(message)

    return [
        Article(
            title=(entry.get("title") or "").strip(),
            link=(entry.get("link") or "").strip(),
            pub_date=entry.get("published") or entry.get("updated") or "",
            content=_entry_content(entry),
        )
        for entry in entries[:limit]
    ]


async def fetch_articles(url: str, limit: int = 10, timeout: float = 30) -> List[Article]:
    """Download a feed and return its first articles.

    Args:
        url: The feed URL.
        limit: Maximum number of articles to return.
        timeout: Total request timeout in seconds.

    Returns:
        Up to ``limit`` articles, in feed order.

    Raises:
        FeedFetchError: If the feed cannot be downloaded or parsed.
    """
    logger.info(f"Fetching feed from {url}")

    try:
        async with aiohttp.ClientSession() as session:
            async with session.get(url, timeout=aiohttp.ClientTimeout(total=timeout)) as response:
                response.raise_for_status()
                body = await response.read()
    except Exception as e:
        logger.error(f"Error fetching feed from {url}: {e}")
        raise FeedFetchError(f"Failed to fetch feed: {url} ({e})") from e

    articles = parse_articles(body, limit=limit)
    logger.info(f"Fetched {len(articles)} articles from {url}")
    return articles
