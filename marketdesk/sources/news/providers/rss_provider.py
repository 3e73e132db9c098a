"""
RSS feed news provider.

Reads the first few entries of a configured feed (Forex Factory by
default in the client docs). Entries are not filtered by symbol: the
feed is a general market wire.
"""

import calendar
import logging
from typing import Dict, List, Optional

import feedparser

from marketdesk.models import LookupResult
from marketdesk.sources.base import ProviderError, SourceProvider
from marketdesk.utils.session import RequestSession

logger = logging.getLogger(__name__)

MAX_ITEMS = 5


def _epoch_ms(entry) -> Optional[int]:
    parsed = entry.get("published_parsed")
    if not parsed:
        return None
    return calendar.timegm(parsed) * 1000


def parse_feed(text: str, limit: int = MAX_ITEMS) -> List[Dict]:
    """
    Extract headline items from an RSS/Atom document.

    Entries without a title or link are skipped. CDATA sections are
    unwrapped by feedparser.
    """
    feed = feedparser.parse(text)
    source = feed.feed.get("title")

    items = []
    for entry in feed.entries:
        title = (entry.get("title") or "").strip()
        link = (entry.get("link") or "").strip()
        if not title or not link:
            continue
        items.append({
            "headline": title,
            "source": source,
            "url": link,
            "datetime": _epoch_ms(entry),
        })
        if len(items) >= limit:
            break
    return items


class RssFeedProvider(SourceProvider):
    """Fetches a feed URL and parses it with feedparser."""

    name = "fxfactory"

    def __init__(self, session: RequestSession, feed_url: str):
        if not feed_url:
            raise ValueError("RSS feed URL required. Set FXFACTORY_RSS env var or fxFactoryRss in settings.")
        super().__init__(session)
        self.feed_url = feed_url

    async def fetch(self, symbol: str) -> Optional[LookupResult]:
        resp = await self.session.get(self.feed_url)
        if resp is None:
            raise ProviderError(f"Failed to fetch RSS feed {self.feed_url}")
        if resp.status_code >= 400:
            raise ProviderError(f"RSS feed HTTP {resp.status_code}")

        items = parse_feed(resp.text)
        if not items:
            return None
        return LookupResult(provider=self.name, data=items)
