"""
NewsAPI.org news provider.

Free tier: 100 requests/day, 1 month lookback.
https://newsapi.org/docs/endpoints/everything
"""

import logging
from typing import Dict, List, Optional

from marketdesk.models import LookupResult
from marketdesk.sources.base import ProviderError, RateLimitError, SourceProvider
from marketdesk.utils.session import RequestSession

logger = logging.getLogger(__name__)

NEWSAPI_BASE = "https://newsapi.org/v2"
MAX_ITEMS = 5


class NewsApiProvider(SourceProvider):
    """Free-text search on the /everything endpoint, newest first."""

    name = "newsapi"

    def __init__(self, session: RequestSession, api_key: str):
        if not api_key:
            raise ValueError("NewsAPI key required. Set NEWSAPI_KEY env var or newsApiKey in settings.")
        super().__init__(session, api_key=api_key)

    async def get_articles(self, query: str, limit: int = MAX_ITEMS) -> List[Dict]:
        """Search for articles matching ``query``, most recent first."""
        params = {
            "q": query,
            "pageSize": limit,
            "sortBy": "publishedAt",
            "apiKey": self.api_key,
        }

        resp = await self.session.get(f"{NEWSAPI_BASE}/everything", params=params)
        if resp is None:
            raise ProviderError("Failed to fetch from NewsAPI")

        data = resp.json()
        if not isinstance(data, dict):
            raise ProviderError("Unexpected NewsAPI payload")
        if data.get("status") == "error":
            if data.get("code") == "rateLimited":
                raise RateLimitError(f"NewsAPI rate limit: {data.get('message', '')}")
            raise ProviderError(f"NewsAPI error: {data.get('message', '')}")

        raw = data.get("articles")
        if not isinstance(raw, list):
            return []

        articles = []
        for a in raw:
            if not isinstance(a, dict):
                continue
            articles.append({
                "headline": a.get("title"),
                "source": self._source_name(a.get("source")),
                "url": a.get("url"),
                "datetime": a.get("publishedAt"),
            })
            if len(articles) >= limit:
                break
        return articles

    @staticmethod
    def _source_name(source) -> Optional[str]:
        if isinstance(source, dict):
            return source.get("name")
        if isinstance(source, str):
            return source
        return None

    async def fetch(self, symbol: str) -> Optional[LookupResult]:
        articles = await self.get_articles(symbol)
        if not articles:
            return None
        return LookupResult(provider=self.name, data=articles)
