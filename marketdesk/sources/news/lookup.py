"""
News lookup: Finnhub, then NewsAPI, then the RSS feed, then mock headlines.
"""

from typing import Any, Dict, List, Mapping

from marketdesk.mock_data import mock_headlines
from marketdesk.sources.base import SourceProvider
from marketdesk.sources.cascade import first_result
from marketdesk.sources.news.providers.finnhub_provider import FinnhubNewsProvider
from marketdesk.sources.news.providers.newsapi_provider import NewsApiProvider
from marketdesk.sources.news.providers.rss_provider import RssFeedProvider
from marketdesk.utils.session import RequestSession


def build_news_providers(credentials: Mapping, session: RequestSession) -> List[SourceProvider]:
    """Configured news providers in priority order."""
    providers: List[SourceProvider] = []
    if credentials.get("finnhubKey"):
        providers.append(FinnhubNewsProvider(session, credentials["finnhubKey"]))
    if credentials.get("newsApiKey"):
        providers.append(NewsApiProvider(session, credentials["newsApiKey"]))
    if credentials.get("fxFactoryRss"):
        providers.append(RssFeedProvider(session, credentials["fxFactoryRss"]))
    return providers


async def lookup_news(symbol: str, credentials: Mapping, session: RequestSession) -> Dict[str, Any]:
    """
    Headlines for ``symbol``.

    Returns:
        {"provider": name, "data": [...]} plus "usedSymbol" when the
        provider matched through an alias candidate.
    """
    result = await first_result(build_news_providers(credentials, session), symbol)
    if result is None:
        return {"provider": "mock", "data": mock_headlines(symbol)}

    body = {"provider": result.provider, "data": result.data}
    if result.used_symbol:
        body["usedSymbol"] = result.used_symbol
    return body
