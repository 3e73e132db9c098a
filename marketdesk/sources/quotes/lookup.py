"""
Quote lookup: alias resolution, Finnhub, then the mock table.
"""

from typing import Any, Dict, List, Mapping

from marketdesk.mock_data import mock_quote
from marketdesk.sources.aliases import resolve
from marketdesk.sources.base import SourceProvider
from marketdesk.sources.cascade import first_result
from marketdesk.sources.quotes.providers.finnhub_provider import FinnhubQuoteProvider
from marketdesk.utils.session import RequestSession


def build_quote_providers(symbol: str, settings: Mapping, credentials: Mapping,
                          session: RequestSession) -> List[SourceProvider]:
    """Quote providers enabled by the resolved credentials, in priority order."""
    providers: List[SourceProvider] = []
    if credentials.get("finnhubKey"):
        providers.append(FinnhubQuoteProvider(
            session, credentials["finnhubKey"], candidates=resolve(symbol, settings)
        ))
    return providers


async def lookup_quote(symbol: str, settings: Mapping, credentials: Mapping,
                       session: RequestSession) -> Dict[str, Any]:
    """
    Quote for ``symbol``.

    Returns:
        {"finnhub": True, "data": {...}, "usedSymbol": "..."} on a live hit,
        otherwise {"mock": True, "data": {...}}.
    """
    providers = build_quote_providers(symbol, settings, credentials, session)
    result = await first_result(providers, symbol)
    if result is None:
        return {"mock": True, "data": mock_quote(symbol)}

    body = {result.provider: True, "data": result.data}
    if result.used_symbol:
        body["usedSymbol"] = result.used_symbol
    return body
