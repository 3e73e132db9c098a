"""
Finnhub REST helpers shared by the quote and news providers.

Free tier: 60 calls/minute.
https://finnhub.io/docs/api/quote
https://finnhub.io/docs/api/company-news
"""

from typing import Any, Dict, Optional

from marketdesk.sources.base import ProviderError, RateLimitError
from marketdesk.utils.session import RequestSession

FINNHUB_BASE = "https://finnhub.io/api/v1"


async def finnhub_get(session: RequestSession, api_key: str, path: str,
                      params: Optional[Dict] = None) -> Any:
    """
    GET a Finnhub endpoint and decode the JSON body.

    Raises:
        ProviderError: transport failure, HTTP error or an ``error`` payload
        RateLimitError: HTTP 429
    """
    query = dict(params or {})
    query["token"] = api_key

    resp = await session.get(f"{FINNHUB_BASE}/{path}", params=query)
    if resp is None:
        raise ProviderError(f"Failed to fetch {path} from Finnhub")

    if resp.status_code == 429:
        raise RateLimitError("Finnhub rate limit exceeded (60 calls/min)")

    if resp.status_code >= 400:
        raise ProviderError(f"Finnhub HTTP {resp.status_code} for {path}")

    data = resp.json()
    if isinstance(data, dict) and data.get("error"):
        raise ProviderError(f"Finnhub error: {data['error']}")
    return data
