"""
Finnhub quote provider.

Tries each candidate symbol in order and accepts the first quote with a
positive current price. Finnhub answers unknown symbols with an all-zero
quote rather than an error, so "c > 0" is the success test.
"""

import logging
import math
from typing import Dict, List, Optional

from marketdesk.models import LookupResult
from marketdesk.sources.base import NoDataError, SourceProvider
from marketdesk.sources.finnhub import finnhub_get
from marketdesk.utils.session import RequestSession

logger = logging.getLogger(__name__)


def is_valid_quote(quote) -> bool:
    """True if the quote's current price is a finite number above zero."""
    if not isinstance(quote, dict):
        return False
    price = quote.get("c")
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return False
    return math.isfinite(price) and price > 0


class FinnhubQuoteProvider(SourceProvider):
    """Finnhub /quote lookup over a list of candidate symbols."""

    name = "finnhub"

    def __init__(self, session: RequestSession, api_key: str, candidates: Optional[List[str]] = None):
        if not api_key:
            raise ValueError("Finnhub API key required. Set FINNHUB_KEY env var or finnhubKey in settings.")
        super().__init__(session, api_key=api_key)
        self.candidates = candidates

    async def get_quote(self, symbol: str) -> Dict:
        data = await finnhub_get(self.session, self.api_key, "quote", {"symbol": symbol})
        if not isinstance(data, dict):
            raise NoDataError(f"Unexpected Finnhub quote payload for {symbol}")
        return data

    async def fetch(self, symbol: str) -> Optional[LookupResult]:
        for candidate in self.candidates or [symbol]:
            try:
                quote = await self.get_quote(candidate)
            except Exception as e:
                logger.warning(f"Finnhub quote failed for {candidate}: {e}")
                continue
            if is_valid_quote(quote):
                logger.info(f"Finnhub success for {symbol} (via {candidate}): {quote['c']}")
                return LookupResult(provider=self.name, data=quote, used_symbol=candidate)

        logger.warning(f"Finnhub returned zero/null for all candidates of {symbol}, falling through")
        return None
