"""
Finnhub company-news provider.

Fetches the last week of company news for the first built-in alias
candidate that has any. User-configured aliases are not consulted here,
unlike the quote lookup.
"""

import datetime
import logging
from typing import Dict, List, Optional

from marketdesk.models import LookupResult
from marketdesk.sources.aliases import builtin_candidates
from marketdesk.sources.base import SourceProvider
from marketdesk.sources.finnhub import finnhub_get
from marketdesk.utils.session import RequestSession

logger = logging.getLogger(__name__)

LOOKBACK_DAYS = 7
MAX_ITEMS = 5


class FinnhubNewsProvider(SourceProvider):
    """Finnhub /company-news over built-in candidate symbols."""

    name = "finnhub"

    def __init__(self, session: RequestSession, api_key: str):
        if not api_key:
            raise ValueError("Finnhub API key required. Set FINNHUB_KEY env var or finnhubKey in settings.")
        super().__init__(session, api_key=api_key)

    @staticmethod
    def _date_window(today: Optional[datetime.date] = None) -> tuple[str, str]:
        if today is None:
            today = datetime.datetime.now(datetime.timezone.utc).date()
        start = today - datetime.timedelta(days=LOOKBACK_DAYS)
        return start.isoformat(), today.isoformat()

    @staticmethod
    def _normalize(item: Dict) -> Dict:
        return {
            "headline": item.get("headline"),
            "source": item.get("source"),
            "url": item.get("url"),
            "datetime": item.get("datetime"),
        }

    async def get_company_news(self, symbol: str, from_date: str, to_date: str) -> List[Dict]:
        data = await finnhub_get(self.session, self.api_key, "company-news", {
            "symbol": symbol,
            "from": from_date,
            "to": to_date,
        })
        if not isinstance(data, list):
            return []
        return [item for item in data if isinstance(item, dict)]

    async def fetch(self, symbol: str) -> Optional[LookupResult]:
        from_date, to_date = self._date_window()
        for candidate in builtin_candidates(symbol):
            articles = await self.get_company_news(candidate, from_date, to_date)
            if articles:
                top = [self._normalize(a) for a in articles[:MAX_ITEMS]]
                return LookupResult(provider=self.name, data=top, used_symbol=candidate)
        return None
