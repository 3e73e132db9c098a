"""
TradingEconomics economic-calendar provider.

Requires a username/key pair, passed as query credentials.
https://docs.tradingeconomics.com/economic_calendar/snapshot/

No ABC hierarchy beyond SourceProvider: TradingEconomics is the sole
live source for calendar data.
"""

import logging
from typing import Dict, List, Optional

from marketdesk.models import LookupResult
from marketdesk.sources.base import ProviderError, RateLimitError, SourceProvider
from marketdesk.utils.session import RequestSession

logger = logging.getLogger(__name__)

BASE_URL = "https://api.tradingeconomics.com"
CALENDAR_FROM = "1970-01-01"
MAX_EVENTS = 20


class TradingEconomicsProvider(SourceProvider):
    """Calendar snapshot for all countries."""

    name = "tradingeconomics"

    def __init__(self, session: RequestSession, username: str, api_key: str):
        if not username or not api_key:
            raise ValueError(
                "TradingEconomics credentials required. Set TRADINGECONOMICS_USER and "
                "TRADINGECONOMICS_KEY env vars or the matching settings fields."
            )
        super().__init__(session, api_key=api_key)
        self.username = username

    async def get_calendar(self) -> Optional[List[Dict]]:
        """
        Fetch calendar events.

        Returns:
            The event list as returned upstream, or None if the payload
            is not a list.
        """
        params = {
            "cDate": CALENDAR_FROM,
            "c": "all",
            "username": self.username,
            "password": self.api_key,
        }
        resp = await self.session.get(f"{BASE_URL}/calendar", params=params)
        if resp is None:
            raise ProviderError("Failed to fetch calendar from TradingEconomics")
        if resp.status_code == 429:
            raise RateLimitError("TradingEconomics rate limit exceeded")

        data = resp.json()
        if not isinstance(data, list):
            logger.debug(f"TradingEconomics returned {type(data).__name__}, expected list")
            return None
        return data

    async def fetch(self, symbol: str = "") -> Optional[LookupResult]:
        events = await self.get_calendar()
        if events is None:
            return None
        return LookupResult(provider=self.name, data=events[:MAX_EVENTS])
