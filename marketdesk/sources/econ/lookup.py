"""
Economic-calendar lookup: TradingEconomics, then the mock calendar.
"""

from typing import Any, Dict, List, Mapping

from marketdesk.mock_data import mock_econ_events
from marketdesk.sources.base import SourceProvider
from marketdesk.sources.cascade import first_result
from marketdesk.sources.econ.provider import TradingEconomicsProvider
from marketdesk.utils.session import RequestSession


def build_econ_providers(credentials: Mapping, session: RequestSession) -> List[SourceProvider]:
    user = credentials.get("tradingEconomicsUser")
    key = credentials.get("tradingEconomicsKey")
    if user and key:
        return [TradingEconomicsProvider(session, user, key)]
    return []


async def lookup_econ(credentials: Mapping, session: RequestSession) -> Dict[str, Any]:
    result = await first_result(build_econ_providers(credentials, session), "", allow_empty=True)
    if result is None:
        return {"provider": "mock", "data": mock_econ_events()}
    return {"provider": result.provider, "data": result.data}
