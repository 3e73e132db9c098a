"""
Provider cascade.

Tries an ordered list of providers and stops at the first one that
returns a result. Any provider failure, including a malformed upstream
payload, is logged and treated as "no data" so the next provider gets
its turn.
"""

import logging
from typing import Iterable, Optional

from marketdesk.models import LookupResult
from marketdesk.sources.base import SourceProvider

logger = logging.getLogger(__name__)


async def first_result(providers: Iterable[SourceProvider], symbol: str,
                       allow_empty: bool = False) -> Optional[LookupResult]:
    """
    Run providers in order.

    Args:
        providers: Providers in priority order
        symbol: Requested symbol ("" for symbol-less lookups)
        allow_empty: Accept a result whose payload is empty instead of
            moving on to the next provider

    Returns:
        The first acceptable LookupResult, or None if every provider came
        back empty or failed.
    """
    label = symbol or "request"
    for provider in providers:
        try:
            result = await provider.fetch(symbol)
        except Exception as e:
            logger.warning(f"{provider.name} failed for {label}: {e}")
            continue
        if result is None or (result.is_empty() and not allow_empty):
            logger.debug(f"{provider.name} had no data for {label}")
            continue
        if result.used_symbol:
            logger.info(f"{provider.name} served {label} via {result.used_symbol}")
        else:
            logger.info(f"{provider.name} served {label}")
        return result
    return None
