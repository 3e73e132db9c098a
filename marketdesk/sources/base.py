"""
Base provider interface for upstream data sources.

Every quote, news and calendar provider implements ``fetch``. A provider
returns a LookupResult when it has data, None when it has nothing for
the symbol, and raises one of the exceptions below when the upstream
call itself failed.
"""

from abc import ABC, abstractmethod
from typing import Optional

from marketdesk.models import LookupResult
from marketdesk.utils.session import RequestSession


class SourceProvider(ABC):
    """Abstract base class for data providers."""

    name: str = ""

    def __init__(self, session: RequestSession, api_key: Optional[str] = None):
        self.session = session
        self.api_key = api_key
        if not self.name:
            self.name = self.__class__.__name__

    @abstractmethod
    async def fetch(self, symbol: str) -> Optional[LookupResult]:
        """
        Look up data for a symbol.

        Args:
            symbol: Symbol as requested by the client (providers that
                ignore symbols, like the calendar, receive "")

        Returns:
            LookupResult with provider name, payload and the candidate
            symbol that matched, or None if the provider had no data.
        """
        pass


class RateLimitError(Exception):
    """Raised when API rate limit is exceeded."""
    pass


class ProviderError(Exception):
    """Base exception for provider-specific errors."""
    pass


class NoDataError(Exception):
    """Raised when the provider answered but the payload is unusable."""
    pass
