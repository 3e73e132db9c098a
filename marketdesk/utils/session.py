"""
Shared async HTTP session for provider calls.

Wraps a single ``httpx.AsyncClient`` so every provider reuses one
connection pool. ``get()`` returns ``None`` on transport failures so
callers can follow the ``if not resp: raise ProviderError(...)`` pattern.
"""

import logging
from typing import Dict, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
USER_AGENT = "marketdesk/1.0"


class RequestSession:
    """Lazily created ``httpx.AsyncClient`` with None-on-failure GETs."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": USER_AGENT},
                follow_redirects=True,
            )
        return self._client

    async def get(self, url: str, params: Optional[Dict] = None) -> Optional[httpx.Response]:
        """
        Issue a GET request.

        Returns:
            The response for any HTTP status, or None if the request
            could not be completed (DNS, connect, timeout).
        """
        try:
            return await self.client.get(url, params=params)
        except httpx.HTTPError as e:
            # Strip the query string, it carries API keys
            logger.warning(f"GET {url.split('?')[0]} failed: {e.__class__.__name__}: {e}")
            return None

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
