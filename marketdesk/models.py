"""
Pydantic data models for marketdesk.

These models describe the entities flowing between providers and the
HTTP API. Provider payloads are passed through with extra fields
preserved, since upstream shapes are not normalized.
"""

from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Impact(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


# ---------------------------------------------------------------------------
# Market data
# ---------------------------------------------------------------------------

class QuoteRecord(BaseModel):
    """Current price (c), change (d), percent change (dp), previous close (pc)."""
    model_config = ConfigDict(extra="allow")

    c: Optional[float] = None
    d: Optional[float] = None
    dp: Optional[float] = None
    pc: Optional[float] = None


class NewsItem(BaseModel):
    """
    A single headline.

    ``datetime`` is epoch seconds from Finnhub, an ISO string from
    NewsAPI and epoch milliseconds from RSS feeds and mock data.
    """
    headline: Optional[str] = None
    source: Optional[str] = None
    url: Optional[str] = None
    datetime: Union[int, float, str, None] = None


class EconEvent(BaseModel):
    country: str
    event: str
    date: str
    impact: Impact


class SentimentResult(BaseModel):
    score: int = 0
    comparative: float = 0.0
    tokens: List[str] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)
    negations: List[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Provider results
# ---------------------------------------------------------------------------

class LookupResult(BaseModel):
    """What a provider returns when it has data."""
    provider: str
    data: Any
    used_symbol: Optional[str] = None

    def is_empty(self) -> bool:
        return not self.data
