"""
Pydantic models for API request/response validation.
Auto-generates OpenAPI documentation.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from marketdesk.models import NewsItem, QuoteRecord


class QuoteResponse(BaseModel):
    """Quote with its origin flag (finnhub or mock)."""
    finnhub: Optional[bool] = None
    mock: Optional[bool] = None
    data: QuoteRecord
    used_symbol: Optional[str] = Field(None, alias="usedSymbol")


class NewsResponse(BaseModel):
    """Headlines tagged with the provider that produced them."""
    provider: str
    data: List[NewsItem]
    used_symbol: Optional[str] = Field(None, alias="usedSymbol")


class EconResponse(BaseModel):
    """Calendar events; provider entries are passed through unchanged."""
    provider: str
    data: List[Dict[str, Any]]


class SettingsResponse(BaseModel):
    ok: bool
    data: Dict[str, Any]


class SettingsErrorResponse(BaseModel):
    ok: bool = False
    error: str


class SentimentRequest(BaseModel):
    text: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error response."""
    error: str


class HealthResponse(BaseModel):
    """API health check response."""
    service: str
    version: str
    status: str
    providers: Dict[str, bool]
