"""Headlines: Finnhub, NewsAPI.org and an RSS feed, with a mock fallback."""
