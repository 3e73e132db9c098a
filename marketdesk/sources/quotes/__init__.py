"""Price quotes: Finnhub with a static mock fallback."""
