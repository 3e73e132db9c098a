"""Economic calendar: TradingEconomics with a mock fallback."""
