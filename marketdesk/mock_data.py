"""
Static fallback data.

Returned when no provider is configured or every configured provider
came back empty. Quote values are broker snapshots for the symbols the
client dashboard shows by default.
"""

import datetime
import time
from typing import Dict, List

from marketdesk.models import EconEvent

NEUTRAL_QUOTE = {"c": 100, "d": 0, "dp": 0, "pc": 100}

_GER40 = {"c": 24780.2, "d": 327.9, "dp": 1.34, "pc": 24452.3}
_EURUSD = {"c": 1.18149, "d": 0.00375, "dp": 0.32, "pc": 1.17774}

MOCK_QUOTES: Dict[str, Dict] = {
    "XAUUSD": {"c": 4967.27, "d": 178.27, "dp": 3.71, "pc": 4789.00},   # Gold CFD
    "XAGUSD": {"c": 76.895, "d": 0.180, "dp": 0.24, "pc": 76.715},      # Silver CFD
    "^DJI": {"c": 50098.00, "d": 1336.00, "dp": 2.74, "pc": 48762.00},
    "^NDX": {"c": 25033.96, "d": 689.20, "dp": 2.83, "pc": 24344.76},
    "^GSPC": {"c": 6928.14, "d": 157.25, "dp": 2.32, "pc": 6770.89},
    "GER40": _GER40,
    "^GDAXI": _GER40,
    "GER30": _GER40,
    "EURUSD=X": _EURUSD,
    "EURUSD": _EURUSD,
}

# (headline, source, age in seconds)
_MOCK_HEADLINES = {
    "XAUUSD": [("Gold gains as risk-off flows increase", "Macro Desk", 3600)],
    "^GDAXI": [("European equities mixed amid economic data", "EU Markets", 3600)],
    "GER40": [("GER40 up after strong tech earnings", "Broker News", 1800)],
    "EURUSD=X": [("Euro strengthens on hawkish ECB signals", "FX News", 5400)],
}

# (country, event, hours ahead, impact)
_MOCK_EVENTS = [
    ("US", "Nonfarm Payrolls", 24, "High"),
    ("EU", "ECB Rate Decision", 48, "High"),
    ("US", "FOMC Minutes", 72, "Medium"),
]


def mock_quote(symbol: str) -> Dict:
    """Exact-match lookup; unknown symbols get a neutral placeholder."""
    return dict(MOCK_QUOTES.get(symbol, NEUTRAL_QUOTE))


def mock_headlines(symbol: str, now_ms: int | None = None) -> List[Dict]:
    """Headlines for a symbol with epoch-millisecond timestamps, [] if unknown."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return [
        {"headline": headline, "source": source, "url": "#", "datetime": now_ms - age * 1000}
        for headline, source, age in _MOCK_HEADLINES.get(symbol, [])
    ]


def mock_econ_events(now: datetime.datetime | None = None) -> List[Dict]:
    """Three upcoming events dated relative to ``now`` (UTC)."""
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    events = []
    for country, event, hours, impact in _MOCK_EVENTS:
        when = now + datetime.timedelta(hours=hours)
        events.append(EconEvent(
            country=country,
            event=event,
            date=when.astimezone(datetime.timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            impact=impact,
        ).model_dump(mode="json"))
    return events
