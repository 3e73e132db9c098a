"""
Symbol alias resolution.

Upstream providers disagree on tickers for indices and FX pairs (the DAX
is ^GDAXI, GER40, DE40...). For each requested symbol we try an ordered
list of candidates and keep the first one that returns data.
"""

from typing import Dict, List, Mapping, Optional

BUILTIN_ALIASES: Dict[str, List[str]] = {
    "^GDAXI": ["^GDAXI", "GER40", "DE40", "DAX", "GER30"],
    "GER30": ["GER30", "^GDAXI", "GER40", "DE40", "DAX"],
    "EURUSD=X": ["EURUSD=X", "EURUSD", "EURUSD:CUR", "EUR/USD"],
    "EUR/USD": ["EURUSD=X", "EURUSD", "EUR/USD"],
}


def merged_aliases(settings: Optional[Mapping] = None) -> Dict[str, List[str]]:
    """Built-in table overlaid with the user's ``aliases`` (per-key replace)."""
    table = dict(BUILTIN_ALIASES)
    user = (settings or {}).get("aliases")
    if isinstance(user, Mapping):
        table.update(user)
    return table


def resolve(symbol: str, settings: Optional[Mapping] = None) -> List[str]:
    """
    Ordered candidate symbols for ``symbol``.

    Args:
        symbol: Requested symbol, used verbatim as the key
        settings: Settings document; its ``aliases`` override built-ins

    Returns:
        The alias list, or [symbol] when there is no usable entry. A
        single string entry is treated as a one-item list.
    """
    candidates = merged_aliases(settings).get(symbol)
    if isinstance(candidates, str):
        candidates = [candidates]
    elif isinstance(candidates, (list, tuple)):
        candidates = [c for c in candidates if isinstance(c, str) and c]
    else:
        candidates = None
    if not candidates:
        return [symbol]
    return candidates


def builtin_candidates(symbol: str) -> List[str]:
    """Candidates from the built-in table only, ignoring user aliases."""
    return resolve(symbol, None)
