"""
Search — Filter symbol names as the picker user types
"""

from typing import Iterable, Tuple


def normalize_query(query: str) -> Tuple[str, ...]:
    """Split a query into lowercase terms; spaces and dots both separate."""
    return tuple(term for term in query.lower().replace(".", " ").split() if term)


def filter_symbols(symbols: Iterable[str], query: str) -> Tuple[str, ...]:
    """
    Names containing every query term, case-insensitive, order preserved.

    Examples:
        filter_symbols(names, "arrow up")  -> ("arrow.up", "square.and.arrow.up", ...)
        filter_symbols(names, "")          -> all names
    """
    symbols = tuple(symbols)
    terms = normalize_query(query or "")
    if not terms:
        return symbols
    return tuple(
        name for name in symbols
        if all(term in name.lower() for term in terms)
    )
