"""
Symbols — Process-wide symbol list

Computed on first access and kept for the life of the process.
Initialization is lock-guarded so concurrent first callers share one
load.
"""

import threading
from dataclasses import dataclass
from typing import Optional, Tuple

from .core.loader import SymbolLoader


@dataclass(frozen=True)
class Symbols:
    """All available symbol names and where they came from."""
    all_symbols: Tuple[str, ...]
    source: str
    resource: Optional[str] = None

    def __len__(self) -> int:
        return len(self.all_symbols)

    def __contains__(self, name: object) -> bool:
        return name in self.all_symbols


# Global instance (singleton pattern)
_symbols: Optional[Symbols] = None
_symbols_lock = threading.Lock()


def get_symbols() -> Symbols:
    """
    Get the global symbol list.

    Loads it on first call using environment configuration.
    """
    global _symbols

    if _symbols is None:
        with _symbols_lock:
            if _symbols is None:
                result = SymbolLoader().load()
                _symbols = Symbols(
                    all_symbols=result.symbols,
                    source=result.source,
                    resource=result.resource
                )

    return _symbols


def all_symbols() -> Tuple[str, ...]:
    """All available symbol names."""
    return get_symbols().all_symbols


def reset_symbols() -> None:
    """
    Drop the cached symbol list.

    For tests only; the list never changes during normal operation.
    """
    global _symbols

    with _symbols_lock:
        _symbols = None
