"""
SymbolPicker — SF Symbol names for picker UIs

Loads the list of icon-symbol names once per process:
- Live catalog from the system CoreGlyphs bundle when present
- Bundled text list matched to the OS version otherwise

Usage:
    from symbolpicker import all_symbols, filter_symbols

    names = all_symbols()
    arrows = filter_symbols(names, "arrow")
"""

import logging

__version__ = "0.1.0"

# Library logging: silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Core layer
from .core.platform import PlatformInfo, detect_platform, parse_version
from .core.tiers import FallbackTier, FALLBACK_TIERS, select_resource
from .core.catalog import (
    AvailabilityCatalog, OrderedCatalog, SystemCatalog,
    find_bundle, get_catalog, CORE_GLYPHS_IDENTIFIER,
)
from .core.resources import read_symbol_file, split_symbol_lines
from .core.loader import SymbolLoader, LoadResult, load_symbols

# Process-wide list
from .symbols import Symbols, get_symbols, all_symbols, reset_symbols

# Helpers
from .search import filter_symbols

# Config
from .config import Config, ConfigManager, get_config

__all__ = [
    # Core
    'PlatformInfo', 'detect_platform', 'parse_version',
    'FallbackTier', 'FALLBACK_TIERS', 'select_resource',
    'AvailabilityCatalog', 'OrderedCatalog', 'SystemCatalog',
    'find_bundle', 'get_catalog', 'CORE_GLYPHS_IDENTIFIER',
    'read_symbol_file', 'split_symbol_lines',
    'SymbolLoader', 'LoadResult', 'load_symbols',
    # Cached list
    'Symbols', 'get_symbols', 'all_symbols', 'reset_symbols',
    # Helpers
    'filter_symbols',
    # Config
    'Config', 'ConfigManager', 'get_config',
]
