"""
Loader — Resolve the symbol name list

Resolution order:
    1. Live catalog from the system CoreGlyphs bundle (configured strategy)
    2. Bundled text list picked by OS version (see tiers.FALLBACK_TIERS)
    3. Empty list

Failures at any step mean "no data here", never an error for callers.
Strict mode turns a failed bundled-list read into an AssertionError so
packaging mistakes surface during development.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from ..config import Config, get_config
from .catalog import (
    CORE_GLYPHS_IDENTIFIER, DEFAULT_BUNDLE_PATHS, NO_CATALOG,
    find_bundle, get_catalog,
)
from .platform import PlatformInfo, detect_platform
from .resources import read_symbol_file
from .tiers import FALLBACK_TIERS, FallbackTier, select_resource


logger = logging.getLogger(__name__)


SOURCE_CATALOG = "catalog"
SOURCE_FALLBACK = "fallback"
SOURCE_EMPTY = "empty"

FALLBACK_FAILURE_MESSAGE = "[SymbolPicker] Failed to load bundle resource file."


@dataclass(frozen=True)
class LoadResult:
    """Result of a symbol list resolution."""
    symbols: Tuple[str, ...]
    source: str              # "catalog" | "fallback" | "empty"
    resource: Optional[str]  # plist path or bundled resource identifier

    def __len__(self) -> int:
        return len(self.symbols)


class SymbolLoader:
    """
    Loads symbol names, live catalog first.

    Collaborators are injectable for tests; by default configuration is
    read from the environment and config files, and the platform is
    detected from the host.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        platform_info: Optional[PlatformInfo] = None,
        resource_dir: Optional[Path] = None,
        tiers: Optional[List[FallbackTier]] = None
    ):
        self.config = config if config is not None else get_config()
        self.platform_info = platform_info or detect_platform(
            self.config.platform.name,
            self.config.platform.version
        )
        self.resource_dir = resource_dir
        self.tiers = tiers if tiers is not None else FALLBACK_TIERS

        # Set by the last catalog/fallback read
        self._catalog_path: Optional[str] = None
        self._fallback_resource: Optional[str] = None

    # =========================================================================
    # Primary Interface
    # =========================================================================

    def load(self) -> LoadResult:
        """Resolve the symbol list from the best available source."""
        symbols = self.load_catalog()
        if symbols:
            logger.debug("Loaded %d symbols from %s", len(symbols), self._catalog_path)
            return LoadResult(symbols, SOURCE_CATALOG, self._catalog_path)

        symbols = self.load_fallback()
        if symbols:
            logger.debug("Loaded %d symbols from bundled %s", len(symbols), self._fallback_resource)
            return LoadResult(symbols, SOURCE_FALLBACK, self._fallback_resource)

        return LoadResult((), SOURCE_EMPTY, self._fallback_resource)

    # =========================================================================
    # Sources
    # =========================================================================

    def bundle_search_paths(self) -> List[Path]:
        """Configured bundle paths first, then the system locations."""
        return [Path(p) for p in self.config.catalog.bundle_paths] + list(DEFAULT_BUNDLE_PATHS)

    def load_catalog(self) -> Tuple[str, ...]:
        """Read the live system catalog; () when unavailable."""
        self._catalog_path = None
        strategy = self.config.catalog.strategy
        if strategy == NO_CATALOG:
            return ()

        try:
            catalog = get_catalog(strategy)
        except ValueError as e:
            logger.debug("Skipping system catalog: %s", e)
            return ()

        bundle = find_bundle(CORE_GLYPHS_IDENTIFIER, self.bundle_search_paths())
        if bundle is None:
            logger.debug("Bundle %s not found", CORE_GLYPHS_IDENTIFIER)
            return ()

        symbols = catalog.read(bundle)
        if symbols:
            located = catalog.locate(bundle)
            self._catalog_path = str(located) if located else str(bundle)
        return symbols

    def load_fallback(self) -> Tuple[str, ...]:
        """
        Read the bundled list for this host's OS version.

        A missing or unreadable file yields (), or raises AssertionError
        in strict mode. An existing but empty file is not a failure.
        """
        resource = select_resource(self.platform_info, self.tiers)
        self._fallback_resource = resource
        logger.debug("Platform %s uses bundled list %s", self.platform_info, resource)

        symbols = read_symbol_file(resource, self.resource_dir)
        if symbols is None:
            if self.config.loader.strict:
                raise AssertionError(FALLBACK_FAILURE_MESSAGE)
            logger.debug(FALLBACK_FAILURE_MESSAGE)
            return ()
        return symbols


def load_symbols(config: Optional[Config] = None) -> LoadResult:
    """Resolve the symbol list once, without caching."""
    return SymbolLoader(config).load()
