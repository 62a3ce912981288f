"""
Catalog — Live symbol list from the system CoreGlyphs bundle

The OS ships the SF Symbols catalog in the com.apple.CoreGlyphs bundle.
Two property-list shapes are understood, each as its own strategy:

- availability: name_availability.plist, {"symbols": {name: release}}
                -> key set (file order, not meaningful)
- ordered:      symbol_order.plist, [name, ...]
                -> curated order preserved

Any missing bundle, missing file, or unexpected shape reads as an empty
catalog. Nothing here raises for bad data.
"""

import logging
import plistlib
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type


logger = logging.getLogger(__name__)


CORE_GLYPHS_IDENTIFIER = "com.apple.CoreGlyphs"

DEFAULT_BUNDLE_PATHS = [
    Path("/System/Library/CoreServices/CoreGlyphs.bundle"),
]


# =============================================================================
# Bundle Lookup
# =============================================================================

def _read_plist(path: Path) -> Optional[Any]:
    """Parse a plist file, or None when missing/unreadable/malformed."""
    try:
        with open(path, "rb") as f:
            return plistlib.load(f)
    except FileNotFoundError:
        return None
    except Exception as e:
        # Any parse failure means no data
        logger.debug("Unreadable plist %s: %s", path, e)
        return None


def bundle_identifier(bundle: Path) -> Optional[str]:
    """Read CFBundleIdentifier from a bundle's Info.plist."""
    for info_path in (bundle / "Contents" / "Info.plist", bundle / "Info.plist"):
        info = _read_plist(info_path)
        if isinstance(info, dict):
            identifier = info.get("CFBundleIdentifier")
            if isinstance(identifier, str):
                return identifier
    return None


def find_bundle(
    identifier: str = CORE_GLYPHS_IDENTIFIER,
    search_paths: Optional[Iterable[Path]] = None
) -> Optional[Path]:
    """
    Locate a bundle directory by its identifier.

    Args:
        identifier: CFBundleIdentifier to match
        search_paths: Candidate bundle directories, in priority order
                      (default: DEFAULT_BUNDLE_PATHS)

    Returns:
        Path of the first matching bundle, or None
    """
    candidates = DEFAULT_BUNDLE_PATHS if search_paths is None else search_paths
    for candidate in candidates:
        candidate = Path(candidate)
        try:
            if not candidate.is_dir():
                continue
        except OSError as e:
            logger.debug("Cannot inspect %s: %s", candidate, e)
            continue
        if bundle_identifier(candidate) == identifier:
            logger.debug("Found bundle %s at %s", identifier, candidate)
            return candidate
    return None


def resource_path(bundle: Path, name: str, ext: str) -> Optional[Path]:
    """
    Resolve a named resource inside a bundle.

    Checks Contents/Resources (macOS layout) before the bundle root
    (flat iOS layout).
    """
    filename = f"{name}.{ext}"
    for directory in (bundle / "Contents" / "Resources", bundle):
        path = directory / filename
        try:
            if path.is_file():
                return path
        except OSError as e:
            logger.debug("Cannot inspect %s: %s", path, e)
    return None


# =============================================================================
# Catalog Strategies
# =============================================================================

class SystemCatalog:
    """Base class: one plist resource inside the CoreGlyphs bundle."""

    name = ""
    resource_name = ""
    resource_type = "plist"

    def locate(self, bundle: Path) -> Optional[Path]:
        return resource_path(bundle, self.resource_name, self.resource_type)

    def read(self, bundle: Path) -> Tuple[str, ...]:
        """Read symbol names from the bundle; () when unavailable."""
        path = self.locate(bundle)
        if path is None:
            logger.debug("%s: no %s.%s in %s", self.name, self.resource_name,
                         self.resource_type, bundle)
            return ()
        data = _read_plist(path)
        if data is None:
            return ()
        return self.parse(data)

    def parse(self, data: Any) -> Tuple[str, ...]:
        raise NotImplementedError


class AvailabilityCatalog(SystemCatalog):
    """name_availability.plist: take the key set of the "symbols" mapping."""

    name = "availability"
    resource_name = "name_availability"
    key_name = "symbols"

    def parse(self, data: Any) -> Tuple[str, ...]:
        if not isinstance(data, dict):
            return ()
        symbols = data.get(self.key_name)
        if not isinstance(symbols, dict):
            return ()
        # Every entry must map a name to its release string
        if not all(isinstance(k, str) and isinstance(v, str) for k, v in symbols.items()):
            return ()
        return tuple(symbols.keys())


class OrderedCatalog(SystemCatalog):
    """symbol_order.plist: an array of names in display order."""

    name = "ordered"
    resource_name = "symbol_order"

    def parse(self, data: Any) -> Tuple[str, ...]:
        if not isinstance(data, list):
            return ()
        if not all(isinstance(item, str) for item in data):
            return ()
        # Keep first occurrence
        return tuple(dict.fromkeys(data))


CATALOG_STRATEGIES: Dict[str, Type[SystemCatalog]] = {
    AvailabilityCatalog.name: AvailabilityCatalog,
    OrderedCatalog.name: OrderedCatalog,
}

# Config value that skips the live catalog entirely
NO_CATALOG = "none"

DEFAULT_STRATEGY = AvailabilityCatalog.name


def get_catalog(name: str) -> SystemCatalog:
    """
    Create a catalog strategy by name.

    Raises:
        ValueError: Unknown strategy name
    """
    try:
        return CATALOG_STRATEGIES[name]()
    except KeyError:
        raise ValueError(f"Unknown catalog strategy '{name}'. Valid: {', '.join(list_strategies())}")


def list_strategies() -> List[str]:
    """Strategy names accepted by configuration."""
    return list(CATALOG_STRATEGIES) + [NO_CATALOG]
