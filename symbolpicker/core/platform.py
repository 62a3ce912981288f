"""
Platform — Host OS detection for fallback selection

Detection priority:
1. Explicit override (config or environment)
2. platform.mac_ver() on Darwin hosts
3. platform.system(), with no version

Non-Apple hosts are reported by their lowercased system name and an
empty version tuple.
"""

import logging
import platform
from dataclasses import dataclass
from typing import Optional, Tuple


logger = logging.getLogger(__name__)


APPLE_PLATFORMS = ("macos", "ios", "tvos", "watchos", "visionos")

# Aliases accepted in config/env overrides
PLATFORM_ALIASES = {
    "darwin": "macos",
    "macosx": "macos",
    "osx": "macos",
    "ipados": "ios",
    "xros": "visionos",
}


@dataclass(frozen=True)
class PlatformInfo:
    """Host platform name and OS version."""
    name: str
    version: Tuple[int, ...] = ()

    @property
    def is_apple(self) -> bool:
        return self.name in APPLE_PLATFORMS

    @property
    def version_string(self) -> str:
        return ".".join(str(part) for part in self.version)

    def __str__(self) -> str:
        if self.version:
            return f"{self.name} {self.version_string}"
        return self.name


def parse_version(text: Optional[str]) -> Tuple[int, ...]:
    """
    Parse a dotted version string into an integer tuple.

    "14.2.1" -> (14, 2, 1). Malformed input yields ().
    """
    if not text:
        return ()
    parts = []
    for piece in str(text).strip().split("."):
        if not piece.isdigit():
            return ()
        parts.append(int(piece))
    return tuple(parts)


def normalize_platform_name(name: str) -> str:
    """Lowercase a platform name and resolve known aliases."""
    key = name.strip().lower().replace(" ", "")
    return PLATFORM_ALIASES.get(key, key)


def detect_platform(
    override_name: Optional[str] = None,
    override_version: Optional[str] = None
) -> PlatformInfo:
    """
    Detect the host platform.

    Args:
        override_name: Platform name from config/env (e.g. "ios")
        override_version: Version string from config/env (e.g. "17.0")

    Returns:
        Detected PlatformInfo
    """
    # Priority 1: Explicit override
    if override_name:
        info = PlatformInfo(
            name=normalize_platform_name(override_name),
            version=parse_version(override_version)
        )
        logger.debug("Using configured platform %s", info)
        return info

    # Priority 2: Darwin reports the macOS product version
    system = platform.system()
    if system == "Darwin":
        release, _, _ = platform.mac_ver()
        version = parse_version(override_version) or parse_version(release)
        return PlatformInfo(name="macos", version=version)

    # Priority 3: Anything else
    return PlatformInfo(
        name=normalize_platform_name(system or "unknown"),
        version=parse_version(override_version)
    )
