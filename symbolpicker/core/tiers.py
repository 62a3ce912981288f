"""
Tiers — OS-version table for the bundled fallback lists

Evaluated top-down; the first tier whose minimums the host meets wins.
A platform missing from a tier's minimums satisfies it, so unknown hosts
get the newest list.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .platform import PlatformInfo


@dataclass(frozen=True)
class FallbackTier:
    """One (minimum-version, resource) row."""
    resource: str
    minimums: Dict[str, Tuple[int, ...]] = field(default_factory=dict)


FALLBACK_TIERS: List[FallbackTier] = [
    FallbackTier(
        resource="sfsymbol5",
        minimums={
            "ios": (17, 0),
            "macos": (14, 0),
            "tvos": (17, 0),
            "watchos": (10, 0),
            "visionos": (1, 0),
        },
    ),
    FallbackTier(
        resource="sfsymbol4",
        minimums={
            "ios": (16, 0),
            "macos": (13, 0),
            "tvos": (16, 0),
            "watchos": (9, 0),
        },
    ),
    FallbackTier(resource="sfsymbol"),
]


def compare_versions(left: Tuple[int, ...], right: Tuple[int, ...]) -> int:
    """Compare version tuples, padding the shorter one with zeros."""
    width = max(len(left), len(right))
    a = tuple(left) + (0,) * (width - len(left))
    b = tuple(right) + (0,) * (width - len(right))
    return (a > b) - (a < b)


def tier_satisfied(tier: FallbackTier, platform_info: PlatformInfo) -> bool:
    """Check whether the host meets a tier's minimum version."""
    minimum = tier.minimums.get(platform_info.name)
    if minimum is None:
        return True
    return compare_versions(platform_info.version, minimum) >= 0


def select_resource(
    platform_info: PlatformInfo,
    tiers: List[FallbackTier] = FALLBACK_TIERS
) -> str:
    """
    Pick the bundled fallback resource for a host.

    Args:
        platform_info: Detected host platform
        tiers: Ordered table, highest threshold first

    Returns:
        Resource identifier (file stem under resources/)
    """
    for tier in tiers:
        if tier_satisfied(tier, platform_info):
            return tier.resource
    # Table without a catch-all row
    return tiers[-1].resource
