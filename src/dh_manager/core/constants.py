"""Application-wide constants for the Daggerheart character manager.

Rules constants follow the Daggerheart SRD. These are process-wide
immutable tables; nothing in the engine rebuilds them per call.
"""

from __future__ import annotations

from types import MappingProxyType

# =============================================================================
# Progression
# =============================================================================

DEFAULT_PROFICIENCY = 2
"""Base Proficiency used when a calculation does not supply one."""

TIER_LEVEL_BANDS: tuple[tuple[int, int], ...] = (
    (1, 1),
    (4, 2),
    (7, 3),
)
"""(highest level, tier) pairs; anything above the last band is tier 4."""

MAX_TIER = 4
"""Highest tier a character can reach."""

# =============================================================================
# Class Base Stats (SRD starting values)
# =============================================================================

CLASS_BASE_STATS: MappingProxyType[str, tuple[int, int]] = MappingProxyType(
    {
        # class name: (starting hit points, starting evasion)
        "Bard": (5, 10),
        "Druid": (6, 10),
        "Guardian": (7, 9),
        "Ranger": (6, 12),
        "Rogue": (6, 12),
        "Seraph": (7, 9),
        "Sorcerer": (6, 10),
        "Warrior": (6, 11),
        "Wizard": (5, 11),
    }
)

# =============================================================================
# Defaults (no class selected / no armor equipped)
# =============================================================================

DEFAULT_CLASS_HP = 6
DEFAULT_CLASS_EVASION = 10

DEFAULT_MAJOR_THRESHOLD = 5
DEFAULT_SEVERE_THRESHOLD = 11


__all__ = [
    # Progression
    "DEFAULT_PROFICIENCY",
    "TIER_LEVEL_BANDS",
    "MAX_TIER",
    # Classes
    "CLASS_BASE_STATS",
    # Defaults
    "DEFAULT_CLASS_HP",
    "DEFAULT_CLASS_EVASION",
    "DEFAULT_MAJOR_THRESHOLD",
    "DEFAULT_SEVERE_THRESHOLD",
]
