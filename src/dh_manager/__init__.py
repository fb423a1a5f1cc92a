"""Daggerheart Character Manager - derived-stat core.

Computes a character's derived stats (HP, Evasion, Armor Score,
Proficiency, damage thresholds, traits) from class, armor, equipment,
level and trait state. Equipment modifiers come from explicit homebrew
values or are parsed from SRD feature text.

Example:
    >>> from dh_manager import (
    ...     ArmorItem, EquipmentState, ClassSelection, ProgressionState,
    ...     build_engine_input, calculate_character_stats,
    ... )
    >>>
    >>> equipment = EquipmentState(
    ...     armor=ArmorItem(name="Chainmail", base_score=4, evasion_modifier=-1)
    ... )
    >>> stats = calculate_character_stats(
    ...     build_engine_input(
    ...         ClassSelection(class_name="Warrior"),
    ...         equipment,
    ...         ProgressionState(current_level=1),
    ...         None,
    ...     )
    ... )
    >>> stats.evasion.total
    10

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 schemas for equipment, modifiers, and stats.
    engine: Feature parser, normalizer, aggregator, calculator, adapters.
"""

from __future__ import annotations

# Core
from dh_manager.core.config import Settings, get_settings
from dh_manager.core.exceptions import DhManagerError
from dh_manager.core.logging import configure_logging, get_logger

# Engine
from dh_manager.engine import (
    aggregate_equipment_stats,
    build_engine_input,
    calculate_character_stats,
    get_equipment_stats_summary,
    get_stat_totals,
    normalize_equipment,
    parse_feature_description,
)

# Models
from dh_manager.models import (
    AggregatedEquipmentStats,
    ArmorItem,
    CharacterStatsInput,
    CharacterStatsOutput,
    ClassSelection,
    CustomEquipmentSlot,
    EquipmentFeature,
    EquipmentState,
    ModifiableStat,
    NormalizedModifiers,
    ProgressionState,
    StatModifier,
    WeaponItem,
)


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "DhManagerError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Engine
    "parse_feature_description",
    "normalize_equipment",
    "aggregate_equipment_stats",
    "get_equipment_stats_summary",
    "build_engine_input",
    "calculate_character_stats",
    "get_stat_totals",
    # Models
    "ModifiableStat",
    "StatModifier",
    "NormalizedModifiers",
    "AggregatedEquipmentStats",
    "EquipmentFeature",
    "ArmorItem",
    "WeaponItem",
    "CustomEquipmentSlot",
    "EquipmentState",
    "ClassSelection",
    "ProgressionState",
    "CharacterStatsInput",
    "CharacterStatsOutput",
]
