"""Pydantic V2 schemas for the Daggerheart character manager.

Submodules:
    enums: Closed enumerations (ModifiableStat, CharacterTrait, ModifierSource, ...)
    modifiers: Parser output and additive delta records
    equipment: Equipment input shapes (armor, weapons, custom slots)
    stats: Stats engine inputs and breakdown outputs
    character: Character-sheet state (class, progression, beastform)

Example:
    >>> from dh_manager.models import ArmorItem, EquipmentFeature
    >>> armor = ArmorItem(name="Full Plate", evasion_modifier=-2, agility_modifier=-1)
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from dh_manager.models.enums import (
    CHARACTER_TRAITS,
    SIMPLE_STATS,
    BeastformActivation,
    Burden,
    CharacterTrait,
    EquipmentMode,
    ModifiableStat,
    ModifierSource,
)

# =============================================================================
# Modifier Records
# =============================================================================
from dh_manager.models.modifiers import (
    AggregatedEquipmentStats,
    NormalizedModifiers,
    ParsedFeatureEffect,
    StatDeltas,
    StatModifier,
    empty_trait_map,
)

# =============================================================================
# Stats Engine Schemas
# =============================================================================
from dh_manager.models.stats import (
    ArmorInput,
    CalculatedArmorScore,
    CalculatedEvasion,
    CalculatedHp,
    CalculatedProficiency,
    CalculatedThreshold,
    CalculatedThresholds,
    CalculatedTrait,
    CharacterStatsInput,
    CharacterStatsOutput,
    ClassInput,
    DamageThresholds,
    ProgressionInput,
    RollModifiers,
    StatTotals,
    TraitsInput,
    TraitState,
    default_trait_states,
)

# =============================================================================
# Equipment
# =============================================================================
from dh_manager.models.equipment import (
    ArmorItem,
    CustomEquipmentSlot,
    EquipmentFeature,
    EquipmentState,
    ExplicitStatModifiers,
    WeaponItem,
)


# =============================================================================
# Character-Sheet State
# =============================================================================
from dh_manager.models.character import (
    BeastformForm,
    BeastformState,
    ClassSelection,
    HomebrewClass,
    ProgressionState,
    TraitBonus,
)


__all__ = [
    # === Enumerations ===
    "CharacterTrait",
    "ModifiableStat",
    "ModifierSource",
    "Burden",
    "EquipmentMode",
    "BeastformActivation",
    "SIMPLE_STATS",
    "CHARACTER_TRAITS",
    # === Modifier Records ===
    "StatModifier",
    "ParsedFeatureEffect",
    "StatDeltas",
    "NormalizedModifiers",
    "AggregatedEquipmentStats",
    "empty_trait_map",
    # === Stats Engine ===
    "DamageThresholds",
    "ClassInput",
    "ArmorInput",
    "ProgressionInput",
    "TraitState",
    "TraitsInput",
    "CharacterStatsInput",
    "default_trait_states",
    "CalculatedHp",
    "CalculatedEvasion",
    "CalculatedArmorScore",
    "CalculatedProficiency",
    "CalculatedThreshold",
    "CalculatedThresholds",
    "CalculatedTrait",
    "RollModifiers",
    "CharacterStatsOutput",
    "StatTotals",
    # === Equipment ===
    "EquipmentFeature",
    "ExplicitStatModifiers",
    "ArmorItem",
    "WeaponItem",
    "CustomEquipmentSlot",
    "EquipmentState",
    # === Character-Sheet State ===
    "HomebrewClass",
    "ClassSelection",
    "ProgressionState",
    "TraitBonus",
    "BeastformForm",
    "BeastformState",
]
