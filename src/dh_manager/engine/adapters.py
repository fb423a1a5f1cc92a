"""State adapters: character-sheet state -> engine input.

The character-management layer keeps its own records (class selection,
equipment slots with standard/homebrew variants, progression, trait
sheet, beastform). These functions pick the active pieces and assemble an
immutable CharacterStatsInput from them.

Example:
    >>> stats_input = build_engine_input(
    ...     ClassSelection(class_name="Warrior"),
    ...     EquipmentState(),
    ...     ProgressionState(current_level=5),
    ...     None,
    ... )
    >>> stats_input.character_class.tier
    3
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dh_manager.core.constants import CLASS_BASE_STATS, MAX_TIER, TIER_LEVEL_BANDS
from dh_manager.core.logging import get_logger
from dh_manager.engine.aggregator import aggregate_equipment_stats
from dh_manager.models.character import BeastformState, ClassSelection, ProgressionState
from dh_manager.models.enums import (
    CHARACTER_TRAITS,
    SIMPLE_STATS,
    BeastformActivation,
    CharacterTrait,
    EquipmentMode,
)
from dh_manager.models.equipment import ArmorItem, EquipmentState, WeaponItem
from dh_manager.models.modifiers import AggregatedEquipmentStats, StatDeltas
from dh_manager.models.stats import (
    ArmorInput,
    CharacterStatsInput,
    ClassInput,
    ProgressionInput,
    TraitsInput,
    TraitState,
)


logger = get_logger(__name__)


# =============================================================================
# Active Equipment Selection
# =============================================================================


def get_active_armor(equipment: EquipmentState) -> ArmorItem | None:
    """Get the armor in use, honoring the slot's homebrew mode."""
    if equipment.armor_mode is EquipmentMode.HOMEBREW:
        return equipment.homebrew_armor
    return equipment.armor


def get_active_primary_weapon(equipment: EquipmentState) -> WeaponItem | None:
    """Get the primary weapon in use, honoring the slot's homebrew mode."""
    if equipment.primary_weapon_mode is EquipmentMode.HOMEBREW:
        return equipment.homebrew_primary_weapon
    return equipment.primary_weapon


def get_active_secondary_weapon(equipment: EquipmentState) -> WeaponItem | None:
    """Get the secondary weapon in use, honoring the slot's homebrew mode."""
    if equipment.secondary_weapon_mode is EquipmentMode.HOMEBREW:
        return equipment.homebrew_secondary_weapon
    return equipment.secondary_weapon


def get_active_combat_wheelchair(equipment: EquipmentState) -> WeaponItem | None:
    """Get the combat wheelchair in use, if the character uses one."""
    if not equipment.use_combat_wheelchair:
        return None
    if equipment.wheelchair_mode is EquipmentMode.HOMEBREW:
        return equipment.homebrew_wheelchair
    return equipment.combat_wheelchair


def get_equipment_feature_modifiers(equipment: EquipmentState) -> AggregatedEquipmentStats:
    """Aggregate the modifiers of every active item and activated custom slot."""
    return aggregate_equipment_stats(
        armor=get_active_armor(equipment),
        primary_weapon=get_active_primary_weapon(equipment),
        secondary_weapon=get_active_secondary_weapon(equipment),
        wheelchair=get_active_combat_wheelchair(equipment),
        custom_slots=equipment.custom_slots,
    )


# =============================================================================
# Input Extraction
# =============================================================================


def get_tier_from_level(level: int) -> int:
    """Get the tier for a level: 1 | 2-4 | 5-7 | 8+.

    >>> [get_tier_from_level(level) for level in (1, 2, 4, 5, 7, 8, 10)]
    [1, 2, 2, 3, 3, 4, 4]
    """
    for highest_level, tier in TIER_LEVEL_BANDS:
        if level <= highest_level:
            return tier
    return MAX_TIER


def extract_class_input(selection: ClassSelection | None) -> ClassInput:
    """Build class input from the class selection.

    Homebrew classes use their own starting values; standard classes are
    looked up by name. Unknown or missing classes fall back to defaults.
    Tier is always 1 here; build_engine_input derives it from level.
    """
    if selection is None:
        return ClassInput()

    if selection.is_homebrew and selection.homebrew_class is not None:
        return ClassInput(
            base_hp=selection.homebrew_class.starting_hit_points,
            base_evasion=selection.homebrew_class.starting_evasion,
        )

    base_stats = CLASS_BASE_STATS.get(selection.class_name or "")
    if base_stats is None:
        if selection.class_name:
            logger.debug("Unknown class, using defaults", class_name=selection.class_name)
        return ClassInput()

    base_hp, base_evasion = base_stats
    return ClassInput(base_hp=base_hp, base_evasion=base_evasion)


def extract_armor_input(equipment: EquipmentState | None) -> ArmorInput:
    """Build armor input from the active armor, or defaults when unarmored."""
    if equipment is None:
        return ArmorInput()

    armor = get_active_armor(equipment)
    if armor is None:
        return ArmorInput()

    return ArmorInput(
        base_score=armor.base_score,
        evasion_modifier=armor.evasion_modifier,
        agility_modifier=armor.agility_modifier,
        base_thresholds=armor.base_thresholds,
    )


def extract_equipment_modifiers(equipment: EquipmentState | None) -> StatDeltas:
    """Build the equipment delta record from the equipment state."""
    if equipment is None:
        return StatDeltas()
    return get_equipment_feature_modifiers(equipment)


def extract_progression_input(progression: ProgressionState | None) -> ProgressionInput:
    """Build progression input from the progression state."""
    if progression is None:
        return ProgressionInput()
    return ProgressionInput(level=progression.current_level)


def extract_traits_input(
    traits: Mapping[CharacterTrait | str, TraitState | Mapping[str, Any]] | None,
) -> TraitsInput:
    """Build traits input from the trait sheet; missing traits default."""
    if traits is None:
        return TraitsInput()
    return TraitsInput(traits=dict(traits))


# =============================================================================
# Beastform
# =============================================================================


def build_beastform_modifiers(beastform: BeastformState | None) -> StatDeltas:
    """Express an active beastform as equipment-style deltas.

    Returns:
        Evasion and trait deltas for an active form; all zeros otherwise.
    """
    if beastform is None or not beastform.active or beastform.form is None:
        return StatDeltas()

    form = beastform.form
    deltas = StatDeltas(evasion=form.evasion_bonus)
    deltas.traits[form.trait_bonus.trait] += form.trait_bonus.value

    if (
        beastform.activation_method is BeastformActivation.EVOLUTION
        and beastform.evolution_bonus_trait is not None
    ):
        bonus = beastform.evolution_bonus_trait
        deltas.traits[bonus.trait] += bonus.value

    return deltas


def merge_equipment_modifiers(first: StatDeltas, second: StatDeltas) -> StatDeltas:
    """Sum two delta records pointwise into a new record."""
    merged = StatDeltas()
    for stat in SIMPLE_STATS:
        setattr(merged, stat.value, getattr(first, stat.value) + getattr(second, stat.value))
    for trait in CHARACTER_TRAITS:
        merged.traits[trait] = first.traits[trait] + second.traits[trait]
    return merged


# =============================================================================
# Engine Input
# =============================================================================


def build_engine_input(
    class_selection: ClassSelection | None,
    equipment: EquipmentState | None,
    progression: ProgressionState | None,
    traits: Mapping[CharacterTrait | str, TraitState | Mapping[str, Any]] | None,
    beastform: BeastformState | None = None,
    *,
    base_proficiency: int | None = None,
) -> CharacterStatsInput:
    """Assemble the complete engine input from character-sheet state.

    Tier is derived from level; beastform deltas are merged into the
    equipment deltas.
    """
    progression_input = extract_progression_input(progression)
    class_input = extract_class_input(class_selection).model_copy(
        update={"tier": get_tier_from_level(progression_input.level)}
    )

    equipment_modifiers = merge_equipment_modifiers(
        extract_equipment_modifiers(equipment),
        build_beastform_modifiers(beastform),
    )

    return CharacterStatsInput(
        character_class=class_input,
        armor=extract_armor_input(equipment),
        equipment_modifiers=equipment_modifiers,
        progression=progression_input,
        traits=extract_traits_input(traits),
        base_proficiency=base_proficiency,
    )


__all__ = [
    # Active equipment
    "get_active_armor",
    "get_active_primary_weapon",
    "get_active_secondary_weapon",
    "get_active_combat_wheelchair",
    "get_equipment_feature_modifiers",
    # Extraction
    "get_tier_from_level",
    "extract_class_input",
    "extract_armor_input",
    "extract_equipment_modifiers",
    "extract_progression_input",
    "extract_traits_input",
    # Beastform
    "build_beastform_modifiers",
    "merge_equipment_modifiers",
    # Engine input
    "build_engine_input",
]
