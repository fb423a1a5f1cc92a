"""Character stats calculation engine.

Combines class, armor, progression, trait and aggregated equipment
inputs into final stats with breakdowns. Every function here is a pure
function of its arguments; nothing is cached between calls and nothing is
clamped (negative Evasion or thresholds are reported as computed).

Formulas:
    HP          = class base HP + (tier - 1)
    Evasion     = class base + armor evasion modifier + equipment evasion
    Armor Score = armor base score + equipment armor score
    Proficiency = base proficiency + equipment proficiency
    Threshold   = armor base threshold + max(0, level - 1) + equipment threshold
    Trait       = value + bonus + (armor agility modifier [Agility only]
                  + equipment trait delta)
"""

from __future__ import annotations

from dh_manager.core.config import get_settings
from dh_manager.core.logging import get_logger
from dh_manager.models.enums import CHARACTER_TRAITS, CharacterTrait
from dh_manager.models.modifiers import StatDeltas
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
    ProgressionInput,
    RollModifiers,
    StatTotals,
    TraitsInput,
    TraitState,
)


logger = get_logger(__name__)


# =============================================================================
# Individual Stat Calculators
# =============================================================================


def calculate_hp(class_input: ClassInput) -> CalculatedHp:
    """Calculate HP: class base HP plus one per tier above the first.

    Level-up HP selections are tracked by the character sheet, not here.
    """
    return CalculatedHp(
        class_base=class_input.base_hp,
        tier_bonus=max(0, class_input.tier - 1),
    )


def calculate_evasion(
    class_input: ClassInput,
    armor_input: ArmorInput,
    equipment_modifiers: StatDeltas,
) -> CalculatedEvasion:
    """Calculate Evasion.

    The armor's evasion modifier comes from ArmorInput only. Standard armor
    normalizes to an empty record, so it is never in the equipment delta too.
    """
    return CalculatedEvasion(
        class_base=class_input.base_evasion,
        armor_modifier=armor_input.evasion_modifier,
        equipment_modifier=equipment_modifiers.evasion,
    )


def calculate_armor_score(
    armor_input: ArmorInput,
    equipment_modifiers: StatDeltas,
) -> CalculatedArmorScore:
    """Calculate Armor Score."""
    return CalculatedArmorScore(
        base=armor_input.base_score,
        equipment_modifier=equipment_modifiers.armor_score,
    )


def calculate_proficiency(
    equipment_modifiers: StatDeltas,
    base_proficiency: int | None = None,
) -> CalculatedProficiency:
    """Calculate Proficiency.

    Args:
        equipment_modifiers: Aggregated equipment deltas.
        base_proficiency: Proficiency before equipment; defaults to the
            configured ``engine.default_proficiency``.
    """
    if base_proficiency is None:
        base_proficiency = get_settings().engine.default_proficiency
    return CalculatedProficiency(
        base=base_proficiency,
        equipment_modifier=equipment_modifiers.proficiency,
    )


def _calculate_threshold(base: int, level: int, equipment_modifier: int) -> CalculatedThreshold:
    return CalculatedThreshold(
        base=base,
        level_bonus=max(0, level - 1),
        equipment_modifier=equipment_modifier,
    )


def calculate_thresholds(
    armor_input: ArmorInput,
    progression_input: ProgressionInput,
    equipment_modifiers: StatDeltas,
) -> CalculatedThresholds:
    """Calculate Major and Severe thresholds independently."""
    thresholds = armor_input.base_thresholds
    level = progression_input.level
    return CalculatedThresholds(
        major=_calculate_threshold(thresholds.major, level, equipment_modifiers.major_threshold),
        severe=_calculate_threshold(thresholds.severe, level, equipment_modifiers.severe_threshold),
    )


def _calculate_trait(
    trait: CharacterTrait,
    state: TraitState,
    armor_input: ArmorInput,
    equipment_modifiers: StatDeltas,
) -> CalculatedTrait:
    armor_agility = armor_input.agility_modifier if trait is CharacterTrait.AGILITY else 0
    return CalculatedTrait(
        base=state.value,
        bonus=state.bonus,
        equipment_modifier=equipment_modifiers.traits[trait] + armor_agility,
        marked=state.marked,
    )


def calculate_traits(
    traits_input: TraitsInput,
    armor_input: ArmorInput,
    equipment_modifiers: StatDeltas,
) -> dict[CharacterTrait, CalculatedTrait]:
    """Calculate all six traits."""
    return {
        trait: _calculate_trait(
            trait,
            traits_input.traits[trait],
            armor_input,
            equipment_modifiers,
        )
        for trait in CHARACTER_TRAITS
    }


# =============================================================================
# Main Engine Function
# =============================================================================


def calculate_character_stats(stats_input: CharacterStatsInput | None = None) -> CharacterStatsOutput:
    """Calculate every character stat from one input snapshot.

    Args:
        stats_input: The complete input; omitted sections use their
            defaults, and None means all defaults.

    Returns:
        Freshly built stats with breakdowns.

    Example:
        >>> output = calculate_character_stats(
        ...     CharacterStatsInput(progression=ProgressionInput(level=5))
        ... )
        >>> output.thresholds.major.total
        9
    """
    if stats_input is None:
        stats_input = CharacterStatsInput()

    class_input = stats_input.character_class
    armor_input = stats_input.armor
    equipment = stats_input.equipment_modifiers

    output = CharacterStatsOutput(
        hp=calculate_hp(class_input),
        evasion=calculate_evasion(class_input, armor_input, equipment),
        armor_score=calculate_armor_score(armor_input, equipment),
        proficiency=calculate_proficiency(equipment, stats_input.base_proficiency),
        thresholds=calculate_thresholds(armor_input, stats_input.progression, equipment),
        traits=calculate_traits(stats_input.traits, armor_input, equipment),
        roll_modifiers=RollModifiers(
            attack=equipment.attack_rolls,
            spellcast=equipment.spellcast_rolls,
        ),
    )
    logger.debug(
        "Calculated character stats",
        hp=output.hp.total,
        evasion=output.evasion.total,
        armor_score=output.armor_score.total,
    )
    return output


# =============================================================================
# Convenience Functions
# =============================================================================


def get_stat_totals(output: CharacterStatsOutput) -> StatTotals:
    """Strip the breakdowns, keeping only totals."""
    return StatTotals(
        hp=output.hp.total,
        evasion=output.evasion.total,
        armor_score=output.armor_score.total,
        proficiency=output.proficiency.total,
        major_threshold=output.thresholds.major.total,
        severe_threshold=output.thresholds.severe.total,
        traits={trait: calc.total for trait, calc in output.traits.items()},
    )


def has_equipment_modifiers(output: CharacterStatsOutput) -> bool:
    """Whether any stat in the output carries a non-zero equipment modifier."""
    if any(
        (
            output.evasion.equipment_modifier,
            output.armor_score.equipment_modifier,
            output.proficiency.equipment_modifier,
            output.thresholds.major.equipment_modifier,
            output.thresholds.severe.equipment_modifier,
            output.roll_modifiers.attack,
            output.roll_modifiers.spellcast,
        )
    ):
        return True
    return any(calc.equipment_modifier for calc in output.traits.values())


__all__ = [
    "calculate_hp",
    "calculate_evasion",
    "calculate_armor_score",
    "calculate_proficiency",
    "calculate_thresholds",
    "calculate_traits",
    "calculate_character_stats",
    "get_stat_totals",
    "has_equipment_modifiers",
]
