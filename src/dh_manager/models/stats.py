"""Input and output schemas for the character stats calculation engine.

Inputs are immutable snapshots assembled by the caller (see
``dh_manager.engine.adapters`` for building them from UI state). Every
output stat carries its breakdown components; ``total`` is a computed
field so it can never disagree with the components it is built from.

Example:
    >>> stats_input = CharacterStatsInput(
    ...     character_class=ClassInput(base_hp=6, base_evasion=10, tier=1),
    ...     progression=ProgressionInput(level=5),
    ... )
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from dh_manager.core.constants import (
    DEFAULT_CLASS_EVASION,
    DEFAULT_CLASS_HP,
    DEFAULT_MAJOR_THRESHOLD,
    DEFAULT_SEVERE_THRESHOLD,
)
from dh_manager.models.enums import CHARACTER_TRAITS, CharacterTrait
from dh_manager.models.modifiers import StatDeltas


# =============================================================================
# Engine Inputs
# =============================================================================


class DamageThresholds(BaseModel):
    """Major and Severe damage thresholds."""

    model_config = ConfigDict(frozen=True)

    major: int = DEFAULT_MAJOR_THRESHOLD
    severe: int = DEFAULT_SEVERE_THRESHOLD


class ClassInput(BaseModel):
    """Class-derived base values.

    Attributes:
        base_hp: Starting hit points from the class.
        base_evasion: Starting Evasion from the class.
        tier: Tier (1-4) derived from level.
    """

    model_config = ConfigDict(frozen=True)

    base_hp: int = DEFAULT_CLASS_HP
    base_evasion: int = DEFAULT_CLASS_EVASION
    tier: int = 1


class ArmorInput(BaseModel):
    """Base stats of the equipped armor.

    The evasion and agility modifiers are applied here, once. They never
    reach the engine through the equipment deltas as well.
    """

    model_config = ConfigDict(frozen=True)

    base_score: int = 0
    evasion_modifier: int = 0
    agility_modifier: int = 0
    base_thresholds: DamageThresholds = Field(default_factory=DamageThresholds)


class ProgressionInput(BaseModel):
    """Progression inputs."""

    model_config = ConfigDict(frozen=True)

    level: int = 1


class TraitState(BaseModel):
    """One trait as tracked on the character sheet."""

    model_config = ConfigDict(frozen=True)

    value: int = 0
    bonus: int = 0
    marked: bool = False


def default_trait_states() -> dict[CharacterTrait, TraitState]:
    """Create a trait state mapping with every trait at its default."""
    return {trait: TraitState() for trait in CHARACTER_TRAITS}


class TraitsInput(BaseModel):
    """Current trait values with bonuses, dense over all six traits."""

    model_config = ConfigDict(frozen=True)

    traits: dict[CharacterTrait, TraitState] = Field(default_factory=default_trait_states)

    @field_validator("traits", mode="before")
    @classmethod
    def fill_missing_traits(cls, value: Any) -> Any:
        """Fill traits absent from a partial mapping with default states."""
        if value is None:
            return default_trait_states()
        if isinstance(value, Mapping):
            return {**default_trait_states(), **value}
        return value


class CharacterStatsInput(BaseModel):
    """Complete, immutable input for one stats calculation.

    Attributes:
        character_class: Class base values and tier.
        armor: Equipped armor base values.
        equipment_modifiers: Aggregated equipment deltas (an
            AggregatedEquipmentStats is accepted as-is).
        progression: Level.
        traits: Trait values and bonuses.
        base_proficiency: Proficiency before equipment; the configured
            default applies when omitted.
    """

    model_config = ConfigDict(frozen=True)

    character_class: ClassInput = Field(default_factory=ClassInput)
    armor: ArmorInput = Field(default_factory=ArmorInput)
    equipment_modifiers: StatDeltas = Field(default_factory=StatDeltas)
    progression: ProgressionInput = Field(default_factory=ProgressionInput)
    traits: TraitsInput = Field(default_factory=TraitsInput)
    base_proficiency: int | None = None


# =============================================================================
# Engine Outputs
# =============================================================================


class CalculatedHp(BaseModel):
    """Hit points with breakdown."""

    model_config = ConfigDict(frozen=True)

    class_base: int
    tier_bonus: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return self.class_base + self.tier_bonus


class CalculatedEvasion(BaseModel):
    """Evasion with breakdown."""

    model_config = ConfigDict(frozen=True)

    class_base: int
    armor_modifier: int
    equipment_modifier: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return self.class_base + self.armor_modifier + self.equipment_modifier


class CalculatedArmorScore(BaseModel):
    """Armor Score with breakdown."""

    model_config = ConfigDict(frozen=True)

    base: int
    equipment_modifier: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return self.base + self.equipment_modifier


class CalculatedProficiency(BaseModel):
    """Proficiency with breakdown."""

    model_config = ConfigDict(frozen=True)

    base: int
    equipment_modifier: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return self.base + self.equipment_modifier


class CalculatedThreshold(BaseModel):
    """One damage threshold with breakdown."""

    model_config = ConfigDict(frozen=True)

    base: int
    level_bonus: int
    equipment_modifier: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return self.base + self.level_bonus + self.equipment_modifier


class CalculatedThresholds(BaseModel):
    """Major and Severe thresholds."""

    model_config = ConfigDict(frozen=True)

    major: CalculatedThreshold
    severe: CalculatedThreshold


class CalculatedTrait(BaseModel):
    """One trait with breakdown.

    ``equipment_modifier`` already combines the armor's agility modifier
    (Agility only) with the equipment delta for the trait, so callers can
    show a single number.
    """

    model_config = ConfigDict(frozen=True)

    base: int
    bonus: int
    equipment_modifier: int
    marked: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return self.base + self.bonus + self.equipment_modifier


class RollModifiers(BaseModel):
    """Flat roll modifiers granted by equipment."""

    model_config = ConfigDict(frozen=True)

    attack: int = 0
    spellcast: int = 0


class CharacterStatsOutput(BaseModel):
    """All calculated stats with per-component breakdowns."""

    model_config = ConfigDict(frozen=True)

    hp: CalculatedHp
    evasion: CalculatedEvasion
    armor_score: CalculatedArmorScore
    proficiency: CalculatedProficiency
    thresholds: CalculatedThresholds
    traits: dict[CharacterTrait, CalculatedTrait]
    roll_modifiers: RollModifiers = Field(default_factory=RollModifiers)


class StatTotals(BaseModel):
    """Totals only, for display components that skip the breakdowns."""

    model_config = ConfigDict(frozen=True)

    hp: int
    evasion: int
    armor_score: int
    proficiency: int
    major_threshold: int
    severe_threshold: int
    traits: dict[CharacterTrait, int]


__all__ = [
    # Inputs
    "DamageThresholds",
    "ClassInput",
    "ArmorInput",
    "ProgressionInput",
    "TraitState",
    "TraitsInput",
    "CharacterStatsInput",
    "default_trait_states",
    # Outputs
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
]
