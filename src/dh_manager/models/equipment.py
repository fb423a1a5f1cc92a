"""Equipment input shapes consumed by the stat pipeline.

These models describe what the character-management layer hands to the
engine. The engine does not require them: any mapping (camelCase or
snake_case keys) or attribute-bearing object with the same fields is
accepted, and absent fields are treated as unset. What matters is which
fields are present:

* ``stat_modifiers`` set: explicit (homebrew) modifiers, feature text ignored.
* ``evasion_modifier`` / ``agility_modifier`` set: armor base stats.
* Otherwise: modifiers are parsed from feature descriptions.

Example:
    >>> sword = WeaponItem(
    ...     name="Greatsword",
    ...     burden=Burden.TWO_HANDED,
    ...     features=[EquipmentFeature(name="Massive", description="-1 to Evasion")],
    ... )
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from dh_manager.models.enums import Burden, CharacterTrait, EquipmentMode
from dh_manager.models.stats import DamageThresholds


class EquipmentFeature(BaseModel):
    """A named feature on a piece of equipment."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Feature name (e.g., 'Heavy')")
    description: str = Field(default="", description="Feature rules text")


class ExplicitStatModifiers(BaseModel):
    """User-authored numeric modifiers for homebrew equipment.

    Every field is optional; unset fields contribute zero.
    """

    model_config = ConfigDict(frozen=True)

    evasion: int | None = None
    proficiency: int | None = None
    armor_score: int | None = None
    major_threshold: int | None = None
    severe_threshold: int | None = None
    attack_rolls: int | None = None
    spellcast_rolls: int | None = None
    traits: dict[CharacterTrait, int] | None = None


class ArmorItem(BaseModel):
    """A suit of armor.

    Attributes:
        name: Armor name.
        base_score: Base Armor Score.
        base_thresholds: Base damage thresholds.
        evasion_modifier: Evasion change from the armor itself.
        agility_modifier: Agility change from the armor itself.
        features: Armor features (not parsed for standard armor).
        stat_modifiers: Explicit modifiers for homebrew armor.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    base_score: int = 0
    base_thresholds: DamageThresholds = Field(default_factory=DamageThresholds)
    evasion_modifier: int = 0
    agility_modifier: int = 0
    features: list[EquipmentFeature] = Field(default_factory=list)
    stat_modifiers: ExplicitStatModifiers | None = None


class WeaponItem(BaseModel):
    """A primary weapon, secondary weapon, or combat wheelchair."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    burden: Burden | None = None
    features: list[EquipmentFeature] = Field(default_factory=list)
    stat_modifiers: ExplicitStatModifiers | None = None


class CustomEquipmentSlot(BaseModel):
    """A free-form equipment slot (rings, charms, loot).

    A slot with a description but no features is parsed as a single
    feature named after the slot. Deactivated slots are ignored.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""
    features: list[EquipmentFeature] = Field(default_factory=list)
    stat_modifiers: ExplicitStatModifiers | None = None
    activated: bool = True


class EquipmentState(BaseModel):
    """Everything a character currently has equipped.

    Each slot holds both the standard and the homebrew item; the slot
    mode decides which one is active.
    """

    model_config = ConfigDict(frozen=True)

    armor: ArmorItem | None = None
    homebrew_armor: ArmorItem | None = None
    armor_mode: EquipmentMode = EquipmentMode.STANDARD

    primary_weapon: WeaponItem | None = None
    homebrew_primary_weapon: WeaponItem | None = None
    primary_weapon_mode: EquipmentMode = EquipmentMode.STANDARD

    secondary_weapon: WeaponItem | None = None
    homebrew_secondary_weapon: WeaponItem | None = None
    secondary_weapon_mode: EquipmentMode = EquipmentMode.STANDARD

    use_combat_wheelchair: bool = False
    combat_wheelchair: WeaponItem | None = None
    homebrew_wheelchair: WeaponItem | None = None
    wheelchair_mode: EquipmentMode = EquipmentMode.STANDARD

    custom_slots: list[CustomEquipmentSlot] = Field(default_factory=list)


__all__ = [
    "EquipmentFeature",
    "ExplicitStatModifiers",
    "ArmorItem",
    "WeaponItem",
    "CustomEquipmentSlot",
    "EquipmentState",
]
