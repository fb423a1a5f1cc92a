"""Enumeration types for the Daggerheart character manager.

The modifiable stat set is closed: exactly seven simple stats and six
character traits. Feature text can only ever resolve to one of these.
"""

from __future__ import annotations

from enum import StrEnum


class CharacterTrait(StrEnum):
    """The six Daggerheart character traits used for action rolls.

    Values are the display names, which are also the keys of every
    trait mapping in the engine.
    """

    AGILITY = "Agility"
    STRENGTH = "Strength"
    FINESSE = "Finesse"
    INSTINCT = "Instinct"
    PRESENCE = "Presence"
    KNOWLEDGE = "Knowledge"


class ModifiableStat(StrEnum):
    """Every stat an equipment modifier can target.

    Seven simple stats plus one member per character trait.
    """

    EVASION = "evasion"
    PROFICIENCY = "proficiency"
    ARMOR_SCORE = "armor_score"
    MAJOR_THRESHOLD = "major_threshold"
    SEVERE_THRESHOLD = "severe_threshold"
    ATTACK_ROLLS = "attack_rolls"
    SPELLCAST_ROLLS = "spellcast_rolls"

    AGILITY = "agility"
    STRENGTH = "strength"
    FINESSE = "finesse"
    INSTINCT = "instinct"
    PRESENCE = "presence"
    KNOWLEDGE = "knowledge"

    @property
    def trait(self) -> CharacterTrait | None:
        """Get the character trait this stat refers to.

        Returns:
            The matching CharacterTrait, or None for simple stats.
        """
        return _STAT_TO_TRAIT.get(self)

    @property
    def is_trait(self) -> bool:
        """Whether this stat is one of the six character traits."""
        return self in _STAT_TO_TRAIT

    @property
    def display_name(self) -> str:
        """Get the name used for this stat in feature text.

        Returns:
            Display name (e.g., 'Armor Score', 'Major damage threshold').
        """
        return _STAT_DISPLAY_NAMES[self]

    @classmethod
    def from_trait(cls, trait: CharacterTrait) -> ModifiableStat:
        """Get the stat member for a character trait."""
        return cls(trait.value.lower())


class ModifierSource(StrEnum):
    """Where one equipment item's normalized modifiers came from."""

    LEGACY_ARMOR = "legacy-armor"
    EXPLICIT = "explicit"
    PARSED = "parsed"
    NONE = "none"


class Burden(StrEnum):
    """Weapon handedness."""

    ONE_HANDED = "One-Handed"
    TWO_HANDED = "Two-Handed"


class EquipmentMode(StrEnum):
    """Whether a slot uses the standard catalog item or a homebrew one."""

    STANDARD = "standard"
    HOMEBREW = "homebrew"


class BeastformActivation(StrEnum):
    """How a Druid entered their beastform."""

    STANDARD = "standard"
    EVOLUTION = "evolution"


_STAT_TO_TRAIT: dict[ModifiableStat, CharacterTrait] = {
    ModifiableStat.AGILITY: CharacterTrait.AGILITY,
    ModifiableStat.STRENGTH: CharacterTrait.STRENGTH,
    ModifiableStat.FINESSE: CharacterTrait.FINESSE,
    ModifiableStat.INSTINCT: CharacterTrait.INSTINCT,
    ModifiableStat.PRESENCE: CharacterTrait.PRESENCE,
    ModifiableStat.KNOWLEDGE: CharacterTrait.KNOWLEDGE,
}

_STAT_DISPLAY_NAMES: dict[ModifiableStat, str] = {
    ModifiableStat.EVASION: "Evasion",
    ModifiableStat.PROFICIENCY: "Proficiency",
    ModifiableStat.ARMOR_SCORE: "Armor Score",
    ModifiableStat.MAJOR_THRESHOLD: "Major damage threshold",
    ModifiableStat.SEVERE_THRESHOLD: "Severe damage threshold",
    ModifiableStat.ATTACK_ROLLS: "attack rolls",
    ModifiableStat.SPELLCAST_ROLLS: "Spellcast Rolls",
    **{stat: trait.value for stat, trait in _STAT_TO_TRAIT.items()},
}

SIMPLE_STATS: tuple[ModifiableStat, ...] = tuple(
    stat for stat in ModifiableStat if not stat.is_trait
)
"""The seven non-trait stats, in declaration order."""

CHARACTER_TRAITS: tuple[CharacterTrait, ...] = tuple(CharacterTrait)
"""All six traits, in declaration order."""


__all__ = [
    "CharacterTrait",
    "ModifiableStat",
    "ModifierSource",
    "Burden",
    "EquipmentMode",
    "BeastformActivation",
    "SIMPLE_STATS",
    "CHARACTER_TRAITS",
]
