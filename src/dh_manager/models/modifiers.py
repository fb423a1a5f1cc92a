"""Modifier records flowing through the equipment stat pipeline.

Two kinds of records live here:

* Parser output (StatModifier, ParsedFeatureEffect): small immutable
  values produced fresh for each feature description.
* Delta records (StatDeltas and its extensions): one integer per simple
  stat plus a dense trait mapping. NormalizedModifiers is the canonical
  per-item form, AggregatedEquipmentStats the pointwise sum across all
  equipped items.

Example:
    >>> mods = NormalizedModifiers(evasion=-1, source=ModifierSource.PARSED)
    >>> mods.traits[CharacterTrait.AGILITY]
    0
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dh_manager.models.enums import (
    CHARACTER_TRAITS,
    SIMPLE_STATS,
    CharacterTrait,
    ModifiableStat,
    ModifierSource,
)


# =============================================================================
# Parser Output
# =============================================================================


@dataclass(frozen=True)
class StatModifier:
    """One signed delta extracted from feature text or supplied explicitly.

    Attributes:
        stat: The stat being modified.
        value: Signed integer delta.
        applies_to_all_traits: True when produced by an "all character
            traits" phrase.
    """

    stat: ModifiableStat
    value: int
    applies_to_all_traits: bool = False


@dataclass(frozen=True)
class ParsedFeatureEffect:
    """Structured result of parsing one equipment feature.

    Attributes:
        feature_name: Name of the feature (e.g., 'Heavy').
        description: The description text as written.
        modifiers: Modifiers found, in discovery order.
    """

    feature_name: str
    description: str
    modifiers: tuple[StatModifier, ...] = field(default_factory=tuple)

    @property
    def has_modifiers(self) -> bool:
        return bool(self.modifiers)


# =============================================================================
# Delta Records
# =============================================================================


def empty_trait_map() -> dict[CharacterTrait, int]:
    """Create a trait mapping with every trait at zero."""
    return {trait: 0 for trait in CHARACTER_TRAITS}


class StatDeltas(BaseModel):
    """Additive stat deltas: one field per simple stat plus all six traits.

    Field names match the ModifiableStat values of the simple stats, so a
    stat can be read or written with getattr/setattr on its value.
    """

    model_config = ConfigDict(extra="forbid")

    evasion: int = 0
    proficiency: int = 0
    armor_score: int = 0
    major_threshold: int = 0
    severe_threshold: int = 0
    attack_rolls: int = 0
    spellcast_rolls: int = 0
    traits: dict[CharacterTrait, int] = Field(default_factory=empty_trait_map)

    @field_validator("traits", mode="before")
    @classmethod
    def fill_missing_traits(cls, value: Any) -> Any:
        """Ensure the trait mapping is dense.

        Args:
            value: Raw trait mapping (may be partial or None).

        Returns:
            Mapping with every trait present, missing ones at zero.
        """
        if value is None:
            return empty_trait_map()
        if isinstance(value, Mapping):
            return {**empty_trait_map(), **value}
        return value

    def get(self, stat: ModifiableStat) -> int:
        """Get the delta for any modifiable stat."""
        trait = stat.trait
        if trait is not None:
            return self.traits[trait]
        return getattr(self, stat.value)

    def add(self, stat: ModifiableStat, value: int) -> None:
        """Add a delta to any modifiable stat in place."""
        trait = stat.trait
        if trait is not None:
            self.traits[trait] += value
        else:
            setattr(self, stat.value, getattr(self, stat.value) + value)

    def iter_nonzero(self) -> Iterator[tuple[ModifiableStat, int]]:
        """Yield (stat, delta) for every non-zero delta.

        Simple stats come first in declaration order, then traits.
        """
        for stat in SIMPLE_STATS:
            value = getattr(self, stat.value)
            if value:
                yield stat, value
        for trait in CHARACTER_TRAITS:
            value = self.traits[trait]
            if value:
                yield ModifiableStat.from_trait(trait), value

    def is_empty(self) -> bool:
        """Whether every delta is zero."""
        return next(self.iter_nonzero(), None) is None


class NormalizedModifiers(StatDeltas):
    """The canonical per-item modifier record.

    Exactly one source tag per equipment item. Parsed records keep the
    feature effects that actually produced modifiers so presentation code
    can explain each number.

    Attributes:
        source: Provenance of the deltas.
        equipment_name: Display name of the item, if known.
        effects: Feature effects with at least one modifier (parsed only).
    """

    source: ModifierSource = ModifierSource.NONE
    equipment_name: str | None = None
    effects: list[ParsedFeatureEffect] = Field(default_factory=list)


class AggregatedEquipmentStats(StatDeltas):
    """Pointwise sum of the normalized modifiers of all equipped items.

    Built empty and filled by the aggregator during a single pass;
    treat it as read-only afterwards.

    Attributes:
        contributions: The non-empty per-item records that were summed.
    """

    contributions: list[NormalizedModifiers] = Field(default_factory=list)

    @property
    def features(self) -> list[ParsedFeatureEffect]:
        """All contributing feature effects across equipment, for display."""
        return [effect for mods in self.contributions for effect in mods.effects]


__all__ = [
    "StatModifier",
    "ParsedFeatureEffect",
    "StatDeltas",
    "NormalizedModifiers",
    "AggregatedEquipmentStats",
    "empty_trait_map",
]
