"""Character-sheet state shapes consumed by the engine adapters.

These mirror what the character-management layer stores: the class
selection, progression, and an active beastform. The static catalogs
(classes, beastforms) stay outside this package; a beastform arrives here
already resolved to the stat-relevant part of its definition.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from dh_manager.models.enums import BeastformActivation, CharacterTrait


class HomebrewClass(BaseModel):
    """Base values of a user-authored class."""

    model_config = ConfigDict(frozen=True)

    starting_hit_points: int
    starting_evasion: int


class ClassSelection(BaseModel):
    """The class chosen on the character sheet."""

    model_config = ConfigDict(frozen=True)

    class_name: str | None = None
    is_homebrew: bool = False
    homebrew_class: HomebrewClass | None = None


class ProgressionState(BaseModel):
    """Progression as tracked on the character sheet."""

    model_config = ConfigDict(frozen=True)

    current_level: int = 1


class TraitBonus(BaseModel):
    """A bonus to one trait."""

    model_config = ConfigDict(frozen=True)

    trait: CharacterTrait
    value: int


class BeastformForm(BaseModel):
    """The stat-relevant part of a beastform definition."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    trait_bonus: TraitBonus
    evasion_bonus: int = 0


class BeastformState(BaseModel):
    """A Druid's current beastform.

    Attributes:
        active: Whether the character is currently transformed.
        form: The assumed form.
        activation_method: How the form was entered.
        evolution_bonus_trait: Extra trait bonus granted by evolution.
    """

    model_config = ConfigDict(frozen=True)

    active: bool = False
    form: BeastformForm | None = None
    activation_method: BeastformActivation = BeastformActivation.STANDARD
    evolution_bonus_trait: TraitBonus | None = None


__all__ = [
    "HomebrewClass",
    "ClassSelection",
    "ProgressionState",
    "TraitBonus",
    "BeastformForm",
    "BeastformState",
]
