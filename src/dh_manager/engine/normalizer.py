"""Equipment normalizer.

Turns one equipment item, whatever its shape, into exactly one
NormalizedModifiers record. The shape is detected from the fields the
item carries, in strict priority order:

1. ``stat_modifiers`` present: copy the explicit values (source ``explicit``).
   Feature text is not parsed.
2. ``evasion_modifier`` or ``agility_modifier`` present: standard armor.
   Emit an empty record (source ``legacy-armor``). The armor's own
   modifiers are applied once by the calculation engine through
   ArmorInput; adding them here as well would count them twice.
3. Otherwise: parse feature descriptions (source ``parsed``), or ``none``
   when no feature yields a modifier.

A missing item normalizes to an empty record tagged ``none``.
"""

from __future__ import annotations

from typing import Any

from dh_manager.core.logging import get_logger
from dh_manager.engine.feature_parser import parse_features
from dh_manager.engine.fields import as_int, has_field, read_field
from dh_manager.models.enums import (
    CHARACTER_TRAITS,
    SIMPLE_STATS,
    ModifierSource,
)
from dh_manager.models.modifiers import NormalizedModifiers


logger = get_logger(__name__)

_ARMOR_FIELDS = ("evasion_modifier", "agility_modifier")


def create_empty_modifiers(source: ModifierSource = ModifierSource.NONE) -> NormalizedModifiers:
    """Create an all-zero record with the given source tag."""
    return NormalizedModifiers(source=source)


def has_explicit_modifiers(equipment: Any) -> bool:
    """Whether the item carries a structured ``stat_modifiers`` block."""
    return has_field(equipment, "stat_modifiers")


def has_legacy_armor_fields(equipment: Any) -> bool:
    """Whether the item exposes armor base-stat fields."""
    return any(has_field(equipment, name) for name in _ARMOR_FIELDS)


def _equipment_name(equipment: Any) -> str | None:
    name = read_field(equipment, "name")
    return str(name) if name is not None else None


def normalize_from_explicit(equipment: Any) -> NormalizedModifiers:
    """Copy an item's explicit stat modifiers, unset fields at zero."""
    explicit = read_field(equipment, "stat_modifiers")
    mods = create_empty_modifiers(ModifierSource.EXPLICIT)
    mods.equipment_name = _equipment_name(equipment)

    for stat in SIMPLE_STATS:
        setattr(mods, stat.value, as_int(read_field(explicit, stat.value, 0)))

    traits = read_field(explicit, "traits")
    if traits is not None:
        for trait in CHARACTER_TRAITS:
            value = read_field(traits, trait.value)
            if value is None:
                value = read_field(traits, trait.value.lower(), 0)
            mods.traits[trait] = as_int(value)

    return mods


def normalize_from_legacy_armor(armor: Any) -> NormalizedModifiers:
    """Emit an empty record for standard armor.

    The armor's evasion and agility modifiers belong to ArmorInput, which
    the calculation engine applies directly.
    """
    mods = create_empty_modifiers(ModifierSource.LEGACY_ARMOR)
    mods.equipment_name = _equipment_name(armor)
    return mods


def normalize_from_features(equipment: Any) -> NormalizedModifiers:
    """Fold every modifier parsed from the item's features into one record."""
    mods = create_empty_modifiers(ModifierSource.PARSED)
    mods.equipment_name = _equipment_name(equipment)

    for effect in parse_features(read_field(equipment, "features")):
        if not effect.has_modifiers:
            continue
        mods.effects.append(effect)
        for modifier in effect.modifiers:
            mods.add(modifier.stat, modifier.value)

    if not mods.effects:
        mods.source = ModifierSource.NONE
    return mods


def normalize_equipment(equipment: Any) -> NormalizedModifiers:
    """Normalize any equipment item to unified modifiers.

    Args:
        equipment: An equipment model, mapping, or object; None for an
            empty slot.

    Returns:
        A fresh NormalizedModifiers record.
    """
    if equipment is None:
        return create_empty_modifiers(ModifierSource.NONE)

    if has_explicit_modifiers(equipment):
        mods = normalize_from_explicit(equipment)
    elif has_legacy_armor_fields(equipment):
        mods = normalize_from_legacy_armor(equipment)
    else:
        mods = normalize_from_features(equipment)

    logger.debug(
        "Normalized equipment",
        equipment=mods.equipment_name,
        source=mods.source.value,
    )
    return mods


def has_any_modifiers(mods: NormalizedModifiers) -> bool:
    """Whether a normalized record has any non-zero delta."""
    return not mods.is_empty()


__all__ = [
    "create_empty_modifiers",
    "has_explicit_modifiers",
    "has_legacy_armor_fields",
    "normalize_from_explicit",
    "normalize_from_legacy_armor",
    "normalize_from_features",
    "normalize_equipment",
    "has_any_modifiers",
]
