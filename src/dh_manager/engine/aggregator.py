"""Stats aggregator.

Sums the normalized modifiers of every equipped item into a single
AggregatedEquipmentStats record. A two-handed primary weapon occupies the
secondary slot, so whatever sits there is left out of the sum.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from dh_manager.core.logging import get_logger
from dh_manager.engine.fields import read_field
from dh_manager.engine.normalizer import normalize_equipment
from dh_manager.models.enums import CHARACTER_TRAITS, SIMPLE_STATS, Burden
from dh_manager.models.equipment import CustomEquipmentSlot, EquipmentFeature
from dh_manager.models.modifiers import AggregatedEquipmentStats, NormalizedModifiers


logger = get_logger(__name__)


def create_empty_aggregated_stats() -> AggregatedEquipmentStats:
    """Create an aggregate with every delta at zero and no contributions."""
    return AggregatedEquipmentStats()


def is_two_handed(weapon: Any) -> bool:
    """Whether a weapon's burden is Two-Handed."""
    burden = read_field(weapon, "burden")
    if burden is None:
        return False
    return str(burden).strip().lower() == Burden.TWO_HANDED.value.lower()


def _add_into(total: AggregatedEquipmentStats, mods: NormalizedModifiers) -> None:
    for stat in SIMPLE_STATS:
        setattr(total, stat.value, getattr(total, stat.value) + getattr(mods, stat.value))
    for trait in CHARACTER_TRAITS:
        total.traits[trait] += mods.traits[trait]


def aggregate_normalized_modifiers(
    records: Iterable[NormalizedModifiers],
) -> AggregatedEquipmentStats:
    """Sum already-normalized records pointwise.

    Args:
        records: Normalized modifiers, one per contributing item.

    Returns:
        The aggregate; only non-empty records are listed as contributions.
    """
    total = create_empty_aggregated_stats()
    for mods in records:
        if mods.is_empty():
            continue
        _add_into(total, mods)
        total.contributions.append(mods)
    return total


def _custom_slot_item(slot: Any) -> Any:
    """Treat a description-only custom slot as a single feature."""
    if read_field(slot, "features") or read_field(slot, "stat_modifiers") is not None:
        return slot
    description = read_field(slot, "description")
    if not description:
        return slot
    name = read_field(slot, "name", "")
    return CustomEquipmentSlot(
        name=str(name),
        description=str(description),
        features=[EquipmentFeature(name=str(name), description=str(description))],
    )


def _is_activated(slot: Any) -> bool:
    return read_field(slot, "activated") is not False


def aggregate_equipment_stats(
    armor: Any = None,
    primary_weapon: Any = None,
    secondary_weapon: Any = None,
    wheelchair: Any = None,
    custom_slots: Iterable[Any] | None = None,
) -> AggregatedEquipmentStats:
    """Normalize and sum the modifiers of every equipped item.

    Args:
        armor: Active armor, or None.
        primary_weapon: Active primary weapon, or None.
        secondary_weapon: Active secondary weapon, or None. Skipped when
            the primary weapon is two-handed.
        wheelchair: Active combat wheelchair, or None.
        custom_slots: Custom equipment slots; deactivated ones are skipped.

    Returns:
        The aggregated equipment stats.

    Example:
        >>> stats = aggregate_equipment_stats(
        ...     primary_weapon={"name": "Warhammer",
        ...                     "features": [{"name": "Heavy", "description": "−1 to Evasion"}]},
        ... )
        >>> stats.evasion
        -1
    """
    items: list[Any] = [armor, primary_weapon]

    if secondary_weapon is not None and is_two_handed(primary_weapon):
        logger.debug(
            "Skipping secondary weapon for two-handed primary",
            primary=read_field(primary_weapon, "name"),
            secondary=read_field(secondary_weapon, "name"),
        )
    else:
        items.append(secondary_weapon)

    items.append(wheelchair)
    items.extend(
        _custom_slot_item(slot) for slot in (custom_slots or ()) if _is_activated(slot)
    )

    stats = aggregate_normalized_modifiers(
        normalize_equipment(item) for item in items if item is not None
    )
    logger.debug(
        "Aggregated equipment stats",
        contributions=[mods.equipment_name for mods in stats.contributions],
    )
    return stats


_SUMMARY_LABELS: dict[str, str] = {
    "evasion": "Evasion",
    "proficiency": "Proficiency",
    "armor_score": "Armor Score",
    "major_threshold": "Major Threshold",
    "severe_threshold": "Severe Threshold",
    "attack_rolls": "Attack Rolls",
    "spellcast_rolls": "Spellcast Rolls",
}


def _format_signed(value: int) -> str:
    return f"+{value}" if value > 0 else str(value)


def get_equipment_stats_summary(stats: AggregatedEquipmentStats) -> list[str]:
    """Render the non-zero deltas as display lines.

    >>> stats = create_empty_aggregated_stats()
    >>> stats.armor_score = 3
    >>> get_equipment_stats_summary(stats)
    ['Armor Score: +3']
    """
    lines: list[str] = []
    for stat, value in stats.iter_nonzero():
        trait = stat.trait
        label = trait.value if trait is not None else _SUMMARY_LABELS[stat.value]
        lines.append(f"{label}: {_format_signed(value)}")
    return lines


__all__ = [
    "create_empty_aggregated_stats",
    "is_two_handed",
    "aggregate_normalized_modifiers",
    "aggregate_equipment_stats",
    "get_equipment_stats_summary",
]
