"""Integration tests for the full equipment-to-stats pipeline.

These exercise parsing, normalization, aggregation, state adaptation and
calculation together, the way the character sheet drives them.
"""

from __future__ import annotations

from typing import Any

import pytest
import structlog.testing

from dh_manager import (
    ArmorItem,
    ClassSelection,
    CustomEquipmentSlot,
    EquipmentFeature,
    EquipmentState,
    ProgressionState,
    WeaponItem,
    aggregate_equipment_stats,
    build_engine_input,
    calculate_character_stats,
    get_equipment_stats_summary,
    get_stat_totals,
)
from dh_manager.engine import get_equipment_feature_modifiers, has_equipment_modifiers
from dh_manager.models import (
    Burden,
    CharacterTrait,
    DamageThresholds,
    EquipmentMode,
    ExplicitStatModifiers,
    TraitState,
)


@pytest.fixture
def guardian_equipment(full_plate: ArmorItem, tower_shield: WeaponItem) -> EquipmentState:
    """A Guardian in full plate with a longsword and tower shield."""
    return EquipmentState(
        armor=full_plate,
        primary_weapon=WeaponItem(name="Longsword", burden=Burden.ONE_HANDED),
        secondary_weapon=tower_shield,
    )


class TestStatsPipeline:
    """End-to-end stat calculation."""

    def test_guardian_full_build(self, guardian_equipment: EquipmentState) -> None:
        """Test a fully equipped character."""
        stats = calculate_character_stats(
            build_engine_input(
                ClassSelection(class_name="Guardian"),
                guardian_equipment,
                ProgressionState(current_level=4),
                {CharacterTrait.AGILITY: TraitState(value=1)},
            )
        )

        # Guardian 7 HP, tier 2
        assert stats.hp.total == 8
        # 9 base, -2 plate, -1 shield
        assert stats.evasion.total == 6
        assert stats.evasion.armor_modifier == -2
        assert stats.evasion.equipment_modifier == -1
        # 4 plate, +2 shield
        assert stats.armor_score.total == 6
        # 8/17 plate, +3 levels
        assert stats.thresholds.major.total == 11
        assert stats.thresholds.severe.total == 20
        # 1 value, -1 plate agility
        assert stats.traits[CharacterTrait.AGILITY].total == 0
        assert has_equipment_modifiers(stats)

    def test_two_handed_drops_secondary(self, greatsword: WeaponItem, tower_shield: WeaponItem) -> None:
        """Test the shield is ignored behind a two-handed weapon."""
        equipment = EquipmentState(primary_weapon=greatsword, secondary_weapon=tower_shield)

        totals = get_stat_totals(
            calculate_character_stats(
                build_engine_input(ClassSelection(class_name="Warrior"), equipment, None, None)
            )
        )

        assert totals.armor_score == 0
        assert totals.evasion == 10

    def test_homebrew_armor_explicit(self, full_plate: ArmorItem) -> None:
        """Test homebrew armor contributes its explicit values only."""
        homebrew = ArmorItem(
            name="Runic Mail",
            base_score=3,
            base_thresholds=DamageThresholds(major=7, severe=14),
            features=[EquipmentFeature(name="Warded", description="+5 to Evasion")],
            stat_modifiers=ExplicitStatModifiers(evasion=1, traits={CharacterTrait.KNOWLEDGE: 1}),
        )
        equipment = EquipmentState(
            armor=full_plate,
            homebrew_armor=homebrew,
            armor_mode=EquipmentMode.HOMEBREW,
        )

        stats = calculate_character_stats(
            build_engine_input(ClassSelection(class_name="Wizard"), equipment, None, None)
        )

        assert stats.armor_score.total == 3
        assert stats.evasion.total == 12
        assert stats.traits[CharacterTrait.KNOWLEDGE].total == 1
        assert stats.thresholds.major.total == 7

    def test_all_traits_penalty(self) -> None:
        """Test a cursed item lowers every trait and Evasion by one."""
        cursed = CustomEquipmentSlot(
            name="Cursed Idol",
            description="−1 to all character traits and Evasion",
        )

        stats = calculate_character_stats(
            build_engine_input(None, EquipmentState(custom_slots=[cursed]), None, None)
        )

        assert stats.evasion.total == 9
        assert all(calc.total == -1 for calc in stats.traits.values())

    def test_json_shaped_equipment(self, camelcase_weapon: dict[str, Any]) -> None:
        """Test plain mappings flow through the aggregator."""
        equipment = EquipmentState()
        deltas = get_equipment_feature_modifiers(equipment)
        assert deltas.is_empty()

        aggregate = aggregate_equipment_stats(primary_weapon=camelcase_weapon)
        assert get_equipment_stats_summary(aggregate) == ["Spellcast Rolls: +1", "Knowledge: +1"]

    def test_pipeline_idempotent(self, guardian_equipment: EquipmentState) -> None:
        """Test rebuilding from the same state gives identical stats."""

        def run() -> Any:
            return calculate_character_stats(
                build_engine_input(
                    ClassSelection(class_name="Guardian"),
                    guardian_equipment,
                    ProgressionState(current_level=4),
                    None,
                )
            )

        assert run() == run()

    def test_normalization_logged(self, guardian_equipment: EquipmentState) -> None:
        """Test normalization decisions are logged with their source."""
        with structlog.testing.capture_logs() as logs:
            calculate_character_stats(build_engine_input(None, guardian_equipment, None, None))

        normalized = [entry for entry in logs if entry["event"] == "Normalized equipment"]
        assert {entry["source"] for entry in normalized} == {"legacy-armor", "parsed", "none"}
        assert all(entry["log_level"] == "debug" for entry in normalized)
