"""Tests for the character stats calculation engine."""

from __future__ import annotations

from pathlib import Path

import pytest

from dh_manager.engine.calculator import (
    calculate_armor_score,
    calculate_character_stats,
    calculate_evasion,
    calculate_hp,
    calculate_proficiency,
    calculate_thresholds,
    calculate_traits,
    get_stat_totals,
    has_equipment_modifiers,
)
from dh_manager.models import (
    AggregatedEquipmentStats,
    ArmorInput,
    CharacterStatsInput,
    CharacterTrait,
    ClassInput,
    DamageThresholds,
    ProgressionInput,
    StatDeltas,
    TraitsInput,
    TraitState,
)


@pytest.fixture
def scenario_input() -> CharacterStatsInput:
    """A level 5 character in light armor with no equipment modifiers."""
    return CharacterStatsInput(
        character_class=ClassInput(base_hp=6, base_evasion=10, tier=1),
        armor=ArmorInput(base_thresholds=DamageThresholds(major=6, severe=9)),
        progression=ProgressionInput(level=5),
    )


class TestIndividualCalculators:
    """Tests for per-stat calculators."""

    @pytest.mark.parametrize(("tier", "expected"), [(1, 6), (2, 7), (4, 9), (0, 6)])
    def test_hp_tier_bonus(self, tier: int, expected: int) -> None:
        """Test one extra HP per tier above the first."""
        assert calculate_hp(ClassInput(base_hp=6, tier=tier)).total == expected

    def test_evasion_components(self) -> None:
        """Test armor and equipment modifiers are applied once each."""
        evasion = calculate_evasion(
            ClassInput(base_evasion=10),
            ArmorInput(evasion_modifier=-2),
            StatDeltas(evasion=1),
        )

        assert evasion.armor_modifier == -2
        assert evasion.equipment_modifier == 1
        assert evasion.total == 9

    def test_armor_score(self) -> None:
        """Test base score plus equipment."""
        assert calculate_armor_score(ArmorInput(base_score=4), StatDeltas(armor_score=2)).total == 6

    def test_proficiency_explicit_base(self) -> None:
        """Test an explicit base proficiency."""
        assert calculate_proficiency(StatDeltas(proficiency=-1), base_proficiency=3).total == 2

    def test_proficiency_default_from_settings(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Test the configured default applies when no base is given."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("DH_MANAGER_ENGINE_DEFAULT_PROFICIENCY", "4")

        assert calculate_proficiency(StatDeltas()).base == 4

    @pytest.mark.parametrize(("level", "bonus"), [(1, 0), (2, 1), (10, 9), (0, 0)])
    def test_threshold_level_bonus(self, level: int, bonus: int) -> None:
        """Test thresholds gain one per level above the first."""
        thresholds = calculate_thresholds(
            ArmorInput(), ProgressionInput(level=level), StatDeltas()
        )

        assert thresholds.major.level_bonus == bonus
        assert thresholds.severe.level_bonus == bonus

    def test_thresholds_independent(self) -> None:
        """Test equipment applies to each threshold separately."""
        thresholds = calculate_thresholds(
            ArmorInput(base_thresholds=DamageThresholds(major=6, severe=12)),
            ProgressionInput(level=1),
            StatDeltas(severe_threshold=2),
        )

        assert thresholds.major.total == 6
        assert thresholds.severe.total == 14

    def test_traits_armor_agility_only_on_agility(self) -> None:
        """Test the armor's agility modifier touches Agility alone."""
        traits = calculate_traits(
            TraitsInput(
                traits={
                    CharacterTrait.AGILITY: TraitState(value=2, bonus=1),
                    CharacterTrait.STRENGTH: TraitState(value=1, marked=True),
                }
            ),
            ArmorInput(agility_modifier=-1),
            StatDeltas(traits={CharacterTrait.AGILITY: 1, CharacterTrait.STRENGTH: -1}),
        )

        assert traits[CharacterTrait.AGILITY].equipment_modifier == 0
        assert traits[CharacterTrait.AGILITY].total == 3
        assert traits[CharacterTrait.STRENGTH].total == 0
        assert traits[CharacterTrait.STRENGTH].marked is True
        assert len(traits) == 6


class TestCalculateCharacterStats:
    """Tests for the main engine function."""

    def test_scenario(self, scenario_input: CharacterStatsInput) -> None:
        """Test the level 5 baseline character."""
        totals = get_stat_totals(calculate_character_stats(scenario_input))

        assert totals.hp == 6
        assert totals.evasion == 10
        assert totals.armor_score == 0
        assert totals.proficiency == 2
        assert totals.major_threshold == 10
        assert totals.severe_threshold == 13

    def test_armor_and_equipment_evasion(self, scenario_input: CharacterStatsInput) -> None:
        """Test armor penalty and equipment bonus each count once."""
        stats_input = scenario_input.model_copy(
            update={
                "armor": ArmorInput(
                    evasion_modifier=-2,
                    base_thresholds=DamageThresholds(major=6, severe=9),
                ),
                "equipment_modifiers": AggregatedEquipmentStats(evasion=1),
            }
        )

        assert calculate_character_stats(stats_input).evasion.total == 9

    def test_negative_totals_not_clamped(self) -> None:
        """Test totals may go below zero."""
        stats = calculate_character_stats(
            CharacterStatsInput(equipment_modifiers=StatDeltas(evasion=-20, armor_score=-1))
        )

        assert stats.evasion.total == -10
        assert stats.armor_score.total == -1

    def test_roll_modifiers(self) -> None:
        """Test attack and spellcast deltas pass through."""
        stats = calculate_character_stats(
            CharacterStatsInput(equipment_modifiers=StatDeltas(attack_rolls=1, spellcast_rolls=-1))
        )

        assert stats.roll_modifiers.attack == 1
        assert stats.roll_modifiers.spellcast == -1

    def test_defaults(self) -> None:
        """Test no input at all uses defaults."""
        stats = calculate_character_stats()

        assert stats.hp.total == 6
        assert stats.evasion.total == 10
        assert stats.thresholds.major.total == 5
        assert stats.thresholds.severe.total == 11

    def test_deterministic(self, scenario_input: CharacterStatsInput) -> None:
        """Test repeated calls give equal outputs."""
        assert calculate_character_stats(scenario_input) == calculate_character_stats(scenario_input)


class TestConvenienceFunctions:
    """Tests for totals and modifier detection."""

    def test_has_equipment_modifiers(self) -> None:
        """Test detection of any equipment contribution."""
        plain = calculate_character_stats()
        with_trait = calculate_character_stats(
            CharacterStatsInput(equipment_modifiers=StatDeltas(traits={CharacterTrait.INSTINCT: 1}))
        )

        assert has_equipment_modifiers(plain) is False
        assert has_equipment_modifiers(with_trait) is True

    def test_stat_totals_traits(self) -> None:
        """Test trait totals are kept."""
        stats = calculate_character_stats(
            CharacterStatsInput(
                traits=TraitsInput(traits={CharacterTrait.PRESENCE: TraitState(value=2)})
            )
        )

        assert get_stat_totals(stats).traits[CharacterTrait.PRESENCE] == 2
