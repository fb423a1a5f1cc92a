"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the Daggerheart character manager test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from dh_manager.models import (
    ArmorItem,
    Burden,
    DamageThresholds,
    EquipmentFeature,
    ExplicitStatModifiers,
    WeaponItem,
)


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from dh_manager.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "DH_MANAGER_DEBUG": "true",
        "DH_MANAGER_LOG_LEVEL": "DEBUG",
        "DH_MANAGER_ENGINE_DEFAULT_PROFICIENCY": "3",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Equipment Fixtures
# =============================================================================


@pytest.fixture
def full_plate() -> ArmorItem:
    """Standard armor with its own Evasion and Agility penalties."""
    return ArmorItem(
        name="Full Plate Armor",
        base_score=4,
        base_thresholds=DamageThresholds(major=8, severe=17),
        evasion_modifier=-2,
        agility_modifier=-1,
        features=[
            EquipmentFeature(name="Very Heavy", description="−2 to Evasion; −1 to Agility"),
        ],
    )


@pytest.fixture
def homebrew_armor() -> ArmorItem:
    """Homebrew armor carrying explicit modifiers."""
    return ArmorItem(
        name="Dragonscale Coat",
        base_score=5,
        stat_modifiers=ExplicitStatModifiers(evasion=1, severe_threshold=2),
    )


@pytest.fixture
def greatsword() -> WeaponItem:
    """A two-handed weapon with a parsed Evasion penalty."""
    return WeaponItem(
        name="Greatsword",
        burden=Burden.TWO_HANDED,
        features=[EquipmentFeature(name="Massive", description="−1 to Evasion")],
    )


@pytest.fixture
def tower_shield() -> WeaponItem:
    """A one-handed secondary weapon granting Armor Score."""
    return WeaponItem(
        name="Tower Shield",
        burden=Burden.ONE_HANDED,
        features=[
            EquipmentFeature(
                name="Barrier",
                description="+2 to Armor Score; −1 to Evasion",
            )
        ],
    )


@pytest.fixture
def camelcase_weapon() -> dict[str, Any]:
    """A weapon record as it arrives from JSON, with camelCase keys."""
    return {
        "name": "Runed Staff",
        "burden": "One-Handed",
        "statModifiers": {"spellcastRolls": 1, "traits": {"Knowledge": 1}},
    }
