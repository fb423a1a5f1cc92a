"""Stats engine for the Daggerheart character manager.

Turns equipment and character-sheet state into derived stats in four
stages: feature text is parsed, each item is normalized to one modifier
record, the records are aggregated, and the calculator combines them with
class, armor, progression and trait inputs.

Submodules:
    feature_parser: Stat modifiers from SRD feature phrasing
    normalizer: One normalized record per equipment item
    aggregator: Pointwise sum across equipped items
    calculator: Final stats with breakdowns
    adapters: Character-sheet state to engine input

Example:
    >>> from dh_manager.engine import build_engine_input, calculate_character_stats
    >>> from dh_manager.models import ClassSelection, ProgressionState
    >>>
    >>> stats_input = build_engine_input(
    ...     ClassSelection(class_name="Guardian"), None, ProgressionState(current_level=3), None
    ... )
    >>> calculate_character_stats(stats_input).hp.total
    8
"""

from __future__ import annotations

# =============================================================================
# Feature Parsing
# =============================================================================
from dh_manager.engine.feature_parser import (
    STAT_NAME_LOOKUP,
    has_stat_modifiers,
    lookup_stat,
    match_all_traits_pattern,
    match_bonus_pattern,
    match_terse_pattern,
    match_to_pattern,
    normalize_minus_signs,
    parse_feature,
    parse_feature_description,
    parse_features,
    parse_modifier_value,
)

# =============================================================================
# Normalization
# =============================================================================
from dh_manager.engine.normalizer import (
    create_empty_modifiers,
    has_any_modifiers,
    has_explicit_modifiers,
    has_legacy_armor_fields,
    normalize_equipment,
    normalize_from_explicit,
    normalize_from_features,
    normalize_from_legacy_armor,
)

# =============================================================================
# Aggregation
# =============================================================================
from dh_manager.engine.aggregator import (
    aggregate_equipment_stats,
    aggregate_normalized_modifiers,
    create_empty_aggregated_stats,
    get_equipment_stats_summary,
    is_two_handed,
)

# =============================================================================
# Calculation
# =============================================================================
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

# =============================================================================
# State Adapters
# =============================================================================
from dh_manager.engine.adapters import (
    build_beastform_modifiers,
    build_engine_input,
    extract_armor_input,
    extract_class_input,
    extract_equipment_modifiers,
    extract_progression_input,
    extract_traits_input,
    get_active_armor,
    get_active_combat_wheelchair,
    get_active_primary_weapon,
    get_active_secondary_weapon,
    get_equipment_feature_modifiers,
    get_tier_from_level,
    merge_equipment_modifiers,
)


__all__ = [
    # Feature parsing
    "STAT_NAME_LOOKUP",
    "normalize_minus_signs",
    "parse_modifier_value",
    "lookup_stat",
    "match_to_pattern",
    "match_bonus_pattern",
    "match_terse_pattern",
    "match_all_traits_pattern",
    "parse_feature_description",
    "parse_feature",
    "parse_features",
    "has_stat_modifiers",
    # Normalization
    "create_empty_modifiers",
    "has_explicit_modifiers",
    "has_legacy_armor_fields",
    "normalize_from_explicit",
    "normalize_from_legacy_armor",
    "normalize_from_features",
    "normalize_equipment",
    "has_any_modifiers",
    # Aggregation
    "create_empty_aggregated_stats",
    "is_two_handed",
    "aggregate_normalized_modifiers",
    "aggregate_equipment_stats",
    "get_equipment_stats_summary",
    # Calculation
    "calculate_hp",
    "calculate_evasion",
    "calculate_armor_score",
    "calculate_proficiency",
    "calculate_thresholds",
    "calculate_traits",
    "calculate_character_stats",
    "get_stat_totals",
    "has_equipment_modifiers",
    # State adapters
    "get_active_armor",
    "get_active_primary_weapon",
    "get_active_secondary_weapon",
    "get_active_combat_wheelchair",
    "get_equipment_feature_modifiers",
    "get_tier_from_level",
    "extract_class_input",
    "extract_armor_input",
    "extract_equipment_modifiers",
    "extract_progression_input",
    "extract_traits_input",
    "build_beastform_modifiers",
    "merge_equipment_modifiers",
    "build_engine_input",
]
