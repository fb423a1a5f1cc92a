"""Equipment feature text parser.

Extracts numeric stat modifiers from equipment feature descriptions
written in the SRD's constrained phrasing. Only four sentence shapes are
recognized; anything else yields no modifiers, never an error.

Supported shapes (case-insensitive, typographic minus accepted):

* ``+1 to Evasion``, ``-1 to Finesse``, ``+3 to Severe damage threshold``
* ``You gain a +1 bonus to your Agility.``
* ``+2 Agility, -1 Proficiency`` (sign required, Proficiency/Evasion/traits only)
* ``-1 to all character traits and Evasion``

When the "all character traits" shape matches, the other shapes are not
tried for that description. Across shapes the first modifier found for a
stat wins; later mentions of the same stat are dropped, not summed.

Example:
    >>> parse_feature_description("+2 to Armor Score; −1 to Evasion")
    [StatModifier(stat=<ModifiableStat.ARMOR_SCORE: 'armor_score'>, value=2, ...), ...]
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any

from dh_manager.engine.fields import read_field
from dh_manager.models.enums import CHARACTER_TRAITS, ModifiableStat
from dh_manager.models.modifiers import ParsedFeatureEffect, StatModifier


# =============================================================================
# Shared Tables
# =============================================================================

_MINUS_SIGNS = str.maketrans(
    {
        "−": "-",  # minus sign
        "‒": "-",  # figure dash
        "–": "-",  # en dash
        "﹣": "-",  # small hyphen-minus
        "－": "-",  # fullwidth hyphen-minus
    }
)

STAT_NAME_LOOKUP: Mapping[str, ModifiableStat] = MappingProxyType(
    {stat.display_name.lower(): stat for stat in ModifiableStat}
)
"""Lowercased display name -> stat, shared by every shape."""

_TRAIT_STATS = tuple(ModifiableStat.from_trait(trait) for trait in CHARACTER_TRAITS)


def _alternation(stats: Iterable[ModifiableStat]) -> str:
    """Build a regex alternation of display names, tolerant of extra spaces."""
    return "|".join(
        r"\s+".join(re.escape(word) for word in stat.display_name.split())
        for stat in stats
    )


_ANY_STAT = _alternation(ModifiableStat)
_TERSE_STAT = _alternation((ModifiableStat.PROFICIENCY, ModifiableStat.EVASION, *_TRAIT_STATS))
_BONUS_STAT = _alternation((*_TRAIT_STATS, ModifiableStat.EVASION, ModifiableStat.PROFICIENCY))

# "+1 to Evasion"
_TO_PATTERN = re.compile(rf"(?<!\w)([+-]?\d+)\s*to\s+({_ANY_STAT})\b", re.IGNORECASE)

# "You gain a +1 bonus to your Agility."
_BONUS_PATTERN = re.compile(
    rf"gain\s+a\s+([+-]?\d+)\s*bonus\s+to\s+(?:your\s+)?({_BONUS_STAT})\b",
    re.IGNORECASE,
)

# "-1 Proficiency"; the sign is mandatory so unrelated numbers never match
_TERSE_PATTERN = re.compile(
    rf"([+-]\d+)\s+({_TERSE_STAT})(?=[,.;:\s]|$)",
    re.IGNORECASE,
)

# "-1 to all character traits[ and Evasion]"
_ALL_TRAITS_PATTERN = re.compile(
    r"(?<!\w)([+-]?\d+)\s*to\s+all\s+character\s+traits\b",
    re.IGNORECASE,
)
_AND_EVASION_PATTERN = re.compile(r"and\s+Evasion\b", re.IGNORECASE)

_SIGNED_INT = re.compile(r"^([+-])?(\d+)")


# =============================================================================
# Helpers
# =============================================================================


def normalize_minus_signs(text: str) -> str:
    """Replace typographic minus variants with an ASCII hyphen-minus.

    >>> normalize_minus_signs("−1 to Evasion")
    '-1 to Evasion'
    """
    return text.translate(_MINUS_SIGNS)


def parse_modifier_value(token: str) -> int:
    """Parse a signed integer token such as '+1', '-2' or '3'.

    Returns:
        The signed value, or 0 when the token is not a number.
    """
    match = _SIGNED_INT.match(normalize_minus_signs(token.strip()))
    if not match:
        return 0
    sign = -1 if match.group(1) == "-" else 1
    return sign * int(match.group(2))


def lookup_stat(name: str) -> ModifiableStat | None:
    """Map a stat name as written in feature text to its enum member."""
    return STAT_NAME_LOOKUP.get(" ".join(name.split()).lower())


def _match_stat_pattern(pattern: re.Pattern[str], text: str) -> list[StatModifier]:
    modifiers: list[StatModifier] = []
    for match in pattern.finditer(text):
        value = parse_modifier_value(match.group(1))
        stat = lookup_stat(match.group(2))
        if stat is not None and value != 0:
            modifiers.append(StatModifier(stat=stat, value=value))
    return modifiers


# =============================================================================
# Shape Matchers
# =============================================================================


def match_to_pattern(text: str) -> list[StatModifier]:
    """Shape A: ``<+-N> to <Stat Name>`` for any of the 13 stats."""
    return _match_stat_pattern(_TO_PATTERN, text)


def match_bonus_pattern(text: str) -> list[StatModifier]:
    """Shape B: ``gain a <+-N> bonus to your <Trait|Evasion|Proficiency>``."""
    return _match_stat_pattern(_BONUS_PATTERN, text)


def match_terse_pattern(text: str) -> list[StatModifier]:
    """Shape C: ``<+-N> <Stat>`` without "to", for Proficiency, Evasion and traits."""
    return _match_stat_pattern(_TERSE_PATTERN, text)


def match_all_traits_pattern(text: str) -> list[StatModifier]:
    """Shape D: ``<+-N> to all character traits[ and Evasion]``.

    Produces one modifier per trait, plus Evasion when the description
    says "and Evasion". Every modifier is flagged applies_to_all_traits.
    """
    modifiers: list[StatModifier] = []
    includes_evasion = _AND_EVASION_PATTERN.search(text) is not None
    for match in _ALL_TRAITS_PATTERN.finditer(text):
        value = parse_modifier_value(match.group(1))
        if value == 0:
            continue
        modifiers.extend(
            StatModifier(stat=stat, value=value, applies_to_all_traits=True)
            for stat in _TRAIT_STATS
        )
        if includes_evasion:
            modifiers.append(
                StatModifier(
                    stat=ModifiableStat.EVASION,
                    value=value,
                    applies_to_all_traits=True,
                )
            )
    return modifiers


_PER_STAT_MATCHERS: tuple[Callable[[str], list[StatModifier]], ...] = (
    match_to_pattern,
    match_bonus_pattern,
    match_terse_pattern,
)


def _first_per_stat(modifiers: Iterable[StatModifier]) -> list[StatModifier]:
    seen: set[ModifiableStat] = set()
    unique: list[StatModifier] = []
    for modifier in modifiers:
        if modifier.stat in seen:
            continue
        seen.add(modifier.stat)
        unique.append(modifier)
    return unique


# =============================================================================
# Public API
# =============================================================================


def parse_feature_description(description: Any) -> list[StatModifier]:
    """Extract stat modifiers from one feature description.

    Args:
        description: Feature rules text. Anything that is not a non-empty
            string yields no modifiers.

    Returns:
        Modifiers in discovery order, at most one per stat.
    """
    if not isinstance(description, str) or not description:
        return []

    text = normalize_minus_signs(description)

    if _ALL_TRAITS_PATTERN.search(text):
        candidates = match_all_traits_pattern(text)
    else:
        candidates = [
            modifier for matcher in _PER_STAT_MATCHERS for modifier in matcher(text)
        ]

    return _first_per_stat(candidates)


def parse_feature(feature: Any) -> ParsedFeatureEffect:
    """Parse one equipment feature into a structured effect.

    Args:
        feature: An EquipmentFeature, a mapping, or any object with
            ``name`` and ``description``.

    Returns:
        A fresh ParsedFeatureEffect.
    """
    name = read_field(feature, "name", "")
    description = read_field(feature, "description", "")
    return ParsedFeatureEffect(
        feature_name=str(name),
        description=description if isinstance(description, str) else str(description),
        modifiers=tuple(parse_feature_description(description)),
    )


def parse_features(features: Iterable[Any] | None) -> list[ParsedFeatureEffect]:
    """Parse every feature of an equipment item, one effect per feature."""
    if not features or isinstance(features, str) or not isinstance(features, Iterable):
        return []
    return [parse_feature(feature) for feature in features]


def has_stat_modifiers(feature: Any) -> bool:
    """Whether a feature's description yields any stat modifier."""
    return bool(parse_feature_description(read_field(feature, "description")))


__all__ = [
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
]
