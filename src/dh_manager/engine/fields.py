"""Capability-based field access for heterogeneous equipment records.

Equipment reaches the engine as pydantic models, plain mappings from
JSON (camelCase keys) or from Python code (snake_case keys), or arbitrary
objects. These helpers read a field from any of them; a field counts as
present only when it exists and is not None.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def read_field(item: Any, name: str, default: Any = None) -> Any:
    """Read a snake_case field from a model, mapping, or object.

    Args:
        item: The record to read from.
        name: Field name in snake_case; the camelCase key is also tried
            for mappings.
        default: Returned when the field is absent or None.

    Returns:
        The field value, or ``default``.
    """
    if item is None:
        return default
    if isinstance(item, Mapping):
        value = item.get(name)
        if value is None:
            value = item.get(_camel_case(name))
    else:
        value = getattr(item, name, None)
    return default if value is None else value


def has_field(item: Any, name: str) -> bool:
    """Whether the record carries a non-None value for the field."""
    return read_field(item, name) is not None


def as_int(value: Any) -> int:
    """Coerce a numeric field to int, treating anything unusable as zero.

    >>> as_int("3"), as_int(None), as_int("abc"), as_int(float("inf"))
    (3, 0, 0, 0)
    """
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
