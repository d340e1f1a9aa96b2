"""Normalization helpers.

Typed accessors over already-parsed JSON values. A member whose value has
the wrong JSON type is treated exactly like a missing member.
"""

from __future__ import annotations

from typing import Any


def json_string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def json_object(value: Any) -> dict[str, Any] | None:
    return value if isinstance(value, dict) else None


def json_array(value: Any) -> list[Any] | None:
    return value if isinstance(value, list) else None


def first_string_element(value: Any) -> str | None:
    """Return the first element of a JSON array if it is a string."""
    array = json_array(value)
    if not array:
        return None
    return json_string(array[0])
