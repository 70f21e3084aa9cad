"""Helpers for safely working with dynamic (untyped) structures.

Use these helpers at boundaries where we ingest TOML or environment data.
They provide runtime validation and static type narrowing.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    """Return obj as StrDict if it matches, else None."""
    if is_str_dict(obj):
        return obj
    return None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys) from a mapping."""
    value = table.get(key)
    return as_str_dict(value)


def get_int(table: Mapping[str, object], key: str) -> int | None:
    """Get an integer value from a mapping.

    Returns None if missing or not an int. Booleans are rejected even though
    they are ints in Python.
    """
    value = table.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def parse_int(raw: str | None) -> int | None:
    """Parse an integer from a string (e.g. an environment variable).

    Returns None if raw is None, blank, or not a base-10 integer.
    """
    if raw is None:
        return None
    s = raw.strip()
    if not s:
        return None
    try:
        return int(s, 10)
    except ValueError:
        return None
