"""Functions made available to the code templates."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def add(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


def exists_field(field_name: str, fields: Iterable[Any]) -> bool:
    """Tell whether any of the fields has the given name."""
    return any(f.name == field_name for f in fields)


_INT32_TYPES = frozenset({"int", "int32", "int16", "int8"})


def to_field_type(type_name: str) -> str:
    """Map a model field type to the type used in generated proto messages."""
    if type_name in ("field_type.DeletedTime", "time.Time"):
        return "int64"
    if type_name in _INT32_TYPES:
        return "int32"
    return type_name