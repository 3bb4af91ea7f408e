"""Helpers that assemble dynamic SQL clauses from fragments."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Cond:
    """A fragment that takes part in a clause only when ``cond`` holds."""

    cond: bool
    result: str


def if_clause(conds: Iterable[Cond]) -> str:
    """Join the results of the conditions that hold, each stripped of spaces."""
    parts = [c.result.strip(" ") if c.cond else "" for c in conds]
    return " " + " ".join(parts)


def where_clause(conds: Iterable[str]) -> str:
    """Build a ``WHERE`` clause, joining fragments with ``AND`` where needed."""
    return _join_clause(conds, "WHERE", _where_value, " ")


def set_clause(conds: Iterable[str]) -> str:
    """Build a ``SET`` clause from comma separated assignments."""
    return _join_clause(conds, "SET", _set_value, ",")


def _join_clause(
    conds: Iterable[str], keyword: str, deal: Callable[[str], str], sep: str
) -> str:
    sql = trim_all(sep.join(deal(c) for c in conds))
    if sql:
        sql = f" {keyword} {sql}"
    return sql


def trim_all(text: str) -> str:
    """Trim a leading and a trailing ``and``/``or``/``xor`` or comma."""
    return _trim_right(_trim_left(text))


def _trim_left(text: str) -> str:
    text = text.strip()
    lower = text.lower()
    if lower.startswith("and "):
        return text[4:]
    if lower.startswith("or "):
        return text[3:]
    if lower.startswith("xor "):
        return text[4:]
    if lower.startswith(","):
        return text[1:]
    return text


def _trim_right(text: str) -> str:
    text = text.strip()
    lower = text.lower()
    if lower.endswith(" and"):
        return text[:-3]
    if lower.endswith(" or"):
        return text[:-2]
    if lower.endswith(" xor"):
        return text[:-3]
    if lower.endswith(","):
        return text[:-1]
    return text


def _where_value(value: str) -> str:
    value = value.strip(" ")
    lower = value.lower()
    if not lower:
        return ""
    if lower.startswith(("and ", "or ", "xor ")):
        return value
    return "AND " + value


def _set_value(value: str) -> str:
    return value.strip(", ")


def join_where(value: str) -> str:
    """Return ``WHERE <value> `` for a non-empty trimmed value, else ``""``."""
    trimmed = trim_all(value)
    return f"WHERE {trimmed} " if trimmed else ""


def join_set(value: str) -> str:
    """Return ``SET <value> `` for a non-empty trimmed value, else ``""``."""
    trimmed = trim_all(value)
    return f"SET {trimmed} " if trimmed else ""


def join_trim_all(value: str) -> str:
    """Return the trimmed value followed by a single space."""
    return trim_all(value) + " "