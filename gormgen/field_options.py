"""Options that create, filter or modify the fields of a generated model."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

TAG_KEY_JSON = "json"
TABLE_PLACEHOLDER = "@@table"


@dataclass
class ModelField:
    """A field of a model struct about to be generated."""

    name: str = ""
    type: str = ""
    column_name: str = ""
    column_comment: str = ""
    multiline_comment: bool = False
    tag: dict[str, str] = field(default_factory=dict)
    gorm_tag: dict[str, list[str]] = field(default_factory=dict)
    custom_gen_type: str = ""


FieldOpt = Callable[[ModelField], Optional[ModelField]]


def field_new(field_name: str, field_type: str, field_tag: Mapping[str, str]) -> FieldOpt:
    """Create a new field of any type."""

    def opt(_: ModelField) -> ModelField:
        return ModelField(name=field_name, type=field_type, tag=dict(field_tag))

    return opt


def field_ignore(*args: str) -> FieldOpt:
    """Drop fields whose column name is one of the given names."""
    names = frozenset(args)

    def opt(m: ModelField) -> ModelField | None:
        return None if m.column_name in names else m

    return opt


def field_ignore_reg(*args: str) -> FieldOpt:
    """Drop fields whose column name matches any of the given patterns."""
    patterns = [re.compile(p) for p in args]

    def opt(m: ModelField) -> ModelField | None:
        if any(p.search(m.column_name) for p in patterns):
            return None
        return m

    return opt


def _modify_where(predicate: Callable[[ModelField], bool], change: Callable[[ModelField], None]) -> FieldOpt:
    def opt(m: ModelField) -> ModelField:
        if predicate(m):
            change(m)
        return m

    return opt


def _column_is(column_name: str) -> Callable[[ModelField], bool]:
    return lambda m: m.column_name == column_name


def _column_matches(column_name_reg: str) -> Callable[[ModelField], bool]:
    pattern = re.compile(column_name_reg)
    return lambda m: pattern.search(m.column_name) is not None


def field_rename(column_name: str, new_name: str) -> FieldOpt:
    """Set the struct member name of a column."""

    def change(m: ModelField) -> None:
        m.name = new_name

    return _modify_where(_column_is(column_name), change)


def field_comment(column_name: str, comment: str) -> FieldOpt:
    """Set the comment of a column."""

    def change(m: ModelField) -> None:
        m.column_comment = comment
        m.multiline_comment = "\n" in comment

    return _modify_where(_column_is(column_name), change)


def field_type(column_name: str, new_type: str) -> FieldOpt:
    """Set the type of a column's field."""

    def change(m: ModelField) -> None:
        m.type = new_type

    return _modify_where(_column_is(column_name), change)


def field_type_reg(column_name_reg: str, new_type: str) -> FieldOpt:
    """Set the type of fields whose column matches a pattern."""

    def change(m: ModelField) -> None:
        m.type = new_type

    return _modify_where(_column_matches(column_name_reg), change)


def field_gen_type(column_name: str, new_type: str) -> FieldOpt:
    """Set the generated query type of a column's field."""

    def change(m: ModelField) -> None:
        m.custom_gen_type = new_type

    return _modify_where(_column_is(column_name), change)


def field_gen_type_reg(column_name_reg: str, new_type: str) -> FieldOpt:
    """Set the generated query type of fields whose column matches a pattern."""

    def change(m: ModelField) -> None:
        m.custom_gen_type = new_type

    return _modify_where(_column_matches(column_name_reg), change)


def field_tag(column_name: str, tag_func: Callable[[dict[str, str]], dict[str, str]]) -> FieldOpt:
    """Replace a column's tags with what ``tag_func`` makes of them."""

    def change(m: ModelField) -> None:
        m.tag = tag_func(m.tag)

    return _modify_where(_column_is(column_name), change)


def field_json_tag(column_name: str, json_tag: str) -> FieldOpt:
    """Set the JSON tag of a column."""

    def change(m: ModelField) -> None:
        m.tag[TAG_KEY_JSON] = json_tag

    return _modify_where(_column_is(column_name), change)


def field_json_tag_with_ns(schema_name: Callable[[str], str] | None) -> FieldOpt:
    """Set every field's JSON tag from its column name."""

    def opt(m: ModelField) -> ModelField:
        if schema_name is not None:
            m.tag[TAG_KEY_JSON] = schema_name(m.column_name)
        return m

    return opt


def field_gorm_tag(
    column_name: str, gorm_tag: Callable[[dict[str, list[str]]], dict[str, list[str]]]
) -> FieldOpt:
    """Replace a column's GORM tag with what ``gorm_tag`` makes of it."""

    def change(m: ModelField) -> None:
        m.gorm_tag = gorm_tag(m.gorm_tag)

    return _modify_where(_column_is(column_name), change)


def field_gorm_tag_reg(
    column_name_reg: str, gorm_tag: Callable[[dict[str, list[str]]], dict[str, list[str]]]
) -> FieldOpt:
    """Replace the GORM tag of fields whose column matches a pattern."""

    def change(m: ModelField) -> None:
        m.gorm_tag = gorm_tag(m.gorm_tag)

    return _modify_where(_column_matches(column_name_reg), change)


def field_new_tag(column_name: str, new_tag: Mapping[str, str]) -> FieldOpt:
    """Add or overwrite tags on a column."""

    def change(m: ModelField) -> None:
        m.tag.update(new_tag)

    return _modify_where(_column_is(column_name), change)


def field_new_tag_with_ns(tag_name: str, schema_name: Callable[[str], str] | None) -> FieldOpt:
    """Set a tag on every field from its column name."""
    naming = schema_name if schema_name is not None else (lambda name: name)

    def opt(m: ModelField) -> ModelField:
        m.tag[tag_name] = naming(m.column_name)
        return m

    return opt


def field_trim_prefix(prefix: str) -> FieldOpt:
    """Remove a prefix from every member name."""

    def opt(m: ModelField) -> ModelField:
        m.name = m.name.removeprefix(prefix)
        return m

    return opt


def field_trim_suffix(suffix: str) -> FieldOpt:
    """Remove a suffix from every member name."""

    def opt(m: ModelField) -> ModelField:
        m.name = m.name.removesuffix(suffix)
        return m

    return opt


def field_add_prefix(prefix: str) -> FieldOpt:
    """Prepend a prefix to every member name."""

    def opt(m: ModelField) -> ModelField:
        m.name = prefix + m.name
        return m

    return opt


def field_add_suffix(suffix: str) -> FieldOpt:
    """Append a suffix to every member name."""

    def opt(m: ModelField) -> ModelField:
        m.name += suffix
        return m

    return opt


def with_method(*args: Any) -> Callable[[], list[Any]]:
    """Attach custom methods to a generated model."""
    methods = list(args)
    return lambda: list(methods)


class Namer(Protocol):
    def table_name(self, table: str) -> str: ...


def default_table_name(namer: Namer | None) -> str:
    """Table name of a model that uses the table placeholder."""
    if namer is None:
        return TABLE_PLACEHOLDER
    return namer.table_name(TABLE_PLACEHOLDER)