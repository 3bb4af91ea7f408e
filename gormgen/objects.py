"""Protocols for user supplied model descriptions and their validation."""

from __future__ import annotations

from typing import Protocol


class Field(Protocol):
    """A field of a described model."""

    @property
    def name(self) -> str: ...

    @property
    def type(self) -> str: ...

    @property
    def column_name(self) -> str: ...

    @property
    def gorm_tag(self) -> str: ...

    @property
    def json_tag(self) -> str: ...

    @property
    def tag(self) -> dict[str, str]: ...

    @property
    def comment(self) -> str: ...


class Object(Protocol):
    """A model described by the user rather than read from a database."""

    @property
    def table_name(self) -> str: ...

    @property
    def struct_name(self) -> str: ...

    @property
    def file_name(self) -> str: ...

    @property
    def import_pkg_paths(self) -> list[str]: ...

    @property
    def fields(self) -> list[Field]: ...


class ObjectError(ValueError):
    """Raised when a described model is incomplete."""


def check_object(obj: Object) -> None:
    """Raise :class:`ObjectError` if the object or one of its fields lacks a name or type."""
    if obj.struct_name == "":
        raise ObjectError("Object's struct_name cannot be empty")
    for field in obj.fields:
        if field.name == "":
            raise ObjectError(f"Object {obj.struct_name}'s Field.name cannot be empty")
        if field.type == "":
            raise ObjectError(f"Object {obj.struct_name}'s Field.type cannot be empty")