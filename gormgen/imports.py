"""Ordered lists of import paths for generated files."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ImportList:
    """An immutable list of quoted import paths with blank group separators."""

    entries: tuple[str, ...] = ()

    def add(self, *args: str) -> ImportList:
        """Return a new list with the paths appended as one group.

        Paths are quoted unless already quoted; paths already present before
        this call are skipped; empty strings are kept as group separators.
        A separator closes the group.
        """
        new: list[str] = []
        for raw in args:
            path = raw.strip()
            if not path:
                new.append(path)
                continue
            if not path.endswith('"'):
                path = f'"{path}"'
            if path not in self.entries:
                new.append(path)
        new.append("")
        return ImportList(self.entries + tuple(new))

    def paths(self) -> list[str]:
        """Return the entries as a list."""
        return list(self.entries)


def default_imports() -> ImportList:
    """Imports used by generated query files."""
    return ImportList().add(
        "context",
        "database/sql",
        "strings",
        "",
        "gorm.io/gorm",
        "gorm.io/gorm/schema",
        "gorm.io/gorm/clause",
        "",
        "gorm.io/gen",
        "gorm.io/gen/field",
        "gorm.io/gen/helper",
        "",
        "gorm.io/plugin/dbresolver",
    )


def unit_test_imports() -> ImportList:
    """Imports used by generated unit test files."""
    return ImportList().add(
        "context",
        "fmt",
        "strconv",
        "testing",
        "",
        "gorm.io/driver/sqlite",
        "gorm.io/gorm",
    )