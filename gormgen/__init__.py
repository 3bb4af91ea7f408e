"""Building blocks for data-access code generators: SQL clauses, field options, imports and output layout."""

__version__ = "0.1.0"

__all__ = ["clause", "objects", "functions", "imports", "field_options", "layout"]