# gormgen

Building blocks for a generator of model structures and query code. The
package holds the pieces that work without a database: assembling dynamic
SQL clauses, field options that rewrite model fields, validation of models
described by hand, helper functions for templates, import lists for
generated files, and the layout of generated output files.

It has no dependencies beyond the standard library.

## Install

```
pip install .
pip install ".[test]"   # with pytest, to run the tests
```

## SQL clause helpers: `gormgen.clause`

```python
from gormgen.clause import Cond, if_clause, where_clause, set_clause

where_clause(["name = ?", "or age > ?"])   # " WHERE name = ? or age > ?"
set_clause(["name = ?,", "age = ?"])        # " SET name = ?,age = ?"
if_clause([Cond(True, "a = 1"), Cond(False, "b = 2")])  # " a = 1 "
```

- `where_clause(conds)` prefixes each non-empty fragment with `AND` unless
  it already starts with `and`, `or` or `xor`, joins them with spaces,
  trims the result and returns `" WHERE ..."`, or `""` when nothing is left.
- `set_clause(conds)` strips commas and spaces from the ends of each
  fragment, joins them with commas and returns `" SET ..."`, or `""`.
- `if_clause(conds)` keeps the `result` of every `Cond` whose `cond` is
  true, leaves an empty slot for the others, and joins with spaces after a
  leading space.
- `trim_all(text)` strips whitespace and removes one leading `and `, `or `,
  `xor ` or `,` and one trailing ` and`, ` or`, ` xor` or `,`
  (case-insensitive).
- `join_where(value)` and `join_set(value)` return `"WHERE <trimmed> "` or
  `"SET <trimmed> "`, or `""` when the trimmed value is empty;
  `join_trim_all(value)` returns the trimmed value followed by a space.

## Field options: `gormgen.field_options`

A `ModelField` is a dataclass with `name`, `type`, `column_name`,
`column_comment`, `multiline_comment`, `tag` (a `dict[str, str]`),
`gorm_tag` (a `dict[str, list[str]]`) and `custom_gen_type`. Each option
is a callable that takes a `ModelField` and returns it (possibly changed),
a new field, or `None` to drop it.

```python
from gormgen.field_options import ModelField, field_rename, field_ignore

f = ModelField(name="UserName", column_name="user_name")
field_rename("user_name", "Name")(f).name       # "Name"
field_ignore("password_hash")(ModelField(column_name="password_hash"))  # None
```

- Creating: `field_new(field_name, field_type, field_tag)`.
- Dropping: `field_ignore(*names)`, `field_ignore_reg(*patterns)`.
- Changing one column (exact name) or matching columns (regular expression,
  searched anywhere in the column name): `field_rename`, `field_comment`
  (also sets `multiline_comment` when the comment holds a newline),
  `field_type`, `field_type_reg`, `field_gen_type`, `field_gen_type_reg`,
  `field_tag`, `field_json_tag`, `field_gorm_tag`, `field_gorm_tag_reg`,
  `field_new_tag`.
- Applying to every field: `field_json_tag_with_ns(schema_name)` (does
  nothing when `schema_name` is `None`), `field_new_tag_with_ns(tag_name,
  schema_name)` (uses the column name itself when `schema_name` is `None`),
  `field_trim_prefix`, `field_trim_suffix`, `field_add_prefix`,
  `field_add_suffix`.
- `with_method(*methods)` returns a callable giving a list of the methods.
- `default_table_name(namer)` returns `"@@table"`, or
  `namer.table_name("@@table")` when a namer is given.

## Hand-described models: `gormgen.objects`

`Object` and `Field` are protocols for models given by hand rather than
read from a database. `check_object(obj)` raises `ObjectError` (a
`ValueError`) when the struct name, a field's name or a field's type is
empty.

## Template functions: `gormgen.functions`

- `add(a, b)` returns the sum.
- `exists_field(field_name, fields)` tells whether any field has that `name`.
- `to_field_type(type_name)` maps `time.Time` and `field_type.DeletedTime`
  to `int64`, `int`, `int8`, `int16` and `int32` to `int32`, and leaves
  other types unchanged.

## Import lists: `gormgen.imports`

`ImportList` is an immutable list of quoted import paths. `add(*paths)`
returns a new list with the paths quoted (unless already quoted), paths
already present skipped, empty strings kept as group separators, and a
separator appended at the end. `paths()` returns the entries.
`default_imports()` and `unit_test_imports()` give the stock lists for
query files and their unit tests.

## Output layout: `gormgen.layout`

- `package_output_dir(pkg_path, out_path)`: a package path that holds a
  path separator is made absolute; otherwise it becomes a sibling of
  `out_path`. The result ends in a separator.
- `query_file_path`, `query_test_file_path`, `query_unit_test_file`,
  `model_file_path`, `proto_file_path` and `service_file_path` give the
  names of generated files (`<name>.gen.go`, `<name>.gen_test.go`,
  `<out>_test.go`, `<name>.gen.proto`, `service_<name>.gen.crud.go`).
- `merge_import_paths(import_paths, param_pkg_paths)` joins two path lists,
  each path once, in the order first met.
- `format_error_excerpt(content, error_line)` returns up to five lines on
  each side of `error_line`, each prefixed with its zero-based index.
- `write_file(file_name, content)` writes text (as UTF-8) or bytes,
  creating the file with mode 0640.

## What this package does not do

It does not connect to a database or read table definitions, does not
render or format code templates, and does not write a whole set of
generated files on its own. It has no command-line tool. It provides the
helpers such a generator is built from.