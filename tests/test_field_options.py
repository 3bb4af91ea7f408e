import re

import pytest

from gormgen.field_options import (
    ModelField,
    default_table_name,
    field_add_prefix,
    field_add_suffix,
    field_comment,
    field_gen_type,
    field_gen_type_reg,
    field_gorm_tag,
    field_gorm_tag_reg,
    field_ignore,
    field_ignore_reg,
    field_json_tag,
    field_json_tag_with_ns,
    field_new,
    field_new_tag,
    field_new_tag_with_ns,
    field_rename,
    field_tag,
    field_trim_prefix,
    field_trim_suffix,
    field_type,
    field_type_reg,
    with_method,
)


def make(column="user_name", name="UserName", type_="string"):
    return ModelField(name=name, type=type_, column_name=column)


def test_field_new_ignores_input():
    tag = {"json": "extra"}
    created = field_new("Extra", "int", tag)(make())
    assert (created.name, created.type, created.tag) == ("Extra", "int", tag)
    assert created.column_name == ""


def test_field_ignore():
    opt = field_ignore("a", "user_name")
    assert opt(make()) is None
    kept = make(column="age")
    assert opt(kept) is kept


def test_field_ignore_reg_searches():
    opt = field_ignore_reg("^del", "_at$")
    assert opt(make(column="deleted")) is None
    assert opt(make(column="created_at")) is None
    assert opt(make(column="name")).column_name == "name"


def test_field_ignore_reg_bad_pattern():
    with pytest.raises(re.error):
        field_ignore_reg("(")


def test_field_rename_only_matching():
    opt = field_rename("user_name", "Login")
    assert opt(make()).name == "Login"
    assert opt(make(column="other")).name == "UserName"


def test_field_comment_sets_multiline():
    single = field_comment("user_name", "one line")(make())
    assert single.column_comment == "one line"
    assert single.multiline_comment is False
    multi = field_comment("user_name", "a\nb")(make())
    assert multi.multiline_comment is True


def test_field_type_and_reg():
    assert field_type("user_name", "sql.NullString")(make()).type == "sql.NullString"
    assert field_type("x", "int")(make()).type == "string"
    assert field_type_reg("name", "[]byte")(make()).type == "[]byte"


def test_field_gen_type_and_reg():
    assert field_gen_type("user_name", "Bytes")(make()).custom_gen_type == "Bytes"
    assert field_gen_type_reg("^zzz", "Bytes")(make()).custom_gen_type == ""


def test_field_tag():
    opt = field_tag("user_name", lambda tag: {**tag, "xml": "n"})
    assert opt(make()).tag == {"xml": "n"}


def test_field_json_tag():
    assert field_json_tag("user_name", "-")(make()).tag["json"] == "-"


def test_field_json_tag_with_ns():
    assert field_json_tag_with_ns(str.upper)(make()).tag["json"] == "USER_NAME"
    assert field_json_tag_with_ns(None)(make()).tag == {}


def test_field_gorm_tag_and_reg():
    def add_column(tag):
        tag["column"] = ["x"]
        return tag

    assert field_gorm_tag("user_name", add_column)(make()).gorm_tag == {"column": ["x"]}
    assert field_gorm_tag_reg("^nomatch$", add_column)(make()).gorm_tag == {}
    assert field_gorm_tag_reg(".", add_column)(make()).gorm_tag == {"column": ["x"]}


def test_field_new_tag_overwrites():
    m = make()
    m.tag["json"] = "old"
    result = field_new_tag("user_name", {"json": "new", "form": "f"})(m)
    assert result.tag == {"json": "new", "form": "f"}


def test_field_new_tag_with_ns_default_identity():
    assert field_new_tag_with_ns("form", None)(make()).tag["form"] == "user_name"
    assert field_new_tag_with_ns("form", str.title)(make()).tag["form"] == "User_Name"


def test_prefix_suffix_round_trip():
    m = make()
    field_add_prefix("Pre")(m)
    field_add_suffix("Post")(m)
    assert m.name == "PreUserNamePost"
    field_trim_prefix("Pre")(m)
    field_trim_suffix("Post")(m)
    assert m.name == "UserName"


def test_trim_only_when_present():
    assert field_trim_prefix("Zz")(make()).name == "UserName"
    assert field_trim_suffix("Zz")(make()).name == "UserName"


def test_with_method():
    methods = with_method("a", "b")
    assert methods() == ["a", "b"]


def test_default_table_name():
    class Namer:
        def table_name(self, table):
            return "pre_" + table

    assert default_table_name(None) == "@@table"
    assert default_table_name(Namer()) == "pre_@@table"