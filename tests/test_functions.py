from types import SimpleNamespace

import pytest

from gormgen.functions import add, exists_field, to_field_type


def test_add():
    assert add(2, 3) == 5
    assert add(0, 7) == 7


def test_add_is_commutative():
    assert add(4, -9) == add(-9, 4)


def test_exists_field():
    fields = [SimpleNamespace(name="ID"), SimpleNamespace(name="Name")]
    assert exists_field("Name", fields) is True
    assert exists_field("Age", fields) is False


def test_exists_field_empty():
    assert exists_field("ID", []) is False


@pytest.mark.parametrize("name", ["field_type.DeletedTime", "time.Time"])
def test_time_types_become_int64(name):
    assert to_field_type(name) == "int64"


@pytest.mark.parametrize("name", ["int", "int32", "int16", "int8"])
def test_small_ints_become_int32(name):
    assert to_field_type(name) == "int32"


@pytest.mark.parametrize("name", ["string", "int64", "float64", "uint"])
def test_other_types_unchanged(name):
    assert to_field_type(name) == name