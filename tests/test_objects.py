import pytest

from jsonnetstd.objects import (
    object_fields,
    object_fields_all,
    object_fields_ex,
    object_has,
    object_has_all,
    object_has_ex,
    object_keys_values,
    object_keys_values_all,
    object_remove_key,
    object_values,
    object_values_all,
)
from jsonnetstd.values import JsonnetError, Obj


@pytest.fixture
def obj():
    return Obj({"b": 2, "a": 1, "h": 3}, hidden=["h"])


def test_fields_visible_sorted(obj):
    assert object_fields(obj) == ["a", "b"]
    assert object_fields_ex(obj, False) == object_fields(obj)


def test_fields_all(obj):
    assert object_fields_all(obj) == ["a", "b", "h"]
    assert object_fields_ex(obj, True) == object_fields_all(obj)


def test_values(obj):
    assert object_values(obj) == [1, 2]
    assert object_values_all(obj) == [1, 2, 3]


def test_keys_values(obj):
    pairs = object_keys_values(obj)
    assert [(p.get("key"), p.get("value")) for p in pairs] == [("a", 1), ("b", 2)]
    all_pairs = object_keys_values_all(obj)
    assert [p.get("key") for p in all_pairs] == object_fields_all(obj)


def test_has(obj):
    assert object_has(obj, "a")
    assert not object_has(obj, "h")
    assert object_has_all(obj, "h")
    assert not object_has_all(obj, "missing")
    assert object_has_ex(obj, "h", True)
    assert not object_has_ex(obj, "h", False)


def test_remove_key(obj):
    result = object_remove_key(obj, "a")
    assert result.fields(True) == ["b"]
    assert result.get("b") == 2


def test_remove_missing_key_keeps_visible(obj):
    result = object_remove_key(obj, "zzz")
    assert result.fields(True) == object_fields(obj)


def test_non_object_raises():
    with pytest.raises(JsonnetError, match="expected object"):
        object_fields([1])


def test_non_string_name_raises(obj):
    with pytest.raises(JsonnetError, match="expected string"):
        object_has(obj, 1)