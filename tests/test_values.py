import json

import pytest

from jsonnetstd.values import (
    ComplexValType, JsonnetError, Obj, ValType, array_greater, array_greater_or_equal,
    array_less, array_less_or_equal, compare, compare_array, equals, escape_string_json,
    format_number, is_array, is_boolean, is_function, is_number, is_object, is_string,
    manifest_json_ex, primitive_equals, std_mod, to_string, type_name, value_type, xnor, xor,
)


def test_type_names():
    assert type_name(1.5) == "number"
    assert type_name(Obj({})) == "object"
    assert type_name(None) == "null"
    assert value_type(True) is ValType.BOOL
    assert value_type(lambda x: x) is ValType.FUNC


def test_predicates():
    assert is_string("a") and not is_string(1)
    assert is_number(2) and not is_number(True)
    assert is_boolean(False)
    assert is_object(Obj({"a": 1}))
    assert is_array([1])
    assert is_function(len) and not is_function(Obj())


def test_obj_hidden_fields():
    o = Obj({"b": 1, "a": 2, "h": 3}, hidden=["h"])
    assert o.fields() == ["a", "b"]
    assert o.fields(True) == ["a", "b", "h"]
    assert len(o) == 2
    assert o.has_field("h", True) and not o.has_field("h")
    assert o.items() == [("a", 2), ("b", 1)]


def test_equals():
    assert equals([1, Obj({"a": "x"})], [1.0, Obj({"a": "x"})])
    assert not equals([1], [1, 2])
    assert not equals(1, "1")
    assert equals(Obj({"a": 1, "h": 2}, ["h"]), Obj({"a": 1}))
    with pytest.raises(JsonnetError):
        equals(len, len)


def test_primitive_equals():
    assert primitive_equals("a", "a")
    assert not primitive_equals(1, "1")
    with pytest.raises(JsonnetError):
        primitive_equals([1], [1])


def test_compare():
    assert compare(1, 2) == -1
    assert compare("b", "a") == 1
    assert compare([1, 2], [1, 2]) == 0
    assert compare([1], [1, 0]) == -1
    with pytest.raises(JsonnetError):
        compare(1, "a")


def test_array_comparisons():
    assert array_less([1], [2])
    assert array_greater([3], [2])
    assert array_less_or_equal([1], [1])
    assert array_greater_or_equal([1, 1], [1])
    assert compare_array([], []) == 0
    with pytest.raises(JsonnetError):
        compare_array(1, [1])


def test_xor_xnor():
    assert xor(True, False) and not xor(True, True)
    assert xnor(False, False) and not xnor(True, False)


def test_format_number():
    assert format_number(3.0) == "3"
    assert float(format_number(0.1)) == 0.1
    assert "e" not in format_number(1e-7)


def test_escape_string_json_roundtrip():
    s = 'a"b\\c\n\t\x01é'
    assert json.loads(escape_string_json(s)) == s


def test_manifest_json_ex_roundtrip():
    value = Obj({"b": [1, 2.5, None], "a": {"k": True} and Obj({"k": True}), "h": 1}, ["h"])
    text = manifest_json_ex(value, "    ")
    assert json.loads(text) == {"a": {"k": True}, "b": [1, 2.5, None]}
    assert text.startswith("{\n    ")
    with pytest.raises(JsonnetError):
        manifest_json_ex([len], "  ")


def test_to_string():
    assert to_string("plain") == "plain"
    assert to_string(Obj({"a": 1, "c": 2})) == '{"a": 1, "c": 2}'


def test_std_mod_numbers():
    assert std_mod(7, 3) == 1
    assert std_mod(-7, 3) == -1
    with pytest.raises(JsonnetError):
        std_mod(1, 0)


def test_std_mod_format():
    assert std_mod("%s-%s", ["a", "b"]) == "a-b"
    assert std_mod("%(x)s", Obj({"x": "v"})) == "v"
    assert std_mod("%d%%", 5.9) == "5%"
    with pytest.raises(JsonnetError):
        std_mod("%s %s", ["a"])
    with pytest.raises(JsonnetError):
        std_mod("%s", ["a", "b"])


def test_complex_type_display():
    num = ComplexValType("simple", simple=ValType.NUM)
    assert str(num) == "number"
    assert str(ComplexValType("array", inner=ComplexValType("any"))) == "array"
    assert str(ComplexValType("array", inner=num)) == "Array<number>"
    union = ComplexValType("union", items=(num, ComplexValType("simple", simple=ValType.STR)))
    assert str(union) == "number | string"
    assert str(ComplexValType("sum", items=(union, num))) == "(number | string) & number"
    assert str(ComplexValType("bounded", low=1.0)) == "BoundedNumber<1, open>"