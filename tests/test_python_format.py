import pytest

from jsonnetstd.python_format import manifest_python, manifest_python_vars
from jsonnetstd.values import JsonnetError, Obj, escape_string_json


def test_nested_value():
    value = Obj({"b": True, "a": [None, "s"]})
    assert manifest_python(value) == '{"a": [None, "s"], "b": True}'


def test_vars():
    assert manifest_python_vars(Obj({"x": False, "y": None})) == "x = False\ny = None\n"


def test_strings_escaped_like_json():
    s = 'a"b\n'
    assert manifest_python(s) == escape_string_json(s)


def test_vars_line_per_field():
    conf = Obj({"a": 1, "b": [], "c": "x"}, hidden=["c"])
    lines = manifest_python_vars(conf).splitlines()
    assert [line.split(" = ")[0] for line in lines] == ["a", "b"]


def test_function_raises():
    with pytest.raises(JsonnetError):
        manifest_python([lambda x: x])


def test_vars_requires_object():
    with pytest.raises(JsonnetError):
        manifest_python_vars([1])