"""Python literal manifestation of Jsonnet values."""

from __future__ import annotations

from typing import Any

from .values import JsonnetError, Obj, ValType, escape_string_json, to_string, value_type


def _python(value: Any) -> str:
    t = value_type(value)
    if t is ValType.BOOL:
        return "True" if value else "False"
    if t is ValType.NULL:
        return "None"
    if t is ValType.STR:
        return escape_string_json(value)
    if t is ValType.NUM:
        return to_string(value)
    if t is ValType.ARR:
        return "[" + ", ".join(_python(el) for el in value) + "]"
    if t is ValType.OBJ:
        body = ", ".join(f"{escape_string_json(k)}: {_python(v)}" for k, v in value.items())
        return "{" + body + "}"
    raise JsonnetError("tried to manifest function")


def manifest_python(value: Any) -> str:
    return _python(value)


def manifest_python_vars(conf: Any) -> str:
    """One ``name = literal`` line per visible field of the root object."""
    if not isinstance(conf, Obj):
        raise JsonnetError("python vars root should be object")
    return "".join(f"{name} = {_python(value)}\n" for name, value in conf.items())