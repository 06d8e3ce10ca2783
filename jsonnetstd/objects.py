"""Object inspection functions."""

from __future__ import annotations

from typing import Any

from .values import JsonnetError, Obj, type_name


def _obj(value: Any) -> Obj:
    if not isinstance(value, Obj):
        raise JsonnetError(f"expected object, got {type_name(value)}")
    return value


def _str(value: Any) -> str:
    if not isinstance(value, str):
        raise JsonnetError(f"expected string, got {type_name(value)}")
    return value


def object_fields_ex(obj: Any, hidden: bool) -> list[str]:
    return _obj(obj).fields(bool(hidden))


def object_fields(obj: Any) -> list[str]:
    return object_fields_ex(obj, False)


def object_fields_all(obj: Any) -> list[str]:
    return object_fields_ex(obj, True)


def _values(obj: Any, include_hidden: bool) -> list:
    return [value for _, value in _obj(obj).items(include_hidden)]


def object_values(obj: Any) -> list:
    return _values(obj, False)


def object_values_all(obj: Any) -> list:
    return _values(obj, True)


def _keys_values(obj: Any, include_hidden: bool) -> list[Obj]:
    return [Obj({"key": k, "value": v}) for k, v in _obj(obj).items(include_hidden)]


def object_keys_values(obj: Any) -> list[Obj]:
    return _keys_values(obj, False)


def object_keys_values_all(obj: Any) -> list[Obj]:
    return _keys_values(obj, True)


def object_has_ex(obj: Any, name: Any, hidden: bool) -> bool:
    return _obj(obj).has_field(_str(name), bool(hidden))


def object_has(obj: Any, name: Any) -> bool:
    return object_has_ex(obj, name, False)


def object_has_all(obj: Any, name: Any) -> bool:
    return object_has_ex(obj, name, True)


def object_remove_key(obj: Any, key: Any) -> Obj:
    """Copy of the visible fields of obj without ``key``."""
    name = _str(key)
    return Obj({k: v for k, v in _obj(obj).items() if k != name})