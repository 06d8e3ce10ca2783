"""Array standard library functions.

Jsonnet arrays are Python lists (tuples are accepted as input), functions are
Python callables taking positional arguments, and lazily evaluated defaults
such as ``on_empty`` are zero-argument callables.
"""

from __future__ import annotations

import math
from typing import Any, Callable

from .values import JsonnetError, Obj, ValType, equals, type_name, value_type

_I32_MAX = 2**31 - 1
_I32_MIN = -(2**31)


def _array(value: Any) -> list:
    if not isinstance(value, (list, tuple)):
        raise JsonnetError(f"expected array, got {type_name(value)}")
    return list(value)


def _indexable(value: Any) -> str | list:
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return list(value)
    raise JsonnetError(f"expected string or array, got {type_name(value)}")


def _to_array(value: Any) -> list:
    """Turn an indexable value into an array; strings become their characters."""
    return list(_indexable(value))


def _func(value: Any) -> Callable[..., Any]:
    if value_type(value) is not ValType.FUNC:
        raise JsonnetError(f"expected function, got {type_name(value)}")
    return value


def _bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise JsonnetError(f"expected boolean, got {type_name(value)}")
    return value


def _str(value: Any) -> str:
    if not isinstance(value, str):
        raise JsonnetError(f"expected string, got {type_name(value)}")
    return value


def _int(value: Any, what: str, low: int | None = _I32_MIN, high: int | None = _I32_MAX) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise JsonnetError(f"{what} should be a number, got {type_name(value)}")
    if not math.isfinite(value) or not float(value).is_integer():
        raise JsonnetError(f"{what} should be an integer, got {value}")
    n = int(value)
    if (low is not None and n < low) or (high is not None and n > high):
        lo = "open" if low is None else low
        hi = "open" if high is None else high
        raise JsonnetError(f"{what} out of bounds: {n} is not in [{lo}, {hi}]")
    return n


def _eval_on_empty(on_empty: Callable[[], Any] | None) -> Any:
    if on_empty is None:
        raise JsonnetError("expected non-empty array")
    return on_empty()


def make_array(size: Any, func: Any) -> list:
    n = _int(size, "size", 0, _I32_MAX)
    f = _func(func)
    return [f(i) for i in range(n)]


def repeat(what: Any, count: Any) -> Any:
    n = _int(count, "count", 0, None)
    if isinstance(what, str):
        return what * n
    if isinstance(what, (list, tuple)):
        return list(what) * n
    raise JsonnetError(f"expected string or array, got {type_name(what)}")


def slice_(indexable: Any, index: Any = None, end: Any = None, step: Any = None) -> Any:
    seq = _indexable(indexable)
    start = None if index is None else _int(index, "index")
    stop = None if end is None else _int(end, "end")
    stride = None if step is None else _int(step, "step", 1, _I32_MAX)
    return seq[start:stop:stride]


def map_(func: Any, arr: Any) -> list:
    f = _func(func)
    return [f(v) for v in _to_array(arr)]


def map_with_index(func: Any, arr: Any) -> list:
    f = _func(func)
    return [f(i, v) for i, v in enumerate(_to_array(arr))]


def map_with_key(func: Any, obj: Any) -> Obj:
    f = _func(func)
    if not isinstance(obj, Obj):
        raise JsonnetError(f"expected object, got {type_name(obj)}")
    return Obj({k: f(k, v) for k, v in obj.items()})


def flat_map(func: Any, arr: Any) -> Any:
    f = _func(func)
    seq = _indexable(arr)
    if isinstance(seq, str):
        pieces = []
        for ch in seq:
            result = f(ch)
            if result is None:
                continue
            if not isinstance(result, str):
                raise JsonnetError("in std.join all items should be strings")
            pieces.append(result)
        return "".join(pieces)
    out: list = []
    for el in seq:
        result = f(el)
        if result is None:
            continue
        if not isinstance(result, (list, tuple)):
            raise JsonnetError("in std.join all items should be arrays")
        out.extend(result)
    return out


def filter_(func: Any, arr: Any) -> list:
    f = _func(func)
    return [v for v in _array(arr) if _bool(f(v))]


def filter_map(filter_func: Any, map_func: Any, arr: Any) -> list:
    mapper = _func(map_func)
    return [mapper(v) for v in filter_(filter_func, arr)]


def foldl(func: Any, arr: Any, init: Any) -> Any:
    f = _func(func)
    acc = init
    for item in _array(arr):
        acc = f(acc, item)
    return acc


def foldr(func: Any, arr: Any, init: Any) -> Any:
    f = _func(func)
    acc = init
    for item in reversed(_array(arr)):
        acc = f(item, acc)
    return acc


def range_(start: Any, stop: Any) -> list[int]:
    """Inclusive range of integers; empty when stop is below start."""
    lo = _int(start, "from")
    hi = _int(stop, "to")
    return list(range(lo, hi + 1))


def join(sep: Any, arr: Any) -> Any:
    items = _array(arr)
    if isinstance(sep, str):
        parts = []
        for item in items:
            if item is None:
                continue
            if not isinstance(item, str):
                raise JsonnetError("in std.join all items should be strings")
            parts.append(item)
        return sep.join(parts)
    if isinstance(sep, (list, tuple)):
        out: list = []
        first = True
        for item in items:
            if item is None:
                continue
            if not isinstance(item, (list, tuple)):
                raise JsonnetError("in std.join all items should be arrays")
            if not first:
                out.extend(sep)
            first = False
            out.extend(item)
        return out
    raise JsonnetError(f"expected string or array, got {type_name(sep)}")


def lines(arr: Any) -> str:
    return join("\n", _array(arr) + [""])


def resolve_path(f: Any, r: Any) -> str:
    path, rel = _str(f), _str(r)
    pos = path.rfind("/")
    if pos < 0:
        return rel
    return path[: pos + 1] + rel


def _deep_join_into(out: list[str], value: Any) -> None:
    seq = _indexable(value)
    if isinstance(seq, str):
        out.append(seq)
        return
    for el in seq:
        _deep_join_into(out, el)


def deep_join(arr: Any) -> str:
    out: list[str] = []
    _deep_join_into(out, arr)
    return "".join(out)


def reverse(arr: Any) -> list:
    return list(reversed(_array(arr)))


def any_(arr: Any) -> bool:
    return any(_bool(v) for v in _array(arr))


def all_(arr: Any) -> bool:
    return all(_bool(v) for v in _array(arr))


def member(arr: Any, x: Any) -> bool:
    seq = _indexable(arr)
    if isinstance(seq, str):
        needle = _str(x)
        return bool(needle) and needle in seq
    return any(equals(item, x) for item in seq)


def find(value: Any, arr: Any) -> list[int]:
    return [i for i, el in enumerate(_array(arr)) if equals(el, value)]


def contains(arr: Any, elem: Any) -> bool:
    return member(arr, elem)


def count(arr: Any, x: Any) -> int:
    return sum(1 for item in _array(arr) if equals(item, x))


def avg(arr: Any, on_empty: Callable[[], Any] | None = None) -> Any:
    items = _array(arr)
    for item in items:
        if value_type(item) is not ValType.NUM:
            raise JsonnetError(f"expected number, got {type_name(item)}")
    if not items:
        return _eval_on_empty(on_empty)
    result = sum(items) / len(items)
    if not math.isfinite(result):
        raise JsonnetError("numeric value is not finite")
    return result


def remove_at(arr: Any, at: Any) -> list:
    items = _array(arr)
    idx = _int(at, "at")
    return items[:idx] + items[idx + 1 :]


def remove(arr: Any, elem: Any) -> list:
    items = _array(arr)
    for index, item in enumerate(items):
        if equals(item, elem):
            return remove_at(items, index)
    return items


def flatten_arrays(arrs: Any) -> list:
    out: list = []
    for arr in _array(arrs):
        out.extend(_array(arr))
    return out


def _flatten_into(value: Any, out: list) -> None:
    if isinstance(value, (list, tuple)):
        for el in value:
            _flatten_into(el, out)
    else:
        out.append(value)


def flatten_deep_array(value: Any) -> list:
    out: list = []
    _flatten_into(value, out)
    return out


def _is_content(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (list, tuple, Obj)):
        return len(value) > 0
    return True


def prune(value: Any) -> Any:
    """Recursively drop nulls, empty arrays and empty objects."""
    if isinstance(value, (list, tuple)):
        pruned = (prune(el) for el in value)
        return [el for el in pruned if _is_content(el)]
    if isinstance(value, Obj):
        fields = {}
        for name, field_value in value.items():
            pruned_value = prune(field_value)
            if _is_content(pruned_value):
                fields[name] = pruned_value
        return Obj(fields)
    return value