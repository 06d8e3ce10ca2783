"""Sorting, de-duplication, extremes and sorted-set operations.

Key functions are Python callables taking one value. When no key function is
given, values are their own keys.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterator

from .values import JsonnetError, ValType, compare, equals, is_number, type_name

_END = object()

KeyFunc = Callable[[Any], Any]


def _array(value: Any) -> list:
    if not isinstance(value, (list, tuple)):
        raise JsonnetError(f"expected array, got {type_name(value)}")
    return list(value)


def _key(key_f: KeyFunc | None) -> KeyFunc:
    if key_f is None:
        return lambda value: value
    if not callable(key_f):
        raise JsonnetError(f"expected function, got {type_name(key_f)}")
    return key_f


def _check_sort_type(keys: list) -> None:
    """Strings and numbers may not be mixed among sort keys."""
    kind = None
    for key in keys:
        if isinstance(key, str):
            current = ValType.STR
        elif is_number(key):
            current = ValType.NUM
        else:
            continue
        if kind is None:
            kind = current
        elif kind is not current:
            raise JsonnetError("sort elements should have the same types")


def _sorted_pairs(items: list, key_f: KeyFunc | None) -> list[tuple[Any, Any]]:
    keyfn = _key(key_f)
    pairs = [(value, keyfn(value)) for value in items]
    _check_sort_type([key for _, key in pairs])
    return sorted(pairs, key=cmp_to_key(lambda p, q: compare(p[1], q[1])))


def _uniq_pairs(pairs: list[tuple[Any, Any]]) -> list:
    first_value, last_key = pairs[0]
    out = [first_value]
    for value, key in pairs[1:]:
        if not equals(last_key, key):
            out.append(value)
        last_key = key
    return out


def sort(arr: Any, key_f: KeyFunc | None = None) -> list:
    items = _array(arr)
    if len(items) <= 1:
        return items
    return [value for value, _ in _sorted_pairs(items, key_f)]


def uniq(arr: Any, key_f: KeyFunc | None = None) -> list:
    """Drop consecutive elements whose keys equal the previous element's key."""
    items = _array(arr)
    if len(items) <= 1:
        return items
    keyfn = _key(key_f)
    return _uniq_pairs([(value, keyfn(value)) for value in items])


def set_(arr: Any, key_f: KeyFunc | None = None) -> list:
    items = _array(arr)
    if len(items) <= 1:
        return items
    return _uniq_pairs(_sorted_pairs(items, key_f))


def _eval_on_empty(on_empty: Callable[[], Any] | None) -> Any:
    if on_empty is None:
        raise JsonnetError("expected non-empty array")
    return on_empty()


def _top1(items: list, key_f: KeyFunc | None, wanted: int) -> Any:
    keyfn = _key(key_f)
    best = items[0]
    best_key = keyfn(best)
    for item in items[1:]:
        key = keyfn(item)
        if compare(key, best_key) == wanted:
            best, best_key = item, key
    return best


def min_array(arr: Any, key_f: KeyFunc | None = None, on_empty: Callable[[], Any] | None = None) -> Any:
    items = _array(arr)
    if not items:
        return _eval_on_empty(on_empty)
    return _top1(items, key_f, -1)


def max_array(arr: Any, key_f: KeyFunc | None = None, on_empty: Callable[[], Any] | None = None) -> Any:
    items = _array(arr)
    if not items:
        return _eval_on_empty(on_empty)
    return _top1(items, key_f, 1)


def set_member(x: Any, arr: Any, key_f: KeyFunc | None = None) -> bool:
    """Binary search for x in a sorted set."""
    items = _array(arr)
    keyfn = _key(key_f)
    wanted = keyfn(x)
    low, high = 0, len(items)
    while low < high:
        middle = (low + high) // 2
        c = compare(keyfn(items[middle]), wanted)
        if c < 0:
            low = middle + 1
        elif c > 0:
            high = middle
        else:
            return True
    return False


def _walk(
    a: Any, b: Any, key_f: KeyFunc | None, drain_a: bool, drain_b: bool
) -> Iterator[tuple[str, Any]]:
    """Merge two sorted sets, yielding ("a"|"b"|"both", value).

    For "both" the value from ``a`` is given. Leftover elements are yielded
    only for the sides asked to be drained.
    """
    keyfn = _key(key_f)
    ia, ib = iter(_array(a)), iter(_array(b))

    def advance(it: Iterator[Any]) -> tuple[Any, Any]:
        value = next(it, _END)
        return value, (_END if value is _END else keyfn(value))

    av, ak = advance(ia)
    bv, bk = advance(ib)
    while av is not _END and bv is not _END:
        c = compare(ak, bk)
        if c < 0:
            yield "a", av
            av, ak = advance(ia)
        elif c > 0:
            yield "b", bv
            bv, bk = advance(ib)
        else:
            yield "both", av
            av, ak = advance(ia)
            bv, bk = advance(ib)
    if drain_a:
        while av is not _END:
            yield "a", av
            av, ak = advance(ia)
    if drain_b:
        while bv is not _END:
            yield "b", bv
            bv, bk = advance(ib)


def set_inter(a: Any, b: Any, key_f: KeyFunc | None = None) -> list:
    return [v for side, v in _walk(a, b, key_f, False, False) if side == "both"]


def set_diff(a: Any, b: Any, key_f: KeyFunc | None = None) -> list:
    return [v for side, v in _walk(a, b, key_f, True, False) if side == "a"]


def set_union(a: Any, b: Any, key_f: KeyFunc | None = None) -> list:
    """Union of two sorted sets; on equal keys the element of ``a`` wins."""
    return [v for _, v in _walk(a, b, key_f, True, True)]