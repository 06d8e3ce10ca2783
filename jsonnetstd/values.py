"""Jsonnet value model, type names, comparison, equality and core formatting."""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable, Mapping


class JsonnetError(Exception):
    """Runtime error raised by standard library functions."""


class ValType(enum.Enum):
    BOOL = "boolean"
    NULL = "null"
    STR = "string"
    NUM = "number"
    ARR = "array"
    OBJ = "object"
    FUNC = "function"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ComplexValType:
    """Description of a value's expected type, printable for error messages.

    ``kind`` is one of: any, char, simple, bounded, array, object, attrs_of,
    union, sum, lazy.
    """

    kind: str
    simple: ValType | None = None
    low: float | None = None
    high: float | None = None
    inner: ComplexValType | None = None
    fields: tuple[tuple[str, ComplexValType], ...] = field(default_factory=tuple)
    items: tuple[ComplexValType, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        kind = self.kind
        if kind == "any":
            return "any"
        if kind == "char":
            return "char"
        if kind == "simple":
            return str(self.simple)
        if kind == "bounded":
            low = "open" if self.low is None else format_number(self.low)
            high = "open" if self.high is None else format_number(self.high)
            return f"BoundedNumber<{low}, {high}>"
        if kind == "array":
            if self.inner is None or self.inner.kind == "any":
                return "array"
            return f"Array<{self.inner}>"
        if kind == "object":
            body = ", ".join(f"{k}: {v}" for k, v in self.fields)
            return "{" + body + "}"
        if kind == "attrs_of":
            if self.inner is None or self.inner.kind == "any":
                return "object"
            return f"AttrsOf<{self.inner}>"
        if kind in ("union", "sum"):
            is_union = kind == "union"
            parts = []
            for item in self.items:
                text = str(item)
                if item.kind == "union" and not is_union:
                    text = f"({text})"
                parts.append(text)
            return (" | " if is_union else " & ").join(parts)
        if kind == "lazy":
            return f"Lazy<{self.inner}>"
        raise JsonnetError(f"unknown type kind: {kind}")


class Obj:
    """A Jsonnet object: named fields, some of which may be hidden."""

    def __init__(self, fields: Mapping[str, Any] | None = None, hidden: Iterable[str] = ()):
        self._fields = dict(fields or {})
        self._hidden = frozenset(hidden)

    def fields(self, include_hidden: bool = False) -> list[str]:
        return sorted(
            name for name in self._fields if include_hidden or name not in self._hidden
        )

    def get(self, name: str) -> Any:
        return self._fields[name]

    def has_field(self, name: str, include_hidden: bool = False) -> bool:
        if name not in self._fields:
            return False
        return include_hidden or name not in self._hidden

    def items(self, include_hidden: bool = False) -> list[tuple[str, Any]]:
        return [(name, self._fields[name]) for name in self.fields(include_hidden)]

    def __len__(self) -> int:
        return len(self.fields())

    def __repr__(self) -> str:
        return f"Obj({dict(self.items(True))!r})"


def _is_num(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def value_type(value: Any) -> ValType:
    if value is None:
        return ValType.NULL
    if isinstance(value, bool):
        return ValType.BOOL
    if _is_num(value):
        return ValType.NUM
    if isinstance(value, str):
        return ValType.STR
    if isinstance(value, (list, tuple)):
        return ValType.ARR
    if isinstance(value, Obj):
        return ValType.OBJ
    if callable(value):
        return ValType.FUNC
    raise JsonnetError(f"not a jsonnet value: {value!r}")


def type_name(value: Any) -> str:
    return value_type(value).value


def is_string(v: Any) -> bool:
    return isinstance(v, str)


def is_number(v: Any) -> bool:
    return _is_num(v)


def is_boolean(v: Any) -> bool:
    return isinstance(v, bool)


def is_object(v: Any) -> bool:
    return isinstance(v, Obj)


def is_array(v: Any) -> bool:
    return isinstance(v, (list, tuple))


def is_function(v: Any) -> bool:
    return value_type(v) is ValType.FUNC


def equals(a: Any, b: Any) -> bool:
    ta, tb = value_type(a), value_type(b)
    if ta is not tb:
        return False
    if ta is ValType.FUNC:
        raise JsonnetError("cannot test equality of functions")
    if ta is ValType.ARR:
        return len(a) == len(b) and all(equals(x, y) for x, y in zip(a, b))
    if ta is ValType.OBJ:
        names = a.fields()
        if names != b.fields():
            return False
        return all(equals(a.get(n), b.get(n)) for n in names)
    return a == b


def primitive_equals(a: Any, b: Any) -> bool:
    ta, tb = value_type(a), value_type(b)
    if ta is not tb:
        return False
    if ta in (ValType.ARR, ValType.OBJ):
        raise JsonnetError(f"primitiveEquals operates on primitive types, got {ta}")
    if ta is ValType.FUNC:
        raise JsonnetError("cannot test equality of functions")
    return a == b


def compare(a: Any, b: Any) -> int:
    """Three-way comparison as used by the < operator: -1, 0 or 1."""
    if _is_num(a) and _is_num(b) or isinstance(a, str) and isinstance(b, str):
        return (a > b) - (a < b)
    if is_array(a) and is_array(b):
        for x, y in zip(a, b):
            c = compare(x, y)
            if c:
                return c
        return (len(a) > len(b)) - (len(a) < len(b))
    raise JsonnetError(
        f"binary operation < is not defined for {type_name(a)} and {type_name(b)}"
    )


def _require_arrays(arr1: Any, arr2: Any) -> None:
    for arr in (arr1, arr2):
        if not is_array(arr):
            raise JsonnetError(f"expected array, got {type_name(arr)}")


def compare_array(arr1: Any, arr2: Any) -> int:
    _require_arrays(arr1, arr2)
    return compare(arr1, arr2)


def array_less(arr1: Any, arr2: Any) -> bool:
    return compare_array(arr1, arr2) < 0


def array_greater(arr1: Any, arr2: Any) -> bool:
    return compare_array(arr1, arr2) > 0


def array_less_or_equal(arr1: Any, arr2: Any) -> bool:
    return compare_array(arr1, arr2) <= 0


def array_greater_or_equal(arr1: Any, arr2: Any) -> bool:
    return compare_array(arr1, arr2) >= 0


def xor(x: bool, y: bool) -> bool:
    return bool(x) ^ bool(y)


def xnor(x: bool, y: bool) -> bool:
    return bool(x) == bool(y)


def format_number(n: float) -> str:
    """Render a number the way Jsonnet output does (no exponent notation)."""
    n = float(n)
    if not math.isfinite(n):
        raise JsonnetError("number is not finite")
    if n.is_integer():
        return str(int(n))
    return format(Decimal(repr(n)), "f")


_JSON_ESCAPES = {'"': '\\"', "\\": "\\\\", "\b": "\\b", "\f": "\\f", "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def escape_string_json(s: str) -> str:
    out = ['"']
    for ch in s:
        if ch in _JSON_ESCAPES:
            out.append(_JSON_ESCAPES[ch])
        elif ord(ch) < 0x20:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def _manifest_pretty(value: Any, indent: str, newline: str, sep: str, cur: str, minify: bool) -> str:
    t = value_type(value)
    if t is ValType.NULL:
        return "null"
    if t is ValType.BOOL:
        return "true" if value else "false"
    if t is ValType.NUM:
        return format_number(value)
    if t is ValType.STR:
        return escape_string_json(value)
    if t is ValType.FUNC:
        raise JsonnetError("tried to manifest function")
    inner = cur + indent
    if t is ValType.ARR:
        if not value:
            return "[]" if minify else "[ ]"
        parts = [inner + _manifest_pretty(v, indent, newline, sep, inner, minify) for v in value]
        return "[" + newline + ("," + newline).join(parts) + newline + cur + "]"
    items = value.items()
    if not items:
        return "{}" if minify else "{ }"
    parts = [
        inner + escape_string_json(k) + sep + _manifest_pretty(v, indent, newline, sep, inner, minify)
        for k, v in items
    ]
    return "{" + newline + ("," + newline).join(parts) + newline + cur + "}"


def manifest_json_ex(value: Any, indent: str, newline: str | None = None, key_val_sep: str | None = None) -> str:
    newline = "\n" if newline is None else newline
    key_val_sep = ": " if key_val_sep is None else key_val_sep
    minify = indent == "" and newline == ""
    return _manifest_pretty(value, indent, newline, key_val_sep, "", minify)


def _manifest_inline(value: Any) -> str:
    t = value_type(value)
    if t is ValType.ARR:
        if not value:
            return "[ ]"
        return "[" + ", ".join(_manifest_inline(v) for v in value) + "]"
    if t is ValType.OBJ:
        items = value.items()
        if not items:
            return "{ }"
        return "{" + ", ".join(f"{escape_string_json(k)}: {_manifest_inline(v)}" for k, v in items) + "}"
    return _manifest_pretty(value, "", "", ": ", "", False)


def to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    return _manifest_inline(value)


_SPEC = re.compile(
    r"%(?:\((?P<key>[^)]*)\))?(?P<flags>[#0\- +]*)(?P<width>\*|\d+)?"
    r"(?:\.(?P<prec>\*|\d*))?[hlL]?(?P<conv>[diouxXeEfFgGcrs%])"
)


def _format_one(value: Any, conv: str, flags: str, width: int | None, prec: int | None) -> str:
    if conv in "sr":
        text = to_string(value)
        if width is not None:
            text = text.ljust(width) if "-" in flags else text.rjust(width)
        return text
    spec = "%" + flags + ("" if width is None else str(width)) + ("" if prec is None else f".{prec}")
    if conv == "c":
        if isinstance(value, str):
            ch = value
        elif _is_num(value):
            ch = chr(int(value))
        else:
            raise JsonnetError(f"%c expected number or string, got {type_name(value)}")
        return (spec.replace("0", "") + "s") % ch
    if not _is_num(value):
        raise JsonnetError(f"format expected number, got {type_name(value)}")
    if conv in "diuoxX":
        pyconv = "d" if conv in "iu" else conv
        text = (spec + pyconv) % int(value)
        if conv == "o" and "#" in flags:
            text = text.replace("0o", "0", 1)
        return text
    return (spec + conv) % float(value)


def _std_format(fmt: str, vals: Any) -> str:
    if is_array(vals):
        positional, named = list(vals), None
    elif isinstance(vals, Obj):
        positional, named = None, vals
    else:
        positional, named = [vals], None
    used = 0
    out: list[str] = []
    pos = 0

    def take() -> Any:
        nonlocal used
        if positional is None:
            raise JsonnetError("format requires an array when not using named fields")
        if used >= len(positional):
            raise JsonnetError("not enough values to format")
        value = positional[used]
        used += 1
        return value

    while True:
        p = fmt.find("%", pos)
        if p < 0:
            out.append(fmt[pos:])
            break
        out.append(fmt[pos:p])
        m = _SPEC.match(fmt, p)
        if not m:
            raise JsonnetError(f"unrecognized format specifier at position {p}")
        pos = m.end()
        conv = m["conv"]
        if conv == "%":
            out.append("%")
            continue
        width = m["width"]
        width = int(take()) if width == "*" else (int(width) if width else None)
        prec = m["prec"]
        prec = int(take()) if prec == "*" else (int(prec) if prec else (0 if prec == "" else None))
        key = m["key"]
        if key is not None:
            if named is None:
                raise JsonnetError("named format requires an object")
            if not named.has_field(key, True):
                raise JsonnetError(f"no such field: {key}")
            value = named.get(key)
        else:
            value = take()
        out.append(_format_one(value, conv, m["flags"], width, prec))
    if positional is not None and used < len(positional):
        raise JsonnetError(f"too many values to format, expected {used}, got {len(positional)}")
    return "".join(out)


def std_mod(a: Any, b: Any) -> Any:
    if _is_num(a):
        if not _is_num(b):
            raise JsonnetError(f"binary operation % is not defined for number and {type_name(b)}")
        if b == 0:
            raise JsonnetError("division by zero")
        return math.fmod(a, b)
    if isinstance(a, str):
        return _std_format(a, b)
    raise JsonnetError(f"binary operation % is not defined for {type_name(a)} and {type_name(b)}")