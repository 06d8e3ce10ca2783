"""YAML manifestation of Jsonnet values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from .values import (
    JsonnetError,
    Obj,
    ValType,
    escape_string_json,
    format_number,
    type_name,
    value_type,
)

_SPECIAL_WORDS = frozenset(
    [
        "yes", "Yes", "YES", "no", "No", "NO",
        "True", "TRUE", "true", "False", "FALSE", "false",
        "on", "On", "ON", "off", "Off", "OFF",
        "null", "Null", "NULL", "~",
        "y", "Y", "n", "N",
        "-.inf", "+.inf", ".inf",
        "-", "---", "",
    ]
)
_LEADING = frozenset("&*?|-<>=!%@")
_NEEDS_QUOTE_CHAR = re.compile(r"[:{}\[\],#`\"'\\\x00-\x06\t\n\r\x0e-\x1a\x1c-\x1f]")
_DATE_LIKE = re.compile(r"[0-9-]*", re.ASCII)
_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)
_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.ASCII | re.IGNORECASE,
)


def yaml_needs_quotes(s: str) -> bool:
    """Whether a scalar string must be quoted to read back as a string."""
    return (
        s == ""
        or s.startswith(" ")
        or s.endswith(" ")
        or s[0] in _LEADING
        or _NEEDS_QUOTE_CHAR.search(s) is not None
        or s in _SPECIAL_WORDS
        or (_DATE_LIKE.fullmatch(s) is not None and s.count("-") == 2)
        or s.startswith(".")
        or s.startswith("0x")
        or _INTEGER.fullmatch(s) is not None
        or _FLOAT.fullmatch(s) is not None
    )


def _nonempty_array(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and len(value) > 0


def _nonempty_container(value: Any) -> bool:
    return _nonempty_array(value) or (isinstance(value, Obj) and len(value) > 0)


@dataclass(frozen=True)
class YamlFormat:
    """YAML output options.

    ``padding`` indents nested object fields, ``arr_element_padding`` indents
    array elements held in object fields, and ``quote_keys`` forces JSON-style
    quoting of keys and plain strings.
    """

    padding: str = "  "
    arr_element_padding: str = ""
    quote_keys: bool = True

    @classmethod
    def cli(cls, padding: int) -> YamlFormat:
        pad = " " * padding
        return cls(padding=pad, arr_element_padding=pad, quote_keys=False)

    @classmethod
    def std_to_yaml(cls, indent_array_in_object: bool, quote_keys: bool) -> YamlFormat:
        return cls(
            padding="  ",
            arr_element_padding="  " if indent_array_in_object else "",
            quote_keys=quote_keys,
        )

    def manifest(self, value: Any) -> str:
        return self._value(value, "")

    def _scalar(self, s: str) -> str:
        if not self.quote_keys and not yaml_needs_quotes(s):
            return s
        return escape_string_json(s)

    def _string(self, s: str, cur_padding: str) -> str:
        if s == "":
            return '""'
        if s.endswith("\n"):
            header, body = "|", s[:-1]
        elif "\n" in s:
            header, body = "|-", s
        else:
            return self._scalar(s)
        prefix = "\n" + cur_padding + self.padding
        return header + "".join(prefix + line for line in body.split("\n"))

    def _value(self, value: Any, cur_padding: str) -> str:
        t = value_type(value)
        if t is ValType.NULL:
            return "null"
        if t is ValType.BOOL:
            return "true" if value else "false"
        if t is ValType.NUM:
            return format_number(value)
        if t is ValType.STR:
            return self._string(value, cur_padding)
        if t is ValType.FUNC:
            raise JsonnetError("tried to manifest function")
        if t is ValType.ARR:
            return self._array(value, cur_padding)
        return self._object(value, cur_padding)

    def _array(self, arr: Any, cur_padding: str) -> str:
        if not arr:
            return "[]"
        pieces = []
        for i, item in enumerate(arr):
            piece = "" if i == 0 else "\n" + cur_padding
            piece += "-"
            if _nonempty_array(item):
                piece += "\n" + cur_padding + self.padding
            else:
                piece += " "
            inner = cur_padding + self.padding if _nonempty_container(item) else cur_padding
            pieces.append(piece + self._value(item, inner))
        return "".join(pieces)

    def _object(self, obj: Obj, cur_padding: str) -> str:
        items = obj.items()
        if not items:
            return "{}"
        pieces = []
        for i, (key, value) in enumerate(items):
            piece = "" if i == 0 else "\n" + cur_padding
            piece += self._scalar(key) + ":"
            if _nonempty_array(value):
                piece += "\n" + cur_padding + self.arr_element_padding
                inner = cur_padding + self.arr_element_padding
            elif isinstance(value, Obj) and len(value) > 0:
                piece += "\n" + cur_padding + self.padding
                inner = cur_padding + self.padding
            else:
                piece += " "
                inner = cur_padding
            pieces.append(piece + self._value(value, inner))
        return "".join(pieces)


def manifest_yaml_doc(value: Any, indent_array_in_object: bool = False, quote_keys: bool = True) -> str:
    return YamlFormat.std_to_yaml(indent_array_in_object, quote_keys).manifest(value)


def manifest_yaml_stream(
    value: Any,
    indent_array_in_object: bool = False,
    c_document_end: bool = True,
    quote_keys: bool = True,
) -> str:
    """Render an array as a stream of YAML documents."""
    if not isinstance(value, (list, tuple)):
        raise JsonnetError(f"manifestYamlStream only takes arrays, got {type_name(value)}")
    fmt = YamlFormat.std_to_yaml(indent_array_in_object, quote_keys)
    body = "---\n" + "\n---\n".join(fmt.manifest(doc) for doc in value)
    return body + ("\n...\n" if c_document_end else "\n")