"""TOML manifestation of Jsonnet objects."""

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

_BARE_KEY = re.compile(r"[A-Za-z0-9_-]*")


def _escape_key(key: str) -> str:
    if _BARE_KEY.fullmatch(key):
        return key
    return escape_string_json(key)


def _is_section(value: Any) -> bool:
    if isinstance(value, Obj):
        return True
    if isinstance(value, (list, tuple)):
        return len(value) > 0 and all(isinstance(e, Obj) for e in value)
    return False


@dataclass(frozen=True)
class TomlFormat:
    """TOML output options.

    ``padding`` indents the fields of each table; with ``skip_empty_sections``
    a table holding only sub-tables gets no header of its own.
    """

    padding: str = "  "
    skip_empty_sections: bool = False

    @classmethod
    def cli(cls, padding: int) -> TomlFormat:
        return cls(padding=" " * padding, skip_empty_sections=True)

    @classmethod
    def std_to_toml(cls, padding: str) -> TomlFormat:
        return cls(padding=padding, skip_empty_sections=False)

    def manifest(self, value: Any) -> str:
        if not isinstance(value, Obj):
            raise JsonnetError("toml body should be object")
        return self._table_body(value, [], "")

    def _value(self, value: Any, inline: bool, cur_padding: str) -> str:
        t = value_type(value)
        if t is ValType.BOOL:
            return "true" if value else "false"
        if t is ValType.STR:
            return escape_string_json(value)
        if t is ValType.NUM:
            return format_number(value)
        if t is ValType.NULL:
            raise JsonnetError("tried to manifest null")
        if t is ValType.FUNC:
            raise JsonnetError("tried to manifest function")
        if t is ValType.ARR:
            separator = " " if inline else "\n" + cur_padding + self.padding
            items = [separator + self._value(e, True, "") for e in value]
            if not items:
                return "[]"
            closing = " " if inline else "\n" + cur_padding
            return "[" + ",".join(items) + closing + "]"
        fields = [
            " " + _escape_key(k) + " = " + self._value(v, True, "") for k, v in value.items()
        ]
        if not fields:
            return "{}"
        return "{" + ",".join(fields) + " }"

    def _table_body(self, obj: Obj, path: list[str], cur_padding: str) -> str:
        plain = []
        sections = []
        for key, value in obj.items():
            if _is_section(value):
                sections.append((key, value))
            else:
                plain.append(
                    cur_padding + _escape_key(key) + " = " + self._value(value, False, cur_padding)
                )
        chunks = ["\n".join(plain)] if plain else []
        for key, value in sections:
            sub_path = path + [key]
            if isinstance(value, Obj):
                chunks.append(self._table(value, sub_path, cur_padding))
            else:
                chunks.append(self._table_array(value, sub_path, cur_padding))
        return "\n\n".join(chunks)

    def _table(self, obj: Obj, path: list[str], cur_padding: str) -> str:
        if (
            self.skip_empty_sections
            and len(obj) > 0
            and all(_is_section(v) for _, v in obj.items())
        ):
            return self._table_body(obj, path, cur_padding)
        header = cur_padding + "[" + ".".join(_escape_key(k) for k in path) + "]"
        if len(obj) == 0:
            return header
        return header + "\n" + self._table_body(obj, path, cur_padding + self.padding)

    def _table_array(self, arr: Any, path: list[str], cur_padding: str) -> str:
        header = cur_padding + "[[" + ".".join(_escape_key(k) for k in path) + "]]"
        inner = cur_padding + self.padding
        chunks = []
        for obj in arr:
            if len(obj) == 0:
                chunks.append(header)
            else:
                chunks.append(header + "\n" + self._table_body(obj, path, inner))
        return "\n\n".join(chunks)


def manifest_toml_ex(value: Any, indent: str) -> str:
    if not isinstance(value, Obj):
        raise JsonnetError(f"expected object, got {type_name(value)}")
    return TomlFormat.std_to_toml(indent).manifest(value)


def manifest_toml(value: Any) -> str:
    return manifest_toml_ex(value, "  ")