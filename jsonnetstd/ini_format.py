"""INI manifestation of Jsonnet objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .values import JsonnetError, Obj, to_string, type_name


def _field(obj: Obj, name: str) -> Any:
    return obj.get(name) if obj.has_field(name, True) else None


def _body(body: Obj, out: str) -> str:
    for i, (key, value) in enumerate(body.items()):
        if i != 0 or out:
            out += "\n"
        if isinstance(value, (list, tuple)):
            out += "\n".join(f"{key} = {to_string(element)}" for element in value)
        else:
            out += f"{key} = {to_string(value)}"
    return out


@dataclass(frozen=True)
class IniFormat:
    """INI output options; ``final_newline`` appends a trailing newline."""

    final_newline: bool = True

    @classmethod
    def std(cls) -> IniFormat:
        return cls(final_newline=True)

    @classmethod
    def cli(cls) -> IniFormat:
        return cls(final_newline=False)

    def manifest(self, value: Any) -> str:
        if not isinstance(value, Obj):
            raise JsonnetError(f"ini object structure: expected object, got {type_name(value)}")
        main = _field(value, "main")
        if main is not None and not isinstance(main, Obj):
            raise JsonnetError(f"ini object structure: main should be object, got {type_name(main)}")
        if not value.has_field("sections", True):
            raise JsonnetError("ini object structure: missing field <sections>")
        sections = value.get("sections")
        if not isinstance(sections, Obj):
            raise JsonnetError(
                f"ini object structure: sections should be object, got {type_name(sections)}"
            )
        out = ""
        if main is not None:
            out = _body(main, out)
        for i, (name, section) in enumerate(sections.items()):
            if not isinstance(section, Obj):
                raise JsonnetError(
                    f"ini object structure: section <{name}> should be object, got {type_name(section)}"
                )
            if i != 0 or out:
                out += "\n"
            out += f"[{name}]"
            out = _body(section, out)
        if self.final_newline:
            out += "\n"
        return out


def manifest_ini(value: Any) -> str:
    return IniFormat.std().manifest(value)