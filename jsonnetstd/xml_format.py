"""XML manifestation of JsonML-shaped Jsonnet values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from .values import JsonnetError, Obj, to_string, type_name

_XML_ESCAPES = {"<": "&lt;", ">": "&gt;", "&": "&amp;", '"': "&quot;", "'": "&apos;"}


def escape_string_xml(s: str) -> str:
    return "".join(_XML_ESCAPES.get(ch, ch) for ch in s)


@dataclass
class _Tag:
    tag: str
    attrs: Obj
    children: list[Union[_Tag, str]] = field(default_factory=list)


def _parse(value: Any) -> Union[_Tag, str]:
    if isinstance(value, str):
        return value
    if not isinstance(value, (list, tuple)):
        raise JsonnetError(
            f"parsing JSONML value (an array or string): got {type_name(value)}"
        )
    if not value:
        raise JsonnetError("JSONML value should have tag (array length should be >=1)")
    tag = value[0]
    if not isinstance(tag, str):
        raise JsonnetError(f"parsing JSONML tag: expected string, got {type_name(tag)}")
    if len(value) >= 2 and isinstance(value[1], Obj):
        attrs, rest = value[1], value[2:]
    else:
        attrs, rest = Obj(), value[1:]
    return _Tag(tag, attrs, [_parse(child) for child in rest])


@dataclass(frozen=True)
class XmlJsonmlFormat:
    """JsonML to XML; with ``force_closing`` empty elements get a closing tag."""

    force_closing: bool = True

    @classmethod
    def std_to_xml(cls) -> XmlJsonmlFormat:
        return cls(force_closing=True)

    @classmethod
    def cli(cls) -> XmlJsonmlFormat:
        return cls(force_closing=False)

    def manifest(self, value: Any) -> str:
        return self._render(_parse(value))

    def _render(self, node: Union[_Tag, str]) -> str:
        if isinstance(node, str):
            return escape_string_xml(node)
        parts = ["<", node.tag]
        for key, value in node.attrs.items():
            text = value if isinstance(value, str) else to_string(value)
            parts.append(f' {key}="{escape_string_xml(text)}"')
        has_children = bool(node.children)
        if not has_children and not self.force_closing:
            parts.append("/")
        parts.append(">")
        parts.extend(self._render(child) for child in node.children)
        if has_children or self.force_closing:
            parts.append(f"</{node.tag}>")
        return "".join(parts)


def manifest_xml_jsonml(value: Any) -> str:
    return XmlJsonmlFormat.std_to_xml().manifest(value)