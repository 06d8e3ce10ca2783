"""JSON manifestation helpers of the standard library."""

from __future__ import annotations

from typing import Any

from .values import escape_string_json, manifest_json_ex


def escape_string_python(s: str) -> str:
    return escape_string_json(s)


def manifest_json(value: Any) -> str:
    return manifest_json_ex(value, "    ")


def manifest_json_minified(value: Any) -> str:
    return manifest_json_ex(value, "", "", ":")