"""Parsing JSON and YAML text into Jsonnet values."""

from __future__ import annotations

import json
from typing import Any

import yaml

from .values import JsonnetError, Obj


class _Loader(yaml.SafeLoader):
    """Safe loader that keeps timestamps as plain strings."""


_Loader.add_constructor(
    "tag:yaml.org,2002:timestamp", lambda loader, node: loader.construct_scalar(node)
)


def _convert(value: Any, what: str) -> Any:
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, list):
        return [_convert(v, what) for v in value]
    if isinstance(value, dict):
        fields = {}
        for k, v in value.items():
            if not isinstance(k, str):
                raise JsonnetError(f"failed to parse {what}: object keys must be strings")
            fields[k] = _convert(v, what)
        return Obj(fields)
    raise JsonnetError(f"failed to parse {what}: unsupported value {value!r}")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid number {name}")


def parse_json(s: str) -> Any:
    try:
        raw = json.loads(s, parse_constant=_reject_constant)
    except ValueError as exc:
        raise JsonnetError(f"failed to parse json: {exc}") from exc
    return _convert(raw, "json")


def parse_yaml(s: str) -> Any:
    """Parse a YAML stream: no document gives null, several give an array."""
    try:
        docs = [_convert(doc, "yaml") for doc in yaml.load_all(s, Loader=_Loader)]
    except yaml.YAMLError as exc:
        raise JsonnetError(f"failed to parse yaml: {exc}") from exc
    if not docs:
        return None
    if len(docs) == 1:
        return docs[0]
    return docs