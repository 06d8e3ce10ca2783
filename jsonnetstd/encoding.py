"""UTF-8, base64 and hashing functions."""

from __future__ import annotations

import base64
import binascii
import hashlib
from typing import Iterable

from .values import JsonnetError


def encode_utf8(s: str) -> bytes:
    return s.encode("utf-8")


def decode_utf8(data: bytes | Iterable[int]) -> str:
    try:
        return bytes(data).decode("utf-8")
    except (UnicodeDecodeError, ValueError, TypeError) as exc:
        raise JsonnetError("bad utf8") from exc


def base64_encode(value: str | bytes | Iterable[int]) -> str:
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    return base64.b64encode(data).decode("ascii")


def base64_decode_bytes(s: str) -> bytes:
    try:
        return base64.b64decode(s.encode("utf-8"), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise JsonnetError(f"invalid base64: {exc}") from exc


def base64_decode(s: str) -> str:
    return decode_utf8(base64_decode_bytes(s))


def md5(s: str) -> str:
    return hashlib.md5(s.encode("utf-8")).hexdigest()


def sha1(s: str) -> str:
    return hashlib.sha1(s.encode("utf-8")).hexdigest()


def sha256(s: str) -> str:
    return hashlib.sha256(s.encode("utf-8")).hexdigest()


def sha512(s: str) -> str:
    return hashlib.sha512(s.encode("utf-8")).hexdigest()


def sha3(s: str) -> str:
    return hashlib.sha3_512(s.encode("utf-8")).hexdigest()