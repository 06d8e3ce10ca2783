"""String standard library functions."""

from __future__ import annotations

import math
from typing import Any

from .values import JsonnetError, escape_string_json, type_name

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")
_ASCII_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def _str(value: Any) -> str:
    if not isinstance(value, str):
        raise JsonnetError(f"expected string, got {type_name(value)}")
    return value


def _int(value: Any, what: str, low: int | None = None, high: int | None = None) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise JsonnetError(f"{what} should be a number, got {type_name(value)}")
    if not math.isfinite(value) or not float(value).is_integer():
        raise JsonnetError(f"{what} should be an integer, got {value}")
    n = int(value)
    if (low is not None and n < low) or (high is not None and n > high):
        raise JsonnetError(f"{what} out of bounds: {n}")
    return n


def codepoint(s: Any) -> int:
    text = _str(s)
    if len(text) != 1:
        raise JsonnetError(f"expected char, got string of length {len(text)}")
    return ord(text)


def substr(s: Any, start: Any, length: Any) -> str:
    text = _str(s)
    begin = _int(start, "from", 0)
    size = _int(length, "len", 0)
    return text[begin : begin + size]


def char(n: Any) -> str:
    code = _int(n, "codepoint", 0, 2**32 - 1)
    if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
        raise JsonnetError(f"invalid unicode codepoint, got {code}")
    return chr(code)


def str_replace(s: Any, old: Any, new: Any) -> str:
    return _str(s).replace(_str(old), _str(new))


def escape_string_bash(s: Any) -> str:
    return "'" + _str(s).replace("'", "'\"'\"'") + "'"


def escape_string_dollars(s: Any) -> str:
    return _str(s).replace("$", "$$")


def is_empty(s: Any) -> bool:
    return _str(s) == ""


def ascii_upper(s: Any) -> str:
    return _str(s).translate(_ASCII_UPPER)


def ascii_lower(s: Any) -> str:
    return _str(s).translate(_ASCII_LOWER)


def equals_ignore_case(a: Any, b: Any) -> bool:
    return ascii_lower(a) == ascii_lower(b)


def _match_positions(s: str, sep: str) -> list[int]:
    """Non-overlapping match starts, scanning from the left."""
    if not sep:
        return list(range(len(s) + 1))
    out = []
    i = s.find(sep)
    while i >= 0:
        out.append(i)
        i = s.find(sep, i + len(sep))
    return out


def _rmatch_positions(s: str, sep: str) -> list[int]:
    """Non-overlapping match starts, scanning from the right (descending)."""
    if not sep:
        return list(range(len(s), -1, -1))
    out = []
    i = s.rfind(sep)
    while i >= 0:
        out.append(i)
        i = s.rfind(sep, 0, i)
    return out


def _split_at(s: str, positions: list[int], sep_len: int) -> list[str]:
    pieces = []
    prev = 0
    for pos in positions:
        pieces.append(s[prev:pos])
        prev = pos + sep_len
    pieces.append(s[prev:])
    return pieces


def _maxsplits(value: Any) -> int | None:
    n = _int(value, "maxsplits")
    if n == -1:
        return None
    if n < 0:
        raise JsonnetError(f"maxsplits should be non-negative or -1, got {n}")
    return n


def split_limit(s: Any, sep: Any, maxsplits: Any) -> list[str]:
    text, pattern = _str(s), _str(sep)
    limit = _maxsplits(maxsplits)
    positions = _match_positions(text, pattern)
    if limit is not None:
        positions = positions[:limit]
    return _split_at(text, positions, len(pattern))


def split_limit_r(s: Any, sep: Any, maxsplits: Any) -> list[str]:
    text, pattern = _str(s), _str(sep)
    limit = _maxsplits(maxsplits)
    if limit is None:
        return _split_at(text, _match_positions(text, pattern), len(pattern))
    positions = sorted(_rmatch_positions(text, pattern)[:limit])
    return _split_at(text, positions, len(pattern))


def split(s: Any, sep: Any) -> list[str]:
    return split_limit(s, sep, -1)


def find_substr(pat: Any, s: Any) -> list[int]:
    """Character indices of every (possibly overlapping) occurrence of pat."""
    pattern, text = _str(pat), _str(s)
    if not pattern or not text or len(pattern) > len(text):
        return []
    return [i for i in range(len(text)) if text.startswith(pattern, i)]


def parse_nat(raw: str, base: int) -> float:
    if not 1 <= base <= 16:
        raise JsonnetError("integer base should be between 1 and 16")
    total = 0.0
    for ch in raw:
        code = ord(ch)
        if base > 10 and code >= ord("a"):
            digit = code - ord("a") + 10
        elif base > 10 and code >= ord("A"):
            digit = code - ord("A") + 10
        elif code >= ord("0"):
            digit = code - ord("0")
        else:
            digit = base
        if digit >= base:
            raise JsonnetError(f"{escape_string_json(raw)} is not a base {base} integer")
        total = base * total + digit
    return total


def parse_int(s: Any) -> float:
    text = _str(s)
    if text.startswith("-"):
        raw = text[1:]
        if not raw:
            raise JsonnetError("integer only consists of a minus")
        return -parse_nat(raw, 10)
    if not text:
        raise JsonnetError("empty integer")
    return parse_nat(text, 10)


def parse_octal(s: Any) -> float:
    text = _str(s)
    if not text:
        raise JsonnetError("empty octal integer")
    return parse_nat(text, 8)


def parse_hex(s: Any) -> float:
    text = _str(s)
    if not text:
        raise JsonnetError("empty hexadecimal integer")
    return parse_nat(text, 16)


def string_chars(s: Any) -> list[str]:
    return list(_str(s))


def _trim_set(chars: Any) -> str:
    if isinstance(chars, str):
        return chars
    if isinstance(chars, (list, tuple)):
        return "".join(c for c in chars if isinstance(c, str) and len(c) == 1)
    raise JsonnetError(f"expected string or array, got {type_name(chars)}")


def lstrip_chars(s: Any, chars: Any) -> str:
    text = _str(s)
    pattern = _trim_set(chars)
    if not text or not pattern:
        return text
    return text.lstrip(pattern)


def rstrip_chars(s: Any, chars: Any) -> str:
    text = _str(s)
    pattern = _trim_set(chars)
    if not text or not pattern:
        return text
    return text.rstrip(pattern)


def strip_chars(s: Any, chars: Any) -> str:
    text = _str(s)
    pattern = _trim_set(chars)
    if not text or not pattern:
        return text
    return text.strip(pattern)