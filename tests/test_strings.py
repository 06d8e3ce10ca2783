import pytest

from jsonnetstd.strings import (
    ascii_lower,
    ascii_upper,
    char,
    codepoint,
    equals_ignore_case,
    escape_string_bash,
    escape_string_dollars,
    find_substr,
    is_empty,
    lstrip_chars,
    parse_hex,
    parse_int,
    parse_nat,
    parse_octal,
    rstrip_chars,
    split,
    split_limit,
    split_limit_r,
    str_replace,
    string_chars,
    strip_chars,
    substr,
)
from jsonnetstd.values import JsonnetError


def test_parse_nat_base_8():
    assert parse_nat("0", 8) == 0.0
    assert parse_nat("5", 8) == 5.0
    assert parse_nat("32", 8) == float(0o32)
    assert parse_nat("761", 8) == float(0o761)


def test_parse_nat_base_10():
    assert parse_nat("0", 10) == 0.0
    assert parse_nat("3", 10) == 3.0
    assert parse_nat("27", 10) == 27.0
    assert parse_nat("123", 10) == 123.0


def test_parse_nat_base_16():
    assert parse_nat("0", 16) == 0.0
    assert parse_nat("A", 16) == 10.0
    assert parse_nat("a9", 16) == float(0xA9)
    assert parse_nat("BbC", 16) == float(0xBBC)


def test_parse_nat_rejects_bad_digits():
    with pytest.raises(JsonnetError, match="is not a base 8 integer"):
        parse_nat("8", 8)
    with pytest.raises(JsonnetError, match="is not a base 16 integer"):
        parse_nat("g", 16)
    with pytest.raises(JsonnetError):
        parse_nat("1a", 10)


def test_parse_int_and_errors():
    assert parse_int("-27") == -27.0
    assert parse_int("123") == 123.0
    with pytest.raises(JsonnetError, match="integer only consists of a minus"):
        parse_int("-")
    with pytest.raises(JsonnetError, match="empty integer"):
        parse_int("")


def test_parse_octal_and_hex():
    assert parse_octal("761") == float(0o761)
    assert parse_hex("a9") == float(0xA9)
    with pytest.raises(JsonnetError, match="empty octal integer"):
        parse_octal("")
    with pytest.raises(JsonnetError, match="empty hexadecimal integer"):
        parse_hex("")


def test_codepoint_char_round_trip():
    for ch in ["a", "ё", "€"]:
        assert char(codepoint(ch)) == ch
    with pytest.raises(JsonnetError):
        codepoint("ab")


def test_char_invalid_codepoints():
    with pytest.raises(JsonnetError, match="invalid unicode codepoint"):
        char(0xD800)
    with pytest.raises(JsonnetError, match="invalid unicode codepoint"):
        char(0x110000)


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hi", 1, 100) == "i"
    with pytest.raises(JsonnetError):
        substr("hi", -1, 1)


def test_str_replace():
    assert str_replace("a-b-c", "-", "+") == "a+b+c"


def test_escape_string_bash_quotes():
    assert escape_string_bash("it's") == "'it'\"'\"'s'"
    assert escape_string_bash("plain") == "'plain'"


def test_escape_string_dollars():
    assert escape_string_dollars("$x") == "$$x"


def test_is_empty_and_case():
    assert is_empty("") is True
    assert is_empty(" ") is False
    assert equals_ignore_case("HeLLo", "hello") is True
    assert ascii_upper("abcé") == "ABCé"
    assert ascii_lower("ABCÉ") == "abcÉ"


def test_split_round_trip():
    text = "a,b,,c"
    parts = split(text, ",")
    assert ",".join(parts) == text
    assert len(parts) == text.count(",") + 1


def test_split_limit_left_and_right():
    assert split_limit("a,b,c", ",", 1) == ["a", "b,c"]
    assert split_limit_r("a,b,c", ",", 1) == ["a,b", "c"]
    assert split_limit_r("a,b,c", ",", -1) == split("a,b,c", ",")
    assert split_limit("a,b", ",", 0) == ["a,b"]


def test_split_limit_rejects_bad_count():
    with pytest.raises(JsonnetError):
        split_limit("a,b", ",", -2)


def test_split_empty_separator():
    assert split("ab", "") == ["", "a", "b", ""]


def test_find_substr():
    assert find_substr("aa", "aaa") == [0, 1]
    assert find_substr("", "abc") == []
    assert find_substr("abcd", "abc") == []


def test_string_chars():
    assert "".join(string_chars("hello")) == "hello"


def test_strip_chars():
    assert lstrip_chars("xxaxx", "x") == "axx"
    assert rstrip_chars("xxaxx", "x") == "xxa"
    assert strip_chars("xyaxy", ["x", "y", 1]) == "a"
    assert strip_chars("abc", "") == "abc"