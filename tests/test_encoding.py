import pytest

from jsonnetstd import encoding as e
from jsonnetstd.values import JsonnetError


def test_utf8_roundtrip():
    s = "héllo ✓"
    assert e.decode_utf8(e.encode_utf8(s)) == s
    assert e.decode_utf8([104, 105]) == "hi"


def test_bad_utf8():
    with pytest.raises(JsonnetError):
        e.decode_utf8(b"\xff\xfe")


def test_base64_roundtrip():
    s = "some text ✓"
    assert e.base64_decode(e.base64_encode(s)) == s
    data = bytes(range(256))
    assert e.base64_decode_bytes(e.base64_encode(data)) == data
    assert e.base64_encode(b"a") == e.base64_encode("a")


def test_base64_invalid():
    with pytest.raises(JsonnetError):
        e.base64_decode("not base64!")
    with pytest.raises(JsonnetError):
        e.base64_decode(e.base64_encode(b"\xff"))


@pytest.mark.parametrize(
    "func,length", [(e.md5, 32), (e.sha1, 40), (e.sha256, 64), (e.sha512, 128), (e.sha3, 128)]
)
def test_hash_shape(func, length):
    digest = func("abc")
    assert len(digest) == length
    assert set(digest) <= set("0123456789abcdef")
    assert func("abc") == digest and func("abd") != digest


def test_md5_empty():
    assert e.md5("") == "d41d8cd98f00b204e9800998ecf8427e"