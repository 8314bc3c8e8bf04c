import pytest

from fnvtable.fnv import (
    FNV1A_32_OFFSET,
    FNV1A_64_OFFSET,
    fnv1a_32,
    fnv1a_32_hex,
    fnv1a_64,
    fnv1a_64_hex,
    to_bytes,
    to_uint32_hex,
)


def test_fnv1a_32_known_values():
    assert fnv1a_32("") == FNV1A_32_OFFSET == 0x811C9DC5
    assert fnv1a_32("a") == 0xE40C292C
    assert fnv1a_32("foobar") == 0xBF9CF968


def test_fnv1a_64_known_values():
    assert fnv1a_64("") == FNV1A_64_OFFSET == 0xCBF29CE484222325
    assert fnv1a_64("a") == 0xAF63DC4C8601EC8C
    assert fnv1a_64("foobar") == 0x85944171F73967E8


def test_fnv1a_32_stays_unsigned_32_bit():
    for s in ["", "a", "hello", "The quick brown fox jumps over the lazy dog", "ü" * 100]:
        h = fnv1a_32(s)
        assert 0 <= h <= 0xFFFFFFFF


def test_input_forms_hash_alike():
    # str input hashes its UTF-8 bytes
    assert fnv1a_32("hello") == fnv1a_32(b"hello")
    assert fnv1a_32("hello") == fnv1a_32(bytearray(b"hello"))
    assert fnv1a_32("hello") == fnv1a_32([104, 101, 108, 108, 111])
    assert fnv1a_32("ü") == fnv1a_32("ü".encode("utf-8"))
    assert fnv1a_64("hello") == fnv1a_64(memoryview(b"hello"))


def test_seed():
    assert fnv1a_32("a", seed=FNV1A_32_OFFSET) == fnv1a_32("a")
    assert fnv1a_32("a", seed=0) != fnv1a_32("a")
    assert fnv1a_32("", seed=0x1_0000_0005) == 5
    assert fnv1a_64("", seed=7) == 7


def test_hex():
    assert fnv1a_32_hex("") == "811c9dc5"
    assert fnv1a_32_hex("a") == "e40c292c"
    assert fnv1a_64_hex("") == "cbf29ce484222325"
    assert len(fnv1a_64_hex("foobar")) == 16
    assert to_uint32_hex(5) == "00000005"
    assert to_uint32_hex(-1) == "ffffffff"


def test_to_bytes_rejects_bad_input():
    with pytest.raises(TypeError):
        to_bytes(5)  # type: ignore
    with pytest.raises(ValueError):
        to_bytes([256])
