"""FNV-1a hashing.

Non-cryptographic, byte oriented: the hash of a string is the hash of its
UTF-8 encoding.
"""
from typing import Iterable


FNV1A_32_OFFSET = 0x811C9DC5
FNV1A_32_PRIME = 0x01000193
MASK_32 = 0xFFFFFFFF

FNV1A_64_OFFSET = 0xCBF29CE484222325
FNV1A_64_PRIME = 0x100000001B3
MASK_64 = 0xFFFFFFFFFFFFFFFF

Input = str | bytes | bytearray | memoryview | Iterable[int]


def to_bytes(data: Input) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, Iterable):
        # bytes() raises ValueError for ints outside 0..255
        return bytes(data)
    raise TypeError("can't hash {0:s}".format(type(data).__name__), data)


def fnv1a_32(data: Input, seed: int | None = None) -> int:
    hash = FNV1A_32_OFFSET if seed is None else seed & MASK_32
    for b in to_bytes(data):
        hash ^= b
        hash = (hash * FNV1A_32_PRIME) & MASK_32
    return hash


def fnv1a_64(data: Input, seed: int | None = None) -> int:
    hash = FNV1A_64_OFFSET if seed is None else seed & MASK_64
    for b in to_bytes(data):
        hash ^= b
        hash = (hash * FNV1A_64_PRIME) & MASK_64
    return hash


def fnv1a_32_hex(data: Input) -> str:
    return "{0:08x}".format(fnv1a_32(data))


def fnv1a_64_hex(data: Input) -> str:
    return "{0:016x}".format(fnv1a_64(data))


def to_uint32_hex(n: int) -> str:
    return "{0:08x}".format(n & MASK_32)
