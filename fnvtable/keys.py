"""Key encoding.

The table hashes bytes, not objects. A `KeyEncoder` turns a key into the
bytes that get hashed; keys that compare equal must encode to the same
bytes, otherwise a lookup can start probing at the wrong home slot.
"""
from typing import Any, Callable, TypeVar


K = TypeVar("K")

KeyEncoder = Callable[[K], bytes]


class UnsupportedKeyError(TypeError):
    pass


def encode_key(key: Any) -> bytes:
    match key:
        case str():
            return key.encode("utf-8")
        case bytes() | bytearray():
            return bytes(key)
        case bool() | int():
            # True == 1, so both render as "1"
            return encode_int(int(key))
        case float():
            if key.is_integer():
                return encode_int(int(key))
            return repr(key).encode("ascii")
        case None:
            return b"None"
        case tuple():
            return encode_tuple(key)
        case _:
            raise UnsupportedKeyError(
                "no canonical encoding for {0:s}".format(type(key).__name__), key
            )


def encode_int(key: int) -> bytes:
    # hex has no digit limit, unlike str(int)
    return format(key, "x").encode("ascii")


def encode_tuple(key: tuple) -> bytes:
    out = bytearray(b"(")
    for item in key:
        encoded = encode_key(item)
        out += str(len(encoded)).encode("ascii")
        out += b":"
        out += encoded
    out += b")"
    return bytes(out)
