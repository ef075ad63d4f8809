"""Serialize values into the Kafka wire format."""

from __future__ import annotations

import struct
from typing import Callable, Iterable, TypeVar

from samsa.errors import EncodingError

T = TypeVar("T")

MSB = 0b1000_0000

_I16_MAX = 2**15 - 1
_I32_MAX = 2**31 - 1
_U64_MASK = 2**64 - 1


def _pack(fmt: str, value: int) -> bytes:
    try:
        return struct.pack(fmt, value)
    except struct.error as exc:
        raise EncodingError() from exc


def encode_bool(value: bool) -> bytes:
    """Encode a boolean as a single signed byte."""
    return _pack(">b", 1 if value else 0)


def encode_i8(value: int) -> bytes:
    return _pack(">b", value)


def encode_i16(value: int) -> bytes:
    return _pack(">h", value)


def encode_i32(value: int) -> bytes:
    return _pack(">i", value)


def encode_u32(value: int) -> bytes:
    return _pack(">I", value)


def encode_i64(value: int) -> bytes:
    return _pack(">q", value)


def zigzag_encode(value: int) -> int:
    """Zigzag-transform an unsigned 64-bit value."""
    if not 0 <= value <= _U64_MASK:
        raise EncodingError()
    return ((value << 1) & _U64_MASK) ^ (value >> 63)


def encode_varint(value: int) -> bytes:
    """Encode an unsigned value as a zigzag variable-length integer."""
    n = zigzag_encode(value)
    out = bytearray()
    while n >= 0x80:
        out.append(MSB | (n & 0x7F))
        n >>= 7
    out.append(n)
    return bytes(out)


def encode_string(value: str) -> bytes:
    """Encode a string with a 16-bit length prefix."""
    data = value.encode("utf-8")
    if len(data) > _I16_MAX:
        raise EncodingError()
    return struct.pack(">h", len(data)) + data


def encode_nullable_string(value: str | None) -> bytes:
    """Encode a string, or -1 as a 16-bit length for ``None``."""
    if value is None:
        return encode_i16(-1)
    return encode_string(value)


def encode_bytes(value: bytes) -> bytes:
    """Encode bytes with a 32-bit length prefix."""
    data = bytes(value)
    if len(data) > _I32_MAX:
        raise EncodingError()
    return struct.pack(">i", len(data)) + data


def encode_nullable_bytes(value: bytes | None) -> bytes:
    """Encode bytes, or -1 as a 32-bit length for ``None``."""
    if value is None:
        return encode_i32(-1)
    return encode_bytes(value)


def encode_array(items: Iterable[T], encoder: Callable[[T], bytes]) -> bytes:
    """Encode a 32-bit element count followed by each encoded element."""
    elements = list(items)
    if len(elements) > _I32_MAX:
        raise EncodingError()
    return struct.pack(">i", len(elements)) + b"".join(encoder(x) for x in elements)


def encode_strings(items: Iterable[str]) -> bytes:
    """Encode a sequence of strings as a protocol array."""
    return encode_array(items, encode_string)