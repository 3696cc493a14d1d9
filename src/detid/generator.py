"""generator.py - SHA-1 name-based (version 5) UUID generation

Computes RFC 4122 version-5 identifiers: SHA-1 over the 16 namespace
bytes followed by the name bytes, the first 16 digest bytes read as two
big-endian 64-bit words, then the version and variant bits patched in.

Byte order is always explicit. The namespace is fed as its most
significant word then its least significant word, each big-endian, which
is the canonical UUID byte layout regardless of host byte order.
"""

from __future__ import annotations

import hashlib
import struct
from typing import Optional

from .keys import MASK64, DeterministicId, coerce_namespace

VERSION = 5
VARIANT = 2

_ZERO_NAMESPACE = bytes(16)


def write_u64_big_endian(value: int) -> bytes:
    """Pack a 64-bit word as 8 big-endian bytes."""
    return struct.pack(">Q", value & MASK64)


def read_u64_big_endian(buf: bytes, offset: int = 0) -> int:
    """Read 8 big-endian bytes starting at `offset` as an unsigned word."""
    return struct.unpack_from(">Q", buf, offset)[0]


def make_uuid(digest: bytes, version: int = VERSION) -> DeterministicId:
    """Pack a 16 (or more) byte digest into a UUID with version/variant set."""
    if len(digest) < 16:
        raise ValueError(f"digest must hold at least 16 bytes, got {len(digest)}")
    msb = read_u64_big_endian(digest, 0)
    lsb = read_u64_big_endian(digest, 8)

    # version: bits 12-15 of the most significant word
    msb &= ~(0xF << 12)
    msb |= version << 12

    # variant 10xx in the top two bits of the least significant word
    lsb &= ~(0x3 << 62) & MASK64
    lsb |= VARIANT << 62

    return DeterministicId.from_words(msb, lsb)


def _namespace_bytes(namespace: Optional[DeterministicId]) -> bytes:
    if namespace is None:
        return _ZERO_NAMESPACE
    return write_u64_big_endian(namespace.msb) + write_u64_big_endian(namespace.lsb)


def uuid5(namespace, name: bytes) -> DeterministicId:
    """Version-5 UUID of `name` within `namespace`.

    `namespace` may be None (treated as all zeros), a DeterministicId, a
    uuid.UUID, UUID text or a 128-bit int.
    """
    if not isinstance(name, (bytes, bytearray, memoryview)):
        raise TypeError(f"name must be bytes, got {type(name).__name__}")
    ns = coerce_namespace(namespace)
    h = hashlib.sha1()
    h.update(_namespace_bytes(ns))
    h.update(name)
    return make_uuid(h.digest()[:16])


def uuid5_from_text(namespace, text: str) -> DeterministicId:
    """Like `uuid5`, with `text` encoded as UTF-8 for the name."""
    if text is None:
        raise TypeError("text must not be None")
    return uuid5(namespace, text.encode("utf-8"))
