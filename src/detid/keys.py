"""keys.py - 128-bit identifier value type

ZVIC-constrained module: enforces 128-bit contracts at runtime.

A `DeterministicId` is an immutable int holding a UUID's 128 bits. It is
viewed as two 64-bit words, `msb` and `lsb`, matching the RFC 4122 byte
layout read in big-endian order, and prints in the canonical 8-4-4-4-12
lowercase hex form.
"""

from __future__ import annotations

import os
import re
from uuid import UUID

from zvic import constrain_this_module

from .exceptions import NamespaceError

# Enable ZVIC runtime constraint checking if not explicitly disabled.
# Use environment variable `DETID_ZVIC_ENABLED` (default: "1").
try:
    if os.getenv("DETID_ZVIC_ENABLED", "1") == "1":
        constrain_this_module()
except Exception:
    # Don't block import if ZVIC is misconfigured.
    pass

MASK64 = (1 << 64) - 1

_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.I
)


class DeterministicId(int):
    """
    DeterministicId: 128-bit value produced by name-based UUID generation.

    - Immutable and hashable; compares equal to its integer value.
    - `msb`/`lsb` expose the most and least significant 64-bit words.
    - `str()` gives lowercase 8-4-4-4-12 text that `from_str` reads back.
    """

    __slots__ = ()

    def __new__(cls, id_: "int[_ >= 0 and _ < (1 << 128)] | str | None" = None):
        if isinstance(id_, str):
            return cls.from_str(id_)
        if id_ is None:
            id_ = 0
        if not 0 <= id_ < (1 << 128):
            raise ValueError("ID must be a 128-bit integer")
        return super().__new__(cls, id_)

    @property
    def msb(self) -> "int[_ >= 0 and _ < (1 << 64)]":
        return (self >> 64) & MASK64

    @property
    def lsb(self) -> "int[_ >= 0 and _ < (1 << 64)]":
        return self & MASK64

    @property
    def version(self) -> int:
        """Version nibble, bits 12-15 of the most significant word."""
        return (self.msb >> 12) & 0xF

    @property
    def variant(self) -> int:
        """Variant number; 2 is the RFC 4122 (Leach-Salz) layout."""
        top = self.lsb >> 61
        if top & 0b100 == 0:
            return 0
        if top & 0b010 == 0:
            return 2
        return top

    @property
    def bytes(self) -> bytes:
        return int(self).to_bytes(16, "big")

    def __repr__(self) -> str:
        return f"DeterministicId('{self}')"

    def __str__(self) -> str:
        h = f"{int(self):032x}"
        return f"{h[:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:]}"

    def to_uuid(self) -> UUID:
        return UUID(int=int(self))

    @classmethod
    def from_int(cls, id_: "int[_ >= 0 and _ < (1 << 128)]") -> DeterministicId:
        return cls(id_)

    @classmethod
    def from_words(
        cls,
        msb: "int[_ >= 0 and _ < (1 << 64)]",
        lsb: "int[_ >= 0 and _ < (1 << 64)]",
    ) -> DeterministicId:
        """Build from the most and least significant 64-bit words."""
        return cls((msb << 64) | lsb)

    @classmethod
    def from_str(cls, value: str) -> DeterministicId:
        """Parse canonical 8-4-4-4-12 hex text (either case)."""
        text = value.strip()
        if not _UUID_RE.match(text):
            raise NamespaceError(f"{value!r} is not a UUID string")
        return cls(int(text.replace("-", ""), 16))

    @classmethod
    def from_uuid(cls, value: UUID) -> DeterministicId:
        return cls(value.int)


NIL = DeterministicId(0)


def coerce_namespace(value) -> DeterministicId | None:
    """Read a namespace given as text, UUID, int or DeterministicId.

    None stays None: an absent namespace hashes like the all-zero one.
    """
    if value is None or isinstance(value, DeterministicId):
        return value
    if isinstance(value, UUID):
        return DeterministicId.from_uuid(value)
    if isinstance(value, str):
        return DeterministicId.from_str(value)
    if isinstance(value, int) and not isinstance(value, bool):
        if not 0 <= value < (1 << 128):
            raise NamespaceError(f"namespace {value} is not a 128-bit value")
        return DeterministicId(value)
    raise NamespaceError(f"unsupported namespace type {type(value).__name__}")
