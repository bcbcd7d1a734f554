"""Random (version 4) UUIDs with several text formats."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Optional

from .mtrandom import MersenneTwister, next_long

_PLAIN = "%02x" * 16
_DASHED = (
    "%02x%02x%02x%02x-%02x%02x-%02x%02x-%02x%02x-%02x%02x%02x%02x%02x%02x"
)

_PATTERNS = {
    "N": _PLAIN,
    "D": _DASHED,
    "B": "{" + _DASHED + "}",
    "P": "(" + _DASHED + ")",
    "X": (
        "{0x%02x%02x%02x%02x,0x%02x%02x,0x%02x%02x,"
        "{0x%02x,0x%02x,0x%02x,0x%02x,0x%02x,0x%02x,0x%02x,0x%02x}}"
    ),
}


def format_pattern(fmt: str) -> str:
    """The printf-style pattern for format letter ``fmt``.

    Known letters are N, D, B, P and X; anything else gives the N pattern.
    """
    return _PATTERNS.get(fmt, _PLAIN)


@dataclass(frozen=True)
class Uuid:
    """Sixteen bytes of identifier."""

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != 16:
            raise ValueError(f"a uuid holds 16 bytes, not {len(self.data)}")
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def generate(cls, rng: Optional[MersenneTwister] = None) -> "Uuid":
        """Make a random version-4 uuid from four 32-bit draws.

        Without ``rng`` the shared generator is used.
        """
        draw = rng.next_int32 if rng is not None else next_long
        raw = bytearray(struct.pack("<4I", *(draw() for _ in range(4))))
        raw[6] = (raw[6] & 0x0F) | 0x40
        raw[8] = (raw[8] & 0x3F) | 0x80
        return cls(bytes(raw))

    def to_string(self, fmt: str = "D") -> str:
        """Render the uuid with format letter ``fmt`` (see format_pattern)."""
        return format_pattern(fmt) % tuple(self.data)

    def __str__(self) -> str:
        return self.to_string("D")