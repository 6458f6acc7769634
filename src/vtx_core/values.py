"""Dial and name value types with their on-wire encodings."""
from __future__ import annotations

from dataclasses import dataclass

from .binary import BinaryInput
from .errors import InvalidMessage, OutOfRange
from .protocol import PROGRAM_NAME_LEN

_PRINTABLE = range(0x20, 0x7F)


@dataclass(frozen=True)
class ZeroToTenDial:
    """A 0-10 amp knob stored in tenths: semantic value 0..100, one raw byte."""

    semantic_value: int

    MIN = 0
    MAX = 100

    def __post_init__(self):
        if isinstance(self.semantic_value, bool) or not isinstance(self.semantic_value, int):
            raise OutOfRange("ZeroToTenDial", self.semantic_value, "int 0..100")
        if not self.MIN <= self.semantic_value <= self.MAX:
            raise OutOfRange("ZeroToTenDial", self.semantic_value, "0..100")

    @property
    def encoded(self) -> bytes:
        return bytes([self.semantic_value])

    @property
    def display(self) -> str:
        return f"{self.semantic_value / 10:.1f}"

    @classmethod
    def read_from(cls, input: BinaryInput) -> "ZeroToTenDial":
        offset = input.position
        raw = input.next_byte()
        if raw > cls.MAX:
            raise InvalidMessage(f"Dial value {raw} exceeds {cls.MAX}", offset)
        return cls(raw)


@dataclass(frozen=True)
class TwoByteDial:
    """First dial of a pedal slot; the raw big-endian unsigned short."""

    semantic_value: int

    def __post_init__(self):
        if isinstance(self.semantic_value, bool) or not isinstance(self.semantic_value, int):
            raise OutOfRange("TwoByteDial", self.semantic_value, "int 0..65535")
        if not 0 <= self.semantic_value <= 0xFFFF:
            raise OutOfRange("TwoByteDial", self.semantic_value, "0..65535")

    @property
    def encoded(self) -> bytes:
        return self.semantic_value.to_bytes(2, "big")

    @classmethod
    def read_from(cls, input: BinaryInput) -> "TwoByteDial":
        return cls(input.next_ushort())


@dataclass(frozen=True)
class ProgramName:
    """Program name: printable ASCII, space padded to 16 bytes on the wire."""

    text: str

    def __post_init__(self):
        # Trailing spaces are padding on the wire
        object.__setattr__(self, "text", self.text.rstrip(" "))
        if len(self.text) > PROGRAM_NAME_LEN:
            raise OutOfRange("ProgramName", self.text, f"at most {PROGRAM_NAME_LEN} characters")
        bad = [c for c in self.text if ord(c) not in _PRINTABLE]
        if bad:
            raise OutOfRange("ProgramName", self.text, "printable ASCII")

    @property
    def encoded(self) -> bytes:
        return self.text.encode("ascii").ljust(PROGRAM_NAME_LEN, b" ")

    @classmethod
    def decode(cls, encoded: bytes) -> "ProgramName":
        if len(encoded) != PROGRAM_NAME_LEN:
            raise InvalidMessage(f"Program name must be {PROGRAM_NAME_LEN} bytes, got {len(encoded)}")
        # Legacy files pad with NUL instead of space
        text = "".join(chr(b) if b in _PRINTABLE else "?" for b in encoded.rstrip(b" \x00"))
        return cls(text)

    def __str__(self) -> str:
        return self.text
