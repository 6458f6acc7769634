"""Sequential byte cursors over an owned buffer."""
from __future__ import annotations

import struct

from .errors import UnexpectedEndOfInput

_USHORT_BE = struct.Struct(">H")


class BinaryInput:
    """Reads a byte buffer front to back.

    Every read advances ``position``; asking for more than ``bytes_remaining``
    raises UnexpectedEndOfInput without moving the cursor.
    """

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def bytes_remaining(self) -> int:
        return len(self._data) - self._pos

    def _require(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Negative read length: {n}")
        if n > self.bytes_remaining:
            raise UnexpectedEndOfInput(n, self.bytes_remaining, self._pos)

    def next_byte(self) -> int:
        self._require(1)
        b = self._data[self._pos]
        self._pos += 1
        return b

    def next_bytes(self, n: int) -> bytes:
        self._require(n)
        chunk = self._data[self._pos:self._pos + n]
        self._pos += n
        return chunk

    def next_ushort(self) -> int:
        """Read an unsigned 16 bit big-endian integer."""
        self._require(2)
        (value,) = _USHORT_BE.unpack_from(self._data, self._pos)
        self._pos += 2
        return value

    def skip(self, n: int) -> None:
        self._require(n)
        self._pos += n


class BinaryOutput:
    """Append-only byte sink."""

    def __init__(self):
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def write(self, data) -> None:
        """Append raw bytes, a single byte value, or an object exposing ``encoded``."""
        if isinstance(data, int):
            if not 0 <= data <= 0xFF:
                raise ValueError(f"Byte out of range: {data}")
            self._buf.append(data)
            return
        encoded = getattr(data, "encoded", data)
        self._buf += encoded

    def write_ushort_be(self, value: int) -> None:
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"UShort out of range: {value}")
        self._buf += _USHORT_BE.pack(value)

    def getvalue(self) -> bytes:
        return bytes(self._buf)
