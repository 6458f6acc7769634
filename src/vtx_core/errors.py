"""Error taxonomy for VTXPROG decoding and value construction."""
from __future__ import annotations


class MessageParseError(Exception):
    """Base class for every failure to decode VTXPROG bytes."""


class PrefixNotRecognized(MessageParseError):
    """The input does not start with the VTXPROG magic prefix."""

    def __init__(self, found: bytes):
        self.found = bytes(found)
        super().__init__(f"Incorrect prefix {self.found[:12]!r}")


class InvalidMessage(MessageParseError):
    """The input is a VTXPROG file but a record is malformed."""

    def __init__(self, detail: str, offset: int | None = None):
        self.detail = detail
        self.offset = offset
        if offset is None:
            super().__init__(detail)
        else:
            super().__init__(f"{detail} (at offset 0x{offset:x})")


class UnexpectedEndOfInput(InvalidMessage):
    def __init__(self, requested: int, remaining: int, offset: int):
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"Unexpected end of input: needed {requested} bytes, {remaining} remaining",
            offset,
        )


class UnrecognizedProtocolValue(MessageParseError):
    """An enum byte does not match any known variant."""

    def __init__(self, code: int, parameter: str):
        self.code = code
        self.parameter = parameter
        super().__init__(f"Unrecognized {parameter} protocol value 0x{code:02x}")


class OutOfRange(ValueError):
    """A semantic value failed its constructor's range check."""

    def __init__(self, what: str, value, valid: str):
        self.what = what
        self.value = value
        super().__init__(f"{what} out of range: {value!r} (valid: {valid})")
