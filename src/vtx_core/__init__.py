"""VTX Core - Protocol values, program model and byte cursors."""
from .binary import BinaryInput, BinaryOutput
from .errors import (
    InvalidMessage,
    MessageParseError,
    OutOfRange,
    PrefixNotRecognized,
    UnexpectedEndOfInput,
    UnrecognizedProtocolValue,
)
from .ids import canonicalize, name_key, program_id
from .params import AmpClass, AmpModel, ReverbPedalType, Slot1PedalType, Slot2PedalType, TubeBias
from .program import Program
from .values import ProgramName, TwoByteDial, ZeroToTenDial

__all__ = [
    "BinaryInput",
    "BinaryOutput",
    "InvalidMessage",
    "MessageParseError",
    "OutOfRange",
    "PrefixNotRecognized",
    "UnexpectedEndOfInput",
    "UnrecognizedProtocolValue",
    "canonicalize",
    "name_key",
    "program_id",
    "AmpClass",
    "AmpModel",
    "ReverbPedalType",
    "Slot1PedalType",
    "Slot2PedalType",
    "TubeBias",
    "Program",
    "ProgramName",
    "TwoByteDial",
    "ZeroToTenDial",
]
