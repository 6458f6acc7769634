"""Enumerated hardware parameters and their protocol byte codes.

Each member's value is the single byte the amplifier uses to identify it.
``@unique`` keeps the code -> member mapping injective.
"""
from __future__ import annotations

from enum import Enum, unique

from .binary import BinaryInput
from .errors import UnrecognizedProtocolValue


class ProtocolParameter:
    """Mixin for enums whose value is the protocol code."""

    @property
    def protocol_value(self) -> int:
        return self.value

    @property
    def encoded(self) -> bytes:
        return bytes([self.value])

    @classmethod
    def of_protocol_value(cls, code: int):
        try:
            return cls(code)
        except ValueError:
            raise UnrecognizedProtocolValue(code, cls.__name__) from None

    @classmethod
    def read_from(cls, input: BinaryInput):
        return cls.of_protocol_value(input.next_byte())


@unique
class AmpModel(ProtocolParameter, Enum):
    DELUXE_CL_VIBRATO = 0x00
    DELUXE_CL_NORMAL = 0x01
    TWEED_4X10_BRIGHT = 0x02
    TWEED_4X10_NORMAL = 0x03
    BOUTIQUE_CL = 0x04
    BOUTIQUE_OD = 0x05
    VOX_AC30 = 0x06
    VOX_AC30TB = 0x07
    BRIT_1959_TREBLE = 0x08
    BRIT_1959_NORMAL = 0x09
    BRIT_800 = 0x0A
    BRIT_VM = 0x0B
    SL_OD = 0x0C
    DOUBLE_REC = 0x0D
    CALI_ELATION = 0x0E
    ERUPT_III_CH2 = 0x0F
    ERUPT_III_CH3 = 0x10
    BOUTIQUE_METAL = 0x11
    BRIT_OR_MKII = 0x12
    ORIGINAL_CL = 0x13


@unique
class TubeBias(ProtocolParameter, Enum):
    OFF = 0x00
    COLD = 0x01
    HOT = 0x02


@unique
class AmpClass(ProtocolParameter, Enum):
    A = 0x00
    AB = 0x01


@unique
class Slot1PedalType(ProtocolParameter, Enum):
    COMP = 0x00
    CHORUS = 0x01

    # overdrive
    TUBE_OD = 0x02
    GOLD_DRIVE = 0x03
    TREBLE_BOOST = 0x04
    RC_TURBO = 0x05

    # distortion
    ORANGE_DIST = 0x06
    FAT_DIST = 0x07
    BRIT_LEAD = 0x08
    FUZZ = 0x09


@unique
class Slot2PedalType(ProtocolParameter, Enum):
    FLANGER = 0x00
    BLK_PHASER = 0x01
    ORG_PHASER_1 = 0x02
    ORG_PHASER_2 = 0x03
    TC_TREMOLO = 0x04
    TAPE_ECHO = 0x05
    ANALOG_DELAY = 0x06


@unique
class ReverbPedalType(ProtocolParameter, Enum):
    ROOM = 0x00
    SPRING = 0x01
    HALL = 0x02
    PLATE = 0x03


ALL_PARAMETER_TYPES = (AmpModel, TubeBias, AmpClass, Slot1PedalType, Slot2PedalType, ReverbPedalType)
