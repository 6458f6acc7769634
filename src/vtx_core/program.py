"""Program: one complete amplifier configuration."""
from __future__ import annotations

from dataclasses import dataclass, fields

from .errors import OutOfRange
from .params import AmpClass, AmpModel, ReverbPedalType, Slot1PedalType, Slot2PedalType, TubeBias
from .values import ProgramName, TwoByteDial, ZeroToTenDial


@dataclass(frozen=True)
class Program:
    program_name: ProgramName
    noise_reduction_sensitivity: ZeroToTenDial
    amp_model: AmpModel
    gain: ZeroToTenDial
    treble: ZeroToTenDial
    middle: ZeroToTenDial
    bass: ZeroToTenDial
    volume: ZeroToTenDial
    presence: ZeroToTenDial
    resonance: ZeroToTenDial
    bright_cap: bool
    low_cut: bool
    mid_boost: bool
    tube_bias: TubeBias
    amp_class: AmpClass

    pedal1_enabled: bool
    pedal1_type: Slot1PedalType
    pedal1_dial1: TwoByteDial
    pedal1_dial2: int
    pedal1_dial3: int
    pedal1_dial4: int
    pedal1_dial5: int
    pedal1_dial6: int

    pedal2_enabled: bool
    pedal2_type: Slot2PedalType
    pedal2_dial1: TwoByteDial
    pedal2_dial2: int
    pedal2_dial3: int
    pedal2_dial4: int
    pedal2_dial5: int
    pedal2_dial6: int

    reverb_pedal_enabled: bool
    reverb_pedal_type: ReverbPedalType
    reverb_pedal_dial1: ZeroToTenDial
    reverb_pedal_dial2: ZeroToTenDial
    reverb_pedal_dial3: int
    reverb_pedal_dial4: ZeroToTenDial
    reverb_pedal_dial5: ZeroToTenDial

    def __post_init__(self):
        # f.type is the annotation string
        for f in fields(self):
            value = getattr(self, f.name)
            expected = _FIELD_TYPES[f.type]
            if expected is int:
                if isinstance(value, bool) or not isinstance(value, int):
                    raise OutOfRange(f.name, value, "int 0..255")
                if not 0 <= value <= 0xFF:
                    raise OutOfRange(f.name, value, "0..255")
            elif not isinstance(value, expected):
                raise OutOfRange(f.name, value, expected.__name__)

    @classmethod
    def default(cls, name: str = "") -> "Program":
        """Neutral program used to fill blank slots."""
        zero = ZeroToTenDial(0)
        return cls(
            program_name=ProgramName(name),
            noise_reduction_sensitivity=zero,
            amp_model=AmpModel.ORIGINAL_CL,
            gain=zero,
            treble=zero,
            middle=zero,
            bass=zero,
            volume=zero,
            presence=zero,
            resonance=zero,
            bright_cap=False,
            low_cut=False,
            mid_boost=False,
            tube_bias=TubeBias.OFF,
            amp_class=AmpClass.A,
            pedal1_enabled=False,
            pedal1_type=Slot1PedalType.COMP,
            pedal1_dial1=TwoByteDial(0),
            pedal1_dial2=0,
            pedal1_dial3=0,
            pedal1_dial4=0,
            pedal1_dial5=0,
            pedal1_dial6=0,
            pedal2_enabled=False,
            pedal2_type=Slot2PedalType.FLANGER,
            pedal2_dial1=TwoByteDial(0),
            pedal2_dial2=0,
            pedal2_dial3=0,
            pedal2_dial4=0,
            pedal2_dial5=0,
            pedal2_dial6=0,
            reverb_pedal_enabled=False,
            reverb_pedal_type=ReverbPedalType.ROOM,
            reverb_pedal_dial1=zero,
            reverb_pedal_dial2=zero,
            reverb_pedal_dial3=0,
            reverb_pedal_dial4=zero,
            reverb_pedal_dial5=zero,
        )

    def to_record(self) -> dict:
        """Flatten to plain values: names for enums and text, integers for dials."""
        out: dict = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, ProgramName):
                value = value.text
            elif isinstance(value, (ZeroToTenDial, TwoByteDial)):
                value = value.semantic_value
            elif hasattr(value, "protocol_value"):
                value = value.name
            out[f.name] = value
        return out


_FIELD_TYPES = {
    "ProgramName": ProgramName,
    "ZeroToTenDial": ZeroToTenDial,
    "TwoByteDial": TwoByteDial,
    "AmpModel": AmpModel,
    "TubeBias": TubeBias,
    "AmpClass": AmpClass,
    "Slot1PedalType": Slot1PedalType,
    "Slot2PedalType": Slot2PedalType,
    "ReverbPedalType": ReverbPedalType,
    "bool": bool,
    "int": int,
}
