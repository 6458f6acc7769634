"""VTXPROG record and container codec.

Layout of one 0x3E byte program record (multi-byte integers big-endian):

    [Name(16) | NR(1) | Flags(1) | Amp(1) | Gain..Resonance(7) |
     BrightCap, LowCut, MidBoost(3) | Bias(1) | Class(1) |
     Pedal1: Type(1) Dial1(2) Dial2..6(5) | Pedal2: same(8) |
     Reserved(8) | Reverb: Type(1) Dial1..5(5) | Trailer(1)]

Decoding accepts two legacy deviations of the authoring tool, see
``lenient_amp_bool`` and ``lenient_dial_byte``. Encoding is always canonical.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from vtx_core.binary import BinaryInput, BinaryOutput
from vtx_core.errors import InvalidMessage, PrefixNotRecognized
from vtx_core.params import AmpClass, AmpModel, ReverbPedalType, Slot1PedalType, Slot2PedalType, TubeBias
from vtx_core.program import Program
from vtx_core.protocol import (
    FLAG_PEDAL_1_ENABLED,
    FLAG_PEDAL_2_ENABLED,
    FLAG_REVERB_PEDAL_ENABLED,
    LEGACY_SPACE,
    PREFIX_LEN,
    PROGRAM_NAME_LEN,
    PROGRAM_RECORD_LEN,
    RESERVED_LEN,
    TRAILER_LEN,
    VTXPROG_PREFIX,
)
from vtx_core.values import ProgramName, TwoByteDial, ZeroToTenDial


def lenient_amp_bool(raw: int, offset: int | None = None) -> bool:
    """Amp-level boolean: 0x00 false, 0x01 true, 0x20 (space) false."""
    if raw == 0x00 or raw == LEGACY_SPACE:
        return False
    if raw == 0x01:
        return True
    raise InvalidMessage(f"Expected boolean (0 or 1), got {raw}", offset)


def lenient_dial_byte(raw: int) -> int:
    """Single-byte pedal dial: 0x20 (space) reads as 0x01, anything else passes through."""
    return 0x01 if raw == LEGACY_SPACE else raw


def _read_amp_bool(input: BinaryInput) -> bool:
    offset = input.position
    return lenient_amp_bool(input.next_byte(), offset)


def _read_dial_byte(input: BinaryInput) -> int:
    return lenient_dial_byte(input.next_byte())


def write_program(program: Program, output: BinaryOutput) -> None:
    """Append the canonical 0x3E byte record for ``program``."""
    flags = 0x00
    if program.pedal1_enabled:
        flags |= FLAG_PEDAL_1_ENABLED
    if program.pedal2_enabled:
        flags |= FLAG_PEDAL_2_ENABLED
    if program.reverb_pedal_enabled:
        flags |= FLAG_REVERB_PEDAL_ENABLED

    output.write(program.program_name)
    output.write(program.noise_reduction_sensitivity)
    output.write(flags)
    output.write(program.amp_model)
    for dial in (
        program.gain,
        program.treble,
        program.middle,
        program.bass,
        program.volume,
        program.presence,
        program.resonance,
    ):
        output.write(dial)

    output.write(int(program.bright_cap))
    output.write(int(program.low_cut))
    output.write(int(program.mid_boost))

    output.write(program.tube_bias)
    output.write(program.amp_class)

    output.write(program.pedal1_type)
    output.write_ushort_be(program.pedal1_dial1.semantic_value)
    for raw in (
        program.pedal1_dial2,
        program.pedal1_dial3,
        program.pedal1_dial4,
        program.pedal1_dial5,
        program.pedal1_dial6,
    ):
        output.write(raw)

    output.write(program.pedal2_type)
    output.write_ushort_be(program.pedal2_dial1.semantic_value)
    for raw in (
        program.pedal2_dial2,
        program.pedal2_dial3,
        program.pedal2_dial4,
        program.pedal2_dial5,
        program.pedal2_dial6,
    ):
        output.write(raw)

    output.write(bytes(RESERVED_LEN))
    output.write(program.reverb_pedal_type)
    output.write(program.reverb_pedal_dial1)
    output.write(program.reverb_pedal_dial2)
    output.write(program.reverb_pedal_dial3)
    output.write(program.reverb_pedal_dial4)
    output.write(program.reverb_pedal_dial5)

    output.write(bytes(TRAILER_LEN))


def read_program(input: BinaryInput) -> Program:
    """Decode one record at the cursor."""
    program_name = ProgramName.decode(input.next_bytes(PROGRAM_NAME_LEN))

    nr_sens = ZeroToTenDial.read_from(input)
    flags = input.next_byte()
    amp_model = AmpModel.read_from(input)
    gain = ZeroToTenDial.read_from(input)
    treble = ZeroToTenDial.read_from(input)
    middle = ZeroToTenDial.read_from(input)
    bass = ZeroToTenDial.read_from(input)
    volume = ZeroToTenDial.read_from(input)
    presence = ZeroToTenDial.read_from(input)
    resonance = ZeroToTenDial.read_from(input)

    bright_cap = _read_amp_bool(input)
    low_cut = _read_amp_bool(input)
    mid_boost = _read_amp_bool(input)

    tube_bias = TubeBias.read_from(input)
    amp_class = AmpClass.read_from(input)

    pedal1_type = Slot1PedalType.read_from(input)
    pedal1_dial1 = TwoByteDial.read_from(input)
    pedal1_dials = [_read_dial_byte(input) for _ in range(5)]

    pedal2_type = Slot2PedalType.read_from(input)
    pedal2_dial1 = TwoByteDial.read_from(input)
    pedal2_dials = [_read_dial_byte(input) for _ in range(5)]

    input.skip(RESERVED_LEN)
    reverb_type = ReverbPedalType.read_from(input)
    reverb_dial1 = ZeroToTenDial.read_from(input)
    reverb_dial2 = ZeroToTenDial.read_from(input)
    reverb_dial3 = _read_dial_byte(input)
    reverb_dial4 = ZeroToTenDial.read_from(input)
    reverb_dial5 = ZeroToTenDial.read_from(input)
    input.skip(TRAILER_LEN)

    # Unknown flag bits are ignored
    return Program(
        program_name=program_name,
        noise_reduction_sensitivity=nr_sens,
        amp_model=amp_model,
        gain=gain,
        treble=treble,
        middle=middle,
        bass=bass,
        volume=volume,
        presence=presence,
        resonance=resonance,
        bright_cap=bright_cap,
        low_cut=low_cut,
        mid_boost=mid_boost,
        tube_bias=tube_bias,
        amp_class=amp_class,
        pedal1_enabled=bool(flags & FLAG_PEDAL_1_ENABLED),
        pedal1_type=pedal1_type,
        pedal1_dial1=pedal1_dial1,
        pedal1_dial2=pedal1_dials[0],
        pedal1_dial3=pedal1_dials[1],
        pedal1_dial4=pedal1_dials[2],
        pedal1_dial5=pedal1_dials[3],
        pedal1_dial6=pedal1_dials[4],
        pedal2_enabled=bool(flags & FLAG_PEDAL_2_ENABLED),
        pedal2_type=pedal2_type,
        pedal2_dial1=pedal2_dial1,
        pedal2_dial2=pedal2_dials[0],
        pedal2_dial3=pedal2_dials[1],
        pedal2_dial4=pedal2_dials[2],
        pedal2_dial5=pedal2_dials[3],
        pedal2_dial6=pedal2_dials[4],
        reverb_pedal_enabled=bool(flags & FLAG_REVERB_PEDAL_ENABLED),
        reverb_pedal_type=reverb_type,
        reverb_pedal_dial1=reverb_dial1,
        reverb_pedal_dial2=reverb_dial2,
        reverb_pedal_dial3=reverb_dial3,
        reverb_pedal_dial4=reverb_dial4,
        reverb_pedal_dial5=reverb_dial5,
    )


def encode_program(program: Program) -> bytes:
    out = BinaryOutput()
    write_program(program, out)
    return out.getvalue()


@dataclass(frozen=True)
class VtxProgFile:
    """An ordered sequence of programs; order is slot order."""

    programs: tuple[Program, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "programs", tuple(self.programs))

    def write_to_in_vtxprog_format(self, output: BinaryOutput | None = None) -> bytes:
        """Append to ``output`` (or a fresh buffer) and return only the bytes this call wrote."""
        if output is None:
            output = BinaryOutput()
        start = len(output)
        output.write(VTXPROG_PREFIX)
        for program in self.programs:
            write_program(program, output)
        return output.getvalue()[start:]

    @classmethod
    def read_from_in_vtxprog_format(cls, data: bytes | BinaryInput) -> "VtxProgFile":
        input = data if isinstance(data, BinaryInput) else BinaryInput(data)

        if input.bytes_remaining < PREFIX_LEN:
            raise PrefixNotRecognized(input.next_bytes(input.bytes_remaining))
        prefix = input.next_bytes(PREFIX_LEN)
        if prefix != VTXPROG_PREFIX:
            raise PrefixNotRecognized(prefix)

        programs: list[Program] = []
        while input.bytes_remaining > 0:
            if input.bytes_remaining < PROGRAM_RECORD_LEN:
                raise InvalidMessage(
                    "The input file has an incorrect length, programs are always 0x3E bytes long",
                    input.position,
                )
            programs.append(read_program(input))

        return cls(tuple(programs))


def encode_programs(programs: Iterable[Program]) -> bytes:
    return VtxProgFile(tuple(programs)).write_to_in_vtxprog_format()


def decode_programs(data: bytes) -> list[Program]:
    return list(VtxProgFile.read_from_in_vtxprog_format(data).programs)
