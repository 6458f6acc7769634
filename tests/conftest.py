import dataclasses

import pytest

from vtx_core.params import AmpClass, AmpModel, ReverbPedalType, Slot1PedalType, Slot2PedalType, TubeBias
from vtx_core.program import Program
from vtx_core.values import ProgramName, TwoByteDial, ZeroToTenDial


def build_program(name: str = "Crunch", **overrides) -> Program:
    """A program with every field set to a distinct non-default value."""
    program = Program(
        program_name=ProgramName(name),
        noise_reduction_sensitivity=ZeroToTenDial(15),
        amp_model=AmpModel.VOX_AC30TB,
        gain=ZeroToTenDial(75),
        treble=ZeroToTenDial(60),
        middle=ZeroToTenDial(45),
        bass=ZeroToTenDial(55),
        volume=ZeroToTenDial(80),
        presence=ZeroToTenDial(35),
        resonance=ZeroToTenDial(100),
        bright_cap=True,
        low_cut=False,
        mid_boost=True,
        tube_bias=TubeBias.HOT,
        amp_class=AmpClass.AB,
        pedal1_enabled=True,
        pedal1_type=Slot1PedalType.TUBE_OD,
        pedal1_dial1=TwoByteDial(0x1234),
        pedal1_dial2=10,
        pedal1_dial3=20,
        pedal1_dial4=30,
        pedal1_dial5=40,
        pedal1_dial6=0xFF,
        pedal2_enabled=False,
        pedal2_type=Slot2PedalType.ANALOG_DELAY,
        pedal2_dial1=TwoByteDial(500),
        pedal2_dial2=50,
        pedal2_dial3=60,
        pedal2_dial4=70,
        pedal2_dial5=80,
        pedal2_dial6=0,
        reverb_pedal_enabled=True,
        reverb_pedal_type=ReverbPedalType.SPRING,
        reverb_pedal_dial1=ZeroToTenDial(25),
        reverb_pedal_dial2=ZeroToTenDial(90),
        reverb_pedal_dial3=1,
        reverb_pedal_dial4=ZeroToTenDial(5),
        reverb_pedal_dial5=ZeroToTenDial(65),
    )
    return dataclasses.replace(program, **overrides)


@pytest.fixture
def program() -> Program:
    return build_program()
