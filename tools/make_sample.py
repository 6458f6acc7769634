import dataclasses
import random
from pathlib import Path

from vtx_core.params import AmpClass, AmpModel, ReverbPedalType, Slot1PedalType, Slot2PedalType, TubeBias
from vtx_core.program import Program
from vtx_core.protocol import LEGACY_SPACE, PREFIX_LEN, PROGRAM_RECORD_LEN
from vtx_core.values import TwoByteDial, ZeroToTenDial
from vtx_prog.codec import VtxProgFile
from vtx_prog.library import export_filename

# Record offsets of the fields the legacy authoring tool writes as ASCII space
AMP_BOOL_OFFSETS = (26, 27, 28)
PEDAL1_DIAL2_OFFSET = 34


def dial(rng: random.Random) -> ZeroToTenDial:
    return ZeroToTenDial(rng.randint(0, 100))


def raw_dial(rng: random.Random, hi: int = 100) -> int:
    # 0x20 reads back as 0x01, so only legacy mode may write it
    value = rng.randint(0, hi)
    return value if value != LEGACY_SPACE else value + 1


def random_program(rng: random.Random, name: str) -> Program:
    base = Program.default(name)
    return dataclasses.replace(
        base,
        noise_reduction_sensitivity=dial(rng),
        amp_model=rng.choice(list(AmpModel)),
        gain=dial(rng),
        treble=dial(rng),
        middle=dial(rng),
        bass=dial(rng),
        volume=dial(rng),
        presence=dial(rng),
        resonance=dial(rng),
        bright_cap=rng.random() < 0.5,
        low_cut=rng.random() < 0.5,
        mid_boost=rng.random() < 0.5,
        tube_bias=rng.choice(list(TubeBias)),
        amp_class=rng.choice(list(AmpClass)),
        pedal1_enabled=rng.random() < 0.5,
        pedal1_type=rng.choice(list(Slot1PedalType)),
        pedal1_dial1=TwoByteDial(rng.randint(0, 1000)),
        pedal1_dial2=raw_dial(rng),
        pedal2_enabled=rng.random() < 0.5,
        pedal2_type=rng.choice(list(Slot2PedalType)),
        pedal2_dial1=TwoByteDial(rng.randint(0, 1000)),
        pedal2_dial2=raw_dial(rng),
        reverb_pedal_enabled=rng.random() < 0.5,
        reverb_pedal_type=rng.choice(list(ReverbPedalType)),
        reverb_pedal_dial1=dial(rng),
        reverb_pedal_dial2=dial(rng),
        reverb_pedal_dial3=raw_dial(rng, 1),
        reverb_pedal_dial4=dial(rng),
        reverb_pedal_dial5=dial(rng),
    )


def generate_file(out_dir: str, name: str, count: int = 11, legacy: bool = False, seed: int = 0) -> Path:
    rng = random.Random(seed)
    programs = [random_program(rng, f"{name[:12]} {i + 1:02d}") for i in range(count)]
    if legacy and programs:
        # at least one byte the legacy tool would write differently
        programs[0] = dataclasses.replace(programs[0], low_cut=False)
    data = bytearray(VtxProgFile(tuple(programs)).write_to_in_vtxprog_format())

    if legacy:
        # Mimic the legacy tool: space for "off" booleans and for a dial set to 1
        for i in range(count):
            base = PREFIX_LEN + i * PROGRAM_RECORD_LEN
            for off in AMP_BOOL_OFFSETS:
                if data[base + off] == 0x00:
                    data[base + off] = 0x20
            if data[base + PEDAL1_DIAL2_OFFSET] == 0x01:
                data[base + PEDAL1_DIAL2_OFFSET] = 0x20

    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    path = out / export_filename(name)
    path.write_bytes(bytes(data))
    print(f"GENERATED: {path}")
    return path


if __name__ == "__main__":
    import sys

    # Usage:
    #   python tools/make_sample.py OUT_DIR [NAME] [--count N] [--legacy]

    args = [a for a in sys.argv[1:] if a]

    def pop_flag(arg_list: list[str], flag: str) -> tuple[bool, list[str]]:
        """Remove a boolean flag from an argv-style list."""
        if flag in arg_list:
            return True, [a for a in arg_list if a != flag]
        return False, arg_list

    legacy, args = pop_flag(args, "--legacy")

    count = 11
    if "--count" in args:
        i = args.index("--count")
        if i + 1 >= len(args):
            raise SystemExit("--count requires a value")
        count = int(args[i + 1])
        args = args[:i] + args[i + 2:]

    out = args[0] if len(args) > 0 else "samples"
    name = args[1] if len(args) > 1 else "sample"
    generate_file(out, name, count=count, legacy=legacy)
