"""VTX Prog - VTXPROG container codec and preset library."""
from .codec import VtxProgFile, decode_programs, encode_program, encode_programs, read_program, write_program

__all__ = [
    "VtxProgFile",
    "decode_programs",
    "encode_program",
    "encode_programs",
    "read_program",
    "write_program",
]
