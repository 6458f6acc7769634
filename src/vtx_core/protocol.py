"""VTXPROG protocol constants.

Single source of truth for on-disk magic values and record layouts.
Keep this file stable. Reader and writer must remain synchronized.
"""

# File magic: ASCII "VTXPROG1000 " followed by 20 zero bytes
VTXPROG_PREFIX = b"VTXPROG1000 " + b"\x00" * 20
PREFIX_LEN = 32

# Program record: [Name(16) | NR(1) | Flags(1) | Amp(1) | Dials(7) | Bools(3) |
#   Bias(1) | Class(1) | Pedal1(8) | Pedal2(8) | Reserved(8) | Reverb(6) | Trailer(1)]
PROGRAM_RECORD_LEN = 0x3E
PROGRAM_NAME_LEN = 0x10
RESERVED_LEN = 8
TRAILER_LEN = 1

# Flags byte
FLAG_PEDAL_1_ENABLED = 0b0000_0010
FLAG_PEDAL_2_ENABLED = 0b0000_0100
FLAG_REVERB_PEDAL_ENABLED = 0b0001_0000

# Legacy authoring tool writes ASCII space where a 0/1 byte is expected
LEGACY_SPACE = 0x20

# Library conventions
VTXPROG_SUFFIX = ".vtxprog"
MANIFEST_NAME = "vtxprog-manifest.json"
MIN_PROGRAMS_IN_GROUP = 11

# Default safety bounds
DEFAULT_MAX_FILE_SIZE = 1024 * 1024  # 1 MiB
