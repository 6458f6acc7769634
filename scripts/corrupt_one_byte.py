import sys
from pathlib import Path

def main():
    if len(sys.argv) not in (2, 3):
        print("Usage: corrupt_one_byte.py <file> [offset]")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    b = bytearray(p.read_bytes())
    if len(b) < 32:
        print("File too small to corrupt safely.")
        raise SystemExit(2)

    # Default: flip a bit inside the "VTXPROG" magic so the prefix check fails.
    # Offset 32 + 18 hits the amp model byte of the first program instead.
    idx = int(sys.argv[2], 0) if len(sys.argv) == 3 else 3
    if idx >= len(b):
        print(f"Offset {idx} is past the end of the file ({len(b)} bytes).")
        raise SystemExit(2)
    b[idx] ^= 0x01
    p.write_bytes(bytes(b))
    print(f"Corrupted 1 byte at offset {idx} in {p}")

if __name__ == "__main__":
    main()
