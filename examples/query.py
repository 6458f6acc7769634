"""Query an exported program table - find slots using a given amp model."""
from __future__ import annotations

import sys
from pathlib import Path

import duckdb


def main() -> None:
    if len(sys.argv) < 3:
        print("Usage: python query.py <programs.parquet> <amp_model>")
        print("Example: python query.py programs.parquet VOX_AC30")
        sys.exit(1)

    table = Path(sys.argv[1])
    amp_model = sys.argv[2].upper()

    con = duckdb.connect(":memory:")
    con.execute(f"CREATE VIEW programs AS SELECT * FROM read_parquet('{table}')")

    sql = """
    SELECT
        slot,
        program_name,
        gain,
        pedal1_enabled,
        pedal1_type,
        reverb_pedal_enabled,
        reverb_pedal_type,
        count(*) OVER (PARTITION BY program_id) AS copies
    FROM programs
    WHERE amp_model = ?
    ORDER BY slot
    """

    print(f"--- Programs using {amp_model} ---\n")

    df = con.execute(sql, [amp_model]).fetchdf()
    if df.empty:
        print("No programs found.")
    else:
        for _, row in df.iterrows():
            print(f"SLOT {row['slot']}: {row['program_name']}")
            print(f"  Gain: {row['gain'] / 10:.1f}")
            if row["pedal1_enabled"]:
                print(f"  Pedal 1: {row['pedal1_type']}")
            if row["reverb_pedal_enabled"]:
                print(f"  Reverb: {row['reverb_pedal_type']}")
            if row["copies"] > 1:
                print(f"  Identical to {row['copies'] - 1} other slot(s)")
            print()


if __name__ == "__main__":
    main()
