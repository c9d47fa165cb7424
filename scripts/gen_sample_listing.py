#!/usr/bin/env python3
"""Sample listing generator.

Writes a synthetic CSV shaped like the published apartment sheet, for local
runs of the renderer (point ``csv_url`` at a local HTTP server serving it)
and for the throughput smoke test.

Columns follow the live sheet:
Lakás, m2, Erkély m2, Kert m2, Szerk.kész ár, Kulcsrakész ár, Emelet, Elérhető
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

HEADERS = ["Lakás", "m2", "Erkély m2", "Kert m2", "Szerk.kész ár", "Kulcsrakész ár", "Emelet", "Elérhető"]

BUILDINGS = ["A", "B", "C"]
AVAILABILITY_VALUES = ["Igen", "Nem", "I", "N", "foglalt"]


def _hu_decimal(value: float) -> str:
    return f"{value:.2f}".replace(".", ",")


def generate_listing(rows: int, floors: int = 4, seed: int = 42) -> pd.DataFrame:
    """Generate a synthetic listing DataFrame with spreadsheet-style text cells.

    Areas use a decimal comma, prices are plain forint amounts, floors mix
    "FSZ"-style text with numbers, some garden/balcony cells are left empty.
    """
    rng = np.random.default_rng(seed)

    floor_numbers = rng.integers(0, floors, rows)
    area = rng.uniform(28, 120, rows)
    balcony = rng.uniform(0, 18, rows)
    garden = rng.uniform(0, 60, rows)
    shell_price = np.round(area * rng.uniform(900_000, 1_300_000, rows), -3)
    turnkey_price = np.round(shell_price * rng.uniform(1.12, 1.25, rows), -3)
    availability = rng.choice(AVAILABILITY_VALUES, rows, p=[0.45, 0.25, 0.1, 0.1, 0.1])

    data = {
        "Lakás": [f"{BUILDINGS[i % len(BUILDINGS)]}{i + 1}" for i in range(rows)],
        "m2": [_hu_decimal(v) for v in area],
        "Erkély m2": [_hu_decimal(v) if v > 4 else "" for v in balcony],
        "Kert m2": [_hu_decimal(v) if f == 0 else "" for v, f in zip(garden, floor_numbers)],
        "Szerk.kész ár": [str(int(v)) for v in shell_price],
        "Kulcsrakész ár": [str(int(v)) for v in turnkey_price],
        "Emelet": [f"{f}. emelet" if f else "fsz" for f in floor_numbers],
        "Elérhető": availability.tolist(),
    }
    return pd.DataFrame(data, columns=HEADERS)


def write_listing_csv(output_path: Path, rows: int, floors: int = 4, seed: int = 42) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df = generate_listing(rows, floors, seed)
    df.to_csv(output_path, index=False, encoding="utf-8")
    return output_path


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic apartment listing CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 40 apartments on 4 floors
  %(prog)s sample.csv

  # larger dataset for timing
  %(prog)s big.csv --rows 20000 --floors 10 --seed 7
        """
    )
    parser.add_argument("output", type=Path, help="Output CSV path")
    parser.add_argument("--rows", type=int, default=40, help="Number of apartments (default: 40)")
    parser.add_argument("--floors", type=int, default=4, help="Number of floors incl. ground floor (default: 4)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1
    if args.floors <= 0:
        print("Error: --floors must be positive", file=sys.stderr)
        return 1

    path = write_listing_csv(args.output, args.rows, args.floors, args.seed)
    print(f"Created listing CSV: {path}")
    print(f"  Rows: {args.rows:,}")
    print(f"  Floors: {args.floors}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
