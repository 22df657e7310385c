#!/usr/bin/env python3
"""
Genera un piccolo set di output di digit_enum (prefisso vuoto) in datasets/:

  - datasets/enum_d1.txt : 0..9
  - datasets/enum_d2.txt : 0..99   (prime 10 righe senza zero iniziale)
  - datasets/enum_d3.txt : 0..999
  - datasets/enum_d4.txt : 0..9999

Formato: una stringa per riga, come l'output di `digit_enum.py --out`.

Si lancia come modulo (serve `src` sul path) o come script installato:

  PYTHONPATH=src python3 -m generative.gen_enum_datasets
  gen-enum-datasets --outdir datasets --depths 1 2 3
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, List, Optional

from digit_enum import enumerate_digits

OUT_DIR = Path("datasets")
DEFAULT_DEPTHS = (1, 2, 3, 4)


def write_enum_dataset(path: Path, depth: int, prefix: str = "") -> None:
    with path.open("w", encoding="utf-8", newline="\n") as f:
        enumerate_digits(prefix, depth, out=f)
    print(f"[ok] Scritto {path}")


def generate(out_dir: Path = OUT_DIR, depths: Iterable[int] = DEFAULT_DEPTHS) -> list[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    paths: list[Path] = []
    for d in depths:
        path = out_dir / f"enum_d{d}.txt"
        write_enum_dataset(path, d)
        paths.append(path)
    return paths


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Genera datasets/enum_d{n}.txt con digit_enum.")
    ap.add_argument("--outdir", type=Path, default=OUT_DIR, help="Directory di output (default datasets)")
    ap.add_argument(
        "--depths",
        type=int,
        nargs="+",
        default=list(DEFAULT_DEPTHS),
        help="Profondità da generare (default 1 2 3 4)",
    )
    args = ap.parse_args(argv)
    if any(d < 0 for d in args.depths):
        raise SystemExit("[err] --depths deve contenere solo valori >= 0")
    generate(args.outdir, args.depths)


if __name__ == "__main__":
    main()
