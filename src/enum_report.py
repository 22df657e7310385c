#!/usr/bin/env python3
"""
enum_report.py

Report e confronto degli output di digit_enum.py.

- build_report(): riassume un file di output (righe, istogramma lunghezze,
  conteggi per cifra, chi², ordinamento, SHA256)
- main(): confronta uno o più report JSON contro una baseline
  (stesso SHA256 = stesso output byte per byte) ed esporta opzionalmente:
  - CSV (--csv)
  - tabella Markdown (--md)

Uso tipico:

    python3 src/digit_enum.py --depth 3 --out a.txt --report-json a.json
    python3 src/digit_enum.py --depth 3 --out b.txt --report-json b.json
    python3 src/enum_report.py a.json b.json --md compare_d3.md

Exit status 1 se un report differisce dalla baseline o è incompleto.
"""

from __future__ import annotations

import argparse
import hashlib
import json
import math
import os
import sys
from typing import Any, Dict, List, Optional, Tuple

from digit_enum import RADIX, expected_line_count

# ---------- Helpers I/O ----------


def sha256_hex(s: str) -> str:
    return hashlib.sha256(s.encode("utf8")).hexdigest()


# ---------- Statistiche ----------


def length_histogram(lines: List[str]) -> Dict[int, int]:
    hist: Dict[int, int] = {}
    for s in lines:
        hist[len(s)] = hist.get(len(s), 0) + 1
    return dict(sorted(hist.items()))


def counts_and_chi_square(seq: List[int], M: int) -> Tuple[Dict[int, int], float, float]:
    """
    Ritorna: counts per simbolo, chi-square, expected per bin.

    Su un output completo di digit_enum ogni cifra compare lo stesso numero di
    volte in ogni posizione, quindi con prefisso non vuoto chi² = 0 sempre.
    Con prefisso vuoto gli zeri iniziali soppressi mancano e lo 0 risulta
    sottorappresentato: chi² > 0 misura proprio quella soppressione
    (depth=2: 0 compare 10 volte contro 20, chi² = 90/19).
    """
    cnt = {i: 0 for i in range(M)}
    for x in seq:
        if 0 <= x < M:
            cnt[x] += 1
    N = len(seq)
    if M == 0 or N == 0:
        return cnt, float("nan"), float("nan")
    expected = N / float(M)
    chi2 = 0.0
    for i in range(M):
        dev = cnt[i] - expected
        chi2 += (dev * dev) / expected
    return cnt, chi2, expected


def is_lexicographic(lines: List[str]) -> bool:
    return all(a < b for a, b in zip(lines, lines[1:]))


def is_numeric_ascending(lines: List[str]) -> bool:
    """Ordine numerico stretto; False se una riga non è un intero."""
    if not all(s.isdigit() for s in lines):
        return False
    values = [int(s) for s in lines]
    return all(a < b for a, b in zip(values, values[1:]))


# ---------- Report ----------


def build_report(path: str, prefix: str, depth: int) -> Dict[str, Any]:
    with open(path, "r", encoding="utf8") as f:
        text = f.read()
    lines = [s for s in text.split("\n") if s]

    # cifre aggiunte dall'enumeratore (prefisso escluso)
    tails = [s[len(prefix) :] if s.startswith(prefix) else s for s in lines]
    digits = [ord(c) - 48 for t in tails for c in t if "0" <= c <= "9"]
    counts, chi2, expected = counts_and_chi_square(digits, RADIX)

    n_expected = expected_line_count(depth)
    return {
        "mode": "enum",
        "prefix": prefix,
        "depth": depth,
        "N": len(lines),
        "expected_lines": n_expected,
        "complete": len(lines) == n_expected,
        "lengths": length_histogram(lines),
        "alphabet": RADIX,
        "counts": counts,
        "chi_square": chi2,
        "expected_per_bin": expected,
        "lexicographic": is_lexicographic(lines),
        "numeric": is_numeric_ascending(lines),
        "first": lines[0] if lines else None,
        "last": lines[-1] if lines else None,
        "sha256": sha256_hex(text),
    }


def write_report_json(report: Dict[str, Any], path: str) -> None:
    # NaN non è JSON valido: chi² di un output vuoto diventa null
    data = {
        k: (None if isinstance(v, float) and math.isnan(v) else v) for k, v in report.items()
    }
    with open(path, "w", encoding="utf8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def load_report(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf8") as f:
        data = json.load(f)
    data["_path"] = path
    data["_name"] = os.path.basename(path)
    return data


def print_report(report: Dict[str, Any]) -> None:
    print(
        f"MODE: enum  |  prefix={report['prefix']!r}  depth={report['depth']}  "
        f"LINES: {report['N']} (expected {report['expected_lines']})"
    )
    print("Lengths (len: lines):")
    for length, c in report["lengths"].items():
        print(f"  {length}: {c}")
    print("Digit counts:")
    for d, c in report["counts"].items():
        print(f"  {d}: {c}")
    print(f"Chi-square (10 bins): {fmt(report['chi_square'])}")
    print(f"Order: lexicographic={report['lexicographic']}  numeric={report['numeric']}")
    print(f"SHA256: {report['sha256']}")


def fmt(x: Any, digits: int = 4) -> str:
    if x is None:
        return "-"
    if isinstance(x, float):
        if math.isnan(x):
            return "nan"
        return f"{x:.{digits}f}"
    return str(x)


# ---------- Confronto ----------


def compare_rows(
    reports: List[Dict[str, Any]], baseline: Optional[Dict[str, Any]] = None
) -> List[Dict[str, Any]]:
    """Una riga per report; same_output confronta lo SHA256 con la baseline."""
    if baseline is None and reports:
        baseline = reports[0]
    base_sha = baseline.get("sha256") if baseline else None

    rows = []
    for r in reports:
        sha = r.get("sha256")
        rows.append(
            {
                "name": r.get("_name", "?"),
                "prefix": r.get("prefix", ""),
                "depth": r.get("depth", "?"),
                "N": r.get("N", "?"),
                "complete": bool(r.get("complete", False)),
                "chi2": r.get("chi_square"),
                "same_output": sha is not None and sha == base_sha,
                "sha256": sha or "-",
            }
        )
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Confronta report JSON di digit-enum.")
    ap.add_argument("reports", nargs="+", help="Report JSON da confrontare")
    ap.add_argument("--baseline", help="Report JSON di riferimento (default: il primo)")
    ap.add_argument("--csv", help="Esporta un CSV riassuntivo")
    ap.add_argument("--md", help="Esporta tabella Markdown riassuntiva")
    args = ap.parse_args(argv)

    reports: List[Dict[str, Any]] = [load_report(p) for p in args.reports]

    baseline_data: Optional[Dict[str, Any]] = None
    if args.baseline:
        # baseline può essere anche uno dei report
        for r in reports:
            if os.path.abspath(r["_path"]) == os.path.abspath(args.baseline):
                baseline_data = r
                break
        if baseline_data is None:
            baseline_data = load_report(args.baseline)

    rows = compare_rows(reports, baseline_data)
    base_name = (baseline_data or reports[0])["_name"]

    print(f"=== COMPARISON (baseline: {base_name}) ===")
    print("file | prefix | depth | N | complete | chi² | same_output | sha256")
    for row in rows:
        print(
            f"{row['name']} | {row['prefix']!r} | {row['depth']} | {row['N']} | "
            f"{row['complete']} | {fmt(row['chi2'])} | {row['same_output']} | {row['sha256'][:12]}"
        )

    # CSV opzionale
    if args.csv:
        import csv

        with open(args.csv, "w", newline="", encoding="utf8") as f:
            w = csv.writer(f)
            w.writerow(["file", "prefix", "depth", "N", "complete", "chi_square", "same_output", "sha256"])
            for row in rows:
                w.writerow(
                    [
                        row["name"],
                        row["prefix"],
                        row["depth"],
                        row["N"],
                        row["complete"],
                        row["chi2"],
                        row["same_output"],
                        row["sha256"],
                    ]
                )
        print(f"[csv] scritto: {args.csv}")

    # Markdown opzionale
    if args.md:
        with open(args.md, "w", encoding="utf8") as f:
            f.write("# Digit-Enum Compare\n\n")
            f.write(f"**Baseline:** `{base_name}`\n\n")
            f.write("| file | prefix | depth | N | complete | chi² | same output |\n")
            f.write("|---|---|--:|--:|:--:|--:|:--:|\n")
            for row in rows:
                f.write(
                    f"| {row['name']} | `{row['prefix']}` | {row['depth']} | {row['N']} | "
                    f"{'yes' if row['complete'] else 'no'} | {fmt(row['chi2'])} | "
                    f"{'yes' if row['same_output'] else 'no'} |\n"
                )
        print(f"[md] scritto: {args.md}")

    bad = [row["name"] for row in rows if not (row["same_output"] and row["complete"])]
    if bad:
        print(f"[warn] output diversi o incompleti: {', '.join(bad)}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
