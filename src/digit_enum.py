#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
digit_enum.py
Enumeratore di stringhe di cifre in base 10:
- parte da un prefisso e aggiunge `depth` cifre 0..9, in profondità, da sinistra a destra
- stampa una stringa per riga (stdout o file con --out)

Regola del prefisso vuoto: con prefisso "" la cifra 0 non viene aggiunta e il
prefisso resta vuoto; al livello successivo la regola scatta di nuovo. Con
prefisso vuoto l'output coincide quindi con gli interi 0 .. 10**depth - 1
senza zeri iniziali. Comportamento mantenuto identico all'originale (quasi
certamente involontario).

Esempi:
  python3 src/digit_enum.py --depth 2
  python3 src/digit_enum.py --depth 3 --prefix 7 --out out/p7_d3.txt --report-json out/p7_d3.json
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

RADIX = 10
DIGITS = "0123456789"
WARN_DEPTH = 7  # oltre: 10**8 righe e più

# ---------- Enumerazione ----------


def expected_line_count(depth: int) -> int:
    """Righe prodotte da enumerate_digits: depth <= 1 vale come 1."""
    return RADIX ** max(depth, 1)


def enumerate_digits(prefix: str = "", depth: int = 1, out: Optional[TextIO] = None) -> None:
    """
    Scrive su `out` (default sys.stdout) tutte le stringhe prefix + `depth` cifre.

    Visita con stack esplicito: stack[k] è la prossima cifra da provare al
    livello k. slots[k] contiene la cifra scelta al livello k ("" se soppressa),
    ed è unito una sola volta per ogni livello foglia.
    """
    if out is None:
        out = sys.stdout
    write = out.write

    leaf = max(depth, 1) - 1
    slots: List[str] = [""] * leaf
    stack: List[int] = [0]

    while stack:
        level = len(stack) - 1
        if level == leaf:
            stem = prefix + "".join(slots)
            write("".join(stem + d + "\n" for d in DIGITS))
            stack.pop()
            continue

        i = stack[-1]
        if i == RADIX:
            stack.pop()
            continue
        stack[-1] = i + 1

        # uno slot è "" solo se lo sono tutti i precedenti: basta guardare l'ultimo
        if i == 0 and not prefix and (level == 0 or not slots[level - 1]):
            slots[level] = ""
        else:
            slots[level] = DIGITS[i]
        stack.append(0)


# ---------- main ----------


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="digit-enum: enumerazione di stringhe di cifre 0..9")
    ap.add_argument(
        "--depth",
        type=int,
        required=True,
        help="Numero di cifre da aggiungere al prefisso (0 e 1 sono equivalenti)",
    )
    ap.add_argument("--prefix", type=str, default="", help="Prefisso iniziale (default: vuoto)")
    ap.add_argument(
        "--out",
        type=str,
        default=None,
        help="Scrive le righe su file invece che su stdout",
    )
    ap.add_argument(
        "--report-json",
        type=str,
        default=None,
        help="Scrive un report JSON sull'output (richiede --out), compatibile con enum_report.py",
    )
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    a = parse_args(argv)

    if a.depth < 0:
        raise SystemExit("[err] --depth deve essere >= 0")
    if a.report_json and not a.out:
        raise SystemExit("[err] --report-json richiede --out (il report si calcola sul file)")

    n_lines = expected_line_count(a.depth)
    if a.depth > WARN_DEPTH:
        print(
            f"[warn] depth={a.depth}: verranno prodotte {n_lines:,} righe",
            file=sys.stderr,
        )

    if a.out is None:
        enumerate_digits(a.prefix, a.depth)
        sys.stdout.flush()
        return

    with open(a.out, "w", encoding="utf8", newline="\n") as f:
        enumerate_digits(a.prefix, a.depth, out=f)
    print(f"[ok] scritto {a.out} ({n_lines} righe)", file=sys.stderr)

    # stdout è libero: riepilogo leggibile + JSON opzionale
    from enum_report import build_report, print_report, write_report_json

    report = build_report(a.out, a.prefix, a.depth)
    print_report(report)
    if a.report_json:
        write_report_json(report, a.report_json)
        print(f"[report-json] scritto: {a.report_json}", file=sys.stderr)


if __name__ == "__main__":
    main()
