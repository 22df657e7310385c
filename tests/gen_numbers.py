#!/usr/bin/env python3

import argparse
import sys

ap = argparse.ArgumentParser(description="Interi 0..10**n-1, uno per riga (riferimento per prefisso vuoto).")
ap.add_argument("--n", type=int, default=2, help="numero di cifre")
args = ap.parse_args()

sys.stdout.write("".join(f"{k}\n" for k in range(10 ** max(args.n, 1))))
