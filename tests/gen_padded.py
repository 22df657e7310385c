#!/usr/bin/env python3

import argparse
import sys

ap = argparse.ArgumentParser(description="prefix + ogni stringa di n cifre con zeri iniziali, una per riga.")
ap.add_argument("--prefix", type=str, default="7")
ap.add_argument("--n", type=int, default=2)
args = ap.parse_args()

n = max(args.n, 1)
sys.stdout.write("".join(f"{args.prefix}{k:0{n}d}\n" for k in range(10**n)))
