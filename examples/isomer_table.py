#!/usr/bin/env python3
"""
Table of alkane isomer counts with a breakdown by skeleton shape.

For each n, grows the generation from the previous one and reports
how many isomers are straight chains, how many have a quaternary
carbon (degree 4) and the largest branching seen.

Usage: python3 isomer_table.py [--max-n 14] [--processes 4] [--g6-dir out/]
"""

from __future__ import annotations
import argparse
import os
import time

from alkanetools.growth.expand import base_generation, expand_generation
from alkanetools.io.graph6 import write_generation_g6
from alkanetools.utils.naming import alkane_formula


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--max-n", type=int, default=12)
    parser.add_argument("--processes", type=int, default=1)
    parser.add_argument("--g6-dir", type=str, default=None,
                        help="also write alkanes_{n}.g6 per size")
    args = parser.parse_args()

    if args.g6_dir:
        os.makedirs(args.g6_dir, exist_ok=True)

    print(f"{'n':>3}  {'formula':>8}  {'isomers':>8}  {'quaternary':>10}  {'time':>8}")
    gen = base_generation()
    for n in range(1, args.max_n + 1):
        t0 = time.time()
        if n > 1:
            gen = expand_generation(gen, processes=args.processes)
        dt = time.time() - t0

        quaternary = sum(1 for t in gen.values() if max(t.degrees()) == 4)
        print(f"{n:>3}  {alkane_formula(n):>8}  {len(gen):>8}  {quaternary:>10}  {dt:>7.2f}s")

        if args.g6_dir:
            write_generation_g6(gen.values(), os.path.join(args.g6_dir, f"alkanes_{n}.g6"))


if __name__ == "__main__":
    main()
