"""
Write a case file of secrets for apps/cli/run.py.

Features:
- All 5040 codes in ascending order (default).
- Optional seeded random sample (--sample K) without replacement.
- Optional --exclude-zero-lead to drop codes starting with 0 (for UIs that
  display codes as numbers).

Usage:
    python -m script.write_codes --out cases/sample_500.txt --sample 500 --seed 7
"""

import argparse
import random

from packages.datasets import write_lines
from packages.engine import enumerate_all


def main():
    ap = argparse.ArgumentParser(description="Write a case file (one code per line).")
    ap.add_argument("--out", required=True, help="output .txt file")
    ap.add_argument("--sample", type=int, help="random subset size (default: all codes)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--exclude-zero-lead", action="store_true", help="drop codes starting with 0")
    args = ap.parse_args()

    codes = enumerate_all()
    if args.exclude_zero_lead:
        codes = [c for c in codes if c[0] != "0"]
    if args.sample and args.sample < len(codes):
        codes = sorted(random.Random(args.seed).sample(codes, args.sample))

    path = write_lines(codes, args.out)
    print(f"Wrote {len(codes)} codes -> {path}")


if __name__ == "__main__":
    main()
