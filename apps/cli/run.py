# apps/cli/run.py
"""
CLI entry point for benchmarking a guess strategy.

This script:
  1) Picks the secrets to play: a validated case file (--cases), a seeded
     sample of all codes (--sample), or all 5040 codes.
  2) Instantiates the requested strategy.
  3) Plays every secret with an honest oracle, with a live progress indicator, and writes:
       - CSV:  per-case results + guess/feedback history columns
       - JSON: manifest with config, case-file hash, stats, git commit, etc.

Usage:
    python -m apps.cli.run --strategy expected_left --sample 500 --seed 7
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import Dict, List, Tuple

from tqdm import tqdm

from packages.datasets import validate_codes, pretty_summary, read_codes
from packages.engine import enumerate_all
from packages.harness import run_case, summarize, pretty_stats
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.strategies import get_strategy_ids


def progress_mode(mode: str) -> str:
    """auto -> bar on a terminal, plain text otherwise."""
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def select_cases(*, cases_path: str | None, sample: int | None, seed: int) -> Tuple[List[str], Dict | None]:
    """
    Return (secrets, case_report). The report is None unless a case file was used.
    Exits with a message if the case file fails validation.
    """
    if cases_path:
        rep = validate_codes(cases_path)
        print(pretty_summary(rep))
        if not rep["passed"]:
            raise SystemExit("Case file failed validation: " + "; ".join(rep["issues"]))
        secrets = read_codes(cases_path)
    else:
        rep = None
        secrets = enumerate_all()

    if sample and sample < len(secrets):
        # Deterministic sample without replacement
        rng = random.Random(seed)
        pool = list(secrets)
        rng.shuffle(pool)
        secrets = pool[:sample]
    return secrets, rep


def play_all(strategy_id: str, cases: List[str], *, seed: int, max_rounds: int | None,
             progress: str, label: str = "Running") -> List[Dict]:
    """Play every case with a fresh solver; report progress to stderr."""
    mode = progress_mode(progress)
    total = len(cases)
    iterator = tqdm(cases, ncols=80, desc=label, unit="game") if mode == "bar" else cases

    results = []
    start = time.time()
    last_print = 0.0
    for idx, secret in enumerate(iterator, 1):
        # Derive a per-game seed so runs are reproducible and independent
        per_seed = seed + idx * 1013904223  # LCG-ish stride to avoid collisions
        results.append(run_case(strategy_id, secret, seed=per_seed, max_rounds=max_rounds))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{label}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()
    return results


def write_outputs(results: List[Dict], *, outdir: Path, config: Dict, case_report: Dict | None,
                  strategy_id: str) -> Tuple[str, str]:
    """Write run_<id>.csv and run_<id>_manifest.json under `outdir`."""
    run_id = timestamp_id()
    outdir.mkdir(parents=True, exist_ok=True)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": config,
        "cases": case_report,
        "num_cases": len(results),
        "strategy_id": strategy_id,
        "stats": summarize(results),
    }
    write_manifest(manifest, str(manifest_path))
    return str(csv_path), str(manifest_path)


def main(argv: List[str] | None = None):
    """
    Parse CLI args, choose cases, run the batch with progress, and write outputs.
    """
    strategy_ids = get_strategy_ids()

    ap = argparse.ArgumentParser(description="bullscowsAI: benchmark a guess strategy")
    ap.add_argument("--strategy", default="random_consistent", choices=strategy_ids,
                    help="strategy id")
    ap.add_argument("--cases", help="case file with one secret per line (default: all 5040 codes)")
    ap.add_argument("--sample", type=int, help="play only a subset of cases (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-rounds", type=int, help="optional guess budget per game")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    cases, case_report = select_cases(cases_path=args.cases, sample=args.sample, seed=args.seed)
    results = play_all(args.strategy, cases, seed=args.seed, max_rounds=args.max_rounds,
                       progress=args.progress)
    print(pretty_stats(summarize(results)))

    csv_path, manifest_path = write_outputs(
        results, outdir=Path(args.outdir), config=vars(args), case_report=case_report,
        strategy_id=args.strategy,
    )
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
