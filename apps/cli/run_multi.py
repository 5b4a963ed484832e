# apps/cli/run_multi.py
"""
Run multiple strategies in one shot over the same cases.

Writes per-strategy outputs to: <outdir>/<strategy_id>/run_<timestamp>.csv + _manifest.json
"""

from __future__ import annotations
import argparse
from pathlib import Path
from typing import List

from packages.harness import summarize, pretty_stats
from packages.strategies import get_strategy_ids
from apps.cli.run import select_cases, play_all, write_outputs


def main(argv: List[str] | None = None):
    registered = get_strategy_ids()
    ap = argparse.ArgumentParser(description="bullscowsAI: run many strategies at once")
    ap.add_argument("--strategies", nargs="+", required=True,
                    help=f"list of strategy ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--exclude", nargs="*", default=[],
                    help="strategy ids to skip (only if --strategies ALL)")
    ap.add_argument("--cases")
    ap.add_argument("--sample", type=int)
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--max-rounds", type=int)
    ap.add_argument("--outdir", default="reports/batch")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto")
    args = ap.parse_args(argv)

    # 1) shared cases (validated once, deterministic by seed)
    cases, case_report = select_cases(cases_path=args.cases, sample=args.sample, seed=args.seed)

    # 2) expand strategies
    if len(args.strategies) == 1 and args.strategies[0].lower() == "all":
        todo = [s for s in registered if s not in set(args.exclude)]
    else:
        todo = args.strategies
        missing = [s for s in todo if s not in registered]
        if missing:
            raise SystemExit(f"Unknown strategy ids: {missing}. Registered: {registered}")

    outdir = Path(args.outdir)

    # 3) run each strategy sequentially on the shared cases
    for sid in todo:
        if args.progress != "off":
            print(f"\n=== Running {sid} on {len(cases)} cases ===")
        results = play_all(sid, cases, seed=args.seed, max_rounds=args.max_rounds,
                           progress=args.progress, label=sid)
        print(pretty_stats(summarize(results)))
        config = {**vars(args), "strategy": sid}
        csv_path, manifest_path = write_outputs(
            results, outdir=outdir / sid, config=config, case_report=case_report, strategy_id=sid,
        )
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
