"""
Batch statistics for experiment runs (numpy).

summarize(results) condenses per-game dicts from run_case/run_batch into:
  games, success_rate, mean / median / p90 / max guesses (solved games only),
  guess histogram {guesses: count}, contradictions, mean time per game.
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np


def summarize(results: List[Dict]) -> Dict:
    n = len(results)
    if n == 0:
        return {"games": 0, "success_rate": None, "mean_guesses": None,
                "median_guesses": None, "p90_guesses": None, "max_guesses": None,
                "histogram": {}, "contradictions": 0, "mean_time_ms": None}

    solved = np.array([r["guesses"] for r in results if r["success"]], dtype=int)
    times = np.array([float(r["time_ms"]) for r in results], dtype=float)
    contradictions = sum(1 for r in results if r.get("outcome") == "contradiction")

    if solved.size:
        values, counts = np.unique(solved, return_counts=True)
        hist = {int(v): int(c) for v, c in zip(values, counts)}
        mean = round(float(solved.mean()), 4)
        median = float(np.median(solved))
        p90 = float(np.percentile(solved, 90))
        worst = int(solved.max())
    else:
        hist, mean, median, p90, worst = {}, None, None, None, None

    return {
        "games": n,
        "success_rate": round(solved.size / n, 4),
        "mean_guesses": mean,
        "median_guesses": median,
        "p90_guesses": p90,
        "max_guesses": worst,
        "histogram": hist,
        "contradictions": contradictions,
        "mean_time_ms": round(float(times.mean()), 3),
    }


def pretty_stats(s: Dict) -> str:
    """One-line console summary."""
    if not s["games"]:
        return "games=0"
    hist = " ".join(f"{k}:{v}" for k, v in sorted(s["histogram"].items()))
    return (f"games={s['games']} | solved={s['success_rate']:.2%} | mean={s['mean_guesses']} "
            f"| median={s['median_guesses']} | p90={s['p90_guesses']} | max={s['max_guesses']} "
            f"| hist[{hist}] | {s['mean_time_ms']} ms/game")
