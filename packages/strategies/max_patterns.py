"""
Max Pattern Diversity (MPD).

Idea:
  For each guess g, count how many DISTINCT (A, B) feedbacks it produces
  against the CURRENT candidates. Pick the guess with the MOST distinct
  feedbacks. Tie-break: smaller worst bucket, then RNG.

Cheaper to compare than expected-left, but still buckets candidates.
"""

from __future__ import annotations
from typing import List, Tuple
from .base import BaseStrategy, register
from packages.engine.codes import NUM_CODES
from packages.engine.constraints import partition


def _pattern_stats(guess: str, candidates: List[str]) -> Tuple[int, int]:
    """
    Return (num_distinct_feedbacks, worst_bucket_size) for guess.
    """
    buckets = partition(guess, candidates)
    if not buckets:
        return 0, 0
    return len(buckets), max(buckets.values())


@register
class MaxPatternsStrategy(BaseStrategy):
    id = "max_patterns"
    name = "Max Pattern Diversity"
    version = "1.0.0"

    POOL_CAP = 200  # sampled guess pool when candidates are many

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]

        # opening move: all codes are equivalent
        if len(candidates) >= NUM_CODES:
            return candidates[self.rng.randrange(len(candidates))]

        pool = candidates
        if len(pool) > self.POOL_CAP:
            pool = self.rng.sample(candidates, self.POOL_CAP)

        best_m = None
        best_worst = None
        best: List[str] = []

        for g in pool:
            m, worst = _pattern_stats(g, candidates)
            if (best_m is None) or (m > best_m) or (m == best_m and worst < best_worst):
                best_m, best_worst, best = m, worst, [g]
            elif m == best_m and worst == best_worst:
                best.append(g)

        return best[self.rng.randrange(len(best))]
