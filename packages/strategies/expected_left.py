"""
Expected Remaining Candidates (ERC).

Idea:
  For guess g, if CURRENT candidates partition into feedback buckets of sizes
  {c_i}, the expected pool size after seeing the feedback is:
      E[left | g] = sum_i ( (c_i / n) * c_i ) = (1/n) * sum_i c_i^2
  Minimize sum_i c_i^2 (equivalently E[left]). Tie-break: smaller worst
  bucket, then seeded RNG.

Acceleration:
  - Opening move: with the untouched 5040-code pool every code is equivalent
    up to relabelling digits, so just pick one at random.
  - Large pools: evaluate only a seeded random sample of POOL_CAP guesses
    (still scored against ALL candidates).
"""

from __future__ import annotations
from typing import List, Tuple
from .base import BaseStrategy, register
from packages.engine.codes import NUM_CODES
from packages.engine.constraints import partition


def _sum_c2_and_worst(guess: str, candidates: List[str]) -> Tuple[int, int]:
    buckets = partition(guess, candidates)
    worst = max(buckets.values()) if buckets else 0
    sum_c2 = sum(c*c for c in buckets.values())
    return sum_c2, worst


@register
class ExpectedLeftStrategy(BaseStrategy):
    id = "expected_left"
    name = "Expected Remaining Candidates"
    version = "1.0.0"

    POOL_CAP = 200

    def _select_pool(self, candidates: List[str]) -> List[str]:
        if len(candidates) <= self.POOL_CAP:
            return candidates
        return self.rng.sample(candidates, self.POOL_CAP)

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]

        if len(candidates) >= NUM_CODES:
            return candidates[self.rng.randrange(len(candidates))]

        best_sum = None
        best_worst = None
        best: List[str] = []

        for g in self._select_pool(candidates):
            sum_c2, worst = _sum_c2_and_worst(g, candidates)
            if (best_sum is None) or (sum_c2 < best_sum) or (sum_c2 == best_sum and worst < best_worst):
                best_sum, best_worst, best = sum_c2, worst, [g]
            elif sum_c2 == best_sum and worst == best_worst:
                best.append(g)

        return best[self.rng.randrange(len(best))]
