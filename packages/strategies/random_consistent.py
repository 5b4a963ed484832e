"""
Random Consistent strategy.

Strategy:
  - Choose uniformly at random from the CURRENT candidate pool (codes still
    consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via BaseStrategy.rng).
  - This is the default policy; it does not try to minimize the number of
    rounds, but every guess is a possible answer so the pool always shrinks.
"""

from __future__ import annotations

from typing import List
from .base import BaseStrategy, register


@register
class RandomConsistentStrategy(BaseStrategy):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        return candidates[self.rng.randrange(len(candidates))]
