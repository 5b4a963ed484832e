"""
First Candidate strategy: always guess the smallest remaining code.

Fully deterministic (ignores the RNG), which makes whole games reproducible
in tests: e.g. the opening guess is always "0123".
"""

from __future__ import annotations

from .base import BaseStrategy, register


@register
class FirstCandidateStrategy(BaseStrategy):
    id = "first_candidate"
    name = "First Candidate"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        return min(state["candidates"])
