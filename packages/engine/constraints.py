"""
Candidate filtering given game history.

Given:
  - a pool of codes (usually the remaining candidates)
  - a history of (guess, feedback) turns

Return:
  - codes that are consistent with ALL feedback seen so far.

This is the core step that turns feedback into a shrinking candidate pool.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, NamedTuple, Tuple

from .scoring import Feedback, score

class Turn(NamedTuple):
    """One round: the guess that was made and the feedback it received."""
    guess: str
    feedback: Feedback


# History is a sequence of (guess, feedback) turns in order of occurrence.
History = Iterable[Tuple[str, Tuple[int, int]]]


def is_consistent(code: str, history: History) -> bool:
    """True iff `code`, taken as the secret, reproduces every recorded feedback."""
    for guess, fb in history:
        if score(code, guess) != tuple(fb):
            return False
    return True


def filter_candidates(codes: Iterable[str], history: History) -> List[str]:
    """
    Keep only codes consistent with every (guess, feedback) in `history`.
    Order is preserved as in `codes`.
    """
    history = [(g, tuple(fb)) for g, fb in history]
    return [c for c in codes if is_consistent(c, history)]


def partition(guess: str, candidates: Iterable[str]) -> Counter:
    """
    Bucket candidates by the feedback `guess` would receive against each.
    Returns Counter[Feedback -> bucket size].
    """
    buckets: Counter = Counter()
    _score = score
    for c in candidates:
        buckets[_score(c, guess)] += 1
    return buckets


__all__ = ["Turn", "History", "Feedback", "is_consistent", "filter_candidates", "partition"]
