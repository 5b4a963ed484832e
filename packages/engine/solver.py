"""
Candidate-elimination solver ("system guesses" mode).

The human thinks of a secret; the solver guesses and learns purely from the
(A, B) feedback it is given. State machine:

    initialize()          -> AwaitingFeedback   (pool = all 5040 codes)
    submit_feedback(a, b) -> AwaitingFeedback   pool filtered, next guess picked
                          -> Solved             a == 4                  (terminal)
                          -> Contradiction      no code fits the history (terminal)

Invalid feedback raises InvalidFeedback and leaves every piece of state
untouched. A contradiction is a normal outcome (someone mis-scored a guess);
the pool is kept as it was before the failed filter so it can be inspected.

Guess selection is a strategy slot (see packages.strategies): a registered id,
a BaseStrategy, or a plain `list[str] -> str` function.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import List, Tuple, Union

from packages.strategies.base import BaseStrategy, as_strategy

from .codes import CODE_LENGTH, enumerate_all
from .constraints import Turn
from .errors import GameOver
from .scoring import score, validate_feedback


# ---- States / results ----

@dataclass(frozen=True)
class AwaitingFeedback:
    current_guess: str
    pool: Tuple[str, ...]
    kind = "awaiting_feedback"


@dataclass(frozen=True)
class Continue:
    """Result of a non-terminal round: guess again."""
    next_guess: str
    remaining: int
    kind = "continue"


@dataclass(frozen=True)
class Solved:
    final_guess: str
    turns: int
    kind = "solved"


@dataclass(frozen=True)
class Contradiction:
    last_guess: str
    pool: Tuple[str, ...]  # pool BEFORE the failed filter
    kind = "contradiction"


SolverState = Union[AwaitingFeedback, Solved, Contradiction]
RoundResult = Union[Continue, Solved, Contradiction]


class Solver:
    """One game's worth of candidate elimination. Not shared between games."""

    def __init__(self, strategy: Union[str, BaseStrategy, object] = "random_consistent", *,
                 seed: int | None = None):
        # Each solver owns its strategy instance (and RNG)
        self.strategy: BaseStrategy = copy.deepcopy(as_strategy(strategy))
        self.seed = seed
        self._pool: List[str] = []
        self._history: List[Turn] = []
        self._state: SolverState | None = None

    # ---- read-only views ----

    @property
    def state(self) -> SolverState | None:
        return self._state

    @property
    def current_guess(self) -> str | None:
        if isinstance(self._state, AwaitingFeedback):
            return self._state.current_guess
        return None

    @property
    def history(self) -> List[Turn]:
        return list(self._history)

    @property
    def pool(self) -> Tuple[str, ...]:
        return tuple(self._pool)

    @property
    def remaining(self) -> int:
        return len(self._pool)

    @property
    def turns(self) -> int:
        return len(self._history)

    @property
    def finished(self) -> bool:
        return isinstance(self._state, (Solved, Contradiction))

    # ---- transitions ----

    def initialize(self) -> Continue:
        """Start (or restart) a game: full pool, fresh history, first guess."""
        self.strategy.reset(self.seed)
        pool = enumerate_all()
        guess = self._pick(pool, [])
        self._pool, self._history = pool, []
        self._state = AwaitingFeedback(guess, tuple(pool))
        return Continue(guess, len(pool))

    def submit_feedback(self, a: int, b: int) -> RoundResult:
        """
        Feed back (A, B) for the current guess.

        Raises:
          InvalidFeedback: malformed (a, b); nothing changes.
          GameOver:        no game in progress (not initialized / already ended).
          ValueError:      the strategy picked a non-candidate; nothing changes.
        """
        fb = validate_feedback(a, b)
        if not isinstance(self._state, AwaitingFeedback):
            raise GameOver("no game in progress; call initialize() to start a new one")

        guess = self._state.current_guess
        history = self._history + [Turn(guess, fb)]

        if fb.a == CODE_LENGTH:
            self._history = history
            self._state = Solved(guess, len(history))
            return self._state

        narrowed = [c for c in self._pool if score(c, guess) == fb]
        if not narrowed:
            self._history = history
            self._state = Contradiction(guess, tuple(self._pool))
            return self._state

        # Commit only once the next guess is known
        nxt = self._pick(narrowed, history)
        self._pool, self._history = narrowed, history
        self._state = AwaitingFeedback(nxt, tuple(narrowed))
        return Continue(nxt, len(narrowed))

    def _pick(self, pool: List[str], history: List[Turn]) -> str:
        state = {
            "turn": len(history) + 1,
            "candidates": list(pool),
            "history": list(history),
        }
        guess = self.strategy.next_guess(state)
        if guess not in pool:
            raise ValueError(f"strategy {self.strategy.id!r} returned {guess!r}, "
                             f"which is not a remaining candidate")
        return guess
