"""
Player-guesses mode: the system holds a secret, the player guesses.

Each valid guess costs one attempt and returns (A, B). Invalid guesses are
rejected with InvalidCode and do NOT consume an attempt.
"""

from __future__ import annotations

import random
from typing import List

from .codes import validate_code
from .constraints import Turn
from .errors import GameOver
from .scoring import Feedback, SOLVED, score
from .secret import generate_secret


class PlayerGame:
    def __init__(self, secret: str | None = None, *, rng: random.Random | None = None):
        self._secret = validate_code(secret) if secret is not None else generate_secret(rng)
        self._history: List[Turn] = []

    @property
    def history(self) -> List[Turn]:
        return list(self._history)

    @property
    def attempts(self) -> int:
        return len(self._history)

    @property
    def solved(self) -> bool:
        return bool(self._history) and self._history[-1].feedback == SOLVED

    def guess(self, code: str) -> Feedback:
        if self.solved:
            raise GameOver(f"already solved in {self.attempts} attempt(s)")
        code = validate_code(code)
        fb = score(self._secret, code)
        self._history.append(Turn(code, fb))
        return fb

    def reveal(self) -> str:
        """The secret; for the front end once the player wins or gives up."""
        return self._secret
