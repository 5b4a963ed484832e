"""
1A2B scoring (feedback) for a single (secret, guess) pair.

Conventions:
  - A : exact match  = same digit in the same position
  - B : value match  = digit present in the secret, but in another position

Both codes have 4 distinct digits, so no multiplicity bookkeeping is needed:
each guess digit matches at most one secret position and counts toward at
most one of A / B. Hence 0 <= A + B <= 4, and A == 4 iff guess == secret.

The same function serves two purposes:
  1) grade a player's guess against a hidden secret
  2) test a candidate:  score(candidate, guess) == observed feedback
"""

from __future__ import annotations

import numbers
import re
from typing import NamedTuple

from .codes import CODE_LENGTH
from .errors import InvalidFeedback


class Feedback(NamedTuple):
    a: int
    b: int

    def __str__(self) -> str:
        return format_feedback(self)


SOLVED = Feedback(CODE_LENGTH, 0)


def score(secret: str, guess: str) -> Feedback:
    """
    Compute (A, B) for `guess` against `secret`.

    Preconditions:
      - both are valid codes (see codes.is_valid)

    Examples:
      score("1234", "1243") -> Feedback(a=2, b=2)
      score("0123", "4567") -> Feedback(a=0, b=0)
    """
    a = b = 0
    for i in range(CODE_LENGTH):
        if guess[i] == secret[i]:
            a += 1
        elif guess[i] in secret:
            b += 1
    return Feedback(a, b)


def validate_feedback(a, b) -> Feedback:
    """
    Check a caller-supplied (a, b) pair against the feedback invariant.
    Raises InvalidFeedback with the reason; returns a Feedback otherwise.
    """
    for name, v in (("a", a), ("b", b)):
        # any integral type (e.g. numpy.int64), but not bool
        if not isinstance(v, numbers.Integral) or isinstance(v, bool):
            raise InvalidFeedback(f"{name} must be an integer, got {v!r}")
        if v < 0 or v > CODE_LENGTH:
            raise InvalidFeedback(f"{name} must be between 0 and {CODE_LENGTH}, got {v}")
    if a + b > CODE_LENGTH:
        raise InvalidFeedback(f"a + b must be at most {CODE_LENGTH}, got {a} + {b}")
    return Feedback(int(a), int(b))


def format_feedback(fb) -> str:
    """(1, 2) -> "1A2B"."""
    a, b = fb
    return f"{a}A{b}B"


_FEEDBACK_RE = re.compile(r"^\s*(\d+)\s*[aA]\s*(\d+)\s*[bB]\s*$|^\s*(\d+)\s*[,\s]\s*(\d+)\s*$")


def parse_feedback(text: str) -> Feedback:
    """
    Parse user-typed feedback: "1A2B", "1a 2b", "1 2" or "1,2".
    Raises InvalidFeedback if the text is malformed or out of range.
    """
    m = _FEEDBACK_RE.match(text or "")
    if not m:
        raise InvalidFeedback(f"cannot parse feedback {text!r} (expected e.g. '1A2B' or '1 2')")
    a, b = (m.group(1), m.group(2)) if m.group(1) is not None else (m.group(3), m.group(4))
    return validate_feedback(int(a), int(b))
