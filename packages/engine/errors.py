"""
Engine error types.

- InvalidInput:    a proposed code or feedback value breaks its invariant.
                   Always recoverable: the call is rejected and no state changes.
- InvalidCode:     bad code (wrong length, non-digit, repeated digit).
- InvalidFeedback: bad (a, b) pair (out of range or a + b > 4).
- GameOver:        the game already ended (solved / contradiction) or was
                   never started; the caller should restart instead.

A contradiction in the feedback history is NOT an exception: it is a
legitimate terminal outcome returned by Solver.submit_feedback().
"""

from __future__ import annotations


class InvalidInput(ValueError):
    """Base class for rejected caller input."""


class InvalidCode(InvalidInput):
    pass


class InvalidFeedback(InvalidInput):
    pass


class GameOver(RuntimeError):
    pass
