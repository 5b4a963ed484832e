"""
Secret generation.

A secret is drawn uniformly from the 5040 valid codes by sampling 4 digits
WITHOUT replacement (a partial Fisher-Yates shuffle), so a repeated digit can
never be produced.
"""

from __future__ import annotations

import random

from .codes import CODE_LENGTH, DIGITS


def generate_secret(rng: random.Random | None = None) -> str:
    """Return a uniformly random valid code. Pass a seeded `rng` for reproducibility."""
    rng = rng or random
    return "".join(rng.sample(DIGITS, CODE_LENGTH))
