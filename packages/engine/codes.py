"""
Code space for the 4-digit, distinct-digit game.

A code is a 4-character string of decimal digits with no repeated digit.
Leading zeros are kept ("0123" is valid, "0011" is not).

There are exactly 10 * 9 * 8 * 7 = 5040 valid codes.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple

from .errors import InvalidCode

# Rules of the game (single source of truth)
CODE_LENGTH = 4
DIGITS = "0123456789"
NUM_CODES = 5040


def _problem(s) -> str | None:
    """Return a human-readable reason why `s` is not a code, or None if it is."""
    if not isinstance(s, str):
        return f"code must be a string, got {type(s).__name__}"
    if len(s) != CODE_LENGTH:
        return f"code must be exactly {CODE_LENGTH} digits, got {len(s)} character(s)"
    if not all(ch in DIGITS for ch in s):
        return "code must contain decimal digits only"
    if len(set(s)) != CODE_LENGTH:
        return "all digits must be distinct (no repeated digit)"
    return None


def is_valid(s) -> bool:
    """True iff `s` is 4 decimal digits, all distinct."""
    return _problem(s) is None


def validate_code(s) -> str:
    """
    Normalize and validate a user-entered code.

    Surrounding whitespace is stripped. Returns the code on success,
    raises InvalidCode with the reason otherwise.
    """
    code = s.strip() if isinstance(s, str) else s
    reason = _problem(code)
    if reason is not None:
        raise InvalidCode(f"{s!r}: {reason}")
    return code


@lru_cache(maxsize=1)
def _all_codes() -> Tuple[str, ...]:
    # Numeric scan keeps ascending order: 0123, 0124, ..., 9876
    return tuple(s for s in (f"{i:04d}" for i in range(10 ** CODE_LENGTH)) if is_valid(s))


def enumerate_all() -> List[str]:
    """All 5040 valid codes in ascending numeric order (fresh list per call)."""
    return list(_all_codes())
