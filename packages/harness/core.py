"""
Experiment harness core primitives.

- run_case:  play one game (one hidden secret) with a given strategy, the
             Solver being fed by an honest oracle: score(secret, guess).
- run_batch: run many secrets in sequence.

There is no turn limit in 1A2B; `max_rounds` is only a guardrail for
experiments (None = play until Solved / Contradiction).

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or tests without changes.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List
from packages.engine import Solver, score, validate_code, NUM_CODES


def _assert_rounds(max_rounds: int | None) -> None:
    """Guardrail: a budget below 1 or above the code space size makes no sense."""
    if max_rounds is not None and not (1 <= max_rounds <= NUM_CODES):
        raise ValueError(f"max_rounds must be in 1..{NUM_CODES} or None; got {max_rounds}")


def run_case(
        strategy,
        secret: str,
        *,
        seed: int | None = None,
        max_rounds: int | None = None,
) -> Dict:
    """
    Execute one game until the solver wins, hits a contradiction, or runs
    out of the optional round budget.

    Args:
        strategy:   strategy id, BaseStrategy instance, or `list -> code` function
        secret:     the hidden code for this case
        seed:       RNG seed to make strategy tie-breaks reproducible
        max_rounds: optional cap on guesses

    Returns:
        dict with keys:
            success (bool), outcome ("solved" | "contradiction" | "budget"),
            guesses (int), time_ms (float), history (list[(guess, "xAyB")]),
            remaining (list[int], pool size before each guess), secret (str)
    """
    _assert_rounds(max_rounds)
    secret = validate_code(secret)

    solver = Solver(strategy, seed=seed)

    t0 = time.perf_counter()
    result = solver.initialize()
    remaining: List[int] = [result.remaining]
    outcome = "budget"

    while True:
        # Honest oracle: the feedback a careful human would give
        fb = score(secret, solver.current_guess)
        result = solver.submit_feedback(*fb)
        if result.kind != "continue":
            outcome = result.kind
            break
        remaining.append(result.remaining)
        if max_rounds is not None and solver.turns >= max_rounds:
            break

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "success": outcome == "solved",
        "outcome": outcome,
        "guesses": solver.turns,
        "time_ms": dt,
        "history": [(t.guess, str(t.feedback)) for t in solver.history],
        "remaining": remaining,
        "secret": secret,
        "strategy_id": solver.strategy.id,
    }


def run_batch(
        strategy,
        secrets: Iterable[str],
        *,
        seed: int | None = None,
        max_rounds: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    secrets are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    _assert_rounds(max_rounds)

    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(strategy, secret, seed=case_seed, max_rounds=max_rounds))
    return out
